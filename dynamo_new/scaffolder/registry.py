"""The fixed set of files and directories that make up a new project.

``SCAFFOLD`` is a flat, ordered tuple: directories are declared before the
files that live under them, so walking it front to back is always a valid
creation order.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TemplateSpec(BaseModel):
    """One entry of the scaffold: a directory, or a file rendered from a template."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Output path relative to the project root")
    is_directory: bool = Field(default=False)
    template: str | None = Field(
        default=None,
        description="Template name relative to the template directory",
    )

    @model_validator(mode="after")
    def check_kind(self) -> "TemplateSpec":
        if self.is_directory and self.template is not None:
            raise ValueError(f"directory entry {self.path!r} cannot have a template")
        if not self.is_directory and self.template is None:
            raise ValueError(f"file entry {self.path!r} needs a template")
        return self


def _dir(path: str) -> TemplateSpec:
    return TemplateSpec(path=path, is_directory=True)


def _file(path: str, template: str) -> TemplateSpec:
    return TemplateSpec(path=path, template=template)


SCAFFOLD: tuple[TemplateSpec, ...] = (
    _file("README.md", "README.md.j2"),
    _file(".gitignore", "gitignore.j2"),
    _file("mix.exs", "mix.exs.j2"),
    _dir("app"),
    _dir("app/routers"),
    _file("app/routers/application_router.ex", "app/routers/application_router.ex.j2"),
    _dir("config"),
    _file("config/app.ex", "config/app.ex.j2"),
    _dir("config/environments"),
    _file("config/environments/dev.exs", "config/environments/dev.exs.j2"),
    _file("config/environments/test.exs", "config/environments/test.exs.j2"),
    _file("config/environments/prod.exs", "config/environments/prod.exs.j2"),
    _dir("lib"),
    _dir("public"),
)


def iter_directories(
    specs: tuple[TemplateSpec, ...] = SCAFFOLD,
) -> Iterator[TemplateSpec]:
    """Yield the directory entries in declared order."""
    return (spec for spec in specs if spec.is_directory)


def iter_files(
    specs: tuple[TemplateSpec, ...] = SCAFFOLD,
) -> Iterator[TemplateSpec]:
    """Yield the file entries in declared order."""
    return (spec for spec in specs if not spec.is_directory)
