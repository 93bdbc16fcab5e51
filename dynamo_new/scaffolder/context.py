"""Template context for a generation run.

Every template is rendered from the same ``RenderContext``.  The only value
that depends on the command line mode is the Dynamo dependency descriptor
written into ``mix.exs``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

import dynamo_new
from dynamo_new.config import DEFAULT_GIT_URL

# dynamo_new/ -> checkout root
_SOURCE_ROOT_LEVELS = 1


class RenderContext(BaseModel):
    """Read-only variables shared by every template."""

    model_config = ConfigDict(frozen=True)

    app: str = Field(..., description="Underscored application name")
    mod: str = Field(..., description="Top-level module name")
    dynamo: str = Field(..., description="Dependency descriptor for mix.exs")
    version: str = Field(..., description="Dynamo version requirement")

    def as_template_vars(self) -> dict[str, Any]:
        """Return the context as keyword arguments for ``Template.render``."""
        return self.model_dump()


def resolve_source_root(anchor: str | Path, levels: int) -> Path:
    """Walk *levels* parent directories up from *anchor*.

    ``resolve_source_root("/opt/dynamo/dynamo_new", 1)`` returns
    ``/opt/dynamo``.  A *levels* of ``0`` returns the resolved anchor itself.
    """
    if levels < 0:
        raise ValueError("levels must be >= 0")
    root = Path(anchor).expanduser().resolve()
    for _ in range(levels):
        root = root.parent
    return root


def default_source_root() -> Path:
    """Checkout that contains the installed ``dynamo_new`` package."""
    return resolve_source_root(Path(dynamo_new.__file__).parent, _SOURCE_ROOT_LEVELS)


def dependency_descriptor(
    dev_mode: bool,
    source_root: str | Path | None = None,
    git_url: str = DEFAULT_GIT_URL,
) -> str:
    """Return the Dynamo dependency options for the generated ``mix.exs``.

    Development mode points at a local checkout, released mode at git.
    """
    if dev_mode:
        root = Path(source_root).resolve() if source_root is not None else default_source_root()
        return f'raw: "{root.as_posix()}"'
    return f'git: "{git_url}"'


def build_context(
    app: str,
    mod: str,
    dev_mode: bool,
    version: str,
    *,
    source_root: str | Path | None = None,
    git_url: str = DEFAULT_GIT_URL,
) -> RenderContext:
    """Assemble the ``RenderContext`` for one generation run."""
    return RenderContext(
        app=app,
        mod=mod,
        dynamo=dependency_descriptor(dev_mode, source_root, git_url),
        version=version,
    )
