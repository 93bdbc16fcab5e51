"""Main scaffolding orchestrator.

Pairs the static ``SCAFFOLD`` registry with a ``RenderContext`` to build a
``ScaffoldPlan``, then writes that plan below the destination directory.
Existing files are never overwritten.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from dynamo_new.config import GeneratorConfig
from dynamo_new.utils import console as default_console
from dynamo_new.utils import print_action

from .context import RenderContext, build_context
from .naming import derive_names
from .registry import SCAFFOLD, TemplateSpec
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when a directory or file of the scaffold cannot be created."""

    def __init__(self, message: str, path: str | Path = "") -> None:
        self.path = Path(path) if path else None
        super().__init__(message)


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PlanEntry:
    """A single filesystem operation of the plan."""

    path: str
    is_directory: bool = False
    content: str = ""


ScaffoldPlan = tuple[PlanEntry, ...]


def build_plan(
    context: RenderContext,
    renderer: TemplateRenderer | None = None,
    specs: tuple[TemplateSpec, ...] = SCAFFOLD,
) -> ScaffoldPlan:
    """Render every file entry of *specs* and return the ordered plan.

    All rendering happens here, before anything touches the disk, so a
    broken template fails the run without leaving partial output behind.
    """
    renderer = renderer or TemplateRenderer()
    entries: list[PlanEntry] = []
    for spec in specs:
        if spec.is_directory:
            entries.append(PlanEntry(path=spec.path, is_directory=True))
        else:
            entries.append(
                PlanEntry(path=spec.path, content=renderer.render(spec.template, context))
            )
    return tuple(entries)


# ---------------------------------------------------------------------------
# Writer
# ---------------------------------------------------------------------------


@dataclass
class ScaffoldReport:
    """Outcome of writing a plan."""

    root: Path
    created: list[str] = field(default_factory=list)
    existing: list[str] = field(default_factory=list)  # directories already present
    skipped: list[str] = field(default_factory=list)  # files left untouched
    context: RenderContext | None = None

    @property
    def has_conflicts(self) -> bool:
        return bool(self.skipped)


class ScaffoldWriter:
    """Writes a ``ScaffoldPlan`` below a destination directory.

    Every plan path is resolved relative to the destination; the process
    working directory is never changed.  There is no rollback: when a step
    fails, whatever was written before it stays on disk.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def write(self, plan: ScaffoldPlan, destination: str | Path) -> ScaffoldReport:
        """Create the destination and every entry of *plan* in order.

        Raises:
            ScaffoldError: If a directory or file cannot be created.
        """
        root = Path(destination)
        self._mkdir(root)
        report = ScaffoldReport(root=root)

        for entry in plan:
            target = root / entry.path
            if entry.is_directory:
                if target.is_dir():
                    report.existing.append(entry.path)
                    continue
                self._mkdir(target)
                report.created.append(entry.path)
                print_action("creating", entry.path, out=self.console)
            elif self._write_file(target, entry.content):
                report.created.append(entry.path)
                print_action("creating", entry.path, out=self.console)
            else:
                report.skipped.append(entry.path)
                print_action("skipping", f"{entry.path} (already exists)", out=self.console)

        return report

    # -- Internal helpers --------------------------------------------------

    @staticmethod
    def _mkdir(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ScaffoldError(f"Cannot create directory {path}: {exc}", path) from exc

    @classmethod
    def _write_file(cls, path: Path, content: str) -> bool:
        """Create *path* with *content*; return ``False`` if it already exists."""
        if path.exists():
            return False
        cls._mkdir(path.parent)
        try:
            # "x" refuses to clobber a file created since the check above.
            with path.open("x", encoding="utf-8") as fh:
                fh.write(content)
        except FileExistsError:
            return False
        except OSError as exc:
            raise ScaffoldError(f"Cannot write file {path}: {exc}", path) from exc
        return True


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Creates a new Dynamo project.

    Given a destination path, generates::

        README.md
        .gitignore
        mix.exs
        app/routers/application_router.ex
        config/app.ex
        config/environments/{dev,test,prod}.exs
        lib/
        public/
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = TemplateRenderer()
        self.writer = ScaffoldWriter(console)

    def build_context(
        self,
        path: str | Path,
        app: str | None = None,
        module: str | None = None,
        dev: bool = False,
    ) -> RenderContext:
        """Derive names for *path* and build the shared template context.

        Raises:
            InvalidNameError: If the application name is not legal.
        """
        app_name, module_name = derive_names(path, app, module)
        return build_context(
            app_name,
            module_name,
            dev,
            self.config.version,
            source_root=self.config.dev_source_root if dev else None,
            git_url=self.config.git_url,
        )

    def generate(
        self,
        path: str | Path,
        app: str | None = None,
        module: str | None = None,
        dev: bool = False,
    ) -> ScaffoldReport:
        """Generate the project at *path*.

        Names are validated and templates rendered before the destination is
        created, so an invalid name never leaves anything on disk.

        Raises:
            InvalidNameError: If the application name is not legal.
            ScaffoldError: If a directory or file cannot be created.
        """
        context = self.build_context(path, app, module, dev)
        plan = build_plan(context, self.renderer)
        report = self.writer.write(plan, path)
        report.context = context
        return report
