"""Generator configuration.

Typed settings for a generation run. Values are validated by Pydantic at
construction time and can be overridden from environment variables so that
the command line stays free of rarely used knobs.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from dynamo_new import __version__

DEFAULT_GIT_URL = "https://github.com/josevalim/dynamo.git"


class GeneratorConfig(BaseModel):
    """Global generator configuration.

    Instances are created once by the CLI entry point (or by tests) and handed
    to ``ProjectGenerator``.  Nothing in the scaffolder reads the environment
    directly; everything it needs flows through this object.
    """

    version: str = Field(default=__version__, min_length=1)
    git_url: str = Field(
        default=DEFAULT_GIT_URL,
        min_length=1,
        description="Repository referenced by the released-mode dependency",
    )
    source_root: Path | None = Field(
        default=None,
        description="Local Dynamo checkout referenced in development mode",
    )

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def dev_source_root(self) -> Path:
        """Checkout used by ``--dev``; the generator's own tree unless overridden."""
        from dynamo_new.scaffolder.context import default_source_root

        if self.source_root is not None:
            return self.source_root.expanduser().resolve()
        return default_source_root()

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            DYNAMO_NEW_VERSION, DYNAMO_NEW_GIT_URL, DYNAMO_NEW_SOURCE_ROOT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DYNAMO_NEW_VERSION"):
            kwargs["version"] = os.environ["DYNAMO_NEW_VERSION"]
        if os.environ.get("DYNAMO_NEW_GIT_URL"):
            kwargs["git_url"] = os.environ["DYNAMO_NEW_GIT_URL"]
        if os.environ.get("DYNAMO_NEW_SOURCE_ROOT"):
            kwargs["source_root"] = Path(os.environ["DYNAMO_NEW_SOURCE_ROOT"])
        return cls(**kwargs)
