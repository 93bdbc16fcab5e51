"""Application and module name derivation.

Turns the destination path (and the optional ``--app`` / ``--module``
overrides) into the two identifiers every template is parameterized by.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

NAME_PATTERN = re.compile(r"[a-z]\w+", re.IGNORECASE | re.ASCII)
NAME_RULE = "project name must start with a letter and have only letters, numbers and underscore"


class InvalidNameError(ValueError):
    """Raised when an application name violates the naming rule."""

    def __init__(self, name: str, rule: str = NAME_RULE) -> None:
        self.name = name
        self.rule = rule
        super().__init__(f"invalid project name {name!r}: {rule}")


def validate_name(name: str) -> None:
    """Raise ``InvalidNameError`` unless *name* is a legal application name.

    The name must be at least two characters long, start with a letter and
    continue with letters, digits or underscores.
    """
    if not NAME_PATTERN.fullmatch(name):
        raise InvalidNameError(name)


def underscore(name: str) -> str:
    """Convert ``HelloWorld`` to ``hello_world``.

    Examples::

        underscore("HelloWorld")  -> "hello_world"
        underscore("HTTPServer")  -> "http_server"
        underscore("hello_world") -> "hello_world"
    """
    s1 = re.sub(r"([^_])([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def camelize(name: str) -> str:
    """Convert ``hello_world`` to ``HelloWorld``.

    Only the first character of each segment is touched, so digits and
    existing capitals survive (``app_v2x`` -> ``AppV2x``).
    """
    return "".join(part[0].upper() + part[1:] for part in name.split("_") if part)


def derive_names(
    path: str | Path,
    app: str | None = None,
    module: str | None = None,
) -> tuple[str, str]:
    """Return ``(app_name, module_name)`` for a generation run.

    Args:
        path: Destination directory.  The last component of its absolute
            form is the application name unless *app* is given.  Symlinks
            are not followed; the name is the one the caller typed.
        app: Explicit application name.
        module: Explicit module name.  Defaults to the camelized app name.

    Raises:
        InvalidNameError: If the chosen application name is not legal.
    """
    name = app if app is not None else Path(os.path.abspath(path)).name
    validate_name(name)
    app_name = underscore(name)
    return app_name, module or camelize(app_name)
