"""Integration tests that run ``python -m dynamo_new`` as a subprocess.

These exercise the installed package the way a user would: argument
parsing, exit codes and the generated tree on disk.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

EXPECTED_TREE = [
    ".gitignore",
    "README.md",
    "app",
    "app/routers",
    "app/routers/application_router.ex",
    "config",
    "config/app.ex",
    "config/environments",
    "config/environments/dev.exs",
    "config/environments/prod.exs",
    "config/environments/test.exs",
    "lib",
    "mix.exs",
    "public",
]


def _run(*args: str, cwd: Path) -> subprocess.CompletedProcess:
    env = {k: v for k, v in os.environ.items() if not k.startswith("DYNAMO_NEW_")}
    env["COLUMNS"] = "200"
    return subprocess.run(
        [sys.executable, "-m", "dynamo_new", *args],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


def _tree(root: Path) -> list[str]:
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*"))


@pytest.mark.integration
class TestScaffoldEndToEnd:
    def test_generate_relative_path(self, tmp_path: Path) -> None:
        result = _run("hello_world", cwd=tmp_path)

        assert result.returncode == 0, result.stderr
        project = tmp_path / "hello_world"
        assert _tree(project) == EXPECTED_TREE

        mix = (project / "mix.exs").read_text(encoding="utf-8")
        assert "defmodule HelloWorld.Mixfile do" in mix
        assert "app: :hello_world," in mix
        assert 'git: "https://github.com/josevalim/dynamo.git"' in mix

        gitignore = (project / ".gitignore").read_text(encoding="utf-8")
        assert gitignore == "/ebin\n/deps\nerl_crash.dump\n"

        router = (project / "app" / "routers" / "application_router.ex").read_text(
            encoding="utf-8"
        )
        assert router.startswith("defmodule ApplicationRouter do\n")
        assert 'conn.resp(200, "Hello world")' in router

    def test_environment_configs(self, tmp_path: Path) -> None:
        assert _run("blog", cwd=tmp_path).returncode == 0
        envs = tmp_path / "blog" / "config" / "environments"

        dev = (envs / "dev.exs").read_text(encoding="utf-8")
        test = (envs / "test.exs").read_text(encoding="utf-8")
        prod = (envs / "prod.exs").read_text(encoding="utf-8")

        assert "compile_on_demand: true" in dev and "reload_modules: true" in dev
        assert "compile_on_demand: true" in test and "reload_modules: false" in test
        assert "compile_on_demand: false" in prod and "reload_modules: false" in prod

    def test_version(self, tmp_path: Path) -> None:
        result = _run("-v", cwd=tmp_path)
        assert result.returncode == 0
        assert result.stdout.startswith("Dynamo v")
        assert list(tmp_path.iterdir()) == []

    def test_missing_path_exits_nonzero(self, tmp_path: Path) -> None:
        result = _run(cwd=tmp_path)
        assert result.returncode == 1
        assert "expected PATH to be given" in result.stdout
        assert list(tmp_path.iterdir()) == []

    def test_invalid_app_exits_nonzero(self, tmp_path: Path) -> None:
        result = _run("proj", "--app", "my-app", cwd=tmp_path)
        assert result.returncode == 1
        assert "invalid project name" in result.stdout
        assert list(tmp_path.iterdir()) == []

    def test_rerun_is_non_destructive(self, tmp_path: Path) -> None:
        assert _run("blog", cwd=tmp_path).returncode == 0
        readme = tmp_path / "blog" / "README.md"
        readme.write_text("# Mine\n", encoding="utf-8")

        result = _run("blog", "--module", "Other", cwd=tmp_path)

        assert result.returncode == 0
        assert readme.read_text(encoding="utf-8") == "# Mine\n"
        assert "skipping README.md" in result.stdout
