"""Shared pytest fixtures for the dynamo-new test suite.

Provides reusable fixtures for:
- Temporary destination directories
- Generator configuration with a fixed version and source checkout
- A Rich console that records output instead of printing it
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from dynamo_new.config import GeneratorConfig
from dynamo_new.scaffolder import ProjectGenerator, build_context


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """A not-yet-existing destination named like a typical project."""
    return tmp_path / "hello_world"


@pytest.fixture
def fake_checkout(tmp_path: Path) -> Path:
    """Directory standing in for a local Dynamo checkout."""
    checkout = tmp_path / "checkouts" / "dynamo"
    checkout.mkdir(parents=True)
    return checkout


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture
def recording_console() -> Console:
    """Console writing to an in-memory buffer, wide enough to avoid wrapping."""
    return Console(file=io.StringIO(), width=200, color_system=None)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

@pytest.fixture
def config(fake_checkout: Path) -> GeneratorConfig:
    """Configuration pinned to a known version and checkout."""
    return GeneratorConfig(version="0.1.0-dev", source_root=fake_checkout)


@pytest.fixture
def generator(config: GeneratorConfig, recording_console: Console) -> ProjectGenerator:
    return ProjectGenerator(config, console=recording_console)


@pytest.fixture
def sample_context():
    """A released-mode context for ``hello_world``."""
    return build_context("hello_world", "HelloWorld", False, "0.1.0-dev")
