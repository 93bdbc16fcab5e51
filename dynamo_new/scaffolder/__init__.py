"""Dynamo scaffolder -- generates new project skeletons.

Quick usage::

    from dynamo_new.scaffolder import ProjectGenerator

    report = ProjectGenerator().generate("/tmp/hello_world")
    report.created   # ["README.md", ".gitignore", "mix.exs", ...]
"""

from dynamo_new.scaffolder.context import RenderContext, build_context
from dynamo_new.scaffolder.generator import (
    PlanEntry,
    ProjectGenerator,
    ScaffoldError,
    ScaffoldPlan,
    ScaffoldReport,
    ScaffoldWriter,
    build_plan,
)
from dynamo_new.scaffolder.naming import InvalidNameError, derive_names, validate_name
from dynamo_new.scaffolder.registry import SCAFFOLD, TemplateSpec
from dynamo_new.scaffolder.templates import TemplateRenderer

__all__ = [
    "InvalidNameError",
    "PlanEntry",
    "ProjectGenerator",
    "RenderContext",
    "SCAFFOLD",
    "ScaffoldError",
    "ScaffoldPlan",
    "ScaffoldReport",
    "ScaffoldWriter",
    "TemplateRenderer",
    "TemplateSpec",
    "build_context",
    "build_plan",
    "derive_names",
    "validate_name",
]
