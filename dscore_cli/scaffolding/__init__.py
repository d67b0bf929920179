"""Page scaffolding module for dscore-cli.

This module provides the ``dscore-cli generate-page`` command with
framework-specific template generation.

Supported frameworks:
- Vue 3 (single file components, composables)
- React (function components, hooks, optional CSS modules)
"""

from dscore_cli.scaffolding.generator import (
    GenerationResult,
    ScaffoldPlan,
    TemplateContext,
    build_template_set,
    generate_page,
    plan_scaffold,
    write_scaffold,
)
from dscore_cli.scaffolding.templates import FileRole, FrameworkTemplate, get_available_templates, get_template

__all__ = [
    "FileRole",
    "FrameworkTemplate",
    "GenerationResult",
    "ScaffoldPlan",
    "TemplateContext",
    "build_template_set",
    "generate_page",
    "get_available_templates",
    "get_template",
    "plan_scaffold",
    "write_scaffold",
]
