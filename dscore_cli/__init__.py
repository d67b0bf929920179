from dscore_cli.naming import derive_casings, to_camel_case, to_pascal_case
from dscore_cli.options import Framework, GenerationConfig, PageDirectory, parse_generate_args
from dscore_cli.scaffolding import generate_page
from dscore_cli.skills import AVAILABLE_SKILLS, install_skill
from dscore_cli.validation import validate_page_name

__all__ = (
    "AVAILABLE_SKILLS",
    "Framework",
    "GenerationConfig",
    "PageDirectory",
    "derive_casings",
    "generate_page",
    "install_skill",
    "parse_generate_args",
    "to_camel_case",
    "to_pascal_case",
    "validate_page_name",
)
