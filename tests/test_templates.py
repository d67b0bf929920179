import re

import pytest

from dscore_cli.options import Framework
from dscore_cli.scaffolding.generator import get_framework_template, get_template_dir
from dscore_cli.scaffolding.templates import (
    FRAMEWORK_TEMPLATES,
    FileRole,
    FrameworkTemplate,
    get_available_templates,
    get_template,
)


def test_get_available_templates() -> None:
    templates = get_available_templates()

    assert len(templates) == 2
    assert all(isinstance(template, FrameworkTemplate) for template in templates)
    assert {template.type for template in templates} == {Framework.VUE, Framework.REACT}


def test_get_template() -> None:
    assert get_template(Framework.REACT) is FRAMEWORK_TEMPLATES[Framework.REACT]
    assert get_template("vue") is FRAMEWORK_TEMPLATES[Framework.VUE]
    assert get_template("svelte") is None


def test_get_framework_template_unknown() -> None:
    with pytest.raises(ValueError, match="svelte"):
        get_framework_template("svelte")


@pytest.mark.parametrize("framework", list(Framework))
def test_every_template_file_exists(framework: Framework) -> None:
    template_dir = get_template_dir()
    search_path = [template_dir / framework.value, template_dir / "base"]

    for template_file in FRAMEWORK_TEMPLATES[framework].files:
        for name in filter(None, (template_file.template, template_file.styled_template)):
            assert any((directory / name).is_file() for directory in search_path), name


@pytest.mark.parametrize("framework", list(Framework))
def test_template_sources_only_use_known_variables(framework: Framework) -> None:
    template_dir = get_template_dir()
    for path in [*(template_dir / framework.value).rglob("*.j2"), *(template_dir / "base").glob("*.j2")]:
        source = path.read_text(encoding="utf-8")
        outside_raw = re.sub(r"\{% raw %\}.*?\{% endraw %\}", "", source, flags=re.DOTALL)
        for expression in re.findall(r"\{\{(.*?)\}\}", outside_raw):
            assert expression.strip() in {"page_name", "pascal_name", "camel_name", "directory"}, (path, expression)


def test_select_files_defaults() -> None:
    react = FRAMEWORK_TEMPLATES[Framework.REACT]

    roles = [f.role for f in react.select_files(include_base_components=False, include_stylesheets=False)]

    assert roles == [FileRole.PAGE, FileRole.CONSTANTS, FileRole.API, FileRole.HOOK, FileRole.SEARCH, FileRole.LIST]


def test_select_files_optional_roles() -> None:
    react = FRAMEWORK_TEMPLATES[Framework.REACT]
    vue = FRAMEWORK_TEMPLATES[Framework.VUE]

    react_roles = {f.role for f in react.select_files(include_base_components=True, include_stylesheets=True)}
    vue_roles = {f.role for f in vue.select_files(include_base_components=True, include_stylesheets=True)}

    assert {FileRole.BASE_TABLE, FileRole.BASE_PAGINATION, FileRole.PAGE_STYLE, FileRole.LIST_STYLE} <= react_roles
    assert FileRole.SEARCH_STYLE in react_roles
    assert {FileRole.BASE_TABLE, FileRole.BASE_PAGINATION} <= vue_roles
    assert not {FileRole.PAGE_STYLE, FileRole.SEARCH_STYLE, FileRole.LIST_STYLE} & vue_roles
    assert FileRole.COMPOSABLE in vue_roles
    assert FileRole.HOOK not in vue_roles
