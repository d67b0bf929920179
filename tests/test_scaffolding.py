import re
from pathlib import Path

import pytest

from dscore_cli.exceptions import DirectoryExistsError, ScaffoldWriteError
from dscore_cli.options import Framework, GenerationConfig, PageDirectory
from dscore_cli.scaffolding import generator
from dscore_cli.scaffolding.generator import (
    TemplateContext,
    build_template_set,
    generate_page,
    plan_scaffold,
)
from dscore_cli.scaffolding.templates import FileRole
from dscore_cli.validation import validate_page_name

LEFTOVER_VARIABLE = re.compile(r"\{\{\s*(page_name|pascal_name|camel_name|directory|framework)\s*\}\}")
REACT = GenerationConfig(framework=Framework.REACT)
VUE = GenerationConfig(framework=Framework.VUE)


def _plan(page_name: str, config: GenerationConfig) -> generator.ScaffoldPlan:
    context = TemplateContext.from_config(page_name, config)
    return plan_scaffold(config.framework, build_template_set(context), context.pascal_name)


def test_template_context() -> None:
    context = TemplateContext.from_config("order-history", GenerationConfig(directory=PageDirectory.PAGE))

    assert context.to_dict() == {
        "page_name": "order-history",
        "pascal_name": "OrderHistory",
        "camel_name": "orderHistory",
        "framework": "vue",
        "directory": "page",
    }


def test_react_plan_paths() -> None:
    plan = _plan("user-mgt", REACT)

    assert plan.directories == ("components/hooks", "components/ui")
    assert [f.relative_path for f in plan.files] == [
        "UserMgtPage.jsx",
        "components/constants.js",
        "components/api.js",
        "components/hooks/useUserMgt.js",
        "components/ui/UserMgtSearch.jsx",
        "components/ui/UserMgtList.jsx",
    ]


def test_vue_plan_paths() -> None:
    plan = _plan("order-history", VUE)

    assert plan.directories == ("composables", "components")
    assert [f.relative_path for f in plan.files] == [
        "OrderHistoryPage.vue",
        "constants.js",
        "api.js",
        "composables/useOrderHistory.js",
        "components/OrderHistorySearch.vue",
        "components/OrderHistoryList.vue",
    ]


def test_react_optional_roles() -> None:
    config = GenerationConfig(framework=Framework.REACT, include_base_components=True, include_stylesheets=True)

    plan = _plan("user-mgt", config)
    paths = {f.relative_path: f.content for f in plan.files}

    assert "components/ui/BaseTable.jsx" in paths
    assert "components/ui/BasePagination.jsx" in paths
    assert "UserMgtPage.module.css" in paths
    assert "components/ui/UserMgtSearch.module.css" in paths
    assert "components/ui/UserMgtList.module.css" in paths
    assert "import styles from './UserMgtPage.module.css'" in paths["UserMgtPage.jsx"]
    assert "import styles from './UserMgtList.module.css'" in paths["components/ui/UserMgtList.jsx"]


def test_react_without_styles_does_not_import_css_modules() -> None:
    plan = _plan("user-mgt", REACT)

    assert all("module.css" not in f.content for f in plan.files)


def test_vue_ignores_stylesheets() -> None:
    styled = _plan("product", GenerationConfig(include_stylesheets=True))

    assert styled == _plan("product", VUE)


def test_vue_base_components() -> None:
    plan = _plan("product", GenerationConfig(include_base_components=True))

    assert [f.relative_path for f in plan.files][-2:] == ["components/BaseTable.vue", "components/BasePagination.vue"]


@pytest.mark.parametrize(
    "config",
    [
        VUE,
        REACT,
        GenerationConfig(framework=Framework.REACT, include_base_components=True, include_stylesheets=True),
        GenerationConfig(include_base_components=True, directory=PageDirectory.PAGE),
    ],
)
def test_rendered_files_have_no_leftover_placeholders(config: GenerationConfig) -> None:
    for planned_file in _plan("order-history", config).files:
        assert not LEFTOVER_VARIABLE.search(planned_file.content), planned_file.relative_path
        assert "{%" not in planned_file.content, planned_file.relative_path
        assert planned_file.content.endswith("\n"), planned_file.relative_path


def test_plan_is_deterministic() -> None:
    config = GenerationConfig(framework=Framework.REACT, include_stylesheets=True)

    assert _plan("user-mgt", config) == _plan("user-mgt", config)


def test_plan_rejects_unknown_roles() -> None:
    with pytest.raises(ValueError, match="hook"):
        plan_scaffold(Framework.VUE, {FileRole.HOOK: "content"}, "Product")


def test_generate_react_page(tmp_path: Path) -> None:
    result = generate_page(tmp_path, "user-mgt", REACT)

    target = tmp_path / "src" / "pages" / "user-mgt"
    assert result.target_dir == target
    assert result.casings.pascal == "UserMgt"
    assert result.written[0] == target / "UserMgtPage.jsx"
    assert all(path.is_file() for path in result.written)
    hook = (target / "components" / "hooks" / "useUserMgt.js").read_text(encoding="utf-8")
    assert "export const useUserMgt = () =>" in hook
    assert (target / "components" / "ui").is_dir()


def test_generate_vue_page(tmp_path: Path) -> None:
    result = generate_page(tmp_path, "order-history", VUE)

    target = tmp_path / "src" / "pages" / "order-history"
    assert (target / "composables").is_dir()
    assert (target / "components").is_dir()
    composable = (target / "composables" / "useOrderHistory.js").read_text(encoding="utf-8")
    assert "export const useOrderHistory" in composable
    assert len(result.written) == 6


def test_generate_in_page_directory(tmp_path: Path) -> None:
    result = generate_page(tmp_path, "product", GenerationConfig(directory=PageDirectory.PAGE))

    assert result.target_dir == tmp_path / "src" / "page" / "product"
    assert (result.target_dir / "ProductPage.vue").is_file()


def test_second_run_fails_validation(tmp_path: Path) -> None:
    generate_page(tmp_path, "user-mgt", REACT)

    with pytest.raises(DirectoryExistsError):
        validate_page_name("user-mgt", PageDirectory.PAGES, cwd=tmp_path)


def test_partial_write_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    original_write = generator._write_file
    calls: list[Path] = []

    def failing_write(path: Path, content: str) -> None:
        calls.append(path)
        if len(calls) == 3:
            raise PermissionError(13, "Permission denied")
        original_write(path, content)

    monkeypatch.setattr(generator, "_write_file", failing_write)

    with pytest.raises(ScaffoldWriteError) as exc_info:
        generate_page(tmp_path, "user-mgt", REACT)

    error = exc_info.value
    target = tmp_path / "src" / "pages" / "user-mgt"
    assert error.path == target / "components" / "api.js"
    assert error.reason == "Permission denied"
    assert error.written == [target / "UserMgtPage.jsx", target / "components" / "constants.js"]
    assert all(path.is_file() for path in error.written)
    assert not error.path.exists()
    assert not (target / "components" / "hooks" / "useUserMgt.js").exists()
