from pathlib import Path

import pytest
import yaml

from dscore_cli.exceptions import InvalidSkillChoiceError, SkillSourceNotFoundError
from dscore_cli.skills import (
    AVAILABLE_SKILLS,
    Skill,
    get_skill_source_path,
    install_skill,
    render_skill_document,
    select_skill,
)


def _split_frontmatter(content: str) -> "tuple[dict[str, str], str]":
    _, header, body = content.split("---\n", 2)
    return yaml.safe_load(header), body


@pytest.mark.parametrize(("answer", "skill_id"), [("1", "dscore-utils"), ("2", "dscore-cli"), (" 2 ", "dscore-cli")])
def test_select_skill(answer: str, skill_id: str) -> None:
    skill = select_skill(answer)

    assert skill is not None
    assert skill.id == skill_id


@pytest.mark.parametrize("answer", ["0", "", "abc"])
def test_select_skill_cancel(answer: str) -> None:
    assert select_skill(answer) is None


@pytest.mark.parametrize("answer", ["3", "-1", "99"])
def test_select_skill_out_of_range(answer: str) -> None:
    with pytest.raises(InvalidSkillChoiceError) as exc_info:
        select_skill(answer)

    assert exc_info.value.choice == int(answer)
    assert exc_info.value.limit == len(AVAILABLE_SKILLS)


@pytest.mark.parametrize("skill", AVAILABLE_SKILLS, ids=lambda skill: skill.id)
def test_bundled_sources_exist(skill: Skill) -> None:
    assert get_skill_source_path(skill).is_file()


def test_render_skill_document() -> None:
    skill = AVAILABLE_SKILLS[1]

    content = render_skill_document(skill)
    frontmatter, body = _split_frontmatter(content)

    assert content.startswith("---\nname: dscore-cli\n")
    assert frontmatter == {
        "name": "dscore-cli",
        "description": f'{skill.description}. "{skill.keywords}" 등을 물어볼 때 사용합니다.',
    }
    assert body == "\n" + get_skill_source_path(skill).read_text(encoding="utf-8")


def test_render_missing_source() -> None:
    skill = Skill(id="missing", name="missing", description="", source_file="missing.md", keywords="")

    with pytest.raises(SkillSourceNotFoundError):
        render_skill_document(skill)


def test_install_skill(tmp_path: Path) -> None:
    skill = AVAILABLE_SKILLS[0]

    path = install_skill(skill, tmp_path)

    assert path == tmp_path / ".claude" / "skills" / "dscore-utils" / "SKILL.md"
    frontmatter, _ = _split_frontmatter(path.read_text(encoding="utf-8"))
    assert frontmatter["name"] == "dscore-utils"


def test_install_skill_overwrites(tmp_path: Path) -> None:
    skill = AVAILABLE_SKILLS[0]
    existing = tmp_path / ".claude" / "skills" / skill.id / "SKILL.md"
    existing.parent.mkdir(parents=True)
    existing.write_text("old", encoding="utf-8")

    install_skill(skill, tmp_path)

    assert existing.read_text(encoding="utf-8") == render_skill_document(skill)
