"""Installation of bundled skill documents.

A skill is a markdown guide shipped inside the package. Installing one copies
it to ``.claude/skills/<id>/SKILL.md`` below the working directory with a YAML
frontmatter header describing when the assistant should load it.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from dscore_cli.exceptions import InvalidSkillChoiceError, SkillSourceNotFoundError
from dscore_cli.utils import get_package_path, read_text_file

__all__ = (
    "AVAILABLE_SKILLS",
    "Skill",
    "get_skill_source_path",
    "install_skill",
    "render_skill_document",
    "select_skill",
)

logger = logging.getLogger("dscore_cli")

SKILLS_DIR = Path(".claude", "skills")
SKILL_FILE_NAME = "SKILL.md"


@dataclass(frozen=True)
class Skill:
    """A skill document bundled with the package.

    Attributes:
        id: Directory name under ``.claude/skills`` and the skill's frontmatter name.
        name: Display name in the menu.
        description: One line summary.
        source_file: Markdown file name inside ``skill_docs``.
        keywords: Topics that should trigger the skill.
    """

    id: str
    name: str
    description: str
    source_file: str
    keywords: str


AVAILABLE_SKILLS: tuple[Skill, ...] = (
    Skill(
        id="dscore-utils",
        name="dscore-utils",
        description="dscore-utils 라이브러리 유틸리티 함수 가이드",
        source_file="dscore_utils_skill.md",
        keywords="유틸리티 함수 사용법, 배열 유틸리티, 날짜 포맷팅, 숫자 포맷팅",
    ),
    Skill(
        id="dscore-cli",
        name="dscore-cli",
        description="dscore-cli 명령어 사용 가이드",
        source_file="dscore_cli_skill.md",
        keywords="페이지 생성, generate-page, CLI 명령어, 스캐폴딩",
    ),
)


def select_skill(answer: str) -> "Skill | None":
    """Resolve a menu answer to a skill.

    Args:
        answer: The number typed by the user.

    Raises:
        InvalidSkillChoiceError: If the number is outside the menu.

    Returns:
        The selected skill, or None when the user cancelled with ``0`` or a
        non-numeric answer.
    """
    try:
        choice = int(answer.strip())
    except ValueError:
        return None
    if choice == 0:
        return None
    if not 1 <= choice <= len(AVAILABLE_SKILLS):
        raise InvalidSkillChoiceError(choice, len(AVAILABLE_SKILLS))
    return AVAILABLE_SKILLS[choice - 1]


def get_skill_source_path(skill: Skill) -> Path:
    return get_package_path("skill_docs", skill.source_file)


def render_skill_document(skill: Skill) -> str:
    """Prepend the YAML frontmatter to the bundled markdown.

    Raises:
        SkillSourceNotFoundError: If the bundled markdown is missing.

    Returns:
        The full ``SKILL.md`` content.
    """
    source_path = get_skill_source_path(skill)
    if not source_path.is_file():
        raise SkillSourceNotFoundError(source_path)

    frontmatter = {
        "name": skill.id,
        "description": f'{skill.description}. "{skill.keywords}" 등을 물어볼 때 사용합니다.',
    }
    header = yaml.safe_dump(frontmatter, allow_unicode=True, sort_keys=False, width=1000)
    return f"---\n{header}---\n\n{read_text_file(source_path)}"


def install_skill(skill: Skill, cwd: Path) -> Path:
    """Write ``SKILL.md`` for a skill below ``cwd``.

    An existing file is overwritten.

    Args:
        skill: The skill to install.
        cwd: Project root.

    Raises:
        SkillSourceNotFoundError: If the bundled markdown is missing.

    Returns:
        Path of the written file.
    """
    content = render_skill_document(skill)
    skill_dir = cwd / SKILLS_DIR / skill.id
    skill_dir.mkdir(parents=True, exist_ok=True)
    skill_file = skill_dir / SKILL_FILE_NAME
    skill_file.write_text(content, encoding="utf-8")
    logger.debug("Installed skill %s to %s", skill.id, skill_file)
    return skill_file
