from __future__ import annotations

import logging
from pathlib import Path

import frontmatter  # type: ignore[import-untyped]
from pydantic import ValidationError

from ..errors import LoadError
from ..models.bundle import Scope
from ..models.skill import Skill

logger = logging.getLogger(__name__)

# Where installed skills live, relative to the project (local) or home (global).
SKILL_DIRS = (Path(".agents", "skills"), Path(".agentskills", "skills"))


def load_skill(path: Path) -> Skill:
    """Load a skill from a SKILL.md file (YAML frontmatter + markdown body)."""
    post = _load_frontmatter(path)
    try:
        return Skill.model_validate({"metadata": dict(post.metadata), "body": post.content})
    except ValidationError as e:
        raise LoadError(f"Invalid skill frontmatter in {path}: {e}", path=path) from e


def discover_skills(skills_dir: Path) -> list[Skill]:
    """Load every ``<skill>/SKILL.md`` under ``skills_dir``, sorted by directory name."""
    if not skills_dir.is_dir():
        return []
    return [load_skill(f) for f in sorted(skills_dir.glob("*/SKILL.md"))]


def load_installed_skills(
    base_dir: Path,
    scope: Scope = "local",
    home: Path | None = None,
) -> list[Skill]:
    """Load the skills installed for ``scope``; malformed skills are logged and skipped.

    A skill name found in more than one search directory is taken from the first.
    """
    root = (home or Path.home()) if scope == "global" else Path(base_dir)
    skills: list[Skill] = []
    seen: set[str] = set()
    for rel in SKILL_DIRS:
        skills_dir = root / rel
        if not skills_dir.is_dir():
            continue
        for skill_file in sorted(skills_dir.glob("*/SKILL.md")):
            try:
                skill = load_skill(skill_file)
            except LoadError as e:
                logger.warning("Skipping skill %s: %s", skill_file.parent.name, e)
                continue
            if skill.name in seen:
                continue
            seen.add(skill.name)
            skills.append(skill)
    logger.debug("Loaded %d installed skills from %s", len(skills), root)
    return skills


def _load_frontmatter(path: Path) -> frontmatter.Post:
    try:
        return frontmatter.load(str(path))
    except FileNotFoundError as e:
        raise LoadError(f"File not found: {path}", path=path) from e
    except Exception as e:
        raise LoadError(f"Failed to parse {path}: {e}", path=path) from e
