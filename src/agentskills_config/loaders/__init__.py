from ._skill import SKILL_DIRS, discover_skills, load_installed_skills, load_skill

__all__ = [
    "SKILL_DIRS",
    "discover_skills",
    "load_installed_skills",
    "load_skill",
]
