"""Load profile and env configuration."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from jobforge.log import get_logger, jobforge_home, load_env

load_env()
log = get_logger(__name__)

BASE_DIR: Path = jobforge_home()
CONFIG_DIR: Path = BASE_DIR / "config"
PROFILE_PATH: Path = CONFIG_DIR / "profile.yaml"
DATA_DIR: Path = BASE_DIR / "data"
EXPORTS_DIR: Path = BASE_DIR / "exports"

# Template labels only change the header of a tailored CV.
TEMPLATES: tuple[str, ...] = (
    "Software Development & IT",
    "Marketing & Communications",
    "Administration & Office Support",
    "Education & Training",
    "Healthcare & Nursing",
    "Political Science & Public Policy",
    "Sales & Customer Service",
    "Engineering & Technical",
    "Finance & Accounting",
    "Creative & Design",
    "Law & Legal Services",
    "Project Management",
    "Human Resources & Recruitment",
    "Supply Chain & Logistics",
    "Hospitality & Tourism",
)
DEFAULT_TEMPLATE: str = TEMPLATES[0]

_PROFILE_HEADER = (
    "# ============================================================\n"
    "# JobForge profile\n"
    "# name is used to sign cover letters\n"
    "# ============================================================\n\n"
)


def default_profile() -> dict[str, Any]:
    return {
        "profile": {"name": "User"},
        "default_template": DEFAULT_TEMPLATE,
    }


def load_profile(path: Path | None = None) -> dict[str, Any]:
    """Read the profile YAML, filling in defaults for anything missing."""
    path = path or PROFILE_PATH
    data = default_profile()
    if not path.exists():
        log.debug("No profile at %s — using defaults", path)
        return data

    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        log.warning("Profile %s is not a mapping — using defaults", path)
        return data

    # Backward compat: flat `name:` key from hand-written profiles
    if "name" in loaded and "profile" not in loaded:
        loaded["profile"] = {"name": loaded.pop("name")}

    section = loaded.get("profile") or {}
    if isinstance(section, dict):
        data["profile"].update(section)
    else:
        log.warning("Ignoring non-mapping `profile:` section in %s", path)
    if loaded.get("default_template"):
        data["default_template"] = loaded["default_template"]
    return data


def write_profile(profile: dict[str, Any], path: Path | None = None) -> Path:
    """Write profile dict to YAML file."""
    path = path or PROFILE_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    yaml_str = yaml.dump(profile, default_flow_style=False, sort_keys=False, allow_unicode=True)
    path.write_text(_PROFILE_HEADER + yaml_str, encoding="utf-8")
    log.info("Profile written → %s", path)
    return path


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def ensure_dirs() -> None:
    for d in (CONFIG_DIR, DATA_DIR, EXPORTS_DIR):
        d.mkdir(parents=True, exist_ok=True)
