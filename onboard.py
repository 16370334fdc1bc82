#!/usr/bin/env python3
"""
Interactive onboarding wizard.

    python onboard.py

Walks through: name → default template → master CV → ready.
"""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobforge.config import TEMPLATES, ensure_dirs, load_profile, write_profile
from jobforge.log import get_logger

log = get_logger(__name__)

# ── Helpers ──────────────────────────────────────────────────────────────


def _ask(prompt: str, default: str = "") -> str:
    hint = f" [{default}]" if default else ""
    val = input(f"  {prompt}{hint}: ").strip()
    return val or default


def _ask_yn(prompt: str, default: bool = True) -> bool:
    hint = "Y/n" if default else "y/N"
    val = input(f"  {prompt} ({hint}): ").strip().lower()
    if not val:
        return default
    return val in ("y", "yes")


def _banner() -> None:
    print()
    print("╔════════════════════════════════════════════╗")
    print("║            JobForge — Setup                ║")
    print("╚════════════════════════════════════════════╝")
    print()


def _step(num: int, total: int, title: str) -> None:
    print(f"\n{'─'*50}")
    print(f"  Step {num}/{total}: {title}")
    print(f"{'─'*50}")


# ── Steps ────────────────────────────────────────────────────────────────


def step_profile(profile: dict) -> dict:
    """Name used to sign cover letters."""
    _step(1, 3, "Profile")
    profile["profile"]["name"] = _ask("Your full name", profile["profile"].get("name", ""))
    return profile


def step_template(profile: dict) -> dict:
    _step(2, 3, "Default template")
    for i, label in enumerate(TEMPLATES, 1):
        print(f"    {i:>2}. {label}")
    current = profile.get("default_template", TEMPLATES[0])
    default_idx = TEMPLATES.index(current) + 1 if current in TEMPLATES else 1
    choice = _ask("Template number", str(default_idx))
    if choice.isdigit() and 1 <= int(choice) <= len(TEMPLATES):
        profile["default_template"] = TEMPLATES[int(choice) - 1]
    else:
        print(f"  ⚠  Not a template number — keeping {current}")
    return profile


def step_master_cv() -> None:
    """Import the master CV from a PDF, DOCX or TXT file."""
    _step(3, 3, "Master CV")
    if not _ask_yn("Import your master CV from a file?", default=True):
        print("  A sample master CV is used until you edit it in the app.")
        return

    path_str = _ask("Resume file path").strip("'\"")
    if not path_str:
        print("  ⚠  No file provided — you can paste your CV in the app later")
        return

    src = Path(path_str).expanduser().resolve()
    if not src.exists():
        print(f"  ✗ File not found: {src}")
        return

    from jobforge.resume import import_master_resume

    try:
        text = import_master_resume(src)
    except (ValueError, RuntimeError, OSError) as exc:
        print(f"  ✗ Import failed: {exc}")
        return
    print(f"  ✓ Master CV imported ({len(text.splitlines())} lines)")


# ── Main ─────────────────────────────────────────────────────────────────


def main() -> None:
    _banner()
    print("  Press Enter to keep the value shown in brackets.\n")

    ensure_dirs()

    profile = load_profile()
    profile = step_profile(profile)
    profile = step_template(profile)
    write_profile(profile)
    print("  ✓ Profile saved → config/profile.yaml")

    step_master_cv()

    print()
    print("╔════════════════════════════════════════════╗")
    print("║            Setup Complete!                 ║")
    print("╚════════════════════════════════════════════╝")
    print()
    print("  Open the app:")
    print("    streamlit run app.py")
    print()
    print("  Or tailor from the terminal:")
    print("    python run_tailor.py [JOB_ID]")
    print()


if __name__ == "__main__":
    main()
