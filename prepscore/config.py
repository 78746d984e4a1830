"""Load env configuration and resolve data paths."""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from prepscore.log import get_logger

log = get_logger(__name__)

load_dotenv()

PACKAGE_DIR: Path = Path(__file__).resolve().parent
DATA_DIR: Path = PACKAGE_DIR / "data"
DEFAULT_LEXICON_PATH: Path = DATA_DIR / "lexicon.yaml"
REPORTS_DIR: Path = PACKAGE_DIR.parent / "reports"

# Upload limits for resume files
MAX_RESUME_BYTES: int = 5 * 1024 * 1024
RESUME_SUFFIXES: tuple[str, ...] = (".pdf", ".docx", ".txt")


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def get_lexicon_path() -> Path:
    """Lexicon file, honouring the PREPSCORE_LEXICON override."""
    override = get_env("PREPSCORE_LEXICON")
    if override:
        path = Path(override).expanduser()
        log.info("Using lexicon override %s", path)
        return path
    return DEFAULT_LEXICON_PATH


def get_max_workers(default: int = 4) -> int:
    raw = get_env("PREPSCORE_MAX_WORKERS")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        log.warning("Ignoring non-integer PREPSCORE_MAX_WORKERS=%r", raw)
        return default
    return max(1, value)


def ensure_dirs() -> None:
    REPORTS_DIR.mkdir(parents=True, exist_ok=True)
