#!/usr/bin/env python3
"""Score a resume or an interview session from the command line.

Usage:
  python run_scoring.py resume <path> [jobType] [--save]
  python run_scoring.py session <session.yaml> [--save]

A session file looks like:
  questions:
    - {id: q1, text: "Tell me about a challenge you faced.", type: Behavioral}
  answers:
    q1: "In my last role ..."
"""
from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).resolve().parent))

import yaml

from prepscore.config import REPORTS_DIR, ensure_dirs
from prepscore.log import get_logger

log = get_logger(__name__)


def _usage() -> int:
    print(__doc__)
    return 1


def _emit(kind: str, payload: dict[str, Any], save: bool) -> None:
    body = json.dumps(payload, indent=2, ensure_ascii=False)
    print(body)
    if save:
        ensure_dirs()
        stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
        path = REPORTS_DIR / f"{kind}_{stamp}.json"
        path.write_text(body, encoding="utf-8")
        log.info("Result written → %s", path)


def run_resume(args: list[str], save: bool) -> int:
    from prepscore.resume import analyze_resume, read_resume_text, validate_resume_file

    if not args:
        return _usage()
    path = Path(args[0])
    job_type = args[1] if len(args) > 1 else "general"

    ok, message = validate_resume_file(path)
    if not ok:
        log.error("Cannot score %s: %s", path, message)
        return 1
    try:
        text = read_resume_text(path)
    except (ValueError, RuntimeError) as exc:
        log.error("Failed to read %s: %s", path.name, exc)
        return 1

    report = analyze_resume(text, job_type)
    _emit("resume", report.to_dict(), save)
    return 0


def run_session(args: list[str], save: bool) -> int:
    from prepscore.session import score_session, summarize_session

    if not args:
        return _usage()
    path = Path(args[0])
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        log.error("Failed to load session file %s: %s", path, exc)
        return 1
    if not isinstance(data, dict):
        log.error("Session file %s must be a mapping with questions and answers", path)
        return 1

    results = score_session(data.get("answers") or {}, data.get("questions") or [])
    summary = summarize_session(results)
    _emit(
        "session",
        {"results": [r.to_dict() for r in results], "summary": summary.to_dict()},
        save,
    )
    return 0


def main(argv: list[str]) -> int:
    save = "--save" in argv
    args = [a for a in argv if a != "--save"]
    if not args:
        return _usage()
    command, rest = args[0], args[1:]
    if command == "resume":
        return run_resume(rest, save)
    if command == "session":
        return run_session(rest, save)
    return _usage()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
