"""Turn an uploaded resume file into plain text.

Supports PDF (via pdftotext or pypdf), DOCX (via stdlib zipfile), and TXT.
Whatever the source, the text is passed through :func:`clean_text` so the
formatting checks see one bullet glyph and plain spaces.
"""
from __future__ import annotations

import re
import shutil
import subprocess
import zipfile
from pathlib import Path
from xml.etree import ElementTree

from prepscore.config import MAX_RESUME_BYTES, RESUME_SUFFIXES
from prepscore.log import get_logger

log = get_logger(__name__)

# Symbol-font and geometric bullets that PDF and Word exports produce.
_BULLET_GLYPHS = ("\uf0b7", "\uf0a7", "\u25cf", "\u25aa", "\u25e6", "\u2023", "\u2043")
_LIGATURES = {"\ufb01": "fi", "\ufb02": "fl", "\ufb00": "ff", "\ufb03": "ffi", "\ufb04": "ffl"}
_ODD_SPACES = re.compile(r"[\u00a0\u2007\u202f\u200b]")

_WORD_NS = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"
PDFTOTEXT_TIMEOUT = 30  # seconds


def validate_resume_file(path: Path) -> tuple[bool, str]:
    """Check format and size before any extraction is attempted."""
    if not path.is_file():
        return False, f"No file found at {path}"
    if path.suffix.lower() not in RESUME_SUFFIXES:
        return False, "Please upload a PDF or DOCX file"
    if path.stat().st_size > MAX_RESUME_BYTES:
        return False, "File size exceeds 5MB limit"
    return True, "ok"


def read_resume_text(path: Path) -> str:
    """Return cleaned plain text from a PDF, DOCX, or TXT file.

    Raises ``ValueError`` for unsupported or unreadable files and
    ``RuntimeError`` when no PDF backend is installed.
    """
    suffix = path.suffix.lower()
    log.info("Extracting text from %s", path.name)
    if suffix == ".txt":
        raw = path.read_text(encoding="utf-8", errors="ignore")
    elif suffix == ".docx":
        raw = _extract_docx(path)
    elif suffix == ".pdf":
        raw = _extract_pdf(path)
    else:
        raise ValueError(f"Unsupported resume format: {suffix}")

    text = clean_text(raw)
    log.debug("Read %d characters from %s", len(text), path.name)
    return text


def clean_text(text: str) -> str:
    """Map exotic bullets, ligatures and non-breaking spaces to plain forms."""
    for glyph in _BULLET_GLYPHS:
        text = text.replace(glyph, "•")
    for ligature, plain in _LIGATURES.items():
        text = text.replace(ligature, plain)
    return _ODD_SPACES.sub(" ", text)


def _fix_spacing(text: str) -> str:
    """Re-insert spaces when PDF extraction merges words together.

    Only applied when spaces make up less than 8% of the text; pypdf output
    for designer templates often runs whole lines together.
    """
    if not text or len(text) < 50:
        return text
    space_ratio = text.count(" ") / len(text)
    if space_ratio > 0.08:
        return text

    log.debug("Low space ratio (%.2f%%), re-spacing page text", space_ratio * 100)
    for pattern, repl in (
        (r"([a-z])([A-Z])", r"\1 \2"),              # camelCase joins
        (r"([a-zA-Z])(\d)", r"\1 \2"),
        (r"(\d)([a-zA-Z%])", r"\1 \2"),
        (r"([.!?,;:])([A-Za-z])", r"\1 \2"),
    ):
        text = re.sub(pattern, repl, text)
    return text


def _extract_pdf(path: Path) -> str:
    # pdftotext keeps column layout; pypdf is the pure-Python fallback
    if shutil.which("pdftotext"):
        try:
            result = subprocess.run(
                ["pdftotext", "-layout", str(path), "-"],
                capture_output=True,
                text=True,
                timeout=PDFTOTEXT_TIMEOUT,
            )
        except subprocess.TimeoutExpired:
            log.warning("pdftotext timed out on %s, falling back to pypdf", path.name)
        else:
            if result.returncode == 0 and result.stdout.strip():
                return result.stdout
            log.warning("pdftotext failed on %s, falling back to pypdf", path.name)

    try:
        from pypdf import PdfReader
        from pypdf.errors import PdfReadError
    except ImportError as exc:
        raise RuntimeError(
            "Cannot read PDF — install pypdf (`pip install pypdf`) "
            "or pdftotext (poppler-utils)."
        ) from exc

    try:
        reader = PdfReader(str(path))
        pages = [_fix_spacing(page.extract_text() or "") for page in reader.pages]
    except PdfReadError as exc:
        raise ValueError(f"{path.name} is not a readable PDF document") from exc
    return "\n".join(pages)


def _extract_docx(path: Path) -> str:
    """One line per non-empty Word paragraph (stdlib zipfile + xml)."""
    try:
        with zipfile.ZipFile(path) as zf, zf.open("word/document.xml") as f:
            tree = ElementTree.parse(f)
    except (zipfile.BadZipFile, KeyError, ElementTree.ParseError) as exc:
        raise ValueError(f"{path.name} is not a readable DOCX document") from exc

    paragraphs = (
        "".join(node.text for node in para.iter(f"{_WORD_NS}t") if node.text)
        for para in tree.iter(f"{_WORD_NS}p")
    )
    return "\n".join(p for p in paragraphs if p)
