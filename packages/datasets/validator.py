"""
Start-word list validator.

What this module does:
- Check a start-word list (one root word per line) before it is used for play.
- Enforce formatting rules (lowercase, a–z only, longer than the minimum word
  length so the root itself offers something to derive).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Optionally check every root against a dictionary oracle.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("packages/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

DEFAULT_MIN_LENGTH = 4


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class ValidationReport:
    """Diagnostics and metadata for one start-word file."""
    path: str              # file path (as given)
    exists: bool           # did the file exist on disk?
    count: int             # number of VALID words after cleaning
    unique_count: int      # unique valid words (after dedupe)
    invalid_lines: int     # blank, non a–z, uppercase or too short
    sha256: str            # SHA-256 of raw file bytes (empty string if missing)
    language: str
    unknown_words: List[str]   # valid roots the dictionary rejects (sample, max 5)
    unknown_count: int
    passed: bool
    issues: List[str]      # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_length` letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.islower() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_start_words(
        path: str,
        min_length: int = DEFAULT_MIN_LENGTH,
        dictionary=None,
        language: str = "en",
) -> Dict:
    """
    Validate a start-word list.

    Parameters
    ----------
    path : str
        Path to the start-word file (one root word per line).
    min_length : int
        Shortest acceptable root word.
    dictionary : optional
        Object with is_valid_word(word, language); when given, roots it does
        not recognize are reported.
    language : str
        Language code passed to the dictionary.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` is strict: non-empty, no invalid lines, no duplicates and
        (with a dictionary) no unknown roots.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"start-word file not found: {path}")
        rep = ValidationReport(path, False, 0, 0, 0, "", language, [], 0, False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    unknown: List[str] = []
    if dictionary is not None:
        unknown = sorted(w for w in unique if not dictionary.is_valid_word(w, language))

    if not words:
        issues.append("start-word file contains 0 valid words")
    if invalid:
        issues.append(f"start-word file has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("start-word file contains duplicate lines")
    if unknown:
        issues.append(f"{len(unknown)} root(s) not recognized by dictionary (e.g., {unknown[:5]})")

    passed = bool(words) and invalid == 0 and len(words) == len(unique) and not unknown

    rep = ValidationReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        language=language,
        unknown_words=unknown[:5],
        unknown_count=len(unknown),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start.txt | words=120 (uniq=120, invalid=0, sha=abc123...) | unknown=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{Path(report['path']).name} | words={report['count']} "
        f"(uniq={report['unique_count']}, invalid={report['invalid_lines']}, sha={sha}) "
        f"| unknown={report['unknown_count']} | {status}"
    )
