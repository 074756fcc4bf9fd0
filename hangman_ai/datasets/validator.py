"""
Dataset validator for hangmanAI.

What this module does:
- Validate a dictionary file (one word per line) before a benchmark run.
- Enforce formatting rules (lowercase a–z only, non-empty).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Report the word-length histogram (games are grouped by length).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from hangman_ai.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from hangman_ai.engine import is_valid_word
from .io import DECODE_ERRORS


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    blank_lines: int = 0
    lengths: Dict[int, int] = field(default_factory=dict)


@dataclass
class ValidationReport:
    words: FileReport
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


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


def _load_and_check(path: Path) -> Tuple[List[str], int, int, List[str]]:
    """
    Load words from a text file and validate them.

    Returns:
      (valid_words, invalid_count, blank_count, first_few_invalid)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0
    examples: List[str] = []

    with path.open("r", encoding="utf-8", errors=DECODE_ERRORS) as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            if is_valid_word(w):
                valid.append(w)
            else:
                invalid += 1
                if len(examples) < 5:
                    examples.append(w)

    return valid, invalid, blank, examples


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags, length histogram
          - `passed` boolean (strict: requires non-empty and no invalid lines)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"words file not found: {path}")
        rep = ValidationReport(
            words=FileReport(path, False, 0, "", 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid, blank, examples = _load_and_check(p)
    unique = set(words)

    lengths: Dict[int, int] = {}
    for w in unique:
        lengths[len(w)] = lengths.get(len(w), 0) + 1

    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        blank_lines=blank,
        lengths=dict(sorted(lengths.items())),
    )

    if report.count == 0:
        issues.append("words file contains 0 valid words")
    if invalid:
        issues.append(f"words has {invalid} invalid line(s) (e.g., {examples})")
    if report.count != report.unique_count:
        issues.append(f"words contains {report.count - report.unique_count} duplicate line(s)")

    passed = report.count > 0 and invalid == 0

    return asdict(ValidationReport(words=report, passed=passed, issues=issues))


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=235886 (uniq=234371, invalid=0, sha=abc123...) | lengths 1..24 | OK
    """
    w = report["words"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (w.get("sha256") or "")[:12]
    lengths = w.get("lengths") or {}
    span = f"{min(lengths)}..{max(lengths)}" if lengths else "-"
    return (
        f"words={w['count']} (uniq={w['unique_count']}, invalid={w['invalid_lines']}, sha={sha}) "
        f"| lengths {span} | {status}"
    )
