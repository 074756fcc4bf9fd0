from __future__ import annotations
import io
import sys
from pathlib import Path
from typing import IO, Iterable, List

STDIN = "-"

# Undecodable bytes become U+FFFD, which word validation rejects per line.
DECODE_ERRORS = "replace"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    The special path "-" reads standard input instead.
    Raises FileNotFoundError if the path doesn't exist.
    """
    if str(p) == STDIN:
        return read_stream(io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8",
                                            errors=DECODE_ERRORS))
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    text = p.read_text(encoding="utf-8", errors=DECODE_ERRORS)
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def read_stream(fp: IO[str]) -> List[str]:
    """Drain a line-oriented text stream (one word per line)."""
    return [ln.rstrip("\r\n") for ln in fp]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
