from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, TextIO

from core.report import RULE


class InputError(RuntimeError):
    """Raised when the input file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to read file: {path} {reason}")
        self.path = path
        self.reason = reason


def read_file(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise InputError(path, reason) from exc


def collect_lines(lines: Iterable[str]) -> str:
    text = ""
    for line in lines:
        text += line.rstrip("\r\n") + "\n"
    return text.strip()


def read_interactive(stream: TextIO | None = None, out: TextIO | None = None) -> str:
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout
    print(RULE, file=out)
    print("AI TEXT SUMMARIZER (local fallback if no OPENAI_API_KEY)", file=out)
    print(RULE, file=out)
    print("\nEnter or paste your text below:", file=out)
    print("(Press Ctrl+D on an empty line when done)\n", file=out)
    return collect_lines(stream)
