"""Newline-delimited JSON record parser.

Splits raw content on b"\\n" and decodes every segment on its own. A
segment that does not decode to a JSON object yields a ParsedLine carrying
the error instead of a record; the caller decides how to report it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

from ..errors import LineDecodeError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


@dataclass(frozen=True)
class ParsedLine:
    line_number: int
    record: Optional[Dict[str, Any]] = None
    error: Optional[LineDecodeError] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


def decode_line(segment: bytes) -> Dict[str, Any]:
    """Decode one segment into a string-keyed mapping or raise LineDecodeError.

    Invalid UTF-8 is replaced with U+FFFD rather than failing the line.
    """
    text = segment.decode("utf-8", errors="replace")
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise LineDecodeError(str(e)) from e

    if not isinstance(value, dict):
        raise LineDecodeError(f"expected a JSON object, got {type(value).__name__}")
    return value


def iter_lines(content: bytes) -> Iterator[ParsedLine]:
    """Lazily decode every newline-separated segment of `content`."""
    for line_number, segment in enumerate(content.split(b"\n"), start=1):
        try:
            yield ParsedLine(line_number=line_number, record=decode_line(segment))
        except LineDecodeError as e:
            yield ParsedLine(line_number=line_number, error=e)
