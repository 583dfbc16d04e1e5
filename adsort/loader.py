"""Reading advertisements from the line-oriented JSON data file."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import replace

from adsort.ad import Ad, Content

_WHITESPACE = " \t\r\n"
_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_FIELDS = {
    '"Year"': "year",
    '"Views"': "views",
    '"Likes"': "likes",
    '"Dislikes"': "dislikes",
}
_FLAG_FIELDS = {f'"{content.label}"': content.field_name for content in Content}


def _parse_int(text: str) -> int:
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def _number_value(line: str) -> int:
    colon = line.find(":")
    start = colon + 1
    ends = [position for position in (line.find(",", start), line.find("}", start)) if position >= 0]
    end = min(ends) if ends else len(line)
    return _parse_int(line[start:end])


def _string_value(line: str) -> str:
    colon = line.find(":")
    opening = line.find('"', colon + 1)
    if opening < 0:
        return ""
    closing = line.find('"', opening + 1)
    if closing < 0:
        return line[opening + 1 :]
    return line[opening + 1 : closing]


def parse_ads(lines: Iterable[str]) -> list[Ad]:
    """Build ads from the lines of the data file.

    Each ad starts at a ``"Year"`` line and is complete at its ``"Title"`` line.
    Raises ValueError when a numeric field does not hold a number.
    """
    ads: list[Ad] = []
    current = Ad()
    for raw in lines:
        line = raw.strip(_WHITESPACE)
        key = line.split(":", 1)[0].strip(_WHITESPACE) if line.startswith('"') else ""
        key = _matching_key(line)
        if key is None:
            continue
        if key == '"Year"':
            current = Ad(year=_number_value(line))
        elif key in _INT_FIELDS:
            current = replace(current, **{_INT_FIELDS[key]: _number_value(line)})
        elif key in _FLAG_FIELDS:
            content = replace(current.content, **{_FLAG_FIELDS[key]: "true" in line})
            current = replace(current, content=content)
        elif key == '"Brand"':
            current = replace(current, brand=_string_value(line))
        elif key == '"Title"':
            current = replace(current, title=_string_value(line))
            ads.append(current)
    return ads


def _matching_key(line: str) -> str | None:
    for key in ('"Year"', '"Brand"', *_FLAG_FIELDS, '"Views"', '"Likes"', '"Dislikes"', '"Title"'):
        if line.startswith(key):
            return key
    return None


def load_ads(path: str | os.PathLike[str]) -> list[Ad]:
    """Read ads from the data file at ``path``; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8", errors="replace", newline="\n") as handle:
        return parse_ads(handle)