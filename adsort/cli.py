"""Interactive command: filter ads by content and list them by views, highest first."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO, TypeVar

from adsort.ad import Ad, Content
from adsort.loader import load_ads
from adsort.sorting import merge_sort, quick_sort

DEFAULT_DATA_FILE = "super_bowl_ads_updated.json"
PROGRAM_NAME = "adsort"

SortFunction = Callable[[Iterable[Ad]], list[Ad]]
T = TypeVar("T")

_ALGORITHMS: dict[int, SortFunction] = {1: merge_sort, 2: quick_sort}
_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_DIGITS = re.compile(r"[0-9]+")

_ALGORITHM_MENU = "Choose sorting algorithm:\n  1) Merge Sort\n  2) Quick Sort\n"
_FLAG_MENU = (
    "Select content flags to filter (separate numbers by spaces, 0 = no filter):\n"
    "  0) No Filter\n"
    + "".join(f"  {content.value}) {content.label}\n" for content in Content)
)
_CONTINUE_MENU = "Continue?\n  0) No\n  1) Yes\n"


class InvalidSelection(ValueError):
    """Raised when a menu answer is not acceptable."""


def parse_algorithm_choice(text: str) -> SortFunction:
    """Return the sort function chosen by a leading ``1`` (merge) or ``2`` (quick)."""
    match = _LEADING_INTEGER.match(text)
    if match is None:
        raise InvalidSelection("invalid choice")
    algorithm = _ALGORITHMS.get(int(match.group(1)))
    if algorithm is None:
        raise InvalidSelection("invalid choice")
    return algorithm


def parse_flag_selection(text: str) -> frozenset[Content]:
    """Return the content kinds selected by whitespace-separated menu numbers.

    ``0`` means no filter and may not be followed by any other number.
    An empty result means every ad is accepted.
    """
    tokens = text.split()
    if not tokens:
        raise InvalidSelection("no selection")
    selected: set[Content] = set()
    no_filter = False
    for token in tokens:
        if not _DIGITS.fullmatch(token):
            raise InvalidSelection(f"not a number: {token!r}")
        number = int(token)
        if no_filter:
            raise InvalidSelection("nothing may follow 0")
        if number == 0:
            no_filter = True
        elif 1 <= number <= len(Content):
            selected.add(Content(number))
        else:
            raise InvalidSelection(f"no such flag: {number}")
    return frozenset(selected)


def parse_continue(text: str) -> bool:
    """Return True for an answer starting with ``1`` and False for one starting with ``0``."""
    if text.startswith("1"):
        return True
    if text.startswith("0"):
        return False
    raise InvalidSelection("invalid input")


def filter_ads(ads: Iterable[Ad], wanted: Iterable[Content]) -> list[Ad]:
    """Keep the ads that contain every wanted kind of content."""
    wanted = frozenset(wanted)
    return [ad for ad in ads if ad.content.matches(wanted)]


def sort_by_views_descending(ads: Iterable[Ad], algorithm: SortFunction) -> list[Ad]:
    """Sort with the given ascending sort function, then reverse to highest views first."""
    return algorithm(ads)[::-1]


def format_table(ads: Iterable[Ad]) -> str:
    """Render the ads as a left-aligned table of year, brand, views and content."""
    lines = [f"{'Year':<6}{'Brand':<15}{'Views':<10}Content", "-" * 60]
    lines.extend(
        f"{ad.year:<6}{ad.brand:<15}{ad.views:<10}{ad.content.describe()}" for ad in ads
    )
    return "\n".join(lines) + "\n"


def _ask(
    menu: str,
    parser: Callable[[str], T],
    error: str,
    stdin: TextIO,
    stdout: TextIO,
    stderr: TextIO,
    skip_blank: bool = False,
) -> T:
    while True:
        stdout.write(menu)
        stdout.flush()
        while True:
            line = stdin.readline()
            if not line:
                raise EOFError
            if not (skip_blank and not line.strip()):
                break
        try:
            return parser(line.rstrip("\n"))
        except InvalidSelection:
            stderr.write(error)


def _run_session(ads: Sequence[Ad], stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
    while True:
        algorithm = _ask(
            _ALGORITHM_MENU,
            parse_algorithm_choice,
            "Error: invalid choice\n",
            stdin,
            stdout,
            stderr,
            skip_blank=True,
        )
        wanted = _ask(
            _FLAG_MENU, parse_flag_selection, "Error: invalid input\n", stdin, stdout, stderr
        )
        working = filter_ads(ads, wanted)

        start = time.perf_counter_ns()
        ordered = sort_by_views_descending(working, algorithm)
        elapsed = (time.perf_counter_ns() - start) // 1000

        stdout.write(
            f"Sorted {len(ordered)} ads (highest to lowest views) in {elapsed} microseconds.\n\n"
        )
        stdout.write(format_table(ordered))

        if not _ask(
            _CONTINUE_MENU, parse_continue, "Error: Invalid input\n", stdin, stdout, stderr
        ):
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive session; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    filename = args[0] if args else DEFAULT_DATA_FILE
    try:
        ads = load_ads(filename)
    except OSError:
        print(f'Error: cannot open "{filename}"', file=sys.stderr)
        print(f"Usage: {PROGRAM_NAME} [path/to/{DEFAULT_DATA_FILE}]", file=sys.stderr)
        return 1
    try:
        _run_session(ads, sys.stdin, sys.stdout, sys.stderr)
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())