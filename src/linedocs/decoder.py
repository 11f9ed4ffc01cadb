"""Split raw corpus lines into record fields."""

from __future__ import annotations

SEP = "\t"


class LineFormatError(ValueError):
    """Raised for a corpus line that is not ``title<TAB>date<TAB>body``."""


def split_line(line: str) -> tuple[str, str, str]:
    """Return ``(title, date, body)`` for one corpus line.

    The title ends at the first tab and the date at the second; the body is
    everything after that and may contain further tabs.
    """
    spot = line.find(SEP)
    if spot == -1:
        raise LineFormatError(f"line: [{line}] is in an invalid format")
    spot2 = line.find(SEP, spot + 1)
    if spot2 == -1:
        raise LineFormatError(f"line: [{line}] is in an invalid format")
    return line[:spot], line[spot + 1 : spot2], line[spot2 + 1 :]
