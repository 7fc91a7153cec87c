"""Hierarchical serial numbers for article headings."""

from __future__ import annotations

# H1 is the article title; numbering starts at H2.
FIRST_NUMBERED_LEVEL = 2
LAST_NUMBERED_LEVEL = 6


class SerialNumberer:
    """Assign dotted serial numbers ("2.", "2.1.", ...) to a heading stream.

    One instance covers exactly one article. Feed it the heading levels in
    document order through :meth:`next`.

    Counting rules:

    * every heading increments the counter of its own level;
    * going up (e.g. from ``###`` back to ``##``) resets the counter of the
      level just left, so the next deeper heading starts again at 1;
    * skipped levels (``##`` followed directly by ``####``) that were never
      counted are filled in with 1, so every level from 2 down to the
      current one has a segment.

    >>> numberer = SerialNumberer()
    >>> [numberer.next(level) for level in (2, 2, 3, 2, 3, 3)]
    ['1.', '2.', '2.1.', '3.', '3.1.', '3.2.']
    """

    def __init__(self) -> None:
        self.counters: dict[int, int] = {}
        self.last_level: int | None = None

    def next(self, level: int) -> str:
        """Count a heading of ``level`` and return its serial number."""
        if not FIRST_NUMBERED_LEVEL <= level <= LAST_NUMBERED_LEVEL:
            raise ValueError(
                f"Heading level must be between {FIRST_NUMBERED_LEVEL} and "
                f"{LAST_NUMBERED_LEVEL}, got {level}"
            )

        self.counters.setdefault(level, 0)
        if self.last_level is not None and level < self.last_level:
            self.counters[self.last_level] = 0
        self.counters[level] += 1

        parts: list[str] = []
        for current in range(FIRST_NUMBERED_LEVEL, level + 1):
            # Gap between levels, e.g. #### right after ##
            count = self.counters.setdefault(current, 1)
            parts.append(f"{count}.")

        self.last_level = level
        return "".join(parts)
