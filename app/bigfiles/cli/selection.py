"""Parsing of interactive file selections.

Selections use 1-based row numbers as shown in the results table:
``"1,3-5"`` selects rows 1, 3, 4 and 5; ``"all"`` (or ``"*"``) selects
every row. Order of first appearance is kept and duplicates are dropped.
"""

ALL_TOKENS = frozenset({"all", "*"})


def parse_selection(text: str, count: int) -> list[int]:
    """Parse a selection string into 0-based row indexes.

    Args:
        text: User input such as "1,3-5" or "all".
        count: Number of selectable rows.

    Returns:
        0-based indexes in selection order, without duplicates.

    Raises:
        ValueError: If the input is empty, malformed, or out of range.
    """
    cleaned = text.strip().lower()
    if not cleaned:
        msg = "Selection is empty"
        raise ValueError(msg)
    if cleaned in ALL_TOKENS:
        return list(range(count))

    indexes: list[int] = []
    seen: set[int] = set()
    for part in cleaned.replace(" ", ",").split(","):
        if not part:
            continue
        start, sep, end = part.partition("-")
        try:
            first = int(start)
            last = int(end) if sep else first
        except ValueError:
            msg = f"Invalid selection item: {part!r}"
            raise ValueError(msg) from None
        if first > last:
            msg = f"Invalid range {part!r}: start is greater than end"
            raise ValueError(msg)
        if first < 1 or last > count:
            msg = f"Selection {part!r} is out of range (1-{count})"
            raise ValueError(msg)
        for number in range(first, last + 1):
            if number - 1 not in seen:
                seen.add(number - 1)
                indexes.append(number - 1)

    if not indexes:
        msg = "Selection is empty"
        raise ValueError(msg)
    return indexes
