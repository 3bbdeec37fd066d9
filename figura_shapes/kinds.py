"""Shape kind identifiers as they appear on the wire."""

from enum import IntEnum


class ShapeKind(IntEnum):
    """
    Known shape kinds.

    Values are the integer kind tags stored at the head of each record.
    The registry is keyed by plain ints, so a new kind does not have to be
    added here to be decodable.
    """

    CIRCLE = 0
    TRIANGLE = 1
    SQUARE = 2


def kind_name(kind: int) -> str:
    """Readable name for a kind tag, falling back to the raw value."""
    try:
        return ShapeKind(kind).name
    except ValueError:
        return str(kind)
