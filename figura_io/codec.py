"""
Record Layout
=============

On-disk record format:

    [kind: signed int, kind_width bytes][param_0 .. param_{n-1}: float, param_width bytes]

No length prefix, no delimiter: n is known only after the kind tag has been
resolved through the registry. Byte order is fixed per file ("native" by
default, matching files written on the same platform).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence, Tuple

import numpy as np


BYTE_ORDER_PREFIXES = {
    "native": "=",
    "little": "<",
    "big": ">",
}

VALID_KIND_WIDTHS = {1, 2, 4, 8}
VALID_PARAM_WIDTHS = {4, 8}


@dataclass(frozen=True)
class RecordLayout:
    """
    Byte layout of one record.

    Attributes:
        byte_order: "native", "little" or "big"
        kind_width: Size of the kind tag in bytes
        param_width: Size of each parameter in bytes (4 = float32, 8 = float64)
    """

    byte_order: str = "native"
    kind_width: int = 4
    param_width: int = 8

    def __post_init__(self):
        """Validate layout."""
        if self.byte_order not in BYTE_ORDER_PREFIXES:
            raise ValueError(
                f"Invalid byte_order: {self.byte_order}. "
                f"Must be one of {sorted(BYTE_ORDER_PREFIXES)}"
            )
        if self.kind_width not in VALID_KIND_WIDTHS:
            raise ValueError(
                f"Invalid kind_width: {self.kind_width}. "
                f"Must be one of {sorted(VALID_KIND_WIDTHS)}"
            )
        if self.param_width not in VALID_PARAM_WIDTHS:
            raise ValueError(
                f"Invalid param_width: {self.param_width}. "
                f"Must be one of {sorted(VALID_PARAM_WIDTHS)}"
            )

    @property
    def kind_dtype(self) -> np.dtype:
        return np.dtype(f"{BYTE_ORDER_PREFIXES[self.byte_order]}i{self.kind_width}")

    @property
    def param_dtype(self) -> np.dtype:
        return np.dtype(f"{BYTE_ORDER_PREFIXES[self.byte_order]}f{self.param_width}")

    def record_size(self, param_count: int) -> int:
        """Total bytes of a record carrying param_count parameters."""
        return self.kind_width + param_count * self.param_width

    def encode(self, kind: int, params: Sequence[float]) -> bytes:
        """Serialize one record."""
        head = np.array([int(kind)], dtype=self.kind_dtype).tobytes()
        body = np.asarray(params, dtype=self.param_dtype).tobytes()
        return head + body


def write_records(
    path: str | Path,
    records: Iterable[Tuple[int, Sequence[float]]],
    layout: RecordLayout = RecordLayout(),
) -> int:
    """
    Write (kind, params) records back to back.

    Returns:
        Number of bytes written
    """
    payload = b"".join(layout.encode(kind, params) for kind, params in records)
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(payload)
    return len(payload)
