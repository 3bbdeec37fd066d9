"""
Record Decoder
==============

Bounded Context: One record in, one drawable shape held.

State machine:

    empty ──decode ok──▶ holding ──decode ok──▶ holding (replaced)
      │                     │
      └──decode failed──▶ empty   └──decode failed──▶ holding (previous kept)

Decode steps:
1. Read the kind tag (layout.kind_width bytes)       -> SHORT_READ
2. Resolve the variant: decoder cache, then factory  -> UNKNOWN_KIND
3. Read exactly variant.param_count floats           -> SHORT_READ
4. Cache the variant under its kind, hold (variant, params)

A failed decode keeps the previously held record. last_result always
reports the outcome of the latest call.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from figura_io.codec import RecordLayout
from figura_io.sources import ByteSource
from figura_logging import LogEvent, StructuredLogger, create_logger
from figura_render.base import RenderTarget
from figura_shapes.errors import FailureReason
from figura_shapes.factory import ShapeFactory
from figura_shapes.kinds import kind_name
from figura_shapes.variants import ShapeVariant


@dataclass(frozen=True)
class DecodedRecord:
    """Held (variant, parameters) pair."""

    variant: ShapeVariant
    params: Tuple[float, ...]

    @property
    def kind(self) -> int:
        return self.variant.kind


@dataclass(frozen=True)
class DecodeResult:
    """
    Outcome of one decode() call.

    Attributes:
        reason: None on success, otherwise the failure reason
        kind: Kind tag read, None if the tag itself could not be read
        offset: Bytes of this record consumed (full record size on success)
    """

    reason: Optional[FailureReason] = None
    kind: Optional[int] = None
    offset: int = 0

    @property
    def ok(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        return self.ok


class RecordDecoder:
    """
    Decodes single records and renders the held one.

    Variants are cached by kind for the lifetime of the decoder; they are
    stateless, so every record of the same kind shares one instance.

    Usage:
        decoder = RecordDecoder(default_factory())

        with FileByteSource("features.dat") as source:
            result = decoder.decode(source)

        decoder.render(renderer)
        if not decoder.is_valid():
            print(result.reason)
    """

    def __init__(
        self,
        factory: ShapeFactory,
        layout: RecordLayout = RecordLayout(),
        logger: Optional[StructuredLogger] = None,
    ):
        self.factory = factory
        self.layout = layout
        self.logger = logger or create_logger("decoder")
        self._variants: Dict[int, ShapeVariant] = {}
        self._current: Optional[DecodedRecord] = None
        self._last_result: Optional[DecodeResult] = None

    @property
    def current(self) -> Optional[DecodedRecord]:
        return self._current

    @property
    def last_result(self) -> Optional[DecodeResult]:
        return self._last_result

    @property
    def cached_kinds(self) -> set:
        return set(self._variants.keys())

    def is_valid(self) -> bool:
        """True while a decoded record is held."""
        return self._current is not None

    def decode(self, source: ByteSource) -> DecodeResult:
        """
        Read one record from source.

        Returns:
            DecodeResult; falsy on failure
        """
        kind_dtype = self.layout.kind_dtype
        kind_buffer = bytearray(kind_dtype.itemsize)
        if not source.read(kind_buffer, kind_dtype.itemsize, 1):
            self.logger.warning(
                event=LogEvent.DECODE_SHORT_READ,
                message="Source exhausted while reading kind tag",
                metadata={'offset': 0, 'expected_bytes': kind_dtype.itemsize},
            )
            return self._finish(DecodeResult(reason=FailureReason.SHORT_READ, offset=0))

        kind = int(np.frombuffer(kind_buffer, dtype=kind_dtype)[0])
        offset = kind_dtype.itemsize

        variant = self._resolve(kind)
        if variant is None:
            self.logger.warning(
                event=LogEvent.DECODE_UNKNOWN_KIND,
                message=f"Kind {kind} is not registered",
                metadata={'kind': kind, 'registered': sorted(self.factory.registered_kinds)},
            )
            return self._finish(
                DecodeResult(reason=FailureReason.UNKNOWN_KIND, kind=kind, offset=offset)
            )

        param_dtype = self.layout.param_dtype
        count = variant.param_count
        param_buffer = bytearray(param_dtype.itemsize * count)
        if not source.read(param_buffer, param_dtype.itemsize, count):
            self.logger.warning(
                event=LogEvent.DECODE_SHORT_READ,
                message=f"Source exhausted while reading {count} parameters of '{kind_name(kind)}'",
                metadata={'kind': kind, 'offset': offset, 'expected_bytes': len(param_buffer)},
            )
            return self._finish(
                DecodeResult(reason=FailureReason.SHORT_READ, kind=kind, offset=offset)
            )

        params = tuple(float(value) for value in np.frombuffer(param_buffer, dtype=param_dtype))
        self._variants.setdefault(kind, variant)
        self._current = DecodedRecord(variant=self._variants[kind], params=params)

        self.logger.info(
            event=LogEvent.DECODE_SUCCEEDED,
            message=f"Decoded '{kind_name(kind)}'",
            metadata={'kind': kind, 'param_count': count},
        )
        return self._finish(
            DecodeResult(kind=kind, offset=offset + len(param_buffer))
        )

    def _resolve(self, kind: int) -> Optional[ShapeVariant]:
        """Cached variant for kind, or a fresh one from the factory (not cached yet)."""
        variant = self._variants.get(kind)
        if variant is not None:
            self.logger.debug(
                event=LogEvent.VARIANT_REUSED,
                message=f"Reusing cached '{kind_name(kind)}'",
                metadata={'kind': kind},
            )
            return variant

        variant = self.factory.create(kind)
        if variant is not None:
            self.logger.debug(
                event=LogEvent.VARIANT_CREATED,
                message=f"Created '{kind_name(kind)}'",
                metadata={'kind': kind},
            )
        return variant

    def _finish(self, result: DecodeResult) -> DecodeResult:
        self._last_result = result
        return result

    def render(self, target: RenderTarget) -> None:
        """Draw the held record on target; no-op when nothing is held."""
        if self._current is None:
            self.logger.debug(
                event=LogEvent.RENDER_SKIPPED,
                message="No decoded record to render",
            )
            return

        self._current.variant.draw(target, self._current.params)
        self.logger.debug(
            event=LogEvent.RENDER_COMPLETED,
            message=f"Rendered '{kind_name(self._current.kind)}'",
            metadata={'kind': self._current.kind},
        )
