"""
RecordDecoder tests: decode states, failure reasons, caching, rendering.

Usage:
    pytest test_figura_decoder.py
"""

import io

import pytest

from figura_feature import RecordDecoder
from figura_io import MemoryByteSource, RecordLayout, ScriptedByteSource
from figura_render import ConsoleRenderer
from figura_shapes import (
    Circle,
    FailureReason,
    ShapeFactory,
    ShapeKind,
    Triangle,
    default_factory,
)


LAYOUT = RecordLayout()


def record(kind, params, layout=LAYOUT):
    return MemoryByteSource(layout.encode(kind, params))


@pytest.fixture
def decoder():
    return RecordDecoder(default_factory())


def test_initial_state_is_empty(decoder):
    target = ConsoleRenderer()

    decoder.render(target)

    assert not decoder.is_valid()
    assert decoder.current is None
    assert decoder.last_result is None
    assert target.calls == []


def test_circle_record_renders_draw_circle_once(decoder):
    result = decoder.decode(record(ShapeKind.CIRCLE, [1.0, 2.0, 3.0]))
    target = ConsoleRenderer()

    decoder.render(target)

    assert result.ok
    assert result.kind == ShapeKind.CIRCLE
    assert result.offset == LAYOUT.record_size(3)
    assert decoder.is_valid()
    assert target.calls == [("draw_circle", (1.0, 2.0, 3.0))]


def test_triangle_record_renders_draw_polygon(decoder):
    assert decoder.decode(record(ShapeKind.TRIANGLE, [0, 0, 1, 0, 0, 1]))
    target = ConsoleRenderer()

    decoder.render(target)

    assert target.calls == [("draw_polygon", ([0.0, 0.0, 1.0, 0.0, 0.0, 1.0],))]


def test_square_record_reads_eight_params(decoder):
    params = [0.0, 0.0, 4.0, 0.0, 4.0, 4.0, 0.0, 4.0]
    source = record(ShapeKind.SQUARE, params)

    assert decoder.decode(source)

    assert decoder.current.params == tuple(params)
    assert source.remaining == 0


def test_unknown_kind_fails(decoder):
    result = decoder.decode(record(99, []))
    target = ConsoleRenderer()

    decoder.render(target)

    assert not result
    assert result.reason is FailureReason.UNKNOWN_KIND
    assert result.kind == 99
    assert result.offset == LAYOUT.kind_width
    assert not decoder.is_valid()
    assert target.calls == []


def test_short_kind_tag_fails(decoder):
    result = decoder.decode(MemoryByteSource(b"\x00\x00"))

    assert result.reason is FailureReason.SHORT_READ
    assert result.kind is None
    assert result.offset == 0
    assert not decoder.is_valid()


def test_empty_source_fails(decoder):
    assert decoder.decode(MemoryByteSource(b"")).reason is FailureReason.SHORT_READ
    assert not decoder.is_valid()


def test_truncated_params_fail(decoder):
    payload = LAYOUT.encode(ShapeKind.TRIANGLE, [0.0] * 6)[:-1]

    result = decoder.decode(MemoryByteSource(payload))

    assert result.reason is FailureReason.SHORT_READ
    assert result.kind == ShapeKind.TRIANGLE
    assert result.offset == LAYOUT.kind_width
    assert not decoder.is_valid()
    assert decoder.cached_kinds == set()


def test_render_twice_is_idempotent(decoder):
    decoder.decode(record(ShapeKind.SQUARE, [0, 0, 1, 0, 1, 1, 0, 1]))
    first = ConsoleRenderer(stream=io.StringIO())
    second = ConsoleRenderer(stream=io.StringIO())

    decoder.render(first)
    decoder.render(second)

    assert first.calls == second.calls
    assert first.stream.getvalue() == second.stream.getvalue()
    assert decoder.is_valid()


def test_failed_decode_retains_previous_record(decoder):
    decoder.decode(record(ShapeKind.CIRCLE, [1.0, 2.0, 3.0]))

    result = decoder.decode(record(99, []))
    target = ConsoleRenderer()
    decoder.render(target)

    assert result.reason is FailureReason.UNKNOWN_KIND
    assert decoder.last_result is result
    assert decoder.is_valid()
    assert target.calls == [("draw_circle", (1.0, 2.0, 3.0))]


def test_failed_param_read_retains_previous_record(decoder):
    decoder.decode(record(ShapeKind.CIRCLE, [1.0, 2.0, 3.0]))
    truncated = LAYOUT.encode(ShapeKind.TRIANGLE, [0.0] * 6)[:-1]

    result = decoder.decode(MemoryByteSource(truncated))
    target = ConsoleRenderer()
    decoder.render(target)

    assert result.reason is FailureReason.SHORT_READ
    assert result.kind == ShapeKind.TRIANGLE
    assert decoder.last_result is result
    assert decoder.is_valid()
    assert decoder.current.params == (1.0, 2.0, 3.0)
    assert target.calls == [("draw_circle", (1.0, 2.0, 3.0))]
    assert decoder.cached_kinds == {ShapeKind.CIRCLE}


def test_successful_decode_replaces_previous_record(decoder):
    decoder.decode(record(ShapeKind.CIRCLE, [1.0, 2.0, 3.0]))
    decoder.decode(record(ShapeKind.TRIANGLE, [1, 1, 2, 2, 3, 3]))
    target = ConsoleRenderer()

    decoder.render(target)

    assert target.calls == [("draw_polygon", ([1.0, 1.0, 2.0, 2.0, 3.0, 3.0],))]


def test_variants_cached_by_kind():
    created = []

    def counting_circle():
        variant = Circle()
        created.append(variant)
        return variant

    factory = ShapeFactory()
    factory.register(ShapeKind.CIRCLE, counting_circle)
    factory.register(ShapeKind.TRIANGLE, Triangle)
    decoder = RecordDecoder(factory)
    payload = (
        LAYOUT.encode(ShapeKind.CIRCLE, [1.0, 1.0, 1.0])
        + LAYOUT.encode(ShapeKind.TRIANGLE, [0.0] * 6)
        + LAYOUT.encode(ShapeKind.CIRCLE, [2.0, 2.0, 2.0])
    )
    source = MemoryByteSource(payload)

    assert decoder.decode(source)
    first_variant = decoder.current.variant
    assert decoder.decode(source)
    assert decoder.decode(source)

    assert len(created) == 1
    assert decoder.current.variant is first_variant
    assert decoder.current.params == (2.0, 2.0, 2.0)
    assert decoder.cached_kinds == {ShapeKind.CIRCLE, ShapeKind.TRIANGLE}


@pytest.mark.parametrize(
    "layout",
    [
        RecordLayout(byte_order="big"),
        RecordLayout(byte_order="little", kind_width=2, param_width=4),
        RecordLayout(kind_width=8),
    ],
)
def test_decode_honours_layout(layout):
    decoder = RecordDecoder(default_factory(), layout=layout)

    result = decoder.decode(record(ShapeKind.CIRCLE, [0.5, 1.5, 2.5], layout))

    assert result.ok
    assert result.offset == layout.record_size(3)
    assert decoder.current.params == (0.5, 1.5, 2.5)


def test_scripted_source_decodes_circle(decoder):
    source = ScriptedByteSource(stream=io.StringIO())
    target = ConsoleRenderer(stream=io.StringIO())

    assert decoder.decode(source)
    decoder.render(target)

    assert target.calls == [("draw_circle", (2.1, 2.1, 2.1))]
