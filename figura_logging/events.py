"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for the decode/render pipeline.

Event Naming Convention:
    <component>.<action>

    component: registry, decode, render, source
    action: registered, duplicate, succeeded, short_read, ...

Example Log Query:
    jq 'select(.event == "decode.unknown_kind") | .metadata.kind'
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - registry.*: Shape factory registration
    - decode.*: Record decoding
    - render.*: Drawing of the held record
    - source.*: Byte source lifecycle
    """

    # ========== Registry Events ==========
    REGISTRY_REGISTERED = "registry.registered"
    """Shape kind registered with its constructor."""

    REGISTRY_DUPLICATE = "registry.duplicate"
    """Registration rejected, kind already present."""

    # ========== Decode Events ==========
    DECODE_SUCCEEDED = "decode.succeeded"
    """Record decoded and held as current."""

    DECODE_SHORT_READ = "decode.short_read"
    """Source exhausted before the record was complete."""

    DECODE_UNKNOWN_KIND = "decode.unknown_kind"
    """Kind tag not present in the registry."""

    VARIANT_CREATED = "decode.variant_created"
    """Shape variant constructed by the factory on cache miss."""

    VARIANT_REUSED = "decode.variant_reused"
    """Shape variant served from the decoder cache."""

    # ========== Render Events ==========
    RENDER_COMPLETED = "render.completed"
    """Held record drawn on the target."""

    RENDER_SKIPPED = "render.skipped"
    """Render requested with no held record."""

    RENDER_SAVED = "render.saved"
    """Rendered canvas written to disk."""

    # ========== Source Events ==========
    SOURCE_OPENED = "source.opened"
    """Byte source opened."""

    SOURCE_OPEN_FAILED = "source.open_failed"
    """Byte source could not be opened."""
