"""
ShapeFactory - Explicit kind registration pattern

Bounded Context: Mapping kind tags to shape variant constructors
Responsibilities:
  - Register constructors per kind (insertion only)
  - Reject duplicate kinds without replacing the existing entry
  - Construct a fresh variant per create() call

Caching of constructed variants belongs to the decoder, not here.

Pattern: Registry with explicit registration
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Set, Tuple, Type

from figura_logging import LogEvent, StructuredLogger, create_logger
from figura_shapes.errors import FailureReason
from figura_shapes.kinds import kind_name
from figura_shapes.variants import DEFAULT_VARIANTS, ShapeVariant


VariantConstructor = Callable[[], ShapeVariant]


@dataclass(frozen=True)
class RegistrationResult:
    """
    Outcome of a batch registration.

    Batches apply partially: every non-duplicate entry is added even when a
    later one is rejected. ``ok`` is True only if nothing was rejected.
    """

    registered: Tuple[int, ...] = ()
    rejected: Tuple[int, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.rejected

    @property
    def reason(self) -> Optional[FailureReason]:
        return None if self.ok else FailureReason.DUPLICATE_REGISTRATION

    def __bool__(self) -> bool:
        return self.ok


class ShapeFactory:
    """
    Registry of shape constructors keyed by kind tag.

    Key Features:
      - Duplicate registration is a failure signal (False), not an exception
      - Unknown kinds yield None from create()
      - Introspection: registered_kinds, is_registered, count

    Example:
        factory = ShapeFactory()
        result = factory.register_variants(Circle, Triangle, Square)
        assert result.ok

        factory.register(ShapeKind.CIRCLE, Circle)   # False, first stays

        variant = factory.create(ShapeKind.TRIANGLE)  # fresh Triangle()
        factory.create(99)                            # None
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._constructors: Dict[int, VariantConstructor] = {}
        self.logger = logger or create_logger("registry")

    def register(self, kind: int, constructor: VariantConstructor) -> bool:
        """
        Register a constructor for a kind.

        Args:
            kind: Kind tag (ShapeKind or plain int)
            constructor: Zero-argument callable returning a ShapeVariant

        Returns:
            True if added, False if the kind was already registered
            (registry left unchanged)
        """
        key = int(kind)
        if key in self._constructors:
            self.logger.warning(
                event=LogEvent.REGISTRY_DUPLICATE,
                message=f"Kind '{kind_name(key)}' already registered",
                metadata={'kind': key, 'reason': FailureReason.DUPLICATE_REGISTRATION.value},
            )
            return False

        self._constructors[key] = constructor
        self.logger.debug(
            event=LogEvent.REGISTRY_REGISTERED,
            message=f"Registered kind '{kind_name(key)}'",
            metadata={'kind': key},
        )
        return True

    def register_all(
        self, entries: Iterable[Tuple[int, VariantConstructor]]
    ) -> RegistrationResult:
        """
        Register an ordered batch of (kind, constructor) pairs.

        Every entry is attempted; duplicates are collected in ``rejected``.
        """
        registered = []
        rejected = []
        for kind, constructor in entries:
            if self.register(kind, constructor):
                registered.append(int(kind))
            else:
                rejected.append(int(kind))
        return RegistrationResult(registered=tuple(registered), rejected=tuple(rejected))

    def register_variants(self, *variant_classes: Type[ShapeVariant]) -> RegistrationResult:
        """Register variant classes under their own KIND."""
        return self.register_all((cls.KIND, cls) for cls in variant_classes)

    def create(self, kind: int) -> Optional[ShapeVariant]:
        """
        Construct a new variant for kind.

        Returns:
            New ShapeVariant instance, or None if kind is not registered
        """
        constructor = self._constructors.get(int(kind))
        if constructor is None:
            return None
        return constructor()

    def is_registered(self, kind: int) -> bool:
        return int(kind) in self._constructors

    @property
    def registered_kinds(self) -> Set[int]:
        """Snapshot of registered kind tags."""
        return set(self._constructors.keys())

    def count(self) -> int:
        return len(self._constructors)


def default_factory(logger: Optional[StructuredLogger] = None) -> ShapeFactory:
    """Factory with Circle, Triangle and Square registered."""
    factory = ShapeFactory(logger=logger)
    factory.register_variants(*DEFAULT_VARIANTS)
    return factory
