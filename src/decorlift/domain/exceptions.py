"""Domain exceptions: all public errors of decorlift.

Hexagonal architecture: all exceptions visible to users defined in domain.
Application/Infrastructure raise these, never define their own public exceptions.
"""

from __future__ import annotations


class DecorLiftError(Exception):
    """Base for all decorlift error exceptions.

    Allows: except DecorLiftError to catch all library errors.
    """


class MalformedDescriptorError(DecorLiftError, TypeError):
    """Descriptor violates the data/accessor contract.

    Raised when:
        - data fields (value/writable) mixed with accessor fields (get/set)
        - accessor built with neither getter nor setter
        - decorator returned something that is not descriptor-like
        - final descriptor kind does not match declaration kind

    Inherits TypeError for semantic correctness (expected descriptor, got X).

    Attributes:
        reason: Why descriptor is malformed.
        name: Property name being decorated, None if not yet known.
    """

    def __init__(self, reason: str, *, name: str | None = None) -> None:
        """Initialize with reason and optional property name."""
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        self.name = name
        if name is None:
            super().__init__(f"malformed descriptor: {reason}")
        else:
            super().__init__(f"malformed descriptor for {name!r}: {reason}")


class EvaluationError(DecorLiftError):
    """Decorator expression or decorator function raised.

    Wraps the original exception. Preserves original traceback via __cause__.
    Fail-fast: later decorators of the same list are neither evaluated nor applied.

    Attributes:
        original: Original exception.
        index: Position of decorator in its list (0-based, textual order).
        source: Decorator expression source text.
        phase: "evaluate" (expression) or "apply" (decorator call).
    """

    PHASES = frozenset({"evaluate", "apply"})

    def __init__(
        self,
        original: BaseException,
        *,
        index: int,
        source: str,
        phase: str,
    ) -> None:
        """Initialize with original exception and decorator position."""
        if phase not in self.PHASES:
            raise ValueError(f"phase must be one of {sorted(self.PHASES)}, got {phase!r}")
        if index < 0:
            raise ValueError(f"index must be >= 0, got {index}")

        self.original = original
        self.index = index
        self.source = source
        self.phase = phase
        super().__init__(
            f"decorator #{index} ({source}) failed to {phase}: "
            f"{type(original).__name__}: {original}"
        )
        self.__cause__ = original


class UnrecognizedDeclarationShapeError(DecorLiftError, TypeError):
    """Dispatcher cannot classify declaration.

    Caller/integration bug, never recovered from.

    Attributes:
        got: Actual type received.
    """

    def __init__(self, got: type) -> None:
        """Initialize with actual type."""
        self.got = got
        super().__init__(f"unrecognized declaration shape: {got.__name__}")


class PropertyRedefinitionError(DecorLiftError, TypeError):
    """Cannot redefine non-configurable property.

    Attributes:
        name: Property name.
    """

    def __init__(self, name: str) -> None:
        """Initialize with property name."""
        self.name = name
        super().__init__(f"cannot redefine non-configurable property {name!r}")


class ExpressionSyntaxError(DecorLiftError, SyntaxError):
    """Decorator expression could not be parsed or is unsupported.

    Inherits SyntaxError for semantic correctness.

    Attributes:
        source: Expression source text.
        reason: Error description.
    """

    def __init__(self, *, source: str, reason: str) -> None:
        """Initialize with expression source and error reason."""
        self.source = source
        self.reason = reason
        super().__init__(f"{source!r}: {reason}")


class ReadOnlyPropertyError(DecorLiftError, AttributeError):
    """Assignment to non-writable data property or setter-less accessor.

    Attributes:
        name: Property name.
    """

    def __init__(self, name: str) -> None:
        """Initialize with property name."""
        self.name = name
        super().__init__(f"cannot assign to read-only property {name!r}")
