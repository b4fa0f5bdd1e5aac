# ABOUTME: Middleware priority used to order a middleware stack before composition
# ABOUTME: Lower numbers indicate higher priority (placed earlier, outermost in the onion)

from __future__ import annotations

import sys
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema
from pydantic_core import core_schema

from onionware.exceptions.middleware import InvalidArgumentError


class MiddlewarePriority:
    """
    Ordering key for middleware registered on a stack.

    Lower integer values indicate higher priority: the middleware is placed
    earlier in the composed sequence, so its "before" code runs first and
    its "after" code runs last. Custom values can be slotted between the
    predefined constants.
    """

    HIGHEST: ClassVar[MiddlewarePriority]
    CRITICAL: ClassVar[MiddlewarePriority]
    HIGH: ClassVar[MiddlewarePriority]
    NORMAL: ClassVar[MiddlewarePriority]
    LOW: ClassVar[MiddlewarePriority]
    VERY_LOW: ClassVar[MiddlewarePriority]
    LOWEST: ClassVar[MiddlewarePriority]

    def __init__(self, value: int):
        self.value = value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, MiddlewarePriority):
            return self.value == other.value
        elif isinstance(other, int):
            return self.value == other
        return False

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, MiddlewarePriority):
            return self.value < other.value
        elif isinstance(other, int):
            return self.value < other
        return NotImplemented

    def __le__(self, other: Any) -> bool:
        if isinstance(other, MiddlewarePriority):
            return self.value <= other.value
        elif isinstance(other, int):
            return self.value <= other
        return NotImplemented

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, MiddlewarePriority):
            return self.value > other.value
        elif isinstance(other, int):
            return self.value > other
        return NotImplemented

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, MiddlewarePriority):
            return self.value >= other.value
        elif isinstance(other, int):
            return self.value >= other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"MiddlewarePriority({self.name})"

    @property
    def name(self) -> str:
        """Name of the predefined constant with this value, or the value itself."""
        for label in ("HIGHEST", "CRITICAL", "HIGH", "NORMAL", "LOW", "VERY_LOW", "LOWEST"):
            if getattr(MiddlewarePriority, label).value == self.value:
                return label
        return str(self.value)

    @classmethod
    def coerce(cls, value: int | MiddlewarePriority) -> MiddlewarePriority:
        """Accept either a priority or a bare int."""
        if isinstance(value, MiddlewarePriority):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(
                f"Expected MiddlewarePriority or int, got {type(value).__name__}",
                details={"type": type(value).__name__},
            )
        return cls(value)

    @classmethod
    def before(cls, priority: int | MiddlewarePriority, offset: int = 10) -> MiddlewarePriority:
        """
        Create a priority that places middleware before the given priority.

        Args:
            priority: Base priority value (int or MiddlewarePriority)
            offset: How much earlier to place it (default: 10)
        """
        base_value = priority.value if isinstance(priority, MiddlewarePriority) else priority
        return cls(base_value - offset)

    @classmethod
    def after(cls, priority: int | MiddlewarePriority, offset: int = 10) -> MiddlewarePriority:
        """
        Create a priority that places middleware after the given priority.

        Args:
            priority: Base priority value (int or MiddlewarePriority)
            offset: How much later to place it (default: 10)
        """
        base_value = priority.value if isinstance(priority, MiddlewarePriority) else priority
        return cls(base_value + offset)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        """
        Provide Pydantic core schema for MiddlewarePriority.

        The priority validates from an int and serializes back to one.
        """

        def validate_priority(value: Any) -> MiddlewarePriority:
            if isinstance(value, MiddlewarePriority):
                return value
            elif isinstance(value, int) and not isinstance(value, bool):
                return cls(value)
            raise ValueError(f"Expected MiddlewarePriority or int, got {type(value)}")

        return core_schema.no_info_plain_validator_function(
            validate_priority,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.value if isinstance(value, cls) else value,
                return_schema=core_schema.int_schema(),
            ),
        )


MiddlewarePriority.HIGHEST = MiddlewarePriority(-sys.maxsize - 1)
MiddlewarePriority.CRITICAL = MiddlewarePriority(0)
MiddlewarePriority.HIGH = MiddlewarePriority(100)
MiddlewarePriority.NORMAL = MiddlewarePriority(200)
MiddlewarePriority.LOW = MiddlewarePriority(300)
MiddlewarePriority.VERY_LOW = MiddlewarePriority(400)
MiddlewarePriority.LOWEST = MiddlewarePriority(sys.maxsize)
