# ABOUTME: MiddlewareStack, an in-memory registry that collects middleware before composition
# ABOUTME: Orders middleware by priority with stable registration order and snapshots them into a pipeline

import threading
from typing import Any, List, Optional, Tuple

from loguru import logger

from onionware.config.settings import get_settings
from onionware.interfaces.middleware import AbstractMiddleware, Middleware
from onionware.models.middleware import MiddlewarePriority
from onionware.validators.middleware import describe_middleware, validate_middleware

from .pipeline import ComposedPipeline


class MiddlewareStack:
    """
    Mutable, thread-safe collection of middleware for a host application.

    Frameworks register middleware one at a time (``stack.use(auth).use(router)``)
    and compose once at startup. The composed order is ascending priority,
    with ties kept in registration order. ``compose`` snapshots the current
    order; registering more middleware afterwards does not change pipelines
    that were already composed.
    """

    def __init__(self, name: str = "MiddlewareStack", strict: Optional[bool] = None):
        """
        Initialize an empty stack.

        Args:
            name: Name of the stack, also given to pipelines it composes.
            strict: Require the (context, next) signature on registration.
                    Defaults to the STRICT_ARITY setting.
        """
        self.name = name
        self._strict = get_settings().STRICT_ARITY if strict is None else strict
        self._entries: List[Tuple[MiddlewarePriority, int, Middleware]] = []
        self._sequence = 0
        self._lock = threading.RLock()
        self._logger = logger.bind(name=f"{__name__}.{self.name}")

    def use(self, middleware: Middleware, priority: int | MiddlewarePriority | None = None) -> "MiddlewareStack":
        """
        Register a middleware.

        Args:
            middleware: Callable taking (context, next).
            priority: Placement in the composed order. Defaults to the
                      middleware's own ``priority`` for AbstractMiddleware
                      instances and to NORMAL otherwise.

        Returns:
            The stack itself, for chaining.

        Raises:
            InvalidMiddlewareError: If the middleware fails validation.
            InvalidArgumentError: If the priority is not a MiddlewarePriority or int.
        """
        with self._lock:
            validate_middleware(middleware, len(self._entries), strict=self._strict)

            if priority is None:
                if isinstance(middleware, AbstractMiddleware):
                    resolved = middleware.priority
                else:
                    resolved = MiddlewarePriority.NORMAL
            else:
                resolved = MiddlewarePriority.coerce(priority)

            self._entries.append((resolved, self._sequence, middleware))
            self._sequence += 1
            self._logger.debug(
                f"Middleware {describe_middleware(middleware)} registered with priority {resolved}. "
                f"Total count: {len(self._entries)}"
            )
        return self

    def remove(self, middleware: Middleware) -> None:
        """
        Remove the first registration of a middleware.

        Raises:
            ValueError: If the middleware is not registered.
        """
        with self._lock:
            for position, (_, _, registered) in enumerate(self._entries):
                if registered is middleware:
                    del self._entries[position]
                    self._logger.debug(
                        f"Middleware {describe_middleware(middleware)} removed. Total count: {len(self._entries)}"
                    )
                    return
            raise ValueError(f"Middleware {describe_middleware(middleware)} not found in stack")

    def clear(self) -> None:
        """Remove every registered middleware."""
        with self._lock:
            self._logger.debug(f"Clearing stack with {len(self._entries)} middleware")
            self._entries.clear()

    def get_middleware_by_priority(self) -> List[Middleware]:
        """
        Get the registered middleware in composition order.

        Returns:
            List sorted by priority (lowest value first), ties in registration order.
        """
        with self._lock:
            ordered = sorted(self._entries, key=lambda entry: (entry[0].value, entry[1]))
            return [middleware for _, _, middleware in ordered]

    def compose(self) -> ComposedPipeline:
        """
        Compose the current registrations into a pipeline.

        Elements were validated on ``use``, so this cannot fail.
        """
        ordered = tuple(self.get_middleware_by_priority())
        settings = get_settings()
        self._logger.debug(f"Composing {len(ordered)} middleware from stack {self.name}")
        return ComposedPipeline(ordered, name=self.name, trace=settings.TRACE_DISPATCH)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, middleware: Any) -> bool:
        with self._lock:
            return any(registered is middleware for _, _, registered in self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, count={len(self)})"
