# ABOUTME: Middleware contract: the (context, next) calling convention and a class-based base
# ABOUTME: Function middleware satisfy the Middleware protocol; classes may extend AbstractMiddleware

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional, Protocol, runtime_checkable

from onionware.models.middleware.priority import MiddlewarePriority

Next = Callable[[], Awaitable[Any]]
"""Zero-argument continuation that resumes the chain at the following stage."""


@runtime_checkable
class Middleware(Protocol):
    """
    Anything callable as ``middleware(context, next)``.

    The return value may be an awaitable or a plain value; the dispatcher
    awaits the former and passes the latter through. Calling ``next()`` and
    awaiting it runs every downstream stage; not calling it ends the chain
    at this stage.
    """

    def __call__(self, context: Any, next: Next) -> Any: ...


class AbstractMiddleware(ABC):
    """
    Abstract base class for class-based middleware.

    Subclasses implement ``process``. Instances are directly usable as
    middleware: calling one with ``(context, next)`` runs ``process`` when
    ``can_process`` accepts the context, and otherwise hands control straight
    to the next stage.
    """

    def __init__(self, priority: MiddlewarePriority = MiddlewarePriority.NORMAL, name: Optional[str] = None):
        """
        Initialize middleware with priority and name.

        Args:
            priority: Placement used when registered on a MiddlewareStack.
                      Lower values run earlier.
            name: Identifier for logs and reprs. Defaults to the class name.
        """
        self.priority = MiddlewarePriority.coerce(priority)
        self.name = name or self.__class__.__name__

    @abstractmethod
    async def process(self, context: Any, call_next: Next) -> Any:
        """
        Process the middleware logic.

        Code before ``await call_next()`` runs before every downstream stage,
        code after it runs once all of them have settled. Returning without
        calling ``call_next`` short-circuits the rest of the chain.

        Args:
            context: The opaque per-invocation context.
            call_next: Continuation resuming the next stage. Call it at most once.

        Returns:
            Any value; it becomes the result of the upstream ``next()`` call.
        """

    def can_process(self, context: Any) -> bool:
        """
        Determine if this middleware should handle the given context.

        Returns:
            bool: True to run ``process``, False to pass straight through.
        """
        return True

    async def __call__(self, context: Any, call_next: Next) -> Any:
        if not self.can_process(context):
            return await call_next()
        return await self.process(context, call_next)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, priority={self.priority.name})"
