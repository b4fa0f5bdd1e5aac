# ABOUTME: Abstract composed pipeline interface
# ABOUTME: Defines what a pipeline produced from a middleware sequence must offer

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Iterator, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .middleware import Middleware


class AbstractMiddlewarePipeline(ABC):
    """
    Abstract base class for composed middleware pipelines.

    A pipeline is fixed at construction and reusable: every call starts an
    independent dispatch over the same sequence. Its calling convention is
    the middleware convention, so a pipeline can be nested in another one.
    """

    @property
    @abstractmethod
    def middleware(self) -> Tuple["Middleware", ...]:
        """The composed sequence, in dispatch order."""

    @abstractmethod
    def __call__(self, context: Any, next: Optional[Callable[[], Any]] = None) -> Awaitable[Any]:
        """
        Run the pipeline once over ``context``.

        Args:
            context: Opaque value handed to every stage unchanged.
            next: Optional zero-argument tail continuation, run after the last stage.

        Returns:
            Awaitable settling with the first stage's result, or failing with
            the first unrecovered failure in the chain.
        """

    def __len__(self) -> int:
        return len(self.middleware)

    def __iter__(self) -> Iterator["Middleware"]:
        return iter(self.middleware)
