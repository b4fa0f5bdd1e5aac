# ABOUTME: ComposedPipeline, the in-memory dispatcher for a composed middleware sequence
# ABOUTME: Runs stages in order over a shared context with a one-shot, forward-only cursor per invocation

import inspect
from functools import partial
from typing import Any, Awaitable, Callable, Optional, Tuple, TYPE_CHECKING

from loguru import logger

from onionware.exceptions.middleware import DoubleInvocationError, InvalidArgumentError
from onionware.interfaces.middleware import AbstractMiddlewarePipeline, Middleware
from onionware.validators.middleware import describe_middleware

if TYPE_CHECKING:
    from loguru import Logger


async def _settled(value: Any = None) -> Any:
    return value


async def _failed(error: BaseException) -> Any:
    raise error


class _Dispatch:
    """
    State of a single pipeline invocation.

    Owns the dispatch cursor, the index of the furthest stage entered. The
    cursor only moves forward: asking for a stage at or before it means a
    continuation was called twice, and that request fails.
    """

    __slots__ = ("_stack", "_context", "_tail", "_cursor", "_trace", "_logger")

    def __init__(
        self,
        stack: Tuple[Middleware, ...],
        context: Any,
        tail: Optional[Callable[[], Any]],
        trace: bool,
        bound_logger: "Logger",
    ):
        self._stack = stack
        self._context = context
        self._tail = tail
        self._cursor = -1
        self._trace = trace
        self._logger = bound_logger

    def __call__(self, index: int) -> Awaitable[Any]:
        """
        Enter stage ``index`` and return an awaitable for its completion.

        The guard and the cursor advance happen here, synchronously, so a
        second call to the same continuation is rejected even when the first
        one has not been awaited yet.
        """
        if index <= self._cursor:
            self._logger.warning(
                f"Continuation for stage {index} called after the pipeline reached stage {self._cursor}"
            )
            return _failed(DoubleInvocationError(details={"index": index, "cursor": self._cursor}))

        self._cursor = index

        if index < len(self._stack):
            stage = self._stack[index]
            return self._run(stage, index, self._context, partial(self, index + 1))

        # Sequence exhausted
        if self._tail is None:
            return _settled()
        return self._run(self._tail, index)

    async def _run(self, stage: Callable[..., Any], index: int, *args: Any) -> Any:
        if self._trace:
            self._logger.trace(f"Entering stage {index}/{len(self._stack)}: {describe_middleware(stage)}")

        result = stage(*args)
        if inspect.isawaitable(result):
            result = await result

        if self._trace:
            self._logger.trace(f"Stage {index} settled: {describe_middleware(stage)}")
        return result


class ComposedPipeline(AbstractMiddlewarePipeline):
    """
    A fixed middleware sequence composed into one asynchronous operation.

    Calling the pipeline starts a fresh dispatch with its own cursor, so one
    pipeline can serve any number of concurrent or nested invocations. Every
    stage receives the same context object and a zero-argument ``next``:

        async def timing(ctx, next):
            started = time.monotonic()
            await next()
            ctx.state["elapsed"] = time.monotonic() - started

    Stage return values may be awaitables or plain values; both settle the
    same way, and an exception raised synchronously by a stage surfaces as
    the failure of the awaited result exactly like an asynchronous one.
    Failures are not caught, retried or logged here.

    Instances are normally created by ``compose``, which validates the
    sequence first. The constructor trusts its input.
    """

    def __init__(self, middleware: Tuple[Middleware, ...], name: str = "ComposedPipeline", trace: bool = False):
        """
        Args:
            middleware: Validated sequence, in dispatch order.
            name: Name of the pipeline for identification and logging.
            trace: Log every stage entry and settle at TRACE level.
        """
        self._middleware = tuple(middleware)
        self.name = name
        self._trace = trace
        self._logger = logger.bind(name=f"{__name__}.{self.name}")

    @property
    def middleware(self) -> Tuple[Middleware, ...]:
        return self._middleware

    def __call__(self, context: Any, next: Optional[Callable[[], Any]] = None) -> Awaitable[Any]:
        if next is not None and not callable(next):
            return _failed(
                InvalidArgumentError(
                    "Tail continuation must be callable",
                    details={"type": type(next).__name__},
                )
            )

        dispatch = _Dispatch(self._middleware, context, next, self._trace, self._logger)
        return dispatch(0)

    def __repr__(self) -> str:
        names = ", ".join(describe_middleware(m) for m in self._middleware)
        return f"{self.__class__.__name__}(name={self.name!r}, middleware=[{names}])"
