# ABOUTME: compose(), the entry point that turns a middleware sequence into one pipeline
# ABOUTME: Validates the sequence eagerly so malformed input fails before any dispatch

from typing import Optional, Sequence

from loguru import logger

from onionware.config.settings import get_settings
from onionware.implementations.memory.middleware.pipeline import ComposedPipeline
from onionware.interfaces.middleware import Middleware
from onionware.validators.middleware import validate_middleware_stack

_logger = logger.bind(name=__name__)


def compose(
    stack: Sequence[Middleware],
    *,
    name: str = "ComposedPipeline",
    strict: Optional[bool] = None,
    trace: Optional[bool] = None,
) -> ComposedPipeline:
    """
    Compose an ordered sequence of middleware into a single pipeline.

    Composition performs no I/O and runs no middleware. The returned pipeline
    is immutable; the caller's list can be modified afterwards without
    affecting it.

    Example:
        async def log(ctx, next):
            ctx.append("before")
            await next()
            ctx.append("after")

        pipeline = compose([log, handler])
        await pipeline(ctx)

    Args:
        stack: A list or tuple of callables taking ``(context, next)``.
        name: Name of the pipeline for identification and logging.
        strict: Check each element's signature. Defaults to STRICT_ARITY.
        trace: Log each dispatched stage. Defaults to TRACE_DISPATCH.

    Returns:
        ComposedPipeline: Call it as ``await pipeline(context, next=None)``.

    Raises:
        InvalidMiddlewareStackError: If ``stack`` is not a list or tuple.
        InvalidMiddlewareError: If an element is not usable as middleware.
    """
    settings = get_settings()
    if strict is None:
        strict = settings.STRICT_ARITY
    if trace is None:
        trace = settings.TRACE_DISPATCH

    middleware = validate_middleware_stack(stack, strict=strict)
    _logger.debug(f"Composed pipeline {name} with {len(middleware)} middleware")
    return ComposedPipeline(middleware, name=name, trace=trace)
