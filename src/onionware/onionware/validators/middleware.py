# ABOUTME: Composition-time validation of middleware stacks and their elements
# ABOUTME: Rejects non-list stacks, non-callables and callables that cannot take (context, next)

import inspect
from typing import Any, Tuple

from onionware.exceptions.middleware import InvalidMiddlewareError, InvalidMiddlewareStackError

STACK_TYPE_MESSAGE = "Middleware stack must be a list!"
CALLABLE_MESSAGE = "Middleware must be composed of callables!"


def describe_middleware(middleware: Any) -> str:
    """Human-readable name for a middleware, used in errors and logs."""
    name = getattr(middleware, "name", None)
    if isinstance(name, str) and name:
        return name
    return getattr(middleware, "__qualname__", None) or type(middleware).__name__


def accepts_context_and_next(middleware: Any) -> bool:
    """
    Check whether ``middleware`` can be called with two positional arguments.

    Callables whose signature cannot be introspected are given the benefit
    of the doubt.
    """
    try:
        signature = inspect.signature(middleware)
    except (TypeError, ValueError):
        return True

    try:
        signature.bind(None, None)
    except TypeError:
        return False
    return True


def validate_middleware(middleware: Any, index: int, strict: bool = True) -> Any:
    """
    Validate one element of a middleware stack.

    Args:
        middleware: Candidate element.
        index: Position of the element, reported in errors.
        strict: Also require the ``(context, next)`` signature.

    Returns:
        The element, unchanged.

    Raises:
        InvalidMiddlewareError: If the element is not callable, or when
            ``strict`` is set and its signature cannot accept two positional arguments.
    """
    if not callable(middleware):
        raise InvalidMiddlewareError(
            f"{CALLABLE_MESSAGE} Element at index {index} is of type {type(middleware).__name__}",
            details={"index": index, "type": type(middleware).__name__},
        )

    if strict and not accepts_context_and_next(middleware):
        raise InvalidMiddlewareError(
            f"{CALLABLE_MESSAGE} Element at index {index} ({describe_middleware(middleware)}) "
            f"cannot be called with (context, next)",
            details={"index": index, "type": type(middleware).__name__, "reason": "signature"},
        )

    return middleware


def validate_middleware_stack(stack: Any, strict: bool = True) -> Tuple[Any, ...]:
    """
    Validate a whole stack and snapshot it.

    Args:
        stack: A list or tuple of middleware.
        strict: Also require every element to accept ``(context, next)``.

    Returns:
        Tuple of the elements in their original order.

    Raises:
        InvalidMiddlewareStackError: If ``stack`` is not a list or tuple.
        InvalidMiddlewareError: For the first invalid element.
    """
    if not isinstance(stack, (list, tuple)):
        raise InvalidMiddlewareStackError(
            STACK_TYPE_MESSAGE,
            details={"type": type(stack).__name__},
        )

    for index, middleware in enumerate(stack):
        validate_middleware(middleware, index, strict=strict)

    return tuple(stack)
