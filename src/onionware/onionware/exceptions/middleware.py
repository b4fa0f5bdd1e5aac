# ABOUTME: Middleware-specific exception classes for composition and dispatch
# ABOUTME: Covers malformed middleware stacks and continuations invoked more than once

from typing import Any, Dict

from onionware.exceptions.base import CoreException, ValidationException


class MiddlewareError(CoreException):
    """Base exception class for middleware-related errors.

    This is the base class for errors produced by the composer or the
    dispatcher themselves. Failures raised by middleware are never wrapped
    in it; they propagate to the caller unchanged.
    """

    pass


class InvalidArgumentError(ValidationException, TypeError):
    """Exception raised when composition input is malformed.

    Raised synchronously by ``compose`` before any middleware runs, such as:
    - The stack is not a list or tuple
    - An element is not callable
    - An element cannot be called with ``(context, next)``

    It is also a ``TypeError`` so callers catching the builtin keep working.
    """

    def __init__(self, message: str, code: str | None = "INVALID_ARGUMENT", details: Dict[str, Any] | None = None):
        super().__init__(message, code=code, details=details)


class InvalidMiddlewareStackError(InvalidArgumentError):
    """Exception raised when the middleware stack is not an ordered list."""

    pass


class InvalidMiddlewareError(InvalidArgumentError):
    """Exception raised when an element of the stack is not usable as middleware.

    ``details`` carries the ``index`` of the offending element and its ``type``.
    """

    pass


class DoubleInvocationError(MiddlewareError):
    """Exception raised when a continuation is invoked more than once.

    Signals a bug in a middleware: within one pipeline invocation the
    dispatch cursor only moves forward, so calling ``next()`` twice (or
    re-entering an earlier stage) is rejected. The error is delivered as the
    failure of the awaited continuation, never raised from the call itself.

    ``details`` carries the attempted ``index`` and the current ``cursor``.
    """

    def __init__(
        self,
        message: str = "continuation called multiple times (next() called more than once)",
        code: str | None = "DOUBLE_INVOCATION",
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, details=details)
