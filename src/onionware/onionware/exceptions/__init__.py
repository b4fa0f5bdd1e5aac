# ABOUTME: Exceptions package exports
# ABOUTME: Exports the base exception hierarchy and middleware composition errors

from onionware.exceptions.base import (
    CoreException,
    ValidationException,
)

from onionware.exceptions.middleware import (
    MiddlewareError,
    InvalidArgumentError,
    InvalidMiddlewareStackError,
    InvalidMiddlewareError,
    DoubleInvocationError,
)

__all__ = [
    "CoreException",
    "ValidationException",
    # Middleware exceptions
    "MiddlewareError",
    "InvalidArgumentError",
    "InvalidMiddlewareStackError",
    "InvalidMiddlewareError",
    "DoubleInvocationError",
]
