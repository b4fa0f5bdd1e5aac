# ABOUTME: Onionware package initialization
# ABOUTME: Exposes the middleware composer and its error types as the public surface

"""
Onionware middleware composition package.

This package turns an ordered sequence of asynchronous middleware into a
single composed pipeline that runs them over a shared context with
onion-style control flow: each middleware may run work before and after
everything that follows it.
"""

from onionware.components.middleware import compose
from onionware.exceptions import DoubleInvocationError, InvalidArgumentError
from onionware.implementations.memory.middleware import ComposedPipeline, MiddlewareStack
from onionware.interfaces.middleware import AbstractMiddleware, Middleware, Next

__version__ = "0.1.0"

__all__ = [
    "compose",
    "ComposedPipeline",
    "MiddlewareStack",
    "AbstractMiddleware",
    "Middleware",
    "Next",
    "DoubleInvocationError",
    "InvalidArgumentError",
]
