# ABOUTME: Validators package exports
# ABOUTME: Exports middleware stack validation used by the composer and the stack builder

from .middleware import (
    accepts_context_and_next,
    describe_middleware,
    validate_middleware,
    validate_middleware_stack,
)

__all__ = [
    "accepts_context_and_next",
    "describe_middleware",
    "validate_middleware",
    "validate_middleware_stack",
]
