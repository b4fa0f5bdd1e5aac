# ABOUTME: Implementations package exports
# ABOUTME: Contains concrete implementations of the middleware interfaces

from .memory import ComposedPipeline, MiddlewareStack

__all__ = ["ComposedPipeline", "MiddlewareStack"]
