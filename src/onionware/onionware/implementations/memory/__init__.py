# ABOUTME: Memory-based implementations package
# ABOUTME: Exports in-process implementations of the middleware interfaces

from .middleware import ComposedPipeline, MiddlewareStack

__all__ = ["ComposedPipeline", "MiddlewareStack"]
