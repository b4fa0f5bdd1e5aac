# ABOUTME: Memory-based middleware implementations package
# ABOUTME: Provides the composed pipeline dispatcher and the stack builder

from .pipeline import ComposedPipeline
from .stack import MiddlewareStack

__all__ = ["ComposedPipeline", "MiddlewareStack"]
