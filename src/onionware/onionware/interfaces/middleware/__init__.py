# ABOUTME: Middleware interfaces package
# ABOUTME: Exports the middleware calling convention and abstract bases

from .middleware import AbstractMiddleware, Middleware, Next
from .pipeline import AbstractMiddlewarePipeline

__all__ = ["AbstractMiddleware", "AbstractMiddlewarePipeline", "Middleware", "Next"]
