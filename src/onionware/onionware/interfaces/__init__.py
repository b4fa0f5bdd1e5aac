# ABOUTME: Interfaces package exports
# ABOUTME: Exports the abstract contracts middleware and pipelines implement

from .middleware import AbstractMiddleware, AbstractMiddlewarePipeline, Middleware, Next

__all__ = ["AbstractMiddleware", "AbstractMiddlewarePipeline", "Middleware", "Next"]
