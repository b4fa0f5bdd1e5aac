# ABOUTME: Middleware models package
# ABOUTME: Exports the default context model and the priority ordering type

from .context import MiddlewareContext
from .priority import MiddlewarePriority

__all__ = ["MiddlewareContext", "MiddlewarePriority"]
