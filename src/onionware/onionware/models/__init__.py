# ABOUTME: Models package exports
# ABOUTME: Exports data models shared by the composer and middleware authors

from .middleware import MiddlewareContext, MiddlewarePriority

__all__ = ["MiddlewareContext", "MiddlewarePriority"]
