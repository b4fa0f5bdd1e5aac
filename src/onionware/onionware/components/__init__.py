# ABOUTME: Components package exports
# ABOUTME: Exports high-level building blocks assembled from the interfaces and implementations

from .middleware import compose

__all__ = ["compose"]
