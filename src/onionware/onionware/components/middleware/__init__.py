# ABOUTME: Middleware components package
# ABOUTME: Exports the composer

from .compose import compose

__all__ = ["compose"]
