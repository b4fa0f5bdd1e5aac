# ABOUTME: Main configuration composition for the onionware library
# ABOUTME: Adds composer and dispatcher tuning on top of the base settings

from functools import lru_cache

from pydantic import Field

from ._base import BaseCoreSettings


class ComposeSettings(BaseCoreSettings):
    """The complete configuration for the composer and dispatcher.

    Attributes:
        STRICT_ARITY: When True, ``compose`` rejects callables that cannot be
            called with exactly ``(context, next)``. When False only
            callability is checked.
        TRACE_DISPATCH: When True, the dispatcher logs every stage it enters
            and settles at TRACE level. Off by default since it runs per stage
            per request.
    """

    STRICT_ARITY: bool = Field(
        default=True,
        description="Reject middleware whose signature cannot accept (context, next).",
    )
    TRACE_DISPATCH: bool = Field(
        default=False,
        description="Log each dispatched stage at TRACE level.",
    )


@lru_cache
def get_settings() -> ComposeSettings:
    """Provides a singleton instance of the library settings.

    Returns:
        A single, cached instance of ComposeSettings.
    """
    return ComposeSettings()
