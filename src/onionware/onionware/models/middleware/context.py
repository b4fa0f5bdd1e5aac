# ABOUTME: MiddlewareContext model, a ready-made context for pipeline invocations
# ABOUTME: Holds per-invocation state, metadata and the path of middleware that ran

from datetime import datetime, UTC
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, ConfigDict


class MiddlewareContext(BaseModel):
    """
    General-purpose context for one pipeline invocation.

    A composed pipeline passes its context through untouched, so any object
    works. This model exists for callers that have no context type of their
    own: it gives middleware a shared ``state`` bag to communicate through and
    an ``execution_path`` they can append to.
    """

    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique context identifier")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Context creation timestamp")
    request_id: Optional[str] = Field(default=None, description="Request identifier for tracing")

    state: Dict[str, Any] = Field(default_factory=dict, description="State shared between middleware")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional metadata")
    execution_path: List[str] = Field(default_factory=list, description="Names of middleware that ran")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def add_execution_step(self, middleware_name: str) -> None:
        """
        Add a middleware to the execution path.

        Args:
            middleware_name: Name of the middleware that was executed.
        """
        self.execution_path.append(middleware_name)

    def get(self, key: str, default: Any = None) -> Any:
        """Read a value from the shared state."""
        return self.state.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Write a value into the shared state."""
        self.state[key] = value

    def get_execution_duration(self) -> float:
        """
        Get the duration since context creation in milliseconds.

        Returns:
            float: Duration in milliseconds.
        """
        now = datetime.now(UTC)
        return (now - self.timestamp).total_seconds() * 1000
