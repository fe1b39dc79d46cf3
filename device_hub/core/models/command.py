"""Command and query result models.

Providers return these after executing a command or answering a range
query. The device manager forwards them to callers unmodified.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CommandResult(BaseModel):
    """Result of executing a command on a device.

    Examples:
        >>> CommandResult(success=True)
        >>> CommandResult(success=False, error="Device mock:lamp not found")
    """

    success: bool = Field(..., description="Whether the command succeeded")

    error: str | None = Field(
        default=None,
        description="Human-readable failure reason",
    )

    @classmethod
    def ok(cls) -> CommandResult:
        """Create a successful result."""
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> CommandResult:
        """Create a failed result.

        Args:
            error: Failure reason

        Returns:
            CommandResult with success=False
        """
        return cls(success=False, error=error)


class QueryResult(BaseModel):
    """Result of a range query against a queryable device."""

    success: bool = Field(..., description="Whether the query succeeded")

    items: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Items shaped by the domain's item fields",
    )

    error: str | None = Field(default=None, description="Failure reason")
