"""
Namespace Schemas.

Pydantic schemas for the admin API's namespace request/response bodies.
Field order matches the wire format and is preserved in JSON output.
"""

from pydantic import BaseModel, Field


class TopQuery(BaseModel):
    """A server-ranked query with its row counters."""

    rows_written: int = Field(description="Rows written by the query")
    rows_read: int = Field(description="Rows read by the query")
    query: str = Field(description="Query text")


class NamespaceStats(BaseModel):
    """Read-only statistics snapshot for one namespace."""

    rows_read_count: int = Field(ge=0)
    rows_written_count: int = Field(ge=0)
    storage_bytes_used: int = Field(ge=0)
    write_requests_delegated: int = Field(
        ge=0,
        description="Writes forwarded to the primary in a replicated deployment",
    )
    replication_index: int = Field(ge=0, description="Replication position marker")
    top_queries: list[TopQuery] = Field(default_factory=list)


class NamespaceConfig(BaseModel):
    """Mutable namespace configuration."""

    block_reads: bool
    block_writes: bool
    block_reason: str | None = Field(
        default=None,
        description="Human-readable reason, present only while blocking",
    )
    max_db_size: str | None = Field(
        default=None,
        description="Size with unit, e.g. '500.0 MB'. Passed through verbatim",
        examples=["500.0 MB"],
    )


class ServerError(BaseModel):
    """Error body returned by the admin API on non-2xx responses."""

    error: str
