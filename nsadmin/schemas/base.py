"""
Base Schemas.

Output envelopes printed by the CLI in JSON mode.
"""

from pydantic import BaseModel

from nsadmin.schemas.namespace import NamespaceConfig, NamespaceStats


class SuccessResponse(BaseModel):
    """Envelope for operations without a payload."""

    success: bool = True


class StatsResponse(BaseModel):
    """Envelope for namespace statistics."""

    success: bool = True
    stats: NamespaceStats


class ConfigResponse(BaseModel):
    """Envelope for namespace configuration."""

    success: bool = True
    config: NamespaceConfig
