# Pydantic schemas package
from nsadmin.schemas.base import ConfigResponse, StatsResponse, SuccessResponse
from nsadmin.schemas.namespace import (
    NamespaceConfig,
    NamespaceStats,
    ServerError,
    TopQuery,
)

__all__ = [
    "ConfigResponse",
    "NamespaceConfig",
    "NamespaceStats",
    "ServerError",
    "StatsResponse",
    "SuccessResponse",
    "TopQuery",
]
