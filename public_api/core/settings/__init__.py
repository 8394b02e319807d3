"""Domain-specific configuration models."""

from public_api.core.settings.server_config import (
    DEFAULT_GRPC_ADDRESS,
    DEFAULT_HTTP_ADDRESS,
    BaseServerConfig,
    NullableStr,
    ServerConfig,
    ServicesConfig,
    TLSConfig,
)

__all__ = [
    "DEFAULT_GRPC_ADDRESS",
    "DEFAULT_HTTP_ADDRESS",
    "BaseServerConfig",
    "NullableStr",
    "ServerConfig",
    "ServicesConfig",
    "TLSConfig",
]
