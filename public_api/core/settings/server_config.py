"""Base server configuration."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from public_api.core.exceptions import InvalidConfigurationError

DEFAULT_HTTP_ADDRESS = ":9000"
DEFAULT_GRPC_ADDRESS = ":9001"
MAX_PORT = 65535


def _null_as_empty(value: Any) -> Any:
    """JSON null decodes to an empty string."""
    return "" if value is None else value


def _null_as_empty_block(value: Any) -> Any:
    """JSON null decodes to an empty block."""
    return {} if value is None else value


NullableStr = Annotated[str, BeforeValidator(_null_as_empty)]


class TLSConfig(BaseModel):
    """TLS certificate paths for a listener."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ca_path: NullableStr = Field(default="", alias="caPath")
    cert_path: NullableStr = Field(default="", alias="certPath")
    key_path: NullableStr = Field(default="", alias="keyPath")


class ServerConfig(BaseModel, frozen=True):
    """Single listener settings."""

    address: NullableStr = ""
    tls: TLSConfig | None = None

    @property
    def host(self) -> str:
        """Host part of the address, all interfaces when empty."""
        host, sep, _ = self.address.rpartition(":")
        if not sep:
            host = self.address
        return host.strip("[]") or "0.0.0.0"

    @property
    def port(self) -> int:
        """Port part of the address."""
        _, sep, port = self.address.rpartition(":")
        if not sep or not (port.isascii() and port.isdigit()):
            raise InvalidConfigurationError(
                f"Server address {self.address!r} has no valid port"
            )
        value = int(port)
        if value > MAX_PORT:
            raise InvalidConfigurationError(
                f"Server address {self.address!r} port out of range"
            )
        return value


class ServicesConfig(BaseModel, frozen=True):
    """Listeners run by the base server."""

    grpc: ServerConfig | None = None
    http: ServerConfig | None = None


class BaseServerConfig(BaseModel, frozen=True):
    """Embedded server block."""

    services: Annotated[ServicesConfig, BeforeValidator(_null_as_empty_block)] = Field(
        default_factory=ServicesConfig
    )

    def http_or_default(self) -> ServerConfig:
        """HTTP listener settings, falling back to the default address."""
        return self.services.http or ServerConfig(address=DEFAULT_HTTP_ADDRESS)

    def grpc_or_default(self) -> ServerConfig:
        """gRPC listener settings, falling back to the default address."""
        return self.services.grpc or ServerConfig(address=DEFAULT_GRPC_ADDRESS)
