import os
from types import MappingProxyType
from typing import Any, Mapping

from dotenv import load_dotenv
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveFloat,
    PositiveInt,
    field_serializer,
    field_validator,
)

from ._utils.constants import (
    APPLICATION_JSON,
    ENV_CONNECT_TIMEOUT,
    ENV_HTTP2,
    ENV_TIMEOUT,
    ENV_VERIFY_TLS,
    HEADER_ACCEPT,
)


class ClientConfig(BaseModel):
    """Network and TLS settings shared by every request a client sends.

    Instances are immutable; build a new one (or use ``model_copy(update=...)``)
    to get different settings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout: PositiveFloat = 20.0
    connect_timeout: PositiveFloat = 5.0
    keepalive_expiry: PositiveFloat = 90.0
    max_connections: PositiveInt = 16
    max_keepalive_connections: PositiveInt = 16
    http2: bool = True
    # Skipping certificate verification trusts any server; keep it explicit.
    verify_tls: bool = True
    follow_redirects: bool = True
    default_headers: Mapping[str, str] = Field(
        default_factory=lambda: {HEADER_ACCEPT: APPLICATION_JSON},
        validate_default=True,
    )

    @field_validator("default_headers", mode="after")
    @classmethod
    def freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        # read-only view over a private copy
        return MappingProxyType(dict(value))

    @field_serializer("default_headers")
    def dump_headers(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def __hash__(self) -> int:
        return hash(
            tuple(
                (
                    name,
                    frozenset(value.items()) if isinstance(value, Mapping) else value,
                )
                for name, value in self.__dict__.items()
            )
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """Build a configuration from ``RESTFUL_*`` environment variables.

        A ``.env`` file in the working directory is loaded first. Variables that
        are not set keep their defaults; keyword overrides win over both.
        """
        load_dotenv()

        env_fields = {
            "timeout": ENV_TIMEOUT,
            "connect_timeout": ENV_CONNECT_TIMEOUT,
            "verify_tls": ENV_VERIFY_TLS,
            "http2": ENV_HTTP2,
        }
        values: dict[str, Any] = {
            name: os.environ[var] for name, var in env_fields.items() if var in os.environ
        }
        values.update(overrides)
        return cls(**values)
