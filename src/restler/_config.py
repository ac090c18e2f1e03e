from os import environ as env
from typing import Optional

from pydantic import BaseModel, field_validator

from ._utils.constants import (
    DEFAULT_TIMEOUT,
    ENV_BASE_URL,
    ENV_DISABLE_SSL_VERIFY,
    ENV_TIMEOUT,
)
from .models.errors import BaseUrlMissingError


class Config(BaseModel):
    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    follow_redirects: bool = True

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(
        cls,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "Config":
        """Build a configuration, falling back to environment variables.

        Explicit arguments take precedence over ``RESTLER_BASE_URL``,
        ``RESTLER_TIMEOUT`` and ``RESTLER_DISABLE_SSL_VERIFY``.

        Raises:
            BaseUrlMissingError: If no base URL is available.
        """
        base_url_value = base_url or env.get(ENV_BASE_URL)
        if not base_url_value:
            raise BaseUrlMissingError()

        timeout_value = timeout if timeout is not None else env.get(ENV_TIMEOUT)
        disable_ssl = env.get(ENV_DISABLE_SSL_VERIFY, "").lower() in ("1", "true", "yes")

        return cls(
            base_url=base_url_value,
            timeout=timeout_value if timeout_value is not None else DEFAULT_TIMEOUT,  # type: ignore[arg-type]
            verify_ssl=not disable_ssl,
        )
