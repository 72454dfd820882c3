"""
Client configuration for Shopify REST Methods Library.

A ClientConfig is built once, validated, and handed to the client. It is
frozen so a single client can be shared between threads.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

from .constants import (
    DEFAULT_API_VERSION,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    ENV_VARS,
    ERROR_MESSAGES,
    Headers,
)
from .exceptions import AuthenticationError, ValidationError
from .utils import normalize_shop_domain, join_path


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for one shop.

    Attributes:
        shop_name: Shop name or domain (e.g. 'fooshop' or 'fooshop.myshopify.com')
        access_token: Admin API access token
        api_key: Private app API key (used with password when no token is given)
        password: Private app password
        api_version: API version, or None/'' for the unversioned admin path
        timeout: Request timeout in seconds
        user_agent: User-Agent header value
        enable_logging: Enable request/response logging
        logger: Logger to use instead of the module logger
    """
    shop_name: str
    access_token: Optional[str] = None
    api_key: Optional[str] = None
    password: Optional[str] = None
    api_version: Optional[str] = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    enable_logging: bool = True
    logger: Optional[logging.Logger] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if not self.shop_name or not self.shop_name.strip():
            raise ValidationError(ERROR_MESSAGES['empty_shop'], field="shop_name")
        object.__setattr__(self, "shop_name", normalize_shop_domain(self.shop_name))

        if not self.access_token and not (self.api_key and self.password):
            raise AuthenticationError(
                f"{ERROR_MESSAGES['missing_credentials']}: "
                f"access_token (or {ENV_VARS['access_token']}) or "
                f"api_key and password (or {ENV_VARS['api_key']}/{ENV_VARS['password']})"
            )

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """
        Build a configuration from environment variables (and a .env file).

        Explicit keyword arguments take precedence over the environment.
        """
        load_dotenv()

        values = {
            "shop_name": os.getenv(ENV_VARS['shop_name'], ""),
            "access_token": os.getenv(ENV_VARS['access_token']),
            "api_key": os.getenv(ENV_VARS['api_key']),
            "password": os.getenv(ENV_VARS['password']),
            "api_version": os.getenv(ENV_VARS['api_version'], DEFAULT_API_VERSION),
            "timeout": float(os.getenv(ENV_VARS['timeout'], str(DEFAULT_TIMEOUT))),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    @property
    def base_url(self) -> str:
        return f"https://{self.shop_name}"

    @property
    def path_prefix(self) -> str:
        """'admin/api/<version>', or 'admin' when no version is configured."""
        if self.api_version:
            return join_path("admin", "api", self.api_version)
        return "admin"

    @property
    def auth(self) -> Optional[Tuple[str, str]]:
        """Basic auth pair for private apps; None when a token is used."""
        if self.access_token:
            return None
        return (self.api_key, self.password)

    def default_headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            **Headers.DEFAULT_HEADERS,
        }
        if self.access_token:
            headers[Headers.ACCESS_TOKEN] = self.access_token
        return headers

    def url_for(self, path: str) -> str:
        """Absolute URL for a path relative to the admin prefix."""
        return f"{self.base_url}/{join_path(self.path_prefix, path)}"
