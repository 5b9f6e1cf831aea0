# -*- coding: utf-8 -*-
"""Resolution of the API key and URL a client is built from.

Precedence is explicit argument, then environment, then the production default.
"""

import logging
import os
from dataclasses import dataclass, field

from .client import VezorClient
from .exceptions import ConfigurationError

API_KEY_ENV = "VEZOR_API_KEY"
API_URL_ENV = "VEZOR_API_URL"
DEFAULT_API_URL = "https://api.vezor.io"


@dataclass(frozen=True)
class VezorConfig:
    api_key: str = field(repr=False)
    api_url: str = DEFAULT_API_URL

    def client(self):
        return VezorClient(self.api_url, self.api_key)


def resolve_config(api_key=None, api_url=None, environ=None):
    """
    Build a VezorConfig from explicit values falling back to the environment.

    :param api_key: explicit API key, wins over VEZOR_API_KEY when not None
    :param api_url: explicit API URL, wins over VEZOR_API_URL when not None
    :param environ: mapping to read instead of os.environ
    :return: VezorConfig
    """
    if environ is None:
        environ = os.environ

    key = environ.get(API_KEY_ENV, "")
    if api_key is not None:
        key = api_key
    if not key:
        raise ConfigurationError(
            "Missing API Key",
            "The provider requires an API key. Set it in the provider configuration or "
            f"via the {API_KEY_ENV} environment variable.")

    url = DEFAULT_API_URL
    if environ.get(API_URL_ENV):
        url = environ[API_URL_ENV]
    if api_url is not None:
        url = api_url

    logging.getLogger(__name__).debug(f"Using Vezor API at {url}")
    return VezorConfig(api_key=key, api_url=url)


__all__ = ["VezorConfig", "resolve_config", "API_KEY_ENV", "API_URL_ENV", "DEFAULT_API_URL"]
