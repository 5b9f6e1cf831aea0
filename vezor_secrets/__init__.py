# -*- coding: utf-8 -*-
"""vezor_secrets

Read-only client for the Vezor secrets API. Fetch secrets by id, find them by
name and tags, and pull the secrets a group's saved tag query resolves to.

"""

from __future__ import absolute_import

from vezor_secrets.client import VezorClient, tags_match
from vezor_secrets.config import VezorConfig, resolve_config
from vezor_secrets.datasources import SecretData, GroupData, read_secret, read_group
from vezor_secrets.decorators import InjectSecretString, InjectKeywordedGroupSecrets
from vezor_secrets.exceptions import VezorError, \
    TransportError, \
    APIError, \
    DecodeError, \
    NotFoundError, \
    InvalidVersionError, \
    ConfigurationError, \
    DataSourceError
from vezor_secrets.models import Secret, Group, GroupSecrets, SecretsList
from ._version import __version__

__all__ = ["__version__",
           "VezorClient",
           "tags_match",
           "VezorConfig",
           "resolve_config",
           "Secret",
           "Group",
           "GroupSecrets",
           "SecretsList",
           "SecretData",
           "GroupData",
           "read_secret",
           "read_group",
           "InjectSecretString",
           "InjectKeywordedGroupSecrets",
           "VezorError",
           "TransportError",
           "APIError",
           "DecodeError",
           "NotFoundError",
           "InvalidVersionError",
           "ConfigurationError",
           "DataSourceError"]
