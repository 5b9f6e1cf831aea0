# -*- coding: utf-8 -*-
"""
Read-only data sources over the Vezor client.

vezor_secret  - a single secret picked by name and required tags
vezor_group   - a group's metadata plus the secrets its saved query resolves to

Each reader takes a client and its plain inputs and returns a plain result, or
raises DataSourceError carrying a short summary and a detail line naming what
was being read.
"""

import logging
from dataclasses import dataclass, field

from .exceptions import DataSourceError, VezorError


@dataclass(frozen=True)
class SecretData:
    id: str
    name: str
    value: str = field(repr=False)
    description: str
    tags: dict
    version: int


@dataclass(frozen=True)
class GroupData:
    id: str
    name: str
    description: str
    tags: dict
    secrets: dict = field(repr=False)
    secret_count: int


def read_secret(client, name, tags):
    try:
        secret = client.find_secret(name, tags)
    except VezorError as e:
        raise DataSourceError("Unable to Read Secret",
                              f"Unable to read secret '{name}': {e}") from e

    logging.getLogger(__name__).info(f"Read secret {secret.key_name} version {secret.version}")
    return SecretData(id=secret.id,
                      name=secret.key_name,
                      value=secret.value,
                      description=secret.description,
                      tags=dict(secret.tags),
                      version=secret.version)


def read_group(client, name):
    try:
        group = client.get_group(name)
    except VezorError as e:
        raise DataSourceError("Unable to Read Group",
                              f"Unable to read group '{name}': {e}") from e

    try:
        group_secrets = client.pull_group_secrets(name)
    except VezorError as e:
        raise DataSourceError("Unable to Pull Group Secrets",
                              f"Unable to pull secrets for group '{name}': {e}") from e

    logging.getLogger(__name__).info(
        f"Read group {group.name} with {group_secrets.count} secrets")
    return GroupData(id=group.id,
                     name=group.name,
                     description=group.description,
                     tags=dict(group.tags),
                     secrets=dict(group_secrets.secrets),
                     secret_count=group_secrets.count)


DATA_SOURCES = {
    "vezor_secret": read_secret,
    "vezor_group": read_group,
}


__all__ = ["SecretData", "GroupData", "read_secret", "read_group", "DATA_SOURCES"]
