# -*- coding: utf-8 -*-
"""Immutable snapshots of the objects returned by the Vezor API.

Fields mirror the JSON wire names. Missing or null fields decode to their
empty value; a field of the wrong type raises ``ValueError`` which the client
surfaces as a :class:`vezor_secrets.exceptions.DecodeError`.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, List

import pytz
from dateutil import parser


def _object(data, what):
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object for {what}, got {type(data).__name__}")
    return data


def _str(data, key):
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string")
    return value


def _int(data, key):
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid count or version
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field '{key}' must be an integer")
    return value


def _str_map(data, key):
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(isinstance(v, str) for v in value.values()):
        raise ValueError(f"field '{key}' must be a map of strings")
    return dict(value)


def _timestamp(value):
    if not value:
        return None
    parsed = parser.isoparse(value)
    if parsed.tzinfo is None:
        parsed = pytz.utc.localize(parsed)
    return parsed


@dataclass(frozen=True)
class Secret:
    id: str
    key_name: str
    value: str = field(default="", repr=False)
    description: str = ""
    tags: Dict[str, str] = field(default_factory=dict)
    version: int = 0
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data):
        data = _object(data, "secret")
        return cls(id=_str(data, "id"),
                   key_name=_str(data, "key_name"),
                   value=_str(data, "value"),
                   description=_str(data, "description"),
                   tags=_str_map(data, "tags"),
                   version=_int(data, "version"),
                   created_at=_str(data, "created_at"),
                   updated_at=_str(data, "updated_at"))

    @property
    def created(self):
        return _timestamp(self.created_at)

    @property
    def updated(self):
        return _timestamp(self.updated_at)


@dataclass(frozen=True)
class Group:
    """A named, server side tag query. It holds no secret ids itself."""
    id: str
    name: str
    description: str = ""
    tags: Dict[str, str] = field(default_factory=dict)
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data):
        data = _object(data, "group")
        return cls(id=_str(data, "id"),
                   name=_str(data, "name"),
                   description=_str(data, "description"),
                   tags=_str_map(data, "tags"),
                   created_at=_str(data, "created_at"),
                   updated_at=_str(data, "updated_at"))

    @property
    def created(self):
        return _timestamp(self.created_at)

    @property
    def updated(self):
        return _timestamp(self.updated_at)


@dataclass(frozen=True)
class GroupSecrets:
    group: str
    tags: Dict[str, str] = field(default_factory=dict)
    secrets: Dict[str, str] = field(default_factory=dict, repr=False)
    count: int = 0

    @classmethod
    def from_dict(cls, data):
        data = _object(data, "group secrets")
        return cls(group=_str(data, "group"),
                   tags=_str_map(data, "tags"),
                   secrets=_str_map(data, "secrets"),
                   count=_int(data, "count"))


@dataclass(frozen=True)
class SecretsList:
    secrets: List[Secret] = field(default_factory=list)
    total: int = 0

    @classmethod
    def from_dict(cls, data):
        data = _object(data, "secrets list")
        items = data.get("secrets")
        if items is None:
            items = []
        if not isinstance(items, list):
            raise ValueError("field 'secrets' must be a list")
        return cls(secrets=[Secret.from_dict(item) for item in items],
                   total=_int(data, "total"))


def error_message(body, text):
    """Message for a failed call, the JSON ``error`` field or else the raw body."""
    try:
        payload = json.loads(body)
    except ValueError:
        return text
    if isinstance(payload, dict):
        message = payload.get("error")
        if isinstance(message, str) and message:
            return message
    return text


__all__ = ["Secret", "Group", "GroupSecrets", "SecretsList", "error_message"]
