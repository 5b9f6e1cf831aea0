# -*- coding: utf-8 -*-
"""This module implements the Vezor API client

Every call is a single synchronous request. Nothing is cached and nothing is
retried, a failed request or a body that does not decode is raised straight
to the caller.
"""

import json
import logging
import threading
from urllib.parse import quote

import requests

from .exceptions import APIError, DecodeError, InvalidVersionError, NotFoundError, \
    TransportError
from .models import Group, GroupSecrets, Secret, SecretsList, error_message

DEFAULT_TIMEOUT = 30.0

# list page size used when searching for a secret by name
FIND_SECRET_LIMIT = 100

# characters Go's url.PathEscape leaves alone beyond the unreserved set
_PATH_SAFE = "$&+:=@"


def _path_escape(segment):
    return quote(segment, safe=_PATH_SAFE)


def tags_match(secret_tags, required_tags):
    """
    True if every required tag is present on the secret with an identical value.

    Extra tags on the secret are allowed. Keys and values compare case sensitively.

    :param secret_tags: tags of the candidate secret
    :param required_tags: tags the candidate must carry
    :return: bool
    """
    secret_tags = secret_tags or {}
    for key, value in (required_tags or {}).items():
        if key not in secret_tags or secret_tags[key] != value:
            return False
    return True


class VezorClient():

    def __init__(self, base_url, api_key, timeout=DEFAULT_TIMEOUT):
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self.ns = threading.local()

    @property
    def base_url(self):
        return self._base_url

    @property
    def timeout(self):
        return self._timeout

    def _session(self):
        if not hasattr(self.ns, "session"):
            session = requests.Session()
            session.headers.update({
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            })
            self.ns.session = session
        return self.ns.session

    def close(self):
        # sessions of other threads are released with their thread local
        session = getattr(self.ns, "session", None)
        self.ns = threading.local()
        if session is not None:
            session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def __repr__(self):
        return f"VezorClient(base_url={self._base_url!r})"

    def _request(self, method, path, params=None):
        """
        Issue one authenticated request and return the raw response body.

        :param method: HTTP method
        :param path: API path starting with /
        :param params: optional dict of query parameters, encoded in sorted key order
        :return: bytes
        """
        url = f"{self._base_url}{path}"
        if params:
            params = sorted(params.items())
        logging.getLogger(__name__).debug(f"{method} {url}")
        try:
            response = self._session().request(method, url, params=params or None,
                                               timeout=self._timeout)
            body = response.content
        except requests.exceptions.RequestException as e:
            raise TransportError(method, url, e) from e

        if response.status_code >= 400:
            raise APIError(response.status_code, error_message(body, response.text))
        return body

    @staticmethod
    def _decode(body, what, factory):
        try:
            return factory(json.loads(body))
        except (ValueError, TypeError) as e:
            raise DecodeError(what, e) from e

    def get_secret(self, secret_id, version=None):
        """
        Fetch a single secret with its decrypted value.

        :param secret_id: secret identifier
        :param version: optional integer version, latest when None. Anything else
            raises InvalidVersionError before a request is made
        :return: Secret
        """
        params = {}
        if version is not None:
            if isinstance(version, bool) or not isinstance(version, int):
                raise InvalidVersionError(secret_id, version)
            params["version"] = str(version)
        body = self._request("GET", f"/api/v1/secrets/{secret_id}", params)
        return self._decode(body, "secret", Secret.from_dict)

    def list_secrets(self, tags=None, search="", limit=0):
        """
        List secrets filtered by tags. Values are not populated by this endpoint.

        Each tag is sent as a literal query parameter. search is only sent when
        non empty and limit only when positive.

        :return: SecretsList
        """
        params = dict(tags or {})
        if search:
            params["search"] = search
        if limit and limit > 0:
            params["limit"] = str(limit)
        body = self._request("GET", "/api/v1/secrets", params)
        return self._decode(body, "secrets list", SecretsList.from_dict)

    def find_secret(self, name, tags):
        """
        Find a secret by key name and required tags then fetch it with its value.

        The first listed secret whose key name equals name ignoring case and
        whose tags satisfy tags_match wins. Raises NotFoundError without a
        second request when nothing in the page qualifies.

        :return: Secret
        """
        listing = self.list_secrets(tags, name, FIND_SECRET_LIMIT)
        for candidate in listing.secrets:
            if candidate.key_name.lower() == name.lower() and \
                    tags_match(candidate.tags, tags):
                return self.get_secret(candidate.id)
        raise NotFoundError(name, tags)

    def get_group(self, name):
        body = self._request("GET", f"/api/v1/groups/{_path_escape(name)}")
        return self._decode(body, "group", Group.from_dict)

    def pull_group_secrets(self, name):
        """
        Fetch the secrets a group's saved query resolves to. Evaluated server side.

        :return: GroupSecrets
        """
        body = self._request("GET", f"/api/v1/groups/{_path_escape(name)}/secrets",
                             {"format": "json"})
        return self._decode(body, "group secrets", GroupSecrets.from_dict)


__all__ = ["VezorClient", "tags_match", "DEFAULT_TIMEOUT", "FIND_SECRET_LIMIT"]
