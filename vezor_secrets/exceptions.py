# -*- coding: utf-8 -*-

class VezorError(Exception):
    """Base Error class."""


class TransportError(VezorError):
    CUSTOM_ERROR_MESSAGE = "{} {} request failed: {}"

    def __init__(self, method, url, cause):
        super(TransportError, self).__init__(self.CUSTOM_ERROR_MESSAGE.format(method, url, cause))
        self._method = method
        self._url = url
        self._cause = cause

    @property
    def method(self):
        return self._method

    @property
    def url(self):
        return self._url

    @property
    def cause(self):
        return self._cause


class APIError(VezorError):
    CUSTOM_ERROR_MESSAGE = "API error ({}): {}"

    def __init__(self, status_code, message):
        super(APIError, self).__init__(self.CUSTOM_ERROR_MESSAGE.format(status_code, message))
        self._status_code = status_code
        self._message = message

    @property
    def status_code(self):
        return self._status_code

    @property
    def message(self):
        return self._message


class DecodeError(VezorError):
    CUSTOM_ERROR_MESSAGE = "failed to parse {} response: {}"

    def __init__(self, what, cause):
        super(DecodeError, self).__init__(self.CUSTOM_ERROR_MESSAGE.format(what, cause))
        self._what = what
        self._cause = cause

    @property
    def what(self):
        return self._what

    @property
    def cause(self):
        return self._cause


class NotFoundError(VezorError):
    CUSTOM_ERROR_MESSAGE = "secret '{}' not found with specified tags"

    def __init__(self, name, tags=None):
        super(NotFoundError, self).__init__(self.CUSTOM_ERROR_MESSAGE.format(name))
        self._name = name
        self._tags = dict(tags or {})

    @property
    def name(self):
        return self._name

    @property
    def tags(self):
        return self._tags


class InvalidVersionError(VezorError):
    CUSTOM_ERROR_MESSAGE = "secret {} version must be an integer, got {!r}"

    def __init__(self, secret_id, version):
        super(InvalidVersionError, self).__init__(self.CUSTOM_ERROR_MESSAGE.format(secret_id, version))
        self._secret_id = secret_id
        self._version = version

    @property
    def secret_id(self):
        return self._secret_id

    @property
    def version(self):
        return self._version


class ConfigurationError(VezorError):
    CUSTOM_ERROR_MESSAGE = "{}: {}"

    def __init__(self, summary, detail):
        super(ConfigurationError, self).__init__(self.CUSTOM_ERROR_MESSAGE.format(summary, detail))
        self._summary = summary
        self._detail = detail

    @property
    def summary(self):
        return self._summary

    @property
    def detail(self):
        return self._detail


class DataSourceError(VezorError):
    CUSTOM_ERROR_MESSAGE = "{}: {}"

    def __init__(self, summary, detail):
        super(DataSourceError, self).__init__(self.CUSTOM_ERROR_MESSAGE.format(summary, detail))
        self._summary = summary
        self._detail = detail

    @property
    def summary(self):
        return self._summary

    @property
    def detail(self):
        return self._detail
