"""Decorators for injecting Vezor secrets into functions """

from .config import resolve_config
from .datasources import read_group, read_secret
from .exceptions import DataSourceError


def _default_client(client):
    if client is None:
        client = resolve_config().client()
    return client


class InjectSecretString:
    """Decorator injecting a single secret value found by name and tags"""

    def __init__(self, name, tags, client=None):
        """
        Constructs a decorator to inject a single non-keyworded argument from a secret for a given function.

        :type name: str
        :param name: The key name of the secret

        :type tags: dict
        :param tags: Tags the secret must carry

        :type client: vezor_secrets.VezorClient
        :param client: Client to read with, built from the environment when None
        """

        self.client = _default_client(client)
        self.name = name
        self.tags = dict(tags)

    def __call__(self, func):
        """
        Return a function with the secret value injected as first argument.

        :type func: object
        :param func: The function for injecting a single non-keyworded argument too.
        :return The function with the injected argument.
        """
        secret = read_secret(self.client, self.name, self.tags).value

        def _wrapped_func(*args, **kwargs):
            """
            Internal function to execute wrapped function
            """
            return func(secret, *args, **kwargs)

        return _wrapped_func


class InjectKeywordedGroupSecrets:
    """Decorator injecting keyword arguments from the secrets of a group"""

    def __init__(self, group, client=None, **kwargs):
        """
        Construct a decorator to inject a variable list of keyword arguments to a given function with resolved values
        from the secrets of a group.

        :type group: str
        :param group: The group name

        :type kwargs: dict
        :param kwargs: dictionary mapping original keyword argument of wrapped function to secret name in the group

        :type client: vezor_secrets.VezorClient
        """

        self.client = _default_client(client)
        self.kwarg_map = kwargs
        self.group = group

    def __call__(self, func):
        """
        Return a function with injected keyword arguments from a group.

        :type func: object
        :param func: function for injecting keyword arguments.
        :return The original function with injected keyword arguments
        """

        secrets = read_group(self.client, self.group).secrets

        resolved_kwargs = dict()
        for orig_kwarg in self.kwarg_map:
            secret_name = self.kwarg_map[orig_kwarg]
            try:
                resolved_kwargs[orig_kwarg] = secrets[secret_name]
            except KeyError:
                raise DataSourceError(
                    "Missing Group Secret",
                    "Group '{0}' does not contain secret {1}".format(self.group, secret_name)) from None

        def _wrapped_func(*args, **kwargs):
            """
            Internal function to execute wrapped function
            """
            return func(*args, **resolved_kwargs, **kwargs)

        return _wrapped_func
