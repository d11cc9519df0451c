import os

PORT_ENV = "PORT"
DEFAULT_PORT = "8080"


def get_env(key, fallback):
    """Return the environment value for ``key``, or ``fallback`` if it is not set.

    A variable that is set to an empty string counts as set.
    """
    value = os.environ.get(key)
    if value is None:
        value = fallback
    return value


def resolve_port():
    return get_env(PORT_ENV, DEFAULT_PORT)
