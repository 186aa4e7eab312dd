from collections.abc import Mapping

from django.utils.crypto import get_random_string

from .exceptions import ConfigurationError


def partition(items, predicate) -> tuple[list, list]:
    """
    Split items into two lists: those matching the predicate and the rest.
    Relative order is preserved in both.
    """
    matching, rest = [], []
    for item in items:
        (matching if predicate(item) else rest).append(item)
    return matching, rest


def random_str(length: int = 16) -> str:
    return get_random_string(length)


def normalize_resolvers(value) -> list:
    """
    Accept a single callable, a single attribute mapping, or a list mixing
    both, and return a flat list of resolvers in registration order.
    """
    if callable(value) or isinstance(value, Mapping):
        return [value]
    if not isinstance(value, (list, tuple)):
        raise ConfigurationError(
            "Resolver option must be a callable, an attribute mapping or a list of them; "
            f"got {type(value).__name__}."
        )
    for item in value:
        if not callable(item) and not isinstance(item, Mapping):
            raise ConfigurationError(
                "Each resolver list value must be a callable or an attribute mapping; "
                f"got {item!r}."
            )
    return list(value)
