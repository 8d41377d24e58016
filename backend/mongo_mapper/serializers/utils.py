"""
Helpers shared by the serializers.
"""
from collections import OrderedDict
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, Callable


def is_keyed(value: Any) -> bool:
    """True for a mapping or a plain keyed object."""
    return isinstance(value, (Mapping, SimpleNamespace))


def is_sequence(value: Any) -> bool:
    """True for the ordered sequences accepted by array fields."""
    return isinstance(value, (list, tuple))


def each_in_map_or_object(value: Any, callback: Callable[[str, Any], Any]) -> dict:
    """
    Apply ``callback(key, item)`` to every entry, preserving keys and order.

    An ``OrderedDict`` stays an ``OrderedDict``; other mappings and keyed
    objects become a plain ``dict``.
    """
    items = value.items() if isinstance(value, Mapping) else vars(value).items()
    result: dict = OrderedDict() if isinstance(value, OrderedDict) else {}
    for key, item in items:
        result[key] = callback(key, item)
    return result


def own_fields(obj: Any) -> dict:
    """Attributes set on the instance itself, in assignment order."""
    return vars(obj)
