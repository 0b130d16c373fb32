import dataclasses
import datetime
import numbers
from collections.abc import Iterable, Mapping
from typing import Any, Dict, Optional, Tuple

# Value types, including Decimal and Fraction through numbers.Number
_PRIMITIVES = (type(None), numbers.Number, str, bytes, bytearray,
               datetime.date, datetime.time, datetime.timedelta)


def is_collection_type(tp: type, *, ignore_string=True) -> bool:
    """Whether instances of `tp` are iterable collections.

    `str` counts as one only when `ignore_string` is false.
    """
    if issubclass(tp, str):
        return not ignore_string

    return issubclass(tp, Iterable)


def is_collection(obj: Any, *, ignore_string=True) -> bool:
    return is_collection_type(type(obj), ignore_string=ignore_string)


def to_iterable(obj: Any, *, ignore_string=True) -> Tuple[Iterable, bool]:
    """
    Adapt any value to an iterable.

    Returns the value itself if it already is a collection, otherwise a
    one-element tuple holding it, together with whether it was a collection.
    """
    if is_collection(obj, ignore_string=ignore_string):
        return obj, True

    return (obj,), False


def get_properties(obj: Any) -> Optional[Dict[str, Any]]:
    """
    Public readable attributes of a structured value, or None for primitives.
    """
    if isinstance(obj, _PRIMITIVES):
        return None

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, tuple) and hasattr(obj, '_fields'):
        return obj._asdict()
    if isinstance(obj, Mapping):
        return {str(k): v for k, v in obj.items()}

    properties = {}
    if hasattr(obj, '__dict__'):
        properties.update((k, v) for k, v in vars(obj).items()
                          if not k.startswith('_'))

    for name in dir(type(obj)):
        if not name.startswith('_') and isinstance(getattr(type(obj), name, None), property):
            properties[name] = getattr(obj, name)

    return properties
