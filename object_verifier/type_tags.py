import numbers
from datetime import date
from decimal import Decimal
from enum import Enum
from collections.abc import Mapping


class TypeTag(str, Enum):
    '''Runtime categories a property value can be checked against.'''
    STRING = 'String'
    NUMBER = 'Number'
    BOOLEAN = 'Boolean'
    OBJECT = 'Object'
    ARRAY = 'Array'
    NULL = 'Null'
    FUNCTION = 'Function'
    DATE = 'Date'
    # Python has no undefined value, get_type_tag never returns this. Present keys always fail it.
    UNDEFINED = 'Undefined'


def coerce_type_tag(tag) -> TypeTag:
    '''Accepts a TypeTag or its string value, raises ValueError for anything else.'''
    if isinstance(tag, TypeTag):
        return tag
    try:
        return TypeTag(tag)
    except ValueError:
        allowed = ', '.join(t.value for t in TypeTag)
        raise ValueError(f"Unknown type tag '{tag}'. Expected one of: {allowed}")


def get_type_tag(value) -> TypeTag:
    """
    Returns the type tag of a value.

    Order matters:
        - bool before Number, bool is a subclass of int.
        - Mapping before Function, so callable mappings still read as Object.
        - Function after the concrete types, classes themselves are callable.
    """
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, numbers.Number):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if isinstance(value, date):
        return TypeTag.DATE
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT


def is_truthy(value) -> bool:
    '''JavaScript truthiness: empty lists and dicts are truthy, NaN is not.'''
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, Decimal):
        # Comparing a signaling NaN raises InvalidOperation.
        return not value.is_zero() and not value.is_nan()
    if isinstance(value, numbers.Number):
        # NaN is the only value not equal to itself.
        return value != 0 and value == value
    if isinstance(value, str):
        return value != ''
    return True


def is_type(expected, value, require_truthy: bool = True) -> bool:
    if require_truthy and not is_truthy(value):
        return False
    return get_type_tag(value) == coerce_type_tag(expected)
