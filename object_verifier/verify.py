from collections.abc import Mapping
from typing import Union
from .type_tags import TypeTag, coerce_type_tag, is_type


# Returned instead of the verified dict. Compare with `is`, an empty result ({}) is falsy as well.
VERIFICATION_FAILED = False


def normalize_config(config: Mapping) -> dict:
    if not isinstance(config, Mapping):
        raise ValueError(f"'config' must be a mapping of property name to type tag. Got '{type(config)}' instead")
    return {key: coerce_type_tag(tag) for key, tag in config.items()}


def verify_object_properties(data: Mapping, config: Mapping, require_truthy: bool = True) -> Union[dict, bool]:
    """
    Build a verified copy of 'data' holding exactly the properties named in 'config'.

    Rules per property:
        1. Missing from data: filled with '' when the expected tag is String, None otherwise.
        2. Present: copied if its type tag matches the expected one. With require_truthy (default)
           the value must also be truthy, so 0, '' and False are rejected even for the right type.

    Returns the new dict, or VERIFICATION_FAILED as soon as one present property does not match.
    The failing property is not reported, use find_failing_properties for that.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"'data' must be a mapping. Got '{type(data)}' instead")
    expected_tags = normalize_config(config)

    verified = {}
    for key, expected in expected_tags.items():
        if key not in data:
            verified[key] = '' if expected is TypeTag.STRING else None
            continue

        if not is_type(expected, data[key], require_truthy):
            return VERIFICATION_FAILED
        verified[key] = data[key]

    return verified


def find_failing_properties(data: Mapping, config: Mapping, require_truthy: bool = True) -> list[str]:
    '''Names of the present properties that fail their type check, in config order.'''
    if not isinstance(data, Mapping):
        raise ValueError(f"'data' must be a mapping. Got '{type(data)}' instead")
    expected_tags = normalize_config(config)

    return [
        key for key, expected in expected_tags.items()
        if key in data and not is_type(expected, data[key], require_truthy)
    ]
