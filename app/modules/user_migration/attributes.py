"""Attribute normalization for migrated users.

Maps legacy user pool attributes to the flat name/value profile the new
pool expects. Attribute names are passed through unchanged; only the
provider-internal attributes are dropped.
"""

from typing import Any, Iterable, Mapping, Tuple, Union

from modules.user_migration.models import NormalizedProfile

# Provider-internal attributes that must not be copied to the new pool
EXCLUDED_ATTRIBUTES = frozenset(
    {
        "sub",
        "cognito:user_status",
        "cognito:mfa_enabled",
    }
)

LegacyAttribute = Union[Tuple[str, Any], Mapping[str, Any]]


def _pair(attribute: LegacyAttribute) -> Tuple[str, Any]:
    if isinstance(attribute, Mapping):
        return attribute["Name"], attribute.get("Value", "")
    name, value = attribute
    return name, value


def normalize(legacy_attributes: Iterable[LegacyAttribute]) -> NormalizedProfile:
    """Build the normalized profile from legacy attributes.

    Accepts (name, value) pairs or Cognito {"Name": ..., "Value": ...}
    entries. Pure: no network or state access.

    Args:
        legacy_attributes: attributes in the order the legacy pool returned them

    Returns:
        Mapping of attribute name to string value without internal attributes
    """
    profile: NormalizedProfile = {}
    for attribute in legacy_attributes:
        name, value = _pair(attribute)
        if name in EXCLUDED_ATTRIBUTES:
            continue
        profile[name] = value if isinstance(value, str) else str(value)
    return profile
