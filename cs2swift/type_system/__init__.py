"""
Types module for the C# to Swift transpiler.

This module provides the type, default value and accessibility mappings.
"""

from .mappings import (
    swift_type_name,
    swift_default_value,
    swift_access_modifier,
    is_void_type,
    is_root_object_type,
    CSHARP_TO_SWIFT_MAP,
    DEFAULT_VALUES,
    ANY_OBJECT,
    NIL,
    ACCESS_POLICY_OPEN,
    ACCESS_POLICY_STRICT,
    ACCESS_POLICIES,
)

__all__ = [
    'swift_type_name',
    'swift_default_value',
    'swift_access_modifier',
    'is_void_type',
    'is_root_object_type',
    'CSHARP_TO_SWIFT_MAP',
    'DEFAULT_VALUES',
    'ANY_OBJECT',
    'NIL',
    'ACCESS_POLICY_OPEN',
    'ACCESS_POLICY_STRICT',
    'ACCESS_POLICIES',
]
