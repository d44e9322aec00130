"""
Type mappings and conversion utilities for C# to Swift.

This module contains the mappings and functions for converting resolved C#
types to their Swift spellings, the zero values used to initialize fields,
and the Swift access qualifiers for C# accessibility levels.

Every function is deterministic. Unsupported inputs are reported to the
diagnostics sink passed in and answered with a tagged placeholder.
"""

from typing import Optional

from ..frontend.nodes import Accessibility, ResolvedType, TypeKind


# =============================================================================
# TYPE MAPPING CONSTANTS
# =============================================================================

# Swift name for the universal reference type (System.Object, unresolved types)
ANY_OBJECT = 'AnyObject'

# C# System type names with a different Swift spelling. Every other name
# passes through unchanged.
CSHARP_TO_SWIFT_MAP = {
    'Boolean': 'Bool',
    'Byte': 'UInt8',
    'Char': 'Character',
    'IntPtr': 'Int',
    'Object': ANY_OBJECT,
    'Single': 'Float',
}

# Zero values for C# primitive value types
DEFAULT_VALUES = {
    'Boolean': 'false',
    'Byte': '0',
    'Double': '0.0',
    'Single': '0.0',
    'Int16': '0',
    'Int32': '0',
    'Int64': '0',
    'IntPtr': '0',
    'UInt16': '0',
    'UInt32': '0',
    'UInt64': '0',
    'UIntPtr': '0',
}

NIL = 'nil'

# Type kinds whose default is always nil
NIL_DEFAULT_KINDS = (
    TypeKind.POINTER,
    TypeKind.DYNAMIC,
    TypeKind.TYPE_PARAMETER,
    TypeKind.ERROR,
)

ACCESS_POLICY_OPEN = 'open'
ACCESS_POLICY_STRICT = 'strict'
ACCESS_POLICIES = (ACCESS_POLICY_OPEN, ACCESS_POLICY_STRICT)


# =============================================================================
# TYPE CONVERSION FUNCTIONS
# =============================================================================

def swift_type_name(type_symbol: Optional[ResolvedType], diagnostics) -> str:
    """
    Convert a resolved C# type to its Swift name.

    Args:
        type_symbol: The resolved type, or None if resolution failed
        diagnostics: Sink with an error(message) method

    Returns:
        The Swift type name
    """
    if type_symbol is None:
        return ANY_OBJECT

    if type_symbol.kind == TypeKind.ARRAY:
        return f'[{swift_type_name(type_symbol.element_type, diagnostics)}]'

    name = type_symbol.name
    if name in CSHARP_TO_SWIFT_MAP:
        return CSHARP_TO_SWIFT_MAP[name]

    if not name:
        diagnostics.error(f'Symbol {type_symbol} : {type_symbol.kind.value} has no name')
        return ANY_OBJECT

    return name


def swift_default_value(type_symbol: Optional[ResolvedType], diagnostics) -> str:
    """
    Get the Swift zero value for a resolved C# type.

    Args:
        type_symbol: The resolved type, or None if resolution failed
        diagnostics: Sink with an error(message) method

    Returns:
        A Swift literal, or a tagged placeholder for unsupported types
    """
    if type_symbol is None:
        return NIL

    kind = type_symbol.kind
    if kind == TypeKind.ARRAY:
        return '[]'
    if kind in NIL_DEFAULT_KINDS:
        return NIL

    if kind == TypeKind.NAMED:
        name = type_symbol.name
        if name in DEFAULT_VALUES:
            return DEFAULT_VALUES[name]
        if type_symbol.is_reference_type:
            return NIL
        diagnostics.error(f'Unhandled default value for named type: {name}')
        return f'0/*NT:{name}*/'

    diagnostics.error(f'Unhandled default value for type {kind.value}')
    return f'nil/*T:{kind.value}*/'


def swift_access_modifier(
    accessibility: Optional[Accessibility],
    policy: str = ACCESS_POLICY_OPEN,
) -> str:
    """
    Get the Swift access qualifier (with trailing space) for a C# accessibility.

    The open policy only restricts private members; protected and internal
    members become open. The strict policy also spells out internal and
    public.

    Args:
        accessibility: The declared accessibility, or None if unresolved
        policy: 'open' or 'strict'

    Returns:
        The qualifier followed by a space, or an empty string
    """
    if accessibility == Accessibility.PRIVATE:
        return 'private '
    if policy == ACCESS_POLICY_STRICT:
        if accessibility == Accessibility.INTERNAL:
            return 'internal '
        if accessibility == Accessibility.PUBLIC:
            return 'public '
    return ''


def is_void_type(type_symbol: Optional[ResolvedType]) -> bool:
    """Check if a method return type is missing or System.Void."""
    return type_symbol is None or (
        type_symbol.name == 'Void' and type_symbol.namespace == 'System'
    )


def is_root_object_type(type_symbol: Optional[ResolvedType]) -> bool:
    """Check if a base type is System.Object (the implicit root of classes)."""
    return type_symbol is not None and (
        type_symbol.name == 'Object' and type_symbol.namespace == 'System'
    )
