"""
Type conversion utilities for code generation.

This module provides the TypeConverter class that binds the pure type
mappings to the run's diagnostics aggregator.
"""

from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from .base import BaseGenerator
from ..frontend.nodes import ResolvedType
from ..type_system import (
    swift_type_name,
    swift_default_value,
    is_void_type,
    is_root_object_type,
)


class TypeConverter(BaseGenerator):
    """
    Handles C# to Swift type conversions.

    This class provides:
    - Swift type names for resolved types
    - Zero values for fields whose initializer is not kept
    - Inheritance lists for type headers
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        super().__init__(ctx)

    def swift_type(self, type_symbol: Optional[ResolvedType]) -> str:
        """Convert a resolved C# type to its Swift name."""
        return swift_type_name(type_symbol, self.diagnostics)

    def default_value(self, type_symbol: Optional[ResolvedType]) -> str:
        """Get the Swift zero value for a resolved C# type."""
        return swift_default_value(type_symbol, self.diagnostics)

    def return_type(self, type_symbol: Optional[ResolvedType]) -> Optional[str]:
        """Get the Swift return type, or None for void methods."""
        if is_void_type(type_symbol):
            return None
        return self.swift_type(type_symbol)

    def inheritance_list(self, symbol: ResolvedType, include_base: bool) -> List[str]:
        """Get the Swift names of a type's base class and interfaces.

        Args:
            symbol: The declared type symbol
            include_base: Whether the base type is listed (classes only);
                System.Object is never listed

        Returns:
            Swift type names, base type first, then interfaces in order
        """
        names = []
        base = symbol.base_type
        if include_base and base is not None and not is_root_object_type(base):
            names.append(self.swift_type(base))
        for interface in symbol.interfaces:
            names.append(self.swift_type(interface))
        return names
