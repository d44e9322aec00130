"""
Declaration generation for C# to Swift transpilation.

This module builds Swift class and struct declarations from C# type
declarations, including their inheritance lists and members.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .field import FieldGenerator
    from .function import FunctionGenerator
    from .type_converter import TypeConverter

from .base import BaseGenerator
from .swift_nodes import SwiftTypeDeclaration
from ..frontend.nodes import (
    DeclarationKind,
    TypeDeclaration,
    FieldDeclaration,
    MethodDeclaration,
)


class DeclarationGenerator(BaseGenerator):
    """
    Generates Swift type declarations from C# type declarations.

    Classes list their base class (unless it is System.Object) followed by
    their interfaces; structs list interfaces only. Members other than
    fields and methods are dropped. Interfaces, enums and delegates have
    no Swift counterpart here and yield None.
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        type_converter: 'TypeConverter',
        field_generator: 'FieldGenerator',
        func_generator: 'FunctionGenerator',
    ):
        """
        Initialize the declaration generator.

        Args:
            ctx: The code generation context
            type_converter: The type converter
            field_generator: The field generator
            func_generator: The function generator
        """
        super().__init__(ctx)
        self._type_converter = type_converter
        self._field = field_generator
        self._func = func_generator

    def swift_name(self, decl: TypeDeclaration) -> str:
        """Get the Swift name of a declaration (also its output file stem)."""
        return self._type_converter.swift_type(decl.symbol)

    def generate(self, decl: TypeDeclaration) -> Optional[SwiftTypeDeclaration]:
        """Generate a Swift declaration, or None for kinds that are not emitted."""
        if decl.kind == DeclarationKind.CLASS:
            return self.generate_type(decl, 'class', include_base=True)
        if decl.kind == DeclarationKind.STRUCT:
            return self.generate_type(decl, 'struct', include_base=False)
        return None

    def generate_type(
        self,
        decl: TypeDeclaration,
        keyword: str,
        include_base: bool,
    ) -> SwiftTypeDeclaration:
        name = self.swift_name(decl)

        inherits = []
        if decl.symbol is not None:
            inherits = self._type_converter.inheritance_list(decl.symbol, include_base)

        swift_decl = SwiftTypeDeclaration(keyword=keyword, name=name, inherits=inherits)
        for member in decl.members:
            if isinstance(member, FieldDeclaration):
                swift_decl.members.extend(self._field.generate(member))
            elif isinstance(member, MethodDeclaration):
                swift_decl.members.append(self._func.generate(member))
        return swift_decl
