"""
Function generation for C# to Swift transpilation.

This module handles the generation of Swift method signatures from C#
method declarations. Bodies are always emitted empty.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .type_converter import TypeConverter

from .base import BaseGenerator
from .docs import get_docs
from .swift_nodes import SwiftMethod, SwiftParameter
from ..frontend.nodes import MethodDeclaration


class FunctionGenerator(BaseGenerator):
    """
    Generates Swift methods from C# method declarations.

    This class handles:
    - Slot qualifiers (static, override, abstract, virtual, final)
    - Parameter lists
    - Return types (omitted for void)
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        type_converter: 'TypeConverter',
    ):
        super().__init__(ctx)
        self._type_converter = type_converter

    def slot_qualifier(self, method: MethodDeclaration) -> str:
        """Get the dispatch qualifier for a method.

        static wins over override, which wins over abstract, then virtual.
        Non-virtual methods are final. Swift has no abstract methods, so the
        qualifier is kept as a comment and reported.
        """
        if method.is_static:
            return 'static '
        if method.is_override:
            return 'override '
        if method.is_abstract:
            return '/*abstract*/ '
        if method.is_virtual:
            return ''
        return 'final '

    def generate(self, method: MethodDeclaration) -> SwiftMethod:
        """Generate a Swift method signature."""
        return_type = self._type_converter.return_type(method.return_type)
        if method.is_abstract:
            self.diagnostics.error('Abstract methods are not supported')

        parameters = [
            SwiftParameter(p.name, self._type_converter.swift_type(p.type))
            for p in method.parameters
        ]
        return SwiftMethod(
            name=method.name,
            parameters=parameters,
            return_type=return_type,
            access=self.access_modifier(method.accessibility),
            slot=self.slot_qualifier(method),
            docs=get_docs(method.leading_trivia),
        )
