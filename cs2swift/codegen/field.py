"""
Field generation for C# to Swift transpilation.

This module turns one C# field declaration into one Swift stored property
per declared variable.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .expression import ExpressionGenerator
    from .type_converter import TypeConverter

from .base import BaseGenerator
from .docs import get_docs
from .swift_nodes import SwiftField
from ..frontend.nodes import FieldDeclaration
from ..type_system import NIL


class FieldGenerator(BaseGenerator):
    """
    Generates Swift stored properties from C# field declarations.

    Readonly fields become let, others var; static fields get the static
    prefix. Only readonly fields keep their source initializer. Every other
    field is initialized with the zero value of its type, since the
    assignments that would set it up live in constructors, which are not
    translated.
    """

    def __init__(
        self,
        ctx: 'CodeGenerationContext',
        type_converter: 'TypeConverter',
        expr_generator: 'ExpressionGenerator',
    ):
        """
        Initialize the field generator.

        Args:
            ctx: The code generation context
            type_converter: The type converter
            expr_generator: The expression generator for initializers
        """
        super().__init__(ctx)
        self._type_converter = type_converter
        self._expr = expr_generator

    @staticmethod
    def storage_keyword(is_readonly: bool, is_static: bool) -> str:
        keyword = 'let' if is_readonly else 'var'
        return f'static {keyword}' if is_static else keyword

    def generate(self, field: FieldDeclaration) -> List[SwiftField]:
        """Generate one Swift property per variable, in declaration order."""
        docs = get_docs(field.leading_trivia)
        type_name = self._type_converter.swift_type(field.type)
        keyword = self.storage_keyword(field.is_readonly, field.is_static)

        properties = []
        for variable in field.variables:
            # The source initializer is translated even when it is replaced
            # below so that unsupported expressions are still reported.
            init = self._expr.generate(variable.initializer)
            if not field.is_readonly:
                init = self._type_converter.default_value(field.type)
            properties.append(SwiftField(
                name=variable.name,
                type_name=type_name,
                keyword=keyword,
                access=self.access_modifier(variable.accessibility),
                is_optional=init == NIL,
                initializer=init,
                docs=docs,
            ))
        return properties
