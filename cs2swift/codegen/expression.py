"""
Expression generation for C# to Swift transpilation.

This module re-renders the small expression grammar found in field
initializers: literals, identifiers, member access, invocations, casts,
this and parentheses. It is not a general expression compiler; anything
outside that grammar becomes a tagged nil placeholder.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from .base import BaseGenerator
from ..frontend.nodes import (
    Expression,
    BoolLiteral,
    NumericLiteral,
    StringLiteral,
    NullLiteral,
    ThisReference,
    Identifier,
    MemberAccess,
    Invocation,
    Cast,
    Parenthesized,
    UnsupportedExpression,
)


class ExpressionGenerator(BaseGenerator):
    """
    Generates Swift code from C# expression nodes.

    Supported:
    - true/false/null literals (null -> nil)
    - Numeric literals (verbatim)
    - String literals (verbatim strings -> multi-line string literals)
    - Identifiers and member access
    - Invocations
    - Casts (as <C# type text>; the type is not remapped)
    - this (-> self) and parenthesized expressions
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        super().__init__(ctx)

    # =========================================================================
    # MAIN DISPATCH
    # =========================================================================

    def generate(self, expr: Optional[Expression]) -> Optional[str]:
        """Generate Swift expression from a node.

        Args:
            expr: The expression node, or None

        Returns:
            The Swift code string, or None when there is no expression
        """
        if expr is None:
            return None

        if isinstance(expr, BoolLiteral):
            return 'true' if expr.value else 'false'
        elif isinstance(expr, NumericLiteral):
            return expr.text
        elif isinstance(expr, StringLiteral):
            return self.generate_string_literal(expr)
        elif isinstance(expr, MemberAccess):
            return f'{self.generate(expr.expression)}.{expr.name}'
        elif isinstance(expr, Identifier):
            return expr.name
        elif isinstance(expr, Invocation):
            return self.generate_invocation(expr)
        elif isinstance(expr, Cast):
            return f'{self.generate(expr.expression)} as {expr.type_text}'
        elif isinstance(expr, NullLiteral):
            return 'nil'
        elif isinstance(expr, ThisReference):
            return 'self'
        elif isinstance(expr, Parenthesized):
            return f'({self.generate(expr.expression)})'

        return self.generate_unsupported(expr)

    # =========================================================================
    # SPECIFIC KINDS
    # =========================================================================

    def generate_string_literal(self, lit: StringLiteral) -> str:
        """Generate Swift code for a string literal.

        Regular literals share C#'s escape syntax and are kept as written.
        Verbatim literals (@"...") become multi-line literals holding the
        literal's value.
        """
        if lit.is_verbatim:
            return '"""\n' + lit.value_text + '\n"""'
        return lit.text

    def generate_invocation(self, inv: Invocation) -> str:
        args = ', '.join(self.generate(a) for a in inv.arguments)
        return f'{self.generate(inv.expression)}({args})'

    def generate_unsupported(self, expr: Expression) -> str:
        kind = expr.kind if isinstance(expr, UnsupportedExpression) else type(expr).__name__
        self.diagnostics.error(f'Unhandled expression kind {kind}')
        return f'nil/*E:{kind}*/'
