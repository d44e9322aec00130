"""
Rendering of Swift declaration trees to source text.
"""

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext

from .base import BaseGenerator
from .swift_nodes import (
    SwiftMember,
    SwiftField,
    SwiftMethod,
    SwiftTypeDeclaration,
)


FILE_HEADER = '// This file was generated by cs2swift'


class SwiftRenderer(BaseGenerator):
    """Renders SwiftTypeDeclaration trees as Swift source files."""

    def __init__(self, ctx: 'CodeGenerationContext'):
        super().__init__(ctx)

    def render_file(self, decl: SwiftTypeDeclaration) -> str:
        """Render a declaration as the full contents of its .swift file."""
        return FILE_HEADER + '\n' + self.render_declaration(decl)

    def render_declaration(self, decl: SwiftTypeDeclaration) -> str:
        lines = [self.render_header(decl) + ' {']
        self._ctx.indent_level += 1
        for member in decl.members:
            lines.extend(self.render_member(member))
        self._ctx.indent_level -= 1
        lines.append('}')
        return '\n'.join(lines) + '\n'

    def render_header(self, decl: SwiftTypeDeclaration) -> str:
        header = f'{decl.keyword} {decl.name}'
        if decl.inherits:
            header += ' : ' + ', '.join(decl.inherits)
        return header

    def render_member(self, member: SwiftMember) -> List[str]:
        if isinstance(member, SwiftField):
            return self.render_field(member)
        if isinstance(member, SwiftMethod):
            return self.render_method(member)
        return []

    def render_field(self, prop: SwiftField) -> List[str]:
        indent = self._ctx.indent()
        lines = []
        if prop.docs:
            lines.append(f'{indent}/// {prop.docs}')
        suffix = '?' if prop.is_optional else ''
        init = f' = {prop.initializer}' if prop.initializer is not None else ''
        lines.append(f'{indent}{prop.access}{prop.keyword} {prop.name}: {prop.type_name}{suffix}{init}')
        return lines

    def render_method(self, method: SwiftMethod) -> List[str]:
        indent = self._ctx.indent()
        lines = []
        if method.docs:
            lines.append(f'{indent}/// {method.docs}')
        params = ', '.join(f'{p.name}: {p.type_name}' for p in method.parameters)
        returns = f' -> {method.return_type}' if method.return_type is not None else ''
        lines.append(f'{indent}{method.access}{method.slot}func {method.name}({params}){returns} {{')
        lines.append(f'{indent}}}')
        return lines
