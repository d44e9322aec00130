"""
Swift code generator.

Wires the specialized generators together and exposes the per-declaration
entry points used by the driver.
"""

from typing import Optional

from ..frontend.nodes import TypeDeclaration
from ..type_system import ACCESS_POLICY_OPEN
from .context import CodeGenerationContext
from .declaration import DeclarationGenerator
from .diagnostics import TranspilerDiagnostics
from .expression import ExpressionGenerator
from .field import FieldGenerator
from .function import FunctionGenerator
from .renderer import SwiftRenderer
from .swift_nodes import SwiftTypeDeclaration
from .type_converter import TypeConverter


class SwiftCodeGenerator:
    """
    Generates Swift source for C# type declarations.

    A generator keeps per-declaration state (indentation, current type) in
    its context, so concurrent callers should each use their own generator.
    Generators of one run share the run's diagnostics aggregator.
    """

    def __init__(
        self,
        diagnostics: Optional[TranspilerDiagnostics] = None,
        access_policy: str = ACCESS_POLICY_OPEN,
    ):
        self._ctx = CodeGenerationContext.create(diagnostics, access_policy)
        self.type_converter = TypeConverter(self._ctx)
        self.expr_generator = ExpressionGenerator(self._ctx)
        self.field_generator = FieldGenerator(self._ctx, self.type_converter, self.expr_generator)
        self.func_generator = FunctionGenerator(self._ctx, self.type_converter)
        self.decl_generator = DeclarationGenerator(
            self._ctx, self.type_converter, self.field_generator, self.func_generator,
        )
        self.renderer = SwiftRenderer(self._ctx)

    @property
    def diagnostics(self) -> TranspilerDiagnostics:
        return self._ctx.diagnostics

    def swift_name(self, decl: TypeDeclaration) -> str:
        return self.decl_generator.swift_name(decl)

    def translate(self, decl: TypeDeclaration) -> Optional[SwiftTypeDeclaration]:
        """Build the Swift declaration tree, or None if decl is not emitted."""
        return self.decl_generator.generate(decl)

    def render(self, swift_decl: SwiftTypeDeclaration) -> str:
        """Render a Swift declaration tree as .swift file contents."""
        return self.renderer.render_file(swift_decl)

    def generate(self, decl: TypeDeclaration) -> Optional[str]:
        """Generate the .swift file contents, or None if decl is not emitted."""
        swift_decl = self.translate(decl)
        if swift_decl is None:
            return None
        return self.render(swift_decl)
