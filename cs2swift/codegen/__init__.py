"""
Code generation module for the C# to Swift transpiler.

This module provides Swift code generation from resolved C# declarations.
"""

from .context import CodeGenerationContext
from .base import BaseGenerator
from .type_converter import TypeConverter
from .docs import get_docs
from .expression import ExpressionGenerator
from .field import FieldGenerator
from .function import FunctionGenerator
from .declaration import DeclarationGenerator
from .swift_nodes import SwiftField, SwiftMethod, SwiftParameter, SwiftTypeDeclaration
from .renderer import SwiftRenderer
from .collector import collect_declarations
from .manifest import generate_package_manifest
from .generator import SwiftCodeGenerator
from .diagnostics import TranspilerDiagnostics

__all__ = [
    'CodeGenerationContext',
    'BaseGenerator',
    'TypeConverter',
    'get_docs',
    'ExpressionGenerator',
    'FieldGenerator',
    'FunctionGenerator',
    'DeclarationGenerator',
    'SwiftField',
    'SwiftMethod',
    'SwiftParameter',
    'SwiftTypeDeclaration',
    'SwiftRenderer',
    'collect_declarations',
    'generate_package_manifest',
    'SwiftCodeGenerator',
    'TranspilerDiagnostics',
]
