"""
Front-end boundary for the C# to Swift transpiler.

This module provides the resolved node model and the loader for the
front end's JSON output.
"""

from .nodes import (
    # Symbols
    TypeKind,
    Accessibility,
    ResolvedType,
    Trivia,
    SINGLE_LINE_DOC_TRIVIA,
    MULTI_LINE_DOC_TRIVIA,
    # Expressions
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
    # Members
    Member,
    VariableDeclarator,
    FieldDeclaration,
    Parameter,
    MethodDeclaration,
    UnsupportedMember,
    # Declarations
    DeclarationKind,
    TypeDeclaration,
    NamespaceDeclaration,
    CompilationUnit,
    # Results
    WorkspaceDiagnosticKind,
    WorkspaceDiagnostic,
    DiagnosticSeverity,
    CompilationDiagnostic,
    Compilation,
    Project,
)
from .loader import (
    DumpLoader,
    FrontEndError,
    is_valid_package_name,
    load_project,
    load_project_from_string,
)

__all__ = [
    'TypeKind',
    'Accessibility',
    'ResolvedType',
    'Trivia',
    'SINGLE_LINE_DOC_TRIVIA',
    'MULTI_LINE_DOC_TRIVIA',
    'Expression',
    'BoolLiteral',
    'NumericLiteral',
    'StringLiteral',
    'NullLiteral',
    'ThisReference',
    'Identifier',
    'MemberAccess',
    'Invocation',
    'Cast',
    'Parenthesized',
    'UnsupportedExpression',
    'Member',
    'VariableDeclarator',
    'FieldDeclaration',
    'Parameter',
    'MethodDeclaration',
    'UnsupportedMember',
    'DeclarationKind',
    'TypeDeclaration',
    'NamespaceDeclaration',
    'CompilationUnit',
    'WorkspaceDiagnosticKind',
    'WorkspaceDiagnostic',
    'DiagnosticSeverity',
    'CompilationDiagnostic',
    'Compilation',
    'Project',
    'DumpLoader',
    'FrontEndError',
    'is_valid_package_name',
    'load_project',
    'load_project_from_string',
]
