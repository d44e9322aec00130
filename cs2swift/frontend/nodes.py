"""
Node definitions for the resolved C# compilation.

This module contains the dataclasses that represent what the front end
hands over: resolved type symbols, the syntax containers the collector
walks (compilation units and namespaces), type declarations with their
members, and the small expression grammar used by field initializers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List


# =============================================================================
# SYMBOLS
# =============================================================================

class TypeKind(Enum):
    """Symbol kinds of a resolved type, named as the front end names them."""
    ARRAY = 'ArrayType'
    NAMED = 'NamedType'
    POINTER = 'PointerType'
    FUNCTION_POINTER = 'FunctionPointerType'
    DYNAMIC = 'DynamicType'
    TYPE_PARAMETER = 'TypeParameter'
    ERROR = 'ErrorType'


class Accessibility(Enum):
    """Declared accessibility of a member symbol."""
    NOT_APPLICABLE = 'NotApplicable'
    PRIVATE = 'Private'
    PROTECTED = 'Protected'
    INTERNAL = 'Internal'
    PUBLIC = 'Public'


@dataclass
class ResolvedType:
    """A type symbol as resolved by the front end."""
    name: str
    kind: TypeKind = TypeKind.NAMED
    namespace: str = ''
    is_reference_type: bool = False
    element_type: Optional['ResolvedType'] = None  # For arrays
    base_type: Optional['ResolvedType'] = None
    interfaces: List['ResolvedType'] = field(default_factory=list)
    display: str = ''

    @property
    def qualified_name(self) -> str:
        if self.namespace:
            return f'{self.namespace}.{self.name}'
        return self.name

    def __str__(self) -> str:
        if self.display:
            return self.display
        if self.kind == TypeKind.ARRAY and self.element_type is not None:
            return f'{self.element_type}[]'
        return self.qualified_name or self.kind.value


# =============================================================================
# TRIVIA
# =============================================================================

SINGLE_LINE_DOC_TRIVIA = 'SingleLineDocumentationCommentTrivia'
MULTI_LINE_DOC_TRIVIA = 'MultiLineDocumentationCommentTrivia'


@dataclass
class Trivia:
    """A piece of leading trivia (whitespace, comments, doc comments)."""
    kind: str
    text: str

    @property
    def is_documentation(self) -> bool:
        return self.kind in (SINGLE_LINE_DOC_TRIVIA, MULTI_LINE_DOC_TRIVIA)


# =============================================================================
# EXPRESSIONS
# =============================================================================

@dataclass
class Expression:
    """Base class for initializer expressions."""
    pass


@dataclass
class BoolLiteral(Expression):
    value: bool


@dataclass
class NumericLiteral(Expression):
    text: str


@dataclass
class StringLiteral(Expression):
    """A string literal: source text (with quotes) and its value text."""
    text: str
    value_text: str = ''

    @property
    def is_verbatim(self) -> bool:
        return self.text.startswith('@')


@dataclass
class NullLiteral(Expression):
    pass


@dataclass
class ThisReference(Expression):
    pass


@dataclass
class Identifier(Expression):
    name: str


@dataclass
class MemberAccess(Expression):
    """Represents target.Name."""
    expression: Expression
    name: str


@dataclass
class Invocation(Expression):
    expression: Expression
    arguments: List[Expression] = field(default_factory=list)


@dataclass
class Cast(Expression):
    """Represents (Type)expr; type_text is the source spelling of Type."""
    type_text: str
    expression: Expression


@dataclass
class Parenthesized(Expression):
    expression: Expression


@dataclass
class UnsupportedExpression(Expression):
    """Any expression kind outside the supported grammar."""
    kind: str


# =============================================================================
# MEMBERS
# =============================================================================

@dataclass
class Member:
    """Base class for members of a type declaration."""
    pass


@dataclass
class VariableDeclarator(Member):
    """One variable of a field declaration (int a = 1, b;)."""
    name: str
    accessibility: Optional[Accessibility] = None
    initializer: Optional[Expression] = None


@dataclass
class FieldDeclaration(Member):
    """A field declaration sharing one type and modifier set."""
    type: Optional[ResolvedType]
    variables: List[VariableDeclarator] = field(default_factory=list)
    modifiers: List[str] = field(default_factory=list)
    leading_trivia: List[Trivia] = field(default_factory=list)

    @property
    def is_readonly(self) -> bool:
        return 'readonly' in self.modifiers

    @property
    def is_static(self) -> bool:
        return 'static' in self.modifiers


@dataclass
class Parameter:
    name: str
    type: Optional[ResolvedType] = None


@dataclass
class MethodDeclaration(Member):
    """A method declaration; only its signature is translated."""
    name: str
    return_type: Optional[ResolvedType] = None
    parameters: List[Parameter] = field(default_factory=list)
    accessibility: Optional[Accessibility] = None
    modifiers: List[str] = field(default_factory=list)
    leading_trivia: List[Trivia] = field(default_factory=list)

    @property
    def is_static(self) -> bool:
        return 'static' in self.modifiers

    @property
    def is_override(self) -> bool:
        return 'override' in self.modifiers

    @property
    def is_sealed(self) -> bool:
        return 'sealed' in self.modifiers

    @property
    def is_abstract(self) -> bool:
        return 'abstract' in self.modifiers

    @property
    def is_virtual(self) -> bool:
        return 'virtual' in self.modifiers


@dataclass
class UnsupportedMember(Member):
    """Constructors, properties, events, nested types and the like."""
    kind: str


# =============================================================================
# DECLARATIONS AND CONTAINERS
# =============================================================================

class DeclarationKind(Enum):
    CLASS = 'class'
    STRUCT = 'struct'
    INTERFACE = 'interface'
    ENUM = 'enum'
    DELEGATE = 'delegate'


@dataclass
class TypeDeclaration:
    """A class/struct/interface/enum/delegate declaration.

    symbol is None when the front end failed to resolve the declaration.
    """
    kind: DeclarationKind
    name: str
    symbol: Optional[ResolvedType] = None
    members: List[Member] = field(default_factory=list)
    leading_trivia: List[Trivia] = field(default_factory=list)


@dataclass
class NamespaceDeclaration:
    name: str
    members: List[object] = field(default_factory=list)


@dataclass
class CompilationUnit:
    """Root node of one source file."""
    path: str = ''
    members: List[object] = field(default_factory=list)


# =============================================================================
# FRONT-END RESULTS
# =============================================================================

class WorkspaceDiagnosticKind(Enum):
    FAILURE = 'Failure'
    WARNING = 'Warning'


@dataclass
class WorkspaceDiagnostic:
    """A problem reported while loading the project."""
    kind: WorkspaceDiagnosticKind
    message: str


class DiagnosticSeverity(Enum):
    HIDDEN = 'Hidden'
    INFO = 'Info'
    WARNING = 'Warning'
    ERROR = 'Error'


@dataclass
class CompilationDiagnostic:
    """A compiler diagnostic reported by the front end."""
    severity: DiagnosticSeverity
    message: str
    id: str = ''
    location: str = ''

    def __str__(self) -> str:
        prefix = f'{self.location}: ' if self.location else ''
        code = f' {self.id}' if self.id else ''
        return f'{prefix}{self.severity.value.lower()}{code}: {self.message}'


@dataclass
class Compilation:
    syntax_trees: List[CompilationUnit] = field(default_factory=list)
    diagnostics: List[CompilationDiagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(d.severity == DiagnosticSeverity.ERROR for d in self.diagnostics)


@dataclass
class Project:
    """A loaded project: its name, load diagnostics and compilation."""
    name: str
    diagnostics: List[WorkspaceDiagnostic] = field(default_factory=list)
    compilation: Optional[Compilation] = None

    @property
    def load_failures(self) -> List[WorkspaceDiagnostic]:
        return [d for d in self.diagnostics if d.kind == WorkspaceDiagnosticKind.FAILURE]

    def get_compilation(self) -> Optional[Compilation]:
        return self.compilation
