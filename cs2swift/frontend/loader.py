"""
Front-end dump loader.

The front end (a Roslyn-based dumper) writes the parsed and semantically
resolved project as a JSON document. The DumpLoader converts that document
into the node model in nodes.py; load_project() wraps it so that an
unreadable or malformed dump turns into a Failure load diagnostic instead
of an exception.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from .nodes import (
    # Symbols
    TypeKind,
    Accessibility,
    ResolvedType,
    Trivia,
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


class FrontEndError(Exception):
    """Raised when a front-end dump does not have the expected shape."""
    pass


def is_valid_package_name(name: str) -> bool:
    """Check that name can be used as a single output path component."""
    return bool(name) and name not in ('.', '..') and not any(sep in name for sep in '/\\')


DECLARATION_KINDS: Dict[str, DeclarationKind] = {
    'ClassDeclaration': DeclarationKind.CLASS,
    'StructDeclaration': DeclarationKind.STRUCT,
    'InterfaceDeclaration': DeclarationKind.INTERFACE,
    'EnumDeclaration': DeclarationKind.ENUM,
    'DelegateDeclaration': DeclarationKind.DELEGATE,
}


class DumpLoader:
    """
    Builds node trees from a decoded front-end dump.

    Every parse_* method takes the decoded JSON value for one node and
    returns the corresponding node, raising FrontEndError on shape errors.
    """

    def __init__(self, default_name: str = ''):
        self.default_name = default_name

    # =========================================================================
    # TOP-LEVEL
    # =========================================================================

    def parse_project(self, data: Any) -> Project:
        obj = self._expect_object(data, 'project')
        project = Project(name=self.parse_project_name(obj.get('name')))

        for d in self._expect_list(obj, 'loadDiagnostics'):
            d = self._expect_object(d, 'load diagnostic')
            project.diagnostics.append(WorkspaceDiagnostic(
                kind=self._parse_enum(WorkspaceDiagnosticKind, d.get('kind', 'Failure'), 'load diagnostic kind'),
                message=str(d.get('message', '')),
            ))

        compilation = obj.get('compilation')
        if compilation is not None:
            project.compilation = self.parse_compilation(compilation)
        return project

    def parse_project_name(self, value: Any) -> str:
        """Parse the project name; it names output directories, so it must be
        a single path component."""
        if value is None or value == '':
            return self.default_name
        if not isinstance(value, str):
            raise FrontEndError(f'Expected project name string but got {type(value).__name__}')
        if not is_valid_package_name(value):
            raise FrontEndError(f'Invalid project name: {value!r}')
        return value

    def parse_compilation(self, data: Any) -> Compilation:
        obj = self._expect_object(data, 'compilation')
        compilation = Compilation()
        for d in self._expect_list(obj, 'diagnostics'):
            d = self._expect_object(d, 'compilation diagnostic')
            compilation.diagnostics.append(CompilationDiagnostic(
                severity=self._parse_enum(DiagnosticSeverity, d.get('severity', 'Error'), 'severity'),
                message=str(d.get('message', '')),
                id=str(d.get('id', '')),
                location=str(d.get('location', '')),
            ))
        for tree in self._expect_list(obj, 'syntaxTrees'):
            compilation.syntax_trees.append(self.parse_compilation_unit(tree))
        return compilation

    def parse_compilation_unit(self, data: Any) -> CompilationUnit:
        obj = self._expect_object(data, 'syntax tree')
        return CompilationUnit(
            path=str(obj.get('path', '')),
            members=[self.parse_top_level(m) for m in self._expect_list(obj, 'members')],
        )

    def parse_top_level(self, data: Any) -> object:
        """Parse a namespace member: a namespace, a type declaration or other."""
        obj = self._expect_object(data, 'namespace member')
        kind = str(obj.get('kind', ''))
        if kind in ('NamespaceDeclaration', 'FileScopedNamespaceDeclaration'):
            return NamespaceDeclaration(
                name=str(obj.get('name', '')),
                members=[self.parse_top_level(m) for m in self._expect_list(obj, 'members')],
            )
        if kind in DECLARATION_KINDS:
            return self.parse_type_declaration(obj)
        return UnsupportedMember(kind=kind)

    # =========================================================================
    # DECLARATIONS
    # =========================================================================

    def parse_type_declaration(self, obj: Dict[str, Any]) -> TypeDeclaration:
        name = obj.get('name')
        if not isinstance(name, str):
            raise FrontEndError(f"Type declaration is missing a name: {obj.get('kind')}")
        return TypeDeclaration(
            kind=DECLARATION_KINDS[obj['kind']],
            name=name,
            symbol=self.parse_type(obj.get('symbol')),
            members=[self.parse_member(m) for m in self._expect_list(obj, 'members')],
            leading_trivia=self.parse_trivia(obj),
        )

    def parse_member(self, data: Any) -> Member:
        obj = self._expect_object(data, 'member')
        kind = str(obj.get('kind', ''))
        if kind == 'FieldDeclaration':
            return self.parse_field(obj)
        if kind == 'MethodDeclaration':
            return self.parse_method(obj)
        return UnsupportedMember(kind=kind)

    def parse_field(self, obj: Dict[str, Any]) -> FieldDeclaration:
        variables = []
        for v in self._expect_list(obj, 'variables'):
            v = self._expect_object(v, 'variable')
            variables.append(VariableDeclarator(
                name=str(v.get('name', '')),
                accessibility=self.parse_accessibility(v.get('accessibility')),
                initializer=self.parse_expression(v.get('initializer')),
            ))
        return FieldDeclaration(
            type=self.parse_type(obj.get('type')),
            variables=variables,
            modifiers=self.parse_modifiers(obj),
            leading_trivia=self.parse_trivia(obj),
        )

    def parse_method(self, obj: Dict[str, Any]) -> MethodDeclaration:
        parameters = []
        for p in self._expect_list(obj, 'parameters'):
            p = self._expect_object(p, 'parameter')
            parameters.append(Parameter(
                name=str(p.get('name', '')),
                type=self.parse_type(p.get('type')),
            ))
        return MethodDeclaration(
            name=str(obj.get('name', '')),
            return_type=self.parse_type(obj.get('returnType')),
            parameters=parameters,
            accessibility=self.parse_accessibility(obj.get('accessibility')),
            modifiers=self.parse_modifiers(obj),
            leading_trivia=self.parse_trivia(obj),
        )

    # =========================================================================
    # SYMBOLS
    # =========================================================================

    def parse_type(self, data: Any) -> Optional[ResolvedType]:
        """Parse a resolved type symbol; None stays None (unresolved)."""
        if data is None:
            return None
        obj = self._expect_object(data, 'type')
        return ResolvedType(
            name=str(obj.get('name', '')),
            kind=self._parse_enum(TypeKind, obj.get('kind', 'NamedType'), 'type kind'),
            namespace=str(obj.get('namespace', '')),
            is_reference_type=bool(obj.get('isReferenceType', False)),
            element_type=self.parse_type(obj.get('elementType')),
            base_type=self.parse_type(obj.get('baseType')),
            interfaces=[self.parse_type(i) for i in self._expect_list(obj, 'interfaces') if i is not None],
            display=str(obj.get('display', '')),
        )

    def parse_accessibility(self, value: Any) -> Optional[Accessibility]:
        if value is None:
            return None
        return self._parse_enum(Accessibility, value, 'accessibility')

    def parse_modifiers(self, obj: Dict[str, Any]) -> List[str]:
        modifiers = self._expect_list(obj, 'modifiers')
        for m in modifiers:
            if not isinstance(m, str):
                raise FrontEndError(f'Expected modifier string but got {type(m).__name__}')
        return list(modifiers)

    def parse_trivia(self, obj: Dict[str, Any]) -> List[Trivia]:
        trivia = []
        for t in self._expect_list(obj, 'leadingTrivia'):
            t = self._expect_object(t, 'trivia')
            trivia.append(Trivia(kind=str(t.get('kind', '')), text=str(t.get('text', ''))))
        return trivia

    # =========================================================================
    # EXPRESSIONS
    # =========================================================================

    def parse_expression(self, data: Any) -> Optional[Expression]:
        if data is None:
            return None
        obj = self._expect_object(data, 'expression')
        kind = str(obj.get('kind', ''))

        if kind == 'TrueLiteralExpression':
            return BoolLiteral(True)
        elif kind == 'FalseLiteralExpression':
            return BoolLiteral(False)
        elif kind == 'NumericLiteralExpression':
            return NumericLiteral(str(obj.get('valueText', '')))
        elif kind == 'StringLiteralExpression':
            return StringLiteral(
                text=str(obj.get('text', '')),
                value_text=str(obj.get('valueText', '')),
            )
        elif kind == 'NullLiteralExpression':
            return NullLiteral()
        elif kind == 'ThisExpression':
            return ThisReference()
        elif kind == 'IdentifierName':
            return Identifier(str(obj.get('identifier', '')))
        elif kind == 'SimpleMemberAccessExpression':
            return MemberAccess(
                expression=self._parse_operand(obj, 'expression'),
                name=str(obj.get('name', '')),
            )
        elif kind == 'InvocationExpression':
            return Invocation(
                expression=self._parse_operand(obj, 'expression'),
                arguments=[self._parse_required_expression(a) for a in self._expect_list(obj, 'arguments')],
            )
        elif kind == 'CastExpression':
            return Cast(
                type_text=str(obj.get('type', '')),
                expression=self._parse_operand(obj, 'expression'),
            )
        elif kind == 'ParenthesizedExpression':
            return Parenthesized(self._parse_operand(obj, 'expression'))

        return UnsupportedExpression(kind=kind)

    def _parse_operand(self, obj: Dict[str, Any], key: str) -> Expression:
        if key not in obj:
            raise FrontEndError(f"{obj.get('kind')} is missing '{key}'")
        return self._parse_required_expression(obj[key])

    def _parse_required_expression(self, data: Any) -> Expression:
        expr = self.parse_expression(data)
        if expr is None:
            raise FrontEndError('Expected an expression but got null')
        return expr

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _expect_object(self, data: Any, what: str) -> Dict[str, Any]:
        if not isinstance(data, dict):
            raise FrontEndError(f'Expected {what} object but got {type(data).__name__}')
        return data

    def _expect_list(self, obj: Dict[str, Any], key: str) -> List[Any]:
        """Get the list under key; a missing or null value is an empty list."""
        value = obj.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise FrontEndError(f'Expected {key} list but got {type(value).__name__}')
        return value

    def _parse_enum(self, enum_type, value: Any, what: str):
        try:
            return enum_type(value)
        except ValueError:
            raise FrontEndError(f'Unknown {what}: {value!r}') from None


def load_project_from_string(text: str, name: str = '') -> Project:
    """Load a project from dump text, converting errors into load failures."""
    try:
        data = json.loads(text)
        return DumpLoader(default_name=name).parse_project(data)
    except json.JSONDecodeError as e:
        message = f'Failed to parse front-end output: {e}'
    except FrontEndError as e:
        message = f'Malformed front-end output: {e}'
    return Project(
        name=name,
        diagnostics=[WorkspaceDiagnostic(WorkspaceDiagnosticKind.FAILURE, message)],
    )


def load_project(path: str) -> Project:
    """Load the front-end dump at path.

    The project name defaults to the file name without its extension
    (MyLib.json -> MyLib) when the dump does not carry one.
    """
    dump_path = Path(path)
    name = dump_path.stem
    try:
        with open(dump_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        message = f'Could not read {dump_path}: {e.strerror or e}'
    except UnicodeDecodeError as e:
        message = f'Could not decode {dump_path} as UTF-8: {e}'
    else:
        return load_project_from_string(text, name)
    return Project(
        name=name,
        diagnostics=[WorkspaceDiagnostic(WorkspaceDiagnosticKind.FAILURE, message)],
    )
