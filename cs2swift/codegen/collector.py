"""
Type declaration discovery.

Walks the compilation units of a compilation and collects every type
declaration the front end resolved, in source order.
"""

from typing import Callable, List, Optional

from .. import console
from ..frontend.nodes import (
    Compilation,
    CompilationUnit,
    NamespaceDeclaration,
    TypeDeclaration,
)


def _describe(decl: TypeDeclaration) -> str:
    return f'Found {decl.kind.value} {decl.symbol.qualified_name}'


def collect_from_node(
    node: object,
    declarations: List[TypeDeclaration],
    info: Callable[[str], None],
) -> None:
    """Append the resolved type declarations under node, depth first.

    Type declarations nested inside other types are not visited.
    """
    if isinstance(node, TypeDeclaration):
        if node.symbol is not None:
            info(_describe(node))
            declarations.append(node)
    elif isinstance(node, (CompilationUnit, NamespaceDeclaration)):
        for member in node.members:
            collect_from_node(member, declarations, info)


def collect_declarations(
    compilation: Compilation,
    info: Optional[Callable[[str], None]] = None,
) -> List[TypeDeclaration]:
    """
    Collect the type declarations of a compilation.

    Args:
        compilation: The compilation to walk
        info: Receives one progress line per declaration found

    Returns:
        Declarations in discovery order: syntax trees in order, and within a
        tree the order in which namespaces and declarations appear
    """
    if info is None:
        info = console.info
    declarations: List[TypeDeclaration] = []
    for tree in compilation.syntax_trees:
        collect_from_node(tree, declarations, info)
    return declarations
