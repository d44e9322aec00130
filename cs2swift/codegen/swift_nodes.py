"""
Swift declaration tree.

The member and declaration generators build these nodes; the renderer
turns them into text. Keeping the two apart lets the translation be
inspected without parsing generated Swift.
"""

from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class SwiftMember:
    """Base class for members of a Swift type declaration."""
    pass


@dataclass
class SwiftField(SwiftMember):
    """A stored property: [docs] <access><keyword> <name>: <type>[?][ = <init>]."""
    name: str
    type_name: str
    keyword: str = 'var'  # 'let', 'var', 'static let', 'static var'
    access: str = ''
    is_optional: bool = False
    initializer: Optional[str] = None
    docs: str = ''


@dataclass
class SwiftParameter:
    name: str
    type_name: str


@dataclass
class SwiftMethod(SwiftMember):
    """A method signature with an empty body."""
    name: str
    parameters: List[SwiftParameter] = field(default_factory=list)
    return_type: Optional[str] = None  # None for void
    access: str = ''
    slot: str = ''  # 'static ', 'override ', '/*abstract*/ ', '' or 'final '
    docs: str = ''


@dataclass
class SwiftTypeDeclaration:
    """A class or struct declaration."""
    keyword: str  # 'class' or 'struct'
    name: str
    inherits: List[str] = field(default_factory=list)
    members: List[SwiftMember] = field(default_factory=list)
