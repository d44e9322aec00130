"""
Base generator class with shared utilities.

This module provides the BaseGenerator class that contains common utilities
used across all specialized generator classes in the code generation pipeline.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import CodeGenerationContext
    from .diagnostics import TranspilerDiagnostics

from ..frontend.nodes import Accessibility
from ..type_system import swift_access_modifier


class BaseGenerator:
    """
    Base class for all code generators.

    Provides shared access to:
    - The generation context
    - The run's diagnostics aggregator
    - Accessibility mapping under the configured policy
    """

    def __init__(self, ctx: 'CodeGenerationContext'):
        """
        Initialize the base generator.

        Args:
            ctx: The code generation context containing all state
        """
        self._ctx = ctx

    @property
    def diagnostics(self) -> 'TranspilerDiagnostics':
        return self._ctx.diagnostics

    def access_modifier(self, accessibility: Optional[Accessibility]) -> str:
        """Get the Swift access qualifier for a member's accessibility."""
        return swift_access_modifier(accessibility, self._ctx.access_policy)
