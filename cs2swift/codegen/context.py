"""
Code generation context for the Swift code generator.

This module provides a context class that holds all state needed during
code generation, separating state management from the generation logic.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..type_system import ACCESS_POLICY_OPEN
from .diagnostics import TranspilerDiagnostics


@dataclass
class CodeGenerationContext:
    """
    Holds all state needed during Swift code generation.

    A context is shared by the generators of one SwiftCodeGenerator. The
    diagnostics aggregator may be shared by several contexts.
    """

    # Indentation state
    indent_level: int = 0
    indent_str: str = '    '

    # Options
    access_policy: str = ACCESS_POLICY_OPEN

    # Diagnostics collector
    _diagnostics: Optional[TranspilerDiagnostics] = field(default=None, repr=False)

    @property
    def diagnostics(self) -> TranspilerDiagnostics:
        """Get the diagnostics collector, creating one if needed."""
        if self._diagnostics is None:
            self._diagnostics = TranspilerDiagnostics()
        return self._diagnostics

    def indent(self) -> str:
        """Return the current indentation string."""
        return self.indent_str * self.indent_level

    @classmethod
    def create(
        cls,
        diagnostics: Optional[TranspilerDiagnostics] = None,
        access_policy: str = ACCESS_POLICY_OPEN,
    ) -> 'CodeGenerationContext':
        """
        Create a context bound to a run's diagnostics aggregator.

        Args:
            diagnostics: The run's aggregator (a fresh one if omitted)
            access_policy: 'open' or 'strict' accessibility mapping

        Returns:
            A new CodeGenerationContext instance
        """
        return cls(
            access_policy=access_policy,
            _diagnostics=diagnostics if diagnostics is not None else TranspilerDiagnostics(),
        )
