"""
C# to Swift Transpiler

This package converts the declarations of a resolved C# project into a
Swift package.

Module Structure:
- frontend/: Resolved C# node model and the front-end dump loader
- type_system/: Type name, default value and accessibility mappings
- codegen/: Swift generation (collector, declaration/member generators,
  expression translator, renderer, diagnostics, manifest)
- config.py: Run configuration
- driver.py: Main transpiler and command line interface

Usage:
    from cs2swift import CSharpToSwiftTranspiler

    transpiler = CSharpToSwiftTranspiler('MyLib.json', 'swift-output')
    transpiler.run()
"""

from .driver import CSharpToSwiftTranspiler, TranspileResult, main
from .config import TranspilerConfig, load_config
from .codegen import SwiftCodeGenerator, TranspilerDiagnostics, collect_declarations
from .frontend import load_project, load_project_from_string

__all__ = [
    'CSharpToSwiftTranspiler',
    'TranspileResult',
    'main',
    'TranspilerConfig',
    'load_config',
    'SwiftCodeGenerator',
    'TranspilerDiagnostics',
    'collect_declarations',
    'load_project',
    'load_project_from_string',
]
