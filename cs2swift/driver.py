#!/usr/bin/env python3
"""
C# to Swift Transpiler

This transpiler converts the declarations of a C# project to a Swift
package: classes and structs with their fields and method signatures.
Method bodies are left empty.

The C# side is read from the JSON dump written by the front end, which
has already parsed and semantically resolved the project.

Usage:
    python -m cs2swift.driver MyLib.json -o swift-output

The output is a Swift package at <output>/<Package>/ with a Package.swift
manifest and one Sources/<Package>/<Type>.swift file per class or struct.
"""

import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from . import console
from .config import TranspilerConfig, load_config
from .codegen import (
    SwiftCodeGenerator,
    TranspilerDiagnostics,
    collect_declarations,
    generate_package_manifest,
)
from .frontend import Project, TypeDeclaration, load_project
from .type_system import ACCESS_POLICIES


@dataclass
class TranspileResult:
    """Outcome of a transpiler run."""
    succeeded: bool
    package_name: str = ''
    declarations: List[TypeDeclaration] = field(default_factory=list)
    files: Dict[str, str] = field(default_factory=dict)  # path -> contents


class CSharpToSwiftTranspiler:
    """Main transpiler class that orchestrates the conversion process."""

    def __init__(
        self,
        project_path: str,
        output_dir: str = './swift-output',
        config: Optional[TranspilerConfig] = None,
        diagnostics: Optional[TranspilerDiagnostics] = None,
        out=None,
        err=None,
    ):
        self.project_path = Path(project_path)
        self.output_dir = Path(output_dir)
        self.config = config or TranspilerConfig()
        self.diagnostics = diagnostics or TranspilerDiagnostics()
        self._out = out
        self._err = err

    def info(self, message: str) -> None:
        console.info(message, file=self._out)

    # =========================================================================
    # PIPELINE
    # =========================================================================

    def transpile(self) -> TranspileResult:
        """Load the project and transpile it; nothing is written to disk."""
        self.info(f'Loading project {self.project_path.name}...')
        project = load_project(str(self.project_path))
        return self.transpile_project(project)

    def transpile_project(self, project: Project) -> TranspileResult:
        """Transpile a loaded project.

        Load failures, a missing compilation and compilation errors abort the
        run before any output is produced; the problems are recorded in the
        diagnostics.
        """
        package_name = self.config.package_name or project.name

        failures = project.load_failures
        for d in failures:
            self.diagnostics.error(d.message)
        if failures:
            return TranspileResult(succeeded=False, package_name=package_name)

        self.info(f'Analyzing project {project.name}...')
        compilation = project.get_compilation()
        if compilation is None:
            self.diagnostics.error('Failed to get compilation')
            return TranspileResult(succeeded=False, package_name=package_name)
        if compilation.has_errors:
            for d in compilation.diagnostics:
                self.diagnostics.error(str(d))
            return TranspileResult(succeeded=False, package_name=package_name)

        self.info('Transpiling...')
        declarations = collect_declarations(compilation, info=self.info)

        package_dir = self.output_dir / package_name
        sources_dir = package_dir / 'Sources' / package_name
        files: Dict[str, str] = {
            str(package_dir / 'Package.swift'): generate_package_manifest(
                package_name, self.config.swift_tools_version,
            ),
        }
        for swift_name, code in self.transpile_declarations(declarations):
            if code is not None:
                files[str(sources_dir / f'{swift_name}.swift')] = code

        return TranspileResult(
            succeeded=True,
            package_name=package_name,
            declarations=declarations,
            files=files,
        )

    def transpile_declarations(
        self,
        declarations: List[TypeDeclaration],
    ) -> List[Tuple[str, Optional[str]]]:
        """Render declarations, in parallel when configured.

        Returns (swift_name, code) pairs in the order of declarations; code
        is None for declarations that produce no file.
        """
        if self.config.jobs > 1 and len(declarations) > 1:
            with ThreadPoolExecutor(max_workers=self.config.jobs) as pool:
                return list(pool.map(self._transpile_declaration, declarations))
        return [self._transpile_declaration(d) for d in declarations]

    def _transpile_declaration(self, decl: TypeDeclaration) -> Tuple[str, Optional[str]]:
        generator = SwiftCodeGenerator(self.diagnostics, self.config.access_policy)
        swift_decl = generator.translate(decl)
        if swift_decl is None:
            return generator.swift_name(decl), None
        return swift_decl.name, generator.render(swift_decl)

    def run(self, write: bool = True) -> TranspileResult:
        """Transpile, write the output and print the diagnostic summary."""
        result = self.transpile()
        if result.succeeded and write:
            self.write_output(result)
        self.diagnostics.print_summary(file=self._err)
        if result.succeeded:
            self.info('Done.')
        return result

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def write_output(self, result: TranspileResult) -> None:
        """Write transpiled Swift files to disk.

        Files are written in declaration order, so when two declarations
        share a Swift name the later one wins.
        """
        for filepath, content in result.files.items():
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
            self.info(f'Written: {filepath}')


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description='C# to Swift Transpiler')
    parser.add_argument('input', help='Front-end JSON dump of the C# project')
    parser.add_argument('-o', '--output', default='swift-output', help='Output directory')
    parser.add_argument('--stdout', action='store_true', help='Print to stdout instead of writing files')
    parser.add_argument('--config', metavar='FILE', help='JSON configuration file')
    parser.add_argument('--name', metavar='PACKAGE', help='Swift package name (default: project name)')
    parser.add_argument('--access-policy', choices=ACCESS_POLICIES,
                        help='How C# accessibility maps to Swift (default: open)')
    parser.add_argument('-j', '--jobs', type=int, metavar='N',
                        help='Number of declarations to translate in parallel')

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config).with_overrides(
            package_name=args.name,
            access_policy=args.access_policy,
            jobs=args.jobs,
        )
    except ValueError as e:
        parser.error(str(e))

    # Keep stdout for the generated code when printing it
    out = sys.stderr if args.stdout else None
    transpiler = CSharpToSwiftTranspiler(args.input, args.output, config, out=out)
    result = transpiler.run(write=not args.stdout)
    if not result.succeeded:
        return 1

    if args.stdout:
        for filepath, content in result.files.items():
            print(f'// {filepath}')
            print(content)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
