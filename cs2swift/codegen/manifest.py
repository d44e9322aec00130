"""
Swift package manifest generation.
"""

DEFAULT_SWIFT_TOOLS_VERSION = '5.6'


def generate_package_manifest(
    package_name: str,
    tools_version: str = DEFAULT_SWIFT_TOOLS_VERSION,
) -> str:
    """
    Generate Package.swift for a translated project.

    The package has a single library product backed by a single target, both
    named after the package, and no dependencies.

    Args:
        package_name: Name of the package, product and target
        tools_version: The swift-tools-version line value

    Returns:
        The manifest source
    """
    lines = [
        f'// swift-tools-version: {tools_version}',
        '',
        'import PackageDescription',
        '',
        'let package = Package(',
        f'    name: "{package_name}",',
        '    products: [',
        f'        .library(name: "{package_name}",',
        f'                 targets: ["{package_name}"])',
        '    ],',
        '    dependencies: [',
        '    ],',
        '    targets: [',
        f'        .target(name: "{package_name}",',
        '                dependencies: []),',
        '    ]',
        ')',
    ]
    return '\n'.join(lines) + '\n'
