"""
Transpiler configuration.

Settings come from an optional JSON file and can be overridden on the
command line:

    {
        "packageName": "MyLib",
        "accessPolicy": "open",
        "swiftToolsVersion": "5.6",
        "jobs": 1
    }
"""

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from . import console
from .codegen.manifest import DEFAULT_SWIFT_TOOLS_VERSION
from .frontend import is_valid_package_name
from .type_system import ACCESS_POLICIES, ACCESS_POLICY_OPEN


@dataclass(frozen=True)
class TranspilerConfig:
    """Options for one transpiler run."""
    package_name: Optional[str] = None  # Defaults to the project name
    access_policy: str = ACCESS_POLICY_OPEN
    swift_tools_version: str = DEFAULT_SWIFT_TOOLS_VERSION
    jobs: int = 1

    def __post_init__(self):
        if self.access_policy not in ACCESS_POLICIES:
            raise ValueError(
                f'Unknown access policy {self.access_policy!r}; '
                f'expected one of {", ".join(ACCESS_POLICIES)}'
            )
        if self.jobs < 1:
            raise ValueError(f'jobs must be at least 1, got {self.jobs}')
        if self.package_name is not None and not is_valid_package_name(self.package_name):
            raise ValueError(f'Invalid package name {self.package_name!r}')

    def with_overrides(self, **overrides) -> 'TranspilerConfig':
        """Return a copy with every override that is not None applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def load_config(path: Optional[str]) -> TranspilerConfig:
    """Load a configuration file; missing or invalid files give the defaults."""
    if not path:
        return TranspilerConfig()

    config_file = Path(path)
    if not config_file.exists():
        console.error(f'Warning: config file {config_file} not found, using defaults')
        return TranspilerConfig()

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return TranspilerConfig(
            package_name=data.get('packageName'),
            access_policy=data.get('accessPolicy', ACCESS_POLICY_OPEN),
            swift_tools_version=str(data.get('swiftToolsVersion', DEFAULT_SWIFT_TOOLS_VERSION)),
            jobs=int(data.get('jobs', 1)),
        )
    except (json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
        console.error(f'Warning: Failed to load {config_file}: {e}')
        return TranspilerConfig()
