"""Read-only snapshot of host and runtime environment properties"""
from .properties import (
    HostProperties,
    PropertyAccessDenied,
    PropertyCapture,
    PropertyUndefined,
    PropertyValue,
    get_environment_variable,
)
from .classification import ClassificationFlags, classify, prefix_match
from .versions import LOWEST, PythonVersion, VersionSpec, at_least, at_most, parse_version
from .snapshot import EnvironmentSnapshot, get_environment_snapshot, init_environment_snapshot
from .directories import resolve_directory

__all__ = [
    'HostProperties',
    'PropertyAccessDenied',
    'PropertyCapture',
    'PropertyUndefined',
    'PropertyValue',
    'get_environment_variable',
    'ClassificationFlags',
    'classify',
    'prefix_match',
    'LOWEST',
    'PythonVersion',
    'VersionSpec',
    'at_least',
    'at_most',
    'parse_version',
    'EnvironmentSnapshot',
    'get_environment_snapshot',
    'init_environment_snapshot',
    'resolve_directory',
]
