"""Named host and runtime properties, read live or captured once"""
import getpass
import locale
import logging
import os
import platform
import socket
import sys
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


OS_NAME = "os.name"
OS_VERSION = "os.version"
OS_ARCH = "os.arch"
USER_HOME = "user.home"
USER_DIR = "user.dir"
USER_NAME = "user.name"
USER_LANGUAGE = "user.language"
USER_COUNTRY = "user.country"
USER_TIMEZONE = "user.timezone"
HOST_NAME = "host.name"
PYTHON_VERSION = "python.version"
PYTHON_SPECIFICATION_VERSION = "python.specification.version"
PYTHON_IMPLEMENTATION = "python.implementation"
PYTHON_COMPILER = "python.compiler"
PYTHON_HOME = "python.home"
PYTHON_PREFIX = "python.prefix"
PYTHON_EXECUTABLE = "python.executable"
PYTHON_PATH = "python.path"
PYTHON_IO_TMPDIR = "python.io.tmpdir"
FILE_ENCODING = "file.encoding"
FILESYSTEM_ENCODING = "filesystem.encoding"
FILE_SEPARATOR = "file.separator"
PATH_SEPARATOR = "path.separator"
LINE_SEPARATOR = "line.separator"

# Failures of the underlying runtime calls that mean "not allowed to know"
ACCESS_FAILURES = (OSError, KeyError, RuntimeError)


class PropertyAccessDenied(PermissionError):
    """Reading a property was refused by the host or by the deny list"""

    def __init__(self, name: str, reason: str = ""):
        self.name = name
        self.reason = reason
        message = f"Access to property '{name}' denied"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PropertyUndefined(LookupError):
    """A property needed to build a value is not set on this host"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Property '{name}' is not set")


def _os_version() -> str:
    # Windows reports the NT build ("10.0.19045"), everything else the release
    if platform.system().startswith("Windows"):
        return platform.version()
    return platform.release()


def _locale_parts() -> Optional[list]:
    try:
        code = locale.getlocale()[0]
    except ValueError:
        return None
    if not code:
        return None
    return code.split("_", 1)


def _user_language() -> Optional[str]:
    parts = _locale_parts()
    return parts[0] if parts else None


def _user_country() -> Optional[str]:
    parts = _locale_parts()
    return parts[1] if parts and len(parts) > 1 else None


def _user_name() -> Optional[str]:
    try:
        return getpass.getuser()
    except ImportError:
        # No pwd module and no login variables set
        return None


def _user_timezone() -> Optional[str]:
    return os.environ.get("TZ") or time.tzname[0] or None


def _empty_to_none(value: Optional[str]) -> Optional[str]:
    return value if value else None


PROPERTY_READERS: Dict[str, Callable[[], Optional[str]]] = {
    OS_NAME: lambda: _empty_to_none(platform.system()),
    OS_VERSION: lambda: _empty_to_none(_os_version()),
    OS_ARCH: lambda: _empty_to_none(platform.machine()),
    USER_HOME: lambda: str(Path.home()),
    USER_DIR: os.getcwd,
    USER_NAME: _user_name,
    USER_LANGUAGE: _user_language,
    USER_COUNTRY: _user_country,
    USER_TIMEZONE: _user_timezone,
    HOST_NAME: lambda: _empty_to_none(socket.gethostname()),
    PYTHON_VERSION: platform.python_version,
    PYTHON_SPECIFICATION_VERSION: lambda: f"{sys.version_info[0]}.{sys.version_info[1]}",
    PYTHON_IMPLEMENTATION: platform.python_implementation,
    PYTHON_COMPILER: lambda: _empty_to_none(platform.python_compiler()),
    PYTHON_HOME: lambda: sys.base_prefix,
    PYTHON_PREFIX: lambda: sys.prefix,
    PYTHON_EXECUTABLE: lambda: _empty_to_none(sys.executable),
    PYTHON_PATH: lambda: os.pathsep.join(sys.path),
    PYTHON_IO_TMPDIR: tempfile.gettempdir,
    FILE_ENCODING: lambda: locale.getpreferredencoding(False),
    FILESYSTEM_ENCODING: sys.getfilesystemencoding,
    FILE_SEPARATOR: lambda: os.sep,
    PATH_SEPARATOR: lambda: os.pathsep,
    LINE_SEPARATOR: lambda: os.linesep,
}


class HostProperties:
    """Live view of the host properties

    Overrides take precedence over the runtime value. Names in the deny
    list, and runtime calls failing with an access error, raise
    PropertyAccessDenied. Unknown names read as None.
    """

    def __init__(self, overrides: Optional[Mapping[str, str]] = None,
                 denied: Iterable[str] = (),
                 readers: Optional[Mapping[str, Callable[[], Optional[str]]]] = None):
        self._overrides = dict(overrides or {})
        self._denied = frozenset(denied)
        self._readers = dict(PROPERTY_READERS if readers is None else readers)

    @classmethod
    def from_settings(cls, settings) -> "HostProperties":
        """Build a host view from Settings overrides and deny list"""
        return cls(overrides=settings.property_overrides, denied=settings.denied_properties)

    @property
    def names(self) -> list:
        """Known property names, catalog first then override-only names"""
        names = list(self._readers)
        names.extend(name for name in self._overrides if name not in self._readers)
        return names

    def read(self, name: str) -> Optional[str]:
        """Read one property now, raising PropertyAccessDenied on refusal"""
        if name in self._denied:
            raise PropertyAccessDenied(name, "listed in denied properties")
        if name in self._overrides:
            return self._overrides[name]
        reader = self._readers.get(name)
        if reader is None:
            return None
        try:
            return reader()
        except ACCESS_FAILURES as e:
            raise PropertyAccessDenied(name, str(e)) from e


@dataclass(frozen=True)
class PropertyValue:
    """A captured property: the value, or None when absent"""
    name: str
    value: Optional[str]

    @property
    def present(self) -> bool:
        return self.value is not None


class PropertyCapture:
    """Reads each property at most once and hands out the cached result"""

    def __init__(self, host: Optional[HostProperties] = None):
        self._host = host or HostProperties()
        self._captured: Dict[str, PropertyValue] = {}

    def capture(self, name: str) -> PropertyValue:
        """Capture a property, degrading an access denial to an absent value"""
        cached = self._captured.get(name)
        if cached is not None:
            return cached

        try:
            value = self._host.read(name)
        except PropertyAccessDenied as e:
            logger.warning(f"Caught access denial reading property '{name}'; "
                           f"value will default to None ({e.reason or 'no reason given'})")
            value = None

        captured = PropertyValue(name=name, value=value)
        self._captured[name] = captured
        return captured

    def capture_all(self, names: Iterable[str]) -> Dict[str, PropertyValue]:
        return {name: self.capture(name) for name in names}


def get_environment_variable(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get an environment variable, or default if unset or unreadable"""
    try:
        value = os.environ.get(name)
    except ACCESS_FAILURES as e:
        logger.warning(f"Caught access denial reading environment variable '{name}': {e}")
        return default
    return default if value is None else value
