"""Process-wide immutable snapshot of host and runtime properties

The snapshot is built by ``init_environment_snapshot`` and published once
through ``get_environment_snapshot``. Nothing re-reads the host after that;
later changes to the environment are not reflected.
"""
import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from . import properties as props
from .classification import ClassificationFlags, classify
from .properties import HostProperties, PropertyCapture, PropertyValue
from .versions import LOWEST, PythonVersion, VersionSpec, at_least, at_most, parse_version

logger = logging.getLogger(__name__)

VersionLike = Union[VersionSpec, PythonVersion, str]


def _as_spec(version: VersionLike) -> VersionSpec:
    if isinstance(version, VersionSpec):
        return version
    if isinstance(version, PythonVersion):
        return version.spec
    return parse_version(version)


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """Captured property values with their derived flags"""
    values: Mapping[str, PropertyValue]
    flags: ClassificationFlags
    python_spec: VersionSpec = LOWEST
    # Host view the values were captured from; live lookups reuse it
    host: HostProperties = field(default_factory=HostProperties, compare=False, repr=False)
    _absent: Dict[str, PropertyValue] = field(default_factory=dict, init=False, compare=False, repr=False)

    def value(self, name: str) -> PropertyValue:
        """Captured value for name; unknown names are absent

        Repeated lookups of an unknown name return the same absent value.
        """
        captured = self.values.get(name)
        if captured is not None:
            return captured
        return self._absent.setdefault(name, PropertyValue(name=name, value=None))

    def get(self, name: str) -> Optional[str]:
        return self.value(name).value

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {name: captured.value for name, captured in self.values.items()}

    @property
    def os_name(self) -> Optional[str]:
        return self.get(props.OS_NAME)

    @property
    def os_version(self) -> Optional[str]:
        return self.get(props.OS_VERSION)

    @property
    def os_arch(self) -> Optional[str]:
        return self.get(props.OS_ARCH)

    @property
    def user_home(self) -> Optional[str]:
        return self.get(props.USER_HOME)

    @property
    def user_dir(self) -> Optional[str]:
        return self.get(props.USER_DIR)

    @property
    def user_name(self) -> Optional[str]:
        return self.get(props.USER_NAME)

    @property
    def user_language(self) -> Optional[str]:
        return self.get(props.USER_LANGUAGE)

    @property
    def user_country(self) -> Optional[str]:
        return self.get(props.USER_COUNTRY)

    @property
    def host_name(self) -> Optional[str]:
        return self.get(props.HOST_NAME)

    @property
    def python_version(self) -> Optional[str]:
        return self.get(props.PYTHON_VERSION)

    @property
    def python_specification_version(self) -> Optional[str]:
        return self.get(props.PYTHON_SPECIFICATION_VERSION)

    @property
    def python_version_enum(self) -> Optional[PythonVersion]:
        return PythonVersion.get(self.python_specification_version)

    def is_python_version_at_least(self, required: VersionLike) -> bool:
        return at_least(self.python_spec, _as_spec(required))

    def is_python_version_at_most(self, limit: VersionLike) -> bool:
        return at_most(self.python_spec, _as_spec(limit))


def init_environment_snapshot(settings=None, host: Optional[HostProperties] = None) -> EnvironmentSnapshot:
    """Capture every known property once and derive the flags from them"""
    if host is None:
        host = HostProperties.from_settings(settings) if settings is not None else HostProperties()

    capture = PropertyCapture(host)
    values = capture.capture_all(host.names)

    # Cached reads; these never touch the host a second time
    os_name = capture.capture(props.OS_NAME).value
    os_version = capture.capture(props.OS_VERSION).value
    spec_version = capture.capture(props.PYTHON_SPECIFICATION_VERSION).value

    snapshot = EnvironmentSnapshot(
        values=MappingProxyType(dict(values)),
        flags=classify(os_name, os_version, spec_version),
        python_spec=parse_version(spec_version),
        host=host,
    )

    absent = sorted(name for name, captured in values.items() if not captured.present)
    logger.info(f"Environment snapshot captured: {len(values)} properties, "
                f"os={os_name!r} {os_version!r}, python={spec_version!r}, "
                f"absent={absent}")
    return snapshot


_snapshot: Optional[EnvironmentSnapshot] = None
_snapshot_lock = threading.Lock()


def get_environment_snapshot(settings=None) -> EnvironmentSnapshot:
    """The process-wide snapshot, captured on first use and never replaced

    ``settings`` only takes effect on the call that performs the capture.
    """
    global _snapshot
    if _snapshot is None:
        with _snapshot_lock:
            if _snapshot is None:
                _snapshot = init_environment_snapshot(settings)
    return _snapshot
