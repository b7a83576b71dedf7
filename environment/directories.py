"""Live directory lookups

Unlike the snapshot, these re-read the host on every call and let failures
through: a denied read raises PropertyAccessDenied and an unset property
raises PropertyUndefined. There is no usable path to fall back to.

Without an explicit host they read through the host view of the
process-wide snapshot, so overrides and the deny list apply here as well.
"""
from pathlib import Path
from typing import Optional

from . import properties as props
from .properties import HostProperties, PropertyUndefined
from .snapshot import get_environment_snapshot


def resolve_directory(name: str, host: Optional[HostProperties] = None) -> Path:
    """Build a Path from the current value of property ``name``"""
    if host is None:
        host = get_environment_snapshot().host
    value = host.read(name)
    if value is None:
        raise PropertyUndefined(name)
    return Path(value)


def get_user_home(host: Optional[HostProperties] = None) -> Path:
    return resolve_directory(props.USER_HOME, host)


def get_user_dir(host: Optional[HostProperties] = None) -> Path:
    return resolve_directory(props.USER_DIR, host)


def get_python_home(host: Optional[HostProperties] = None) -> Path:
    return resolve_directory(props.PYTHON_HOME, host)


def get_temp_dir(host: Optional[HostProperties] = None) -> Path:
    return resolve_directory(props.PYTHON_IO_TMPDIR, host)


DIRECTORY_ACCESSORS = {
    props.USER_HOME: get_user_home,
    props.USER_DIR: get_user_dir,
    props.PYTHON_HOME: get_python_home,
    props.PYTHON_IO_TMPDIR: get_temp_dir,
}
