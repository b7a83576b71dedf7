"""Boolean platform classification from literal name and version prefixes"""
from dataclasses import dataclass, fields
from typing import Dict, Optional, Tuple


def prefix_match(value: Optional[str], prefix: str) -> bool:
    """True if value is set and starts with prefix (ordinal, case-sensitive)"""
    if value is None:
        return False
    return value.startswith(prefix)


def os_name_matches(os_name: Optional[str], name_prefix: str) -> bool:
    return prefix_match(os_name, name_prefix)


def os_name_and_version_match(os_name: Optional[str], os_version: Optional[str],
                              name_prefix: str, version_prefix: str) -> bool:
    """Both the OS name and OS version must be set and match their prefixes"""
    if os_name is None or os_version is None:
        return False
    return os_name.startswith(name_prefix) and os_version.startswith(version_prefix)


def python_version_matches(spec_version: Optional[str], version_prefix: str) -> bool:
    return prefix_match(spec_version, version_prefix)


WINDOWS_PREFIX = "Windows"

# Flag -> OS name prefixes; a flag is set when any prefix matches
OS_NAME_PREFIXES: Dict[str, Tuple[str, ...]] = {
    "is_os_aix": ("AIX",),
    "is_os_hp_ux": ("HP-UX",),
    "is_os_irix": ("IRIX", "Irix"),
    "is_os_linux": ("Linux", "LINUX"),
    "is_os_mac": ("Darwin", "Mac"),
    "is_os_mac_osx": ("Darwin", "Mac OS X"),
    "is_os_free_bsd": ("FreeBSD",),
    "is_os_open_bsd": ("OpenBSD",),
    "is_os_net_bsd": ("NetBSD",),
    "is_os_os2": ("OS/2",),
    "is_os_solaris": ("Solaris",),
    "is_os_sun_os": ("SunOS",),
    "is_os_windows": (WINDOWS_PREFIX,),
    "is_os_windows_nt": (WINDOWS_PREFIX + " NT",),
}

# Flag -> (OS name prefix, OS version prefix)
WINDOWS_VERSION_PREFIXES: Dict[str, Tuple[str, str]] = {
    "is_os_windows_95": (WINDOWS_PREFIX + " 9", "4.0"),
    "is_os_windows_98": (WINDOWS_PREFIX + " 9", "4.1"),
    "is_os_windows_me": (WINDOWS_PREFIX, "4.9"),
    "is_os_windows_2000": (WINDOWS_PREFIX, "5.0"),
    "is_os_windows_xp": (WINDOWS_PREFIX, "5.1"),
    "is_os_windows_2003": (WINDOWS_PREFIX, "5.2"),
    "is_os_windows_vista": (WINDOWS_PREFIX, "6.0"),
    "is_os_windows_7": (WINDOWS_PREFIX, "6.1"),
    "is_os_windows_8": (WINDOWS_PREFIX, "6.2"),
    "is_os_windows_8_1": (WINDOWS_PREFIX, "6.3"),
    "is_os_windows_10": (WINDOWS_PREFIX, "10.0"),
}

PYTHON_VERSION_PREFIXES: Dict[str, str] = {
    "is_python_3_8": "3.8",
    "is_python_3_9": "3.9",
    "is_python_3_10": "3.10",
    "is_python_3_11": "3.11",
    "is_python_3_12": "3.12",
    "is_python_3_13": "3.13",
    "is_python_3_14": "3.14",
}

UNIX_FLAGS: Tuple[str, ...] = (
    "is_os_aix",
    "is_os_hp_ux",
    "is_os_irix",
    "is_os_linux",
    "is_os_mac_osx",
    "is_os_solaris",
    "is_os_sun_os",
    "is_os_free_bsd",
    "is_os_open_bsd",
    "is_os_net_bsd",
)


@dataclass(frozen=True)
class ClassificationFlags:
    """Platform and runtime flags computed once from captured values"""
    is_os_aix: bool = False
    is_os_hp_ux: bool = False
    is_os_irix: bool = False
    is_os_linux: bool = False
    is_os_mac: bool = False
    is_os_mac_osx: bool = False
    is_os_free_bsd: bool = False
    is_os_open_bsd: bool = False
    is_os_net_bsd: bool = False
    is_os_os2: bool = False
    is_os_solaris: bool = False
    is_os_sun_os: bool = False
    is_os_unix: bool = False
    is_os_windows: bool = False
    is_os_windows_nt: bool = False
    is_os_windows_95: bool = False
    is_os_windows_98: bool = False
    is_os_windows_me: bool = False
    is_os_windows_2000: bool = False
    is_os_windows_xp: bool = False
    is_os_windows_2003: bool = False
    is_os_windows_vista: bool = False
    is_os_windows_7: bool = False
    is_os_windows_8: bool = False
    is_os_windows_8_1: bool = False
    is_os_windows_10: bool = False
    is_python_3_8: bool = False
    is_python_3_9: bool = False
    is_python_3_10: bool = False
    is_python_3_11: bool = False
    is_python_3_12: bool = False
    is_python_3_13: bool = False
    is_python_3_14: bool = False

    def as_dict(self) -> Dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def classify(os_name: Optional[str], os_version: Optional[str],
             spec_version: Optional[str]) -> ClassificationFlags:
    """Evaluate every prefix table against the given values"""
    flags: Dict[str, bool] = {}

    for flag, prefixes in OS_NAME_PREFIXES.items():
        flags[flag] = any(os_name_matches(os_name, prefix) for prefix in prefixes)

    for flag, (name_prefix, version_prefix) in WINDOWS_VERSION_PREFIXES.items():
        flags[flag] = os_name_and_version_match(os_name, os_version, name_prefix, version_prefix)

    for flag, prefix in PYTHON_VERSION_PREFIXES.items():
        flags[flag] = python_version_matches(spec_version, prefix)

    flags["is_os_unix"] = any(flags[flag] for flag in UNIX_FLAGS)

    return ClassificationFlags(**flags)
