"""Ordered version values for "at least" / "at most" checks"""
import functools
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

_LEADING_VERSION = re.compile(r"^\s*(\d+(?:\.\d+)*)")


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class VersionSpec:
    """Dotted version compared numerically, component by component

    Trailing zero components are dropped so "3.12" equals "3.12.0" and "0"
    has no components at all. The lowest flag marks input that could not be
    parsed; it orders below every real version, "0" included.
    """
    components: Tuple[int, ...]
    text: str = ""
    lowest: bool = field(default=False, repr=False)

    def _key(self) -> tuple:
        return (0,) if self.lowest else (1, self.components)

    def __eq__(self, other):
        if not isinstance(other, VersionSpec):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, VersionSpec):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.components) or "0"

    @property
    def major(self) -> int:
        return self.components[0] if self.components else 0

    @property
    def minor(self) -> int:
        return self.components[1] if len(self.components) > 1 else 0


LOWEST = VersionSpec(components=(), text="", lowest=True)


def parse_version(text: Optional[str]) -> VersionSpec:
    """Parse the leading numeric dotted run of text; anything else is LOWEST"""
    if not text:
        return LOWEST
    match = _LEADING_VERSION.match(text)
    if not match:
        return LOWEST
    components = [int(part) for part in match.group(1).split(".")]
    while components and components[-1] == 0:
        components.pop()
    return VersionSpec(components=tuple(components), text=text)


def at_least(actual: VersionSpec, required: VersionSpec) -> bool:
    return actual >= required


def at_most(actual: VersionSpec, limit: VersionSpec) -> bool:
    return actual <= limit


class PythonVersion(Enum):
    """Known Python language specification versions"""
    PYTHON_3_8 = "3.8"
    PYTHON_3_9 = "3.9"
    PYTHON_3_10 = "3.10"
    PYTHON_3_11 = "3.11"
    PYTHON_3_12 = "3.12"
    PYTHON_3_13 = "3.13"
    PYTHON_3_14 = "3.14"

    @property
    def spec(self) -> VersionSpec:
        return parse_version(self.value)

    def at_least(self, required: "PythonVersion") -> bool:
        return at_least(self.spec, required.spec)

    def at_most(self, limit: "PythonVersion") -> bool:
        return at_most(self.spec, limit.spec)

    @classmethod
    def get(cls, text: Optional[str]) -> Optional["PythonVersion"]:
        """Look up a known version by its "major.minor" text, None if unknown"""
        if not text:
            return None
        wanted = parse_version(text)
        for version in cls:
            if version.spec == wanted:
                return version
        return None
