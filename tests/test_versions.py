"""Tests for version parsing and comparison"""
from environment.versions import LOWEST, PythonVersion, at_least, at_most, parse_version


class TestParseVersion:
    """Test tolerant version parsing"""

    def test_parse_dotted(self):
        version = parse_version("3.12.1")

        assert version.components == (3, 12, 1)
        assert version.major == 3
        assert version.minor == 12
        assert str(version) == "3.12.1"

    def test_unparseable_is_lowest(self):
        assert parse_version("") == LOWEST
        assert parse_version(None) == LOWEST
        assert parse_version("abc") == LOWEST

    def test_trailing_suffix_ignored(self):
        assert parse_version("3.13.0rc1") == parse_version("3.13")

    def test_trailing_zeros_are_insignificant(self):
        assert parse_version("3.12.0") == parse_version("3.12")


class TestVersionComparison:
    """Test numeric ordering"""

    def test_at_least(self):
        assert at_least(parse_version("1.7"), parse_version("1.6")) is True
        assert at_least(parse_version("1.6"), parse_version("1.7")) is False
        assert at_least(parse_version("1.7"), parse_version("1.7")) is True

    def test_unparseable_is_below_everything(self):
        assert at_least(parse_version(""), parse_version("1.0")) is False
        assert at_least(parse_version("0.1"), parse_version("")) is True

    def test_numeric_not_lexical_ordering(self):
        """Test multi-digit components order numerically"""
        assert at_least(parse_version("9"), parse_version("8")) is True
        assert at_least(parse_version("3.10"), parse_version("3.9")) is True
        assert at_least(parse_version("10.0"), parse_version("9.9")) is True

    def test_patch_level(self):
        assert at_least(parse_version("1.6.5"), parse_version("1.6")) is True
        assert at_least(parse_version("1.6"), parse_version("1.6.5")) is False

    def test_at_most(self):
        assert at_most(parse_version("3.8"), parse_version("3.12")) is True
        assert at_most(parse_version("3.12"), parse_version("3.8")) is False


class TestPythonVersion:
    """Test the named version table"""

    def test_get(self):
        assert PythonVersion.get("3.12") is PythonVersion.PYTHON_3_12
        assert PythonVersion.get("3.10") is PythonVersion.PYTHON_3_10
        assert PythonVersion.get("2.7") is None
        assert PythonVersion.get(None) is None

    def test_ordering(self):
        assert PythonVersion.PYTHON_3_10.at_least(PythonVersion.PYTHON_3_9) is True
        assert PythonVersion.PYTHON_3_9.at_least(PythonVersion.PYTHON_3_10) is False
        assert PythonVersion.PYTHON_3_9.at_most(PythonVersion.PYTHON_3_10) is True

    def test_zero_is_above_lowest(self):
        """Test an explicit zero version is still a real version"""
        assert parse_version("0") != LOWEST
        assert parse_version("0.0") == parse_version("0")
        assert at_least(parse_version(""), parse_version("0")) is False
        assert at_least(parse_version("0"), parse_version("")) is True
        assert at_most(parse_version("abc"), parse_version("0.0")) is True

    def test_hashable(self):
        assert len({parse_version("3.12"), parse_version("3.12.0"), LOWEST, parse_version("0")}) == 3
