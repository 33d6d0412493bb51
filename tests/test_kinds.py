"""
Tests for container kind classification and single-step access.
"""

from collections import OrderedDict, namedtuple

from funkit.kinds import MISSING, ContainerKind, as_index, container_kind, get_child, has_child


Point = namedtuple("Point", ["x", "y"])


class TestContainerKind:
    """Test node classification."""

    def test_mappings(self):
        assert container_kind({}) is ContainerKind.MAPPING
        assert container_kind(OrderedDict()) is ContainerKind.MAPPING

    def test_sequences(self):
        assert container_kind([]) is ContainerKind.SEQUENCE
        assert container_kind(()) is ContainerKind.SEQUENCE
        assert container_kind(Point(1, 2)) is ContainerKind.SEQUENCE

    def test_scalars(self):
        """Strings and bytes are leaves."""
        for value in ("abc", b"abc", 1, None, 1.5, print):
            assert container_kind(value) is ContainerKind.SCALAR


class TestMissing:
    """Test the absent-value marker."""

    def test_missing_is_singleton_and_falsy(self):
        assert type(MISSING)() is MISSING
        assert not MISSING
        assert MISSING is not None
        assert repr(MISSING) == "MISSING"


class TestAccess:
    """Test single-step access."""

    def test_as_index(self):
        assert as_index(2) == 2
        assert as_index("2") == 2
        assert as_index(True) is None
        assert as_index("a") is None

    def test_get_child_mapping(self):
        assert get_child({"a": 1}, "a") == 1
        assert get_child({"a": 1}, "b") is MISSING
        assert get_child({"a": None}, "a") is None

    def test_get_child_sequence(self):
        assert get_child([1, 2], 1) == 2
        assert get_child([1, 2], "0") == 1
        assert get_child([1, 2], -1) == 2
        assert get_child([1, 2], 2) is MISSING

    def test_get_child_scalar(self):
        assert get_child("abc", 0) is MISSING
        assert get_child(None, "a", default=None) is None

    def test_has_child(self):
        assert has_child({"a": None}, "a")
        assert not has_child([], 0)
