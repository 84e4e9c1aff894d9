"""Unit tests for parameter coercion helpers."""

from pathlib import Path

import pytest

from blockutils.core.exceptions import InvalidInputError
from blockutils.core.params import coerce_file_reference, coerce_string_list


class TestCoerceFileReference:
    def test_string_becomes_path(self):
        result = coerce_file_reference("/tmp/report.txt")

        assert isinstance(result, Path)
        assert result == Path("/tmp/report.txt")

    def test_path_is_returned_unchanged(self, tmp_path):
        path = tmp_path / "data.bin"
        assert coerce_file_reference(path) is path

    @pytest.mark.parametrize("value", [None, 42, b"/tmp/x", ["/tmp/x"]])
    def test_rejects_other_types(self, value):
        with pytest.raises(InvalidInputError, match="neither string nor Path"):
            coerce_file_reference(value)


class TestCoerceStringList:
    def test_single_string(self):
        assert coerce_string_list("alpha") == ["alpha"]

    def test_list_of_strings(self):
        assert coerce_string_list(["a", "b", "c"]) == ["a", "b", "c"]

    def test_tuple_of_strings(self):
        assert coerce_string_list(("a", "b")) == ["a", "b"]

    def test_empty_sequence(self):
        assert coerce_string_list([]) == []

    def test_returns_new_list(self):
        original = ["a"]
        result = coerce_string_list(original)

        assert result == original
        assert result is not original

    def test_rejects_non_string_item(self):
        """A single bad item fails the whole call."""
        with pytest.raises(InvalidInputError, match="is not a string"):
            coerce_string_list(["a", 1, "c"])

    @pytest.mark.parametrize("value", [None, 42, b"abc", {"a": "b"}])
    def test_rejects_other_types(self, value):
        with pytest.raises(
            InvalidInputError,
            match="neither a sequence of strings, nor a string",
        ):
            coerce_string_list(value)
