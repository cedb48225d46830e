"""Tests for scalar coercion and formatting."""

import pytest

from manifestkit.yamlsubset import UnrepresentableValueError, coerce, format_scalar
from manifestkit.yamlsubset.scalars import needs_quoting


class TestCoerce:
    """Tests for raw token to value coercion."""

    def test_integers(self):
        assert coerce("42") == 42
        assert coerce("-7") == -7
        assert isinstance(coerce("0"), int)

    def test_floats(self):
        assert coerce("3.14") == 3.14
        assert coerce("-0.5") == -0.5
        assert isinstance(coerce("1.0"), float)

    def test_booleans_are_case_insensitive(self):
        assert coerce("true") is True
        assert coerce("TRUE") is True
        assert coerce("False") is False

    @pytest.mark.parametrize("raw", ["", "   ", "null", "Null", "NULL", "~"])
    def test_null_forms(self, raw):
        assert coerce(raw) is None

    def test_quotes_force_string(self):
        """Quote stripping runs before numeric and boolean detection."""
        assert coerce('"123"') == "123"
        assert coerce('"true"') == "true"
        assert coerce("'null'") == "null"
        assert coerce('""') == ""

    def test_no_escape_processing(self):
        assert coerce('"a\\"b"') == 'a\\"b'

    def test_mismatched_quotes_stay_raw(self):
        assert coerce("\"abc'") == "\"abc'"
        assert coerce('"') == '"'

    def test_strings_fall_through_unchanged(self):
        assert coerce("argocd-service.vsphere.vmware.com") == "argocd-service.vsphere.vmware.com"
        assert coerce("1.0.0-24815986") == "1.0.0-24815986"
        assert coerce("yes") == "yes"
        assert coerce("nil") == "nil"

    def test_partial_numbers_are_strings(self):
        assert coerce("1.") == "1."
        assert coerce(".5") == ".5"
        assert coerce("1e5") == "1e5"
        assert coerce("+3") == "+3"

    def test_integer_outside_64_bit_range_is_string(self):
        assert coerce("9223372036854775807") == 9223372036854775807
        assert coerce("9223372036854775808") == "9223372036854775808"


class TestFormatScalar:
    """Tests for value to token formatting."""

    def test_basic_values(self):
        assert format_scalar(None) == "null"
        assert format_scalar(True) == "true"
        assert format_scalar(False) == "false"
        assert format_scalar(42) == "42"
        assert format_scalar("plain") == "plain"

    def test_floats_keep_a_decimal_point(self):
        assert format_scalar(1.5) == "1.5"
        assert format_scalar(2.0) == "2.0"
        assert format_scalar(1e20) == "100000000000000000000.0"
        assert format_scalar(1e-7) == "0.0000001"

    @pytest.mark.parametrize(
        "text",
        ["http://example.com", "true", "NULL", "123abc", " padded", "", "~", "-5", "[]", "3.5"],
    )
    def test_strings_that_need_quotes(self, text):
        assert needs_quoting(text)
        formatted = format_scalar(text)
        assert formatted.startswith('"') and formatted.endswith('"')

    def test_mixed_quotes_use_single_quotes(self):
        text = "it's \"here\""
        assert format_scalar(text) == "'it's \"here\"'"
        assert coerce(format_scalar(text)) == text

    def test_single_quotes_when_only_double_quotes_present(self):
        assert format_scalar('say "hi"') == "'say \"hi\"'"

    @pytest.mark.parametrize(
        "value",
        [
            None, True, False, 0, -12, 3.25, 1e-7,
            "plain", "true", "42", "", "a: b", 'say "hi"', "it's \"x\"", "~",
        ],
    )
    def test_coerce_inverts_format(self, value):
        assert coerce(format_scalar(value)) == value
        assert type(coerce(format_scalar(value))) is type(value)

    def test_unrepresentable_values(self):
        with pytest.raises(UnrepresentableValueError):
            format_scalar(float("nan"))
        with pytest.raises(UnrepresentableValueError):
            format_scalar(float("inf"))
        with pytest.raises(UnrepresentableValueError):
            format_scalar("two\nlines")
        with pytest.raises(UnrepresentableValueError):
            format_scalar(object())
