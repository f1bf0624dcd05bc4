"""Tests for rison.encoder."""

import pytest

from rison.encoder import encode, encode_string
from rison.errors import EncodeError
from rison.model import Null, VArray, VBool, VInt, VNumber, VObject, VStr


class TestLiterals:
    def test_true(self):
        assert encode(VBool(True)) == "!t"

    def test_false(self):
        assert encode(VBool(False)) == "!f"

    def test_null(self):
        assert encode(Null) == "!n"

    def test_vbool_non_bool(self):
        with pytest.raises(EncodeError):
            encode(VBool(1))


class TestNumbers:
    def test_int(self):
        assert encode(VInt(42)) == "42"

    def test_negative_int(self):
        assert encode(VInt(-7)) == "-7"

    def test_zero(self):
        assert encode(VInt(0)) == "0"

    def test_big_int(self):
        assert encode(VInt(12345678901234567890123)) == "12345678901234567890123"

    def test_bool_is_not_int(self):
        with pytest.raises(EncodeError):
            encode(VInt(True))

    def test_float_is_not_int(self):
        with pytest.raises(EncodeError):
            encode(VInt(1.5))

    def test_number_full(self):
        assert encode(VNumber(-3, "50", 10)) == "-3.50e10"

    def test_number_frac_only(self):
        assert encode(VNumber(1, "007")) == "1.007"

    def test_number_exp_only(self):
        assert encode(VNumber(5, None, -2)) == "5e-2"

    def test_number_empty_frac(self):
        with pytest.raises(EncodeError):
            encode(VNumber(1, ""))

    def test_number_non_digit_frac(self):
        with pytest.raises(EncodeError):
            encode(VNumber(1, "5x"))

    def test_number_int_frac(self):
        with pytest.raises(EncodeError):
            encode(VNumber(1, 5))

    def test_number_without_frac_or_exp(self):
        with pytest.raises(EncodeError):
            encode(VNumber(5))

    def test_number_zero_int(self):
        with pytest.raises(EncodeError):
            encode(VNumber(0, "5"))

    def test_number_zero_int_with_exp(self):
        with pytest.raises(EncodeError):
            encode(VNumber(0, None, 3))

    def test_number_bad_exp(self):
        with pytest.raises(EncodeError):
            encode(VNumber(1, None, "2"))


class TestStrings:
    def test_identifier_bare(self):
        assert encode(VStr("foo_bar")) == "foo_bar"

    def test_empty_quoted(self):
        assert encode(VStr("")) == "''"

    def test_space_quoted(self):
        assert encode(VStr("a b")) == "'a b'"

    def test_escapes(self):
        assert encode(VStr("it's!")) == "'it!'s!!'"

    def test_digit_start_quoted(self):
        assert encode(VStr("1a")) == "'1a'"

    def test_number_like_quoted(self):
        assert encode(VStr("42")) == "'42'"

    def test_non_ascii_passes_through(self):
        assert encode(VStr("héllo")) == "'héllo'"

    def test_control_char_passes_through(self):
        assert encode(VStr("a\nb")) == "'a\nb'"

    def test_non_str(self):
        with pytest.raises(EncodeError):
            encode_string(3)


class TestContainers:
    def test_empty_array(self):
        assert encode(VArray()) == "!()"

    def test_array(self):
        assert encode(VArray([VInt(1), VStr("a b"), Null])) == "!(1,'a b',!n)"

    def test_empty_object(self):
        assert encode(VObject()) == "()"

    def test_object(self):
        obj = VObject([("a", VInt(1)), ("b", VBool(False))])
        assert encode(obj) == "(a:1,b:!f)"

    def test_object_quoted_key(self):
        assert encode(VObject([("a b", VInt(1))])) == "('a b':1)"

    def test_object_duplicate_keys(self):
        obj = VObject([("a", VInt(1)), ("a", VInt(2))])
        assert encode(obj) == "(a:1,a:2)"

    def test_nested(self):
        value = VObject([("a", VObject([("b", VArray([VInt(1), VInt(2), VInt(3)]))]))])
        assert encode(value) == "(a:(b:!(1,2,3)))"

    def test_nested_empty(self):
        assert encode(VArray([VArray(), VObject()])) == "!(!(),())"

    def test_bad_item(self):
        with pytest.raises(EncodeError):
            encode(VArray([1]))

    def test_bad_key(self):
        with pytest.raises(EncodeError):
            encode(VObject([(1, Null)]))


class TestNotAValue:
    def test_python_int(self):
        with pytest.raises(EncodeError):
            encode(5)

    def test_none(self):
        with pytest.raises(EncodeError):
            encode(None)
