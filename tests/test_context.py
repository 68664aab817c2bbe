"""Tests for validation_context."""

from shapeguard import ErrorCode, array, is_fail_fast, number, record, shape, string, validation_context


class TestValidationContext:
    def test_default_is_collect_all(self):
        assert is_fail_fast() is False

    def test_flag_is_scoped(self):
        with validation_context(fail_fast=True):
            assert is_fail_fast() is True
            with validation_context(fail_fast=False):
                assert is_fail_fast() is False
            assert is_fail_fast() is True
        assert is_fail_fast() is False

    def test_flag_reset_after_exception(self):
        try:
            with validation_context(fail_fast=True):
                raise RuntimeError
        except RuntimeError:
            pass
        assert is_fail_fast() is False

    def test_shape_fail_fast(self):
        user = shape({"name": string(), "age": number()})
        data = {"name": 1, "age": "x"}
        assert len(user.validate(data).error.sub_errors) == 2

        with validation_context(fail_fast=True):
            error = user.validate(data).error
        assert error.code is ErrorCode.INVALID_OBJECT_SHAPE
        assert [e.path for e in error.sub_errors] == [("name",)]
        assert error.message == "The object has invalid property 'name'."

    def test_array_fail_fast(self):
        with validation_context(fail_fast=True):
            error = array(number()).validate([1, "a", "b"]).error
        assert [e.path for e in error.sub_errors] == [(1,)]

    def test_record_fail_fast(self):
        with validation_context(fail_fast=True):
            error = record(string(), number()).validate({"a": "x", "b": "y"}).error
        assert len(error.sub_errors) == 1

    def test_valid_data_unaffected(self):
        with validation_context(fail_fast=True):
            assert shape({"a": number()}).parse({"a": 1}) == {"a": 1}
