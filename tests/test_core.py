"""Tests for the schema/validator contracts and the modifiers."""

import pytest

from shapeguard import (
    MISSING,
    ErrorCode,
    NullableSchema,
    NullishSchema,
    OptionalSchema,
    RequiredSchema,
    Schema,
    TransformedSchema,
    UnionSchema,
    ValidationError,
    Validator,
    number,
    string,
    valid,
    invalid,
)


class TestValidatorContract:
    def test_validator_is_abstract(self):
        with pytest.raises(TypeError):
            Validator()  # type: ignore[abstract]

    def test_parse_unwraps_validate(self):
        class Positive(Validator[int]):
            def validate(self, value):
                if isinstance(value, int) and value > 0:
                    return valid(value)
                return invalid(ValidationError("not positive", code="invalid_type"))

        assert Positive().parse(3) == 3
        with pytest.raises(ValidationError) as exc_info:
            Positive().parse(-1)
        assert exc_info.value.code is ErrorCode.INVALID_TYPE

    def test_parse_raises_same_error_as_validate(self):
        schema = number()
        result = schema.validate("x")
        with pytest.raises(ValidationError) as exc_info:
            schema.parse("x")
        assert exc_info.value.code is result.error.code
        assert exc_info.value.message == result.error.message

    def test_validate_never_raises_for_bad_input(self):
        schema = string()
        for value in (None, MISSING, 1, [], {}, object()):
            assert schema.validate(value).ok is False


class TestModifiers:
    def test_optional(self):
        schema = string().optional()
        assert isinstance(schema, OptionalSchema)
        assert schema.parse(MISSING) is MISSING
        assert schema.parse("a") == "a"
        result = schema.validate(None)
        assert result.ok is False
        assert result.error.code is ErrorCode.REQUIRED

    def test_nullable(self):
        schema = string().nullable()
        assert isinstance(schema, NullableSchema)
        assert schema.parse(None) is None
        assert schema.parse("a") == "a"
        assert schema.validate(MISSING).error.code is ErrorCode.REQUIRED

    def test_nullish(self):
        schema = string().nullish()
        assert isinstance(schema, NullishSchema)
        assert schema.parse(None) is None
        assert schema.parse(MISSING) is MISSING
        assert schema.validate(1).error.code is ErrorCode.INVALID_TYPE

    def test_required(self):
        schema = string().required()
        assert isinstance(schema, RequiredSchema)
        result = schema.validate(None)
        assert result.ok is False
        assert result.error.code is ErrorCode.REQUIRED
        assert result.error.message == "The value cannot be None."
        assert schema.validate(MISSING).error.message == "The value is required."
        assert schema.parse("a") == "a"

    def test_required_custom_message(self):
        schema = string().nullable().required(message="Name is required")
        assert schema.validate(None).error.message == "Name is required"
        assert schema.validate(MISSING).error.message == "Name is required"

    def test_required_message_callable(self):
        schema = string().optional().required(message=lambda d: f"got {d.value!r}")
        assert schema.validate(MISSING).error.message == "got MISSING"

    def test_required_empty_message(self):
        assert string().required(message="").validate(None).error.message == ""

    def test_later_modifier_wins(self):
        assert string().required().optional().parse(MISSING) is MISSING
        assert string().required().optional().validate(None).ok is False
        assert string().optional().required().validate(MISSING).ok is False
        assert string().nullish().required().validate(None).ok is False
        assert string().required().nullable().parse(None) is None

    def test_acceptance_is_a_union(self):
        for schema in (string().nullable().optional(), string().optional().nullable()):
            assert schema.parse(None) is None
            assert schema.parse(MISSING) is MISSING
            assert schema.parse("a") == "a"

    def test_modifiers_do_not_mutate(self):
        base = string()
        optional = base.optional()
        assert optional is not base
        assert optional.unwrap() is base
        assert base.validate(MISSING).ok is False
        assert base.required().unwrap() is base

    def test_modifiers_are_schemas(self):
        base = number()
        for schema in (base.optional(), base.nullable(), base.nullish(), base.required()):
            assert isinstance(schema, Schema)
            assert isinstance(schema, Validator)
            assert schema.parse(1) == 1

    def test_schemas_are_immutable(self):
        schema = string()
        with pytest.raises(AttributeError):
            schema.trim = True  # type: ignore[misc]


class TestTransform:
    def test_maps_value(self):
        schema = string().transform(str.upper)
        assert isinstance(schema, TransformedSchema)
        assert schema.parse("abc") == "ABC"

    def test_failure_skips_transform(self):
        calls = []
        schema = string().transform(calls.append)
        assert schema.validate(1).error.code is ErrorCode.INVALID_TYPE
        assert calls == []

    def test_transformed_schema_supports_modifiers(self):
        schema = string().transform(len).optional()
        assert schema.parse(MISSING) is MISSING
        assert schema.parse("abcd") == 4

    def test_transform_errors_propagate(self):
        schema = number().transform(lambda x: 1 / x)
        with pytest.raises(ZeroDivisionError):
            schema.validate(0)


class TestRules:
    def test_rule_failure_becomes_result(self):
        def even(value):
            if value % 2:
                raise ValidationError("must be even", code=ErrorCode.INVALID_TYPE)

        schema = number(rules=[even])
        assert schema.parse(2) == 2
        result = schema.validate(3)
        assert result.ok is False
        assert result.error.message == "must be even"

    def test_rules_run_in_order_after_type_check(self):
        calls = []
        schema = number(rules=[lambda v: calls.append(("a", v)), lambda v: calls.append(("b", v))])
        schema.validate("x")
        assert calls == []
        schema.validate(5)
        assert calls == [("a", 5), ("b", 5)]

    def test_other_exceptions_propagate(self):
        def broken(value):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            string(rules=[broken]).validate("a")


class TestUnionOperator:
    def test_or(self):
        schema = string() | number()
        assert isinstance(schema, UnionSchema)
        assert schema.parse("a") == "a"
        assert schema.parse(1) == 1
        assert schema.validate(True).error.code is ErrorCode.INVALID_UNION

    def test_or_with_plain_types(self):
        assert (string() | int).parse(1) == 1
        assert (str | number()).parse("a") == "a"
