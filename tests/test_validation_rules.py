import asyncio

import pytest

from fast_rules import (
    AsyncPredicateValidator,
    AsyncValidatorInvokedSynchronouslyException,
    EqualValidator,
    GreaterThanOrEqualValidator,
    GreaterThanValidator,
    InclusiveBetweenValidator,
    LengthValidator,
    LessThanOrEqualValidator,
    LessThanValidator,
    MaximumLengthValidator,
    MinimumLengthValidator,
    NotEmptyValidator,
    NotEqualValidator,
    NotNullValidator,
    ParentContext,
    PredicateValidator,
    RegularExpressionValidator,
    ValidationContext,
    ValidatorOptions,
)
from fast_rules.core import localization


def ctx(value, name="Name", instance=None):
    return ValidationContext(
        property_value=value,
        property_name=name,
        parent_context=ParentContext(instance_to_validate=instance),
    )


def message(validator, value, name="Name", instance=None):
    failures = validator.validate(ctx(value, name, instance))
    assert len(failures) == 1
    return failures[0].error_message


def test_not_null():
    assert NotNullValidator().validate(ctx("")) == []
    assert message(NotNullValidator(), None) == "'Name' must not be empty."


@pytest.mark.parametrize("value", [None, "", "   ", [], {}, ()])
def test_not_empty_rejects_empty_values(value):
    assert len(NotEmptyValidator().validate(ctx(value))) == 1


@pytest.mark.parametrize("value", ["a", [0], 0, False])
def test_not_empty_accepts_values(value):
    assert NotEmptyValidator().validate(ctx(value)) == []


def test_length_bounds_and_placeholders():
    validator = LengthValidator(2, 4)
    assert validator.validate(ctx("abc")) == []
    assert validator.validate(ctx(None)) == []
    assert message(validator, "abcdef") == \
        "'Name' must be between 2 and 4 characters. You entered 6 characters."


def test_length_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        LengthValidator(5, 1)


def test_minimum_and_maximum_length_use_their_own_templates():
    assert message(MinimumLengthValidator(3), "ab") == \
        "The length of 'Name' must be at least 3 characters. You entered 2 characters."
    assert message(MaximumLengthValidator(1), "ab") == \
        "The length of 'Name' must be 1 characters or fewer. You entered 2 characters."


def test_comparisons():
    assert GreaterThanValidator(1).validate(ctx(2)) == []
    assert message(GreaterThanValidator(1), 1, "Age") == "'Age' must be greater than '1'."
    assert message(GreaterThanOrEqualValidator(2), 1, "Age") == "'Age' must be greater than or equal to '2'."
    assert message(LessThanValidator(1), 1, "Age") == "'Age' must be less than '1'."
    assert message(LessThanOrEqualValidator(0), 1, "Age") == "'Age' must be less than or equal to '0'."
    assert message(EqualValidator("a"), "b") == "'Name' must be equal to 'a'."
    assert message(NotEqualValidator("a"), "a") == "'Name' must not be equal to 'a'."


def test_ordering_comparisons_skip_none_but_equality_does_not():
    assert GreaterThanValidator(1).validate(ctx(None)) == []
    assert len(EqualValidator(1).validate(ctx(None))) == 1


def test_comparison_against_other_property():
    validator = LessThanValidator(lambda instance: instance["end"])
    assert validator.validate(ctx(1, "start", {"end": 5})) == []
    assert message(validator, 9, "start", {"end": 5}) == "'start' must be less than '5'."


def test_inclusive_between():
    validator = InclusiveBetweenValidator(1, 10)
    assert validator.validate(ctx(10)) == []
    assert message(validator, 11, "Score") == "'Score' must be between 1 and 10. You entered 11."
    with pytest.raises(ValueError):
        InclusiveBetweenValidator(10, 1)


def test_regular_expression():
    validator = RegularExpressionValidator(r"^\d+$")
    assert validator.validate(ctx("123")) == []
    assert validator.validate(ctx(None)) == []
    failure = validator.validate(ctx("12a"))[0]
    assert failure.error_message == "'Name' is not in the correct format."
    assert failure.formatted_message_placeholder_values["RegularExpression"] == r"^\d+$"


def test_predicate_receives_instance_value_and_context(sample_person):
    seen = []

    def predicate(instance, value, context):
        seen.append((instance, value, context.property_name))
        return "@" in value

    validator = PredicateValidator(predicate)
    assert validator.validate(ctx(sample_person["email"], "email", sample_person)) == []
    assert message(validator, "nope", "email", sample_person) == \
        "The specified condition was not met for 'email'."
    assert seen[0] == (sample_person, sample_person["email"], "email")


def test_localized_builtin_template():
    localization.set_locale("fr")
    assert message(NotEmptyValidator(), "") == "'Name' ne doit pas être vide."


def test_builtin_with_error_code_override():
    localization.add_translation("en", "person.name.required", "Please tell us your name")
    validator = NotNullValidator(ValidatorOptions(error_code="person.name.required"))
    failure = validator.validate(ctx(None))[0]
    assert failure.error_message == "Please tell us your name"
    assert failure.error_code == "person.name.required"


@pytest.mark.asyncio
async def test_async_predicate():
    async def is_unique(instance, value, context, cancellation):
        await asyncio.sleep(0)
        return value != "taken"

    validator = AsyncPredicateValidator(is_unique)
    assert validator.should_validate_asynchronously(ctx("x")) is True
    assert await validator.validate_async(ctx("free")) == []

    failures = await validator.validate_async(ctx("taken", "username"))
    assert failures[0].error_message == "The specified condition was not met for 'username'."


def test_async_predicate_cannot_run_synchronously():
    async def predicate(instance, value, context, cancellation):
        return True

    with pytest.raises(AsyncValidatorInvokedSynchronouslyException):
        AsyncPredicateValidator(predicate).validate(ctx("x"))


def test_incomparable_value_fails_instead_of_raising():
    failures = GreaterThanValidator(1).validate(ctx("a", "Age"))

    assert len(failures) == 1
    assert failures[0].error_message == "'Age' must be greater than '1'."
    assert failures[0].formatted_message_placeholder_values["ComparisonValue"] == 1
    assert LessThanOrEqualValidator(5).validate(ctx([1], "Age"))[0].attempted_value == [1]
