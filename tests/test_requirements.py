import pytest

from passutils.charsets import CharacterClass, GenerationOptions, build_pool
from passutils.errors import (
    DisabledClassRequirementError,
    EmptyClassPoolRequirementError,
    InvalidNumberError,
    InvalidOptionError,
    InvalidRequirementError,
    LengthTooShortError,
    UnsatisfiableRequirementError,
)
from passutils.requirements import Requirements, validate_requirements


def check(length, options, requirements):
    validate_requirements(length, options, requirements, build_pool(options))


def test_defaults_are_zero():
    reqs = Requirements()
    assert reqs.total == 0
    assert all(reqs.minimum(c) == 0 for c in CharacterClass)


def test_valid_requirements_pass():
    check(10, GenerationOptions(), Requirements(min_upper=2, min_lower=2, min_numbers=2, min_symbols=2))


def test_negative_minimum():
    with pytest.raises(InvalidRequirementError, match="min_symbols"):
        check(10, GenerationOptions(), Requirements(min_symbols=-1))


def test_malformed_minimum():
    with pytest.raises(InvalidNumberError):
        check(10, GenerationOptions(), Requirements(min_upper="2"))
    with pytest.raises(InvalidNumberError):
        check(10, GenerationOptions(), Requirements(min_upper=1.5))
    with pytest.raises(InvalidNumberError):
        check(10, GenerationOptions(), Requirements(min_upper=True))


def test_sum_exceeding_length_names_minimum_length():
    with pytest.raises(LengthTooShortError) as excinfo:
        check(5, GenerationOptions(), Requirements(min_upper=3, min_numbers=4))
    assert excinfo.value.minimum_length == 7
    assert "7" in str(excinfo.value)


def test_sum_equal_to_length_is_allowed():
    check(4, GenerationOptions(), Requirements(min_upper=1, min_lower=1, min_numbers=1, min_symbols=1))


def test_minimum_on_disabled_class():
    with pytest.raises(DisabledClassRequirementError) as excinfo:
        check(4, GenerationOptions(uppercase=False), Requirements(min_upper=1))
    assert excinfo.value.character_class is CharacterClass.UPPERCASE


def test_zero_minimum_on_disabled_class_is_fine():
    check(4, GenerationOptions(uppercase=False), Requirements(min_upper=0))


def test_minimum_on_filtered_class():
    options = GenerationOptions(exclude="123456789", similar=False)
    with pytest.raises(EmptyClassPoolRequirementError) as excinfo:
        check(4, options, Requirements(min_numbers=1))
    assert excinfo.value.character_class is CharacterClass.NUMERIC


def test_length_checked_before_class_checks():
    with pytest.raises(LengthTooShortError):
        check(2, GenerationOptions(uppercase=False), Requirements(min_upper=3))


def test_unsatisfiable_errors_share_a_base():
    for exc in (LengthTooShortError, DisabledClassRequirementError, EmptyClassPoolRequirementError):
        assert issubclass(exc, UnsatisfiableRequirementError)
        assert issubclass(exc, ValueError)


def test_from_mapping_accepts_both_spellings():
    assert Requirements.from_mapping({"minUpper": 2, "min_lower": 3}) == Requirements(min_upper=2, min_lower=3)
    assert Requirements.from_mapping(None) == Requirements()


def test_from_mapping_rejects_unknown_and_duplicate_keys():
    with pytest.raises(InvalidOptionError, match="minUppercase"):
        Requirements.from_mapping({"minUppercase": 2})
    with pytest.raises(InvalidOptionError):
        Requirements.from_mapping({"minUpper": 2, "min_upper": 2})


@pytest.mark.parametrize("data", [5, "abc", [1], [("minUpper", 2)]])
def test_from_mapping_requires_an_object(data):
    with pytest.raises(InvalidOptionError, match="must be an object"):
        Requirements.from_mapping(data)
