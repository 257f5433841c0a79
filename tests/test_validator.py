import pytest

from missing_number.validator import InputValidator, ValidationResult


@pytest.fixture
def validator():
    return InputValidator()


@pytest.mark.parametrize("numbers", [[0], [1], [3, 0, 1], [9, 6, 4, 2, 3, 5, 7, 0, 1], [2, 1]])
def test_accepts_valid_instances(validator, numbers):
    assert validator.validate(numbers) == ValidationResult(True)
    assert validator.is_valid_input(numbers)
    assert validator.get_validation_error(numbers) == ""


def test_rejects_none(validator):
    assert not validator.is_valid_input(None)
    assert "null" in validator.get_validation_error(None)


def test_rejects_empty(validator):
    res = validator.validate([])
    assert not res.is_valid
    assert "empty" in res.error


def test_rejects_duplicates(validator):
    assert validator.get_validation_error([1, 1]) == "All numbers must be distinct"


def test_rejects_out_of_range(validator):
    assert validator.get_validation_error([0, 1, 5]) == "All numbers must be in range [0, 3]"
    assert "range" in validator.get_validation_error([-1, 0])


def test_upper_bound_is_inclusive(validator):
    # n = 3 entra
    assert validator.is_valid_input([0, 1, 3])
    assert not validator.is_valid_input([0, 1, 4])


def test_duplicates_win_over_range(validator):
    assert "distinct" in validator.get_validation_error([7, 7, 7])


def test_accepts_tuples_and_generators(validator):
    assert validator.is_valid_input((1, 0))
    assert validator.is_valid_input(x for x in [1, 0])
