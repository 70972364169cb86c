import pytest

from philosophers.parsing import ArgumentError, Config, parse_args, parse_number


def test_parse_number_plain_digits():
    assert parse_number("42") == 42


def test_parse_number_skips_whitespace_and_plus():
    assert parse_number(" \t+17") == 17


def test_parse_number_ignores_trailing_text():
    assert parse_number("200ms") == 200


def test_parse_number_without_digits_is_zero():
    assert parse_number("abc") == 0
    assert parse_number("") == 0


def test_parse_number_rejects_negative():
    with pytest.raises(ArgumentError, match="Invalid argument"):
        parse_number("-5")


def test_parse_number_rejects_overflow():
    with pytest.raises(ArgumentError):
        parse_number("99999999999999999999999")


def test_parse_args_four_arguments():
    config = parse_args(["5", "800", "200", "200"])
    assert config == Config(5, 800, 200, 200, None)


def test_parse_args_with_meal_count():
    config = parse_args(["4", "410", "200", "200", "7"])
    assert config.max_eat == 7
    assert config.nb_philo == 4


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1"] * 6])
def test_parse_args_wrong_count(args):
    with pytest.raises(ArgumentError, match="Wrong number of arguments"):
        parse_args(args)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["251", "800", "200", "200"],
        ["5", "-800", "200", "200"],
        ["5", "800", "200", "200", "-1"],
    ],
)
def test_parse_args_invalid_values(args):
    with pytest.raises(ArgumentError, match="Invalid argument"):
        parse_args(args)


def test_parse_args_accepts_upper_limit():
    assert parse_args(["250", "800", "200", "200"]).nb_philo == 250