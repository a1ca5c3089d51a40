import pytest

from passgen.config import DEFAULT_CONFIG, MAX_LENGTH, PassgenConfig
from passgen.options import Option, parse_args, parse_length, parse_option


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("+l", Option.LOWER_ENABLE),
        ("-l", Option.LOWER_DISABLE),
        ("+u", Option.UPPER_ENABLE),
        ("-u", Option.UPPER_DISABLE),
        ("+n", Option.NUMBER_ENABLE),
        ("-n", Option.NUMBER_DISABLE),
        ("+s", Option.SYMBOL_ENABLE),
        ("-s", Option.SYMBOL_DISABLE),
        ("--enable-lower", Option.LOWER_ENABLE),
        ("--disable-lower", Option.LOWER_DISABLE),
        ("--enable-upper", Option.UPPER_ENABLE),
        ("--disable-upper", Option.UPPER_DISABLE),
        ("--enable-number", Option.NUMBER_ENABLE),
        ("--disable-number", Option.NUMBER_DISABLE),
        ("--enable-symbol", Option.SYMBOL_ENABLE),
        ("--disable-symbol", Option.SYMBOL_DISABLE),
        ("--help", Option.HELP),
    ],
)
def test_parse_option_recognized(arg, expected):
    assert parse_option(arg) is expected


@pytest.mark.parametrize(
    "arg",
    ["", "+", "-", "--", "+x", "-h", "+ll", "-lu", "l", "22", "--enable", "--HELP", "--help=yes", "---help"],
)
def test_parse_option_unrecognized(arg):
    assert parse_option(arg) is Option.UNRECOGNIZED


@pytest.mark.parametrize(
    "token, expected",
    [
        ("0", 0),
        ("8", 8),
        ("022", 22),
        (str(MAX_LENGTH), MAX_LENGTH),
        ("0" * 5000 + "8", 8),
        ("0" * 30 + str(MAX_LENGTH), MAX_LENGTH),
    ],
)
def test_parse_length_valid(token, expected):
    assert parse_length(token) == expected


@pytest.mark.parametrize(
    "token",
    [
        "", "-5", "+5", " 5", "5 ", "5a", "1_000", "0x10", "٣",
        str(MAX_LENGTH + 1), "9" * 20, "9" * 5000, "1" + "0" * 4400,
    ],
)
def test_parse_length_invalid(token):
    assert parse_length(token) is None


def test_no_arguments_gives_defaults():
    result = parse_args([])
    assert result.config == DEFAULT_CONFIG
    assert not result.show_help
    assert result.unrecognized == []


def test_last_flag_wins():
    result = parse_args(["+s", "-s", "+s"])
    assert result.config.symbol is True

    result = parse_args(["--enable-lower", "-l"])
    assert result.config.lower is False


def test_length_from_last_argument():
    result = parse_args(["+s", "-n", "8"])
    assert result.config == PassgenConfig(lower=True, upper=True, number=False, symbol=True, length=8)
    assert result.unrecognized == []


def test_length_only_accepted_last():
    result = parse_args(["10", "+l"])
    assert result.unrecognized == ["10"]
    assert result.config.length == 22
    assert result.config.lower is True


def test_bad_final_length_falls_back_to_default():
    result = parse_args(["-s", "abc"])
    assert result.unrecognized == ["abc"]
    assert result.config.length == 22


def test_unrecognized_options_do_not_stop_parsing():
    result = parse_args(["-x", "-u", "bogus", "--nope", "+s", "4"])
    assert result.unrecognized == ["-x", "bogus", "--nope"]
    assert result.config == PassgenConfig(upper=False, symbol=True, length=4)


def test_help_stops_parsing():
    result = parse_args(["junk", "-l", "--help", "-u", "more", "7"])
    assert result.show_help
    assert result.unrecognized == ["junk"]
    assert result.config.lower is False
    assert result.config.upper is True
    assert result.config.length == 22


def test_help_as_only_argument():
    result = parse_args(["--help"])
    assert result.show_help
    assert result.unrecognized == []


def test_zero_length():
    assert parse_args(["0"]).config.length == 0


def test_all_classes_disabled():
    result = parse_args(["-l", "-u", "-n", "-s", "5"])
    assert result.config.alphabets() == []
    assert result.config.length == 5


def test_oversized_final_length_is_reported():
    result = parse_args(["+s", "1" + "0" * 4400])
    assert result.unrecognized == ["1" + "0" * 4400]
    assert result.config.length == 22
    assert result.config.symbol is True
