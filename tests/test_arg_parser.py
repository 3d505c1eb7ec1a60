import io

import pytest

from pslam.arg_parser import Parser, ParserError, ParseStatus


def test_int_option_parsed():
    parser = Parser(["--n", "5"])
    assert parser.add_option("n", 0) == 5


def test_float_option_parsed():
    parser = Parser(["--scale", "2.5"])
    assert parser.add_option("scale", 1.0) == 2.5


def test_string_option_parsed():
    parser = Parser(["--path", "data/scan"])
    assert parser.add_option("path", "") == "data/scan"


@pytest.mark.parametrize("text,expected", [("1", True), ("0", False), ("7", True)])
def test_bool_option_from_integer_text(text, expected):
    parser = Parser(["--flag", text])
    assert parser.add_option("flag", False) is expected


def test_int_option_uses_leading_digits():
    parser = Parser(["--n", "12abc"])
    assert parser.add_option("n", 0) == 12


def test_invalid_int_raises():
    parser = Parser(["--n", "abc"])
    with pytest.raises(ParserError):
        parser.add_option("n", 0)


def test_list_option_with_size():
    parser = Parser(["--v", "1", "2", "3"])
    assert parser.add_option("v", [0, 0, 0]) == [1, 2, 3]


def test_list_option_too_few_arguments_raises():
    parser = Parser(["--v", "1"])
    with pytest.raises(ParserError):
        parser.add_option("v", [0.0, 0.0, 0.0])


def test_missing_option_keeps_default():
    parser = Parser([])
    assert parser.add_option("n", 42) == 42


def test_repeated_option_uses_last_values():
    parser = Parser(["--n", "1", "--n", "2"])
    assert parser.add_option("n", 0) == 2


def test_tokens_before_first_option_are_ignored():
    parser = Parser(["stray", "--n", "3"])
    assert parser.add_option("n", 0) == 3
    assert parser.show_msg(verbose=False) == ParseStatus.OK


def test_switch_toggles_value():
    parser = Parser(["--flag"])
    assert parser.add_switch("flag", False) is True
    assert parser.add_switch("other", True) is True


def test_switch_toggles_true_to_false():
    parser = Parser(["--flag"])
    assert parser.add_switch("flag", True) is False


def test_option_given_as_switch_sets_true():
    parser = Parser(["--n"])
    assert parser.add_option("n", 0) == 1


def test_string_option_given_as_switch_is_not_handled(capsys):
    parser = Parser(["--path"])
    assert parser.add_option("path", "x", "input path", required=True) == "x"
    assert parser.show_msg() == ParseStatus.ERROR
    assert "[Error]" in capsys.readouterr().out


def test_help_keeps_defaults_and_lists_options(capsys):
    parser = Parser(["--h", "--n", "9"])
    assert parser.add_option("n", 3, "count", required=True) == 3
    assert parser.has_help() is True
    assert parser.show_msg() == ParseStatus.HELP
    out = capsys.readouterr().out
    assert "(REQUIRED) count (default: 3)" in out


def test_missing_required_is_error(capsys):
    parser = Parser([])
    parser.add_option("input", "", "input folder", required=True)
    assert parser.show_msg() == ParseStatus.ERROR
    assert '"input folder"' in capsys.readouterr().out


def test_unknown_argument_is_warning(capsys):
    parser = Parser(["--unknown", "1"])
    parser.add_option("n", 0)
    assert parser.show_msg() == ParseStatus.WARNING
    assert "unknown" in capsys.readouterr().out


def test_verbose_ok_prints_values(capsys):
    parser = Parser(["--n", "4"])
    parser.add_option("n", 0)
    assert parser.show_msg() == ParseStatus.OK
    assert "--n \t4" in capsys.readouterr().out


def test_quiet_ok_prints_nothing(capsys):
    parser = Parser(["--n", "4"])
    parser.add_option("n", 0)
    assert parser.show_msg(verbose=False) == ParseStatus.OK
    assert capsys.readouterr().out == ""


def test_output_log_writes_aligned_lines():
    parser = Parser(["--n", "5"])
    parser.add_option("n", 0)
    parser.add_switch("fast", False)
    log = io.StringIO()
    text = parser.output_log(log)
    assert log.getvalue() == text
    assert text.splitlines() == ["--n    \t5", "--fast \t0"]