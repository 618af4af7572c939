import pytest

from judgekit.textual import (
    ProgramError,
    char_at,
    evaluate_min_expression,
    explode,
    is_vps,
    run_ac,
)


def test_min_expression_example():
    assert evaluate_min_expression("55-50+40") == -35


def test_min_expression_without_minus_is_sum():
    assert evaluate_min_expression("10+20+30") == evaluate_min_expression("30+20+10")
    assert evaluate_min_expression("7") == 7


def test_min_expression_leading_zeros():
    assert evaluate_min_expression("00009-00009") == 9 - 9


def test_min_expression_malformed():
    with pytest.raises(ValueError):
        evaluate_min_expression("1*2")


def test_char_at():
    assert char_at("Sprout", 3) == "r"
    assert char_at("Sprout", 1) == "S"
    assert char_at("Sprout", 6) == "t"


@pytest.mark.parametrize("position", [0, 7])
def test_char_at_out_of_range(position):
    with pytest.raises(IndexError):
        char_at("Sprout", position)


def test_run_ac_reverse_and_drop():
    assert run_ac("RDD", [1, 2, 3, 4]) == [2, 1]


def test_run_ac_double_reverse_is_identity():
    values = [5, 6, 7]
    assert run_ac("RR", values) == values
    assert run_ac("R", values) == values[::-1]


def test_run_ac_drop_everything():
    assert run_ac("DDD", [1, 2, 3]) == []


def test_run_ac_error_on_empty():
    with pytest.raises(ProgramError):
        run_ac("D", [])
    with pytest.raises(ProgramError):
        run_ac("DD", [1])


def test_run_ac_unknown_command():
    with pytest.raises(ValueError):
        run_ac("X", [1])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(())())", False),
        ("(()())((()))", True),
        ("()", True),
        (")(", False),
        ("(((", False),
    ],
)
def test_is_vps(text, expected):
    assert is_vps(text) is expected


def test_explode_example():
    assert explode("mirkovC4nizCC44", "C4") == "mirkovniz"


def test_explode_to_nothing():
    assert explode("12ab112ab2ab", "12ab") == "FRULA"


def test_explode_without_bomb_keeps_text():
    assert explode("abcdef", "xy") == "abcdef"


def test_explode_result_has_no_bomb():
    result = explode("aabbabab", "ab")
    assert "ab" not in result


def test_explode_empty_bomb():
    with pytest.raises(ValueError):
        explode("abc", "")