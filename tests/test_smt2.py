import pytest

from zkcircuit_kit.smt2 import (
    declare_all_signals_equal,
    declare_all_signals_equal_2,
    declare_header,
    declare_signal,
    safety_implication_to_smt2,
)

PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617

NAMES = {1: "s_1", 2: "s_2", 3: "s_3"}
NAMES_AUX = {1: "s_1_aux", 2: "s_2_aux", 3: "s_3"}


def test_declare_signal_format():
    assert declare_signal("s_7") == "(declare-fun s_7 () FF0)"


def test_declare_header_lines():
    header = declare_header(PRIME)
    assert header == [
        "(set-logic QF_FF)",
        f"(define-sort FF0 () (_ FiniteField {PRIME}))",
    ]


def test_implication_with_empty_sides():
    assert safety_implication_to_smt2(([], []), NAMES, NAMES_AUX) == "(=> true true)"


def test_implication_with_single_signals():
    result = safety_implication_to_smt2(([1], [2]), NAMES, NAMES_AUX)
    assert result == "(=> (= s_1 s_1_aux) (= s_2 s_2_aux))"


def test_implication_with_several_signals():
    result = safety_implication_to_smt2(([1, 2], [3]), NAMES, NAMES_AUX)
    assert result.startswith("(=> (and ")
    assert result.count("(= ") == 3
    assert "(= s_1 s_1_aux)" in result
    assert "(= s_2 s_2_aux)" in result
    assert result.endswith("(= s_3 s_3))")


def test_implication_right_side_matches_equality_conjunction():
    signals = [1, 2, 3]
    expected_right = declare_all_signals_equal(signals, NAMES, signals, NAMES_AUX)
    result = safety_implication_to_smt2(([], signals), NAMES, NAMES_AUX)
    assert result == f"(=> true {expected_right})"


def test_all_equal_empty_is_true():
    assert declare_all_signals_equal([], NAMES, [], NAMES_AUX) == "true"
    assert declare_all_signals_equal_2([], NAMES, []) == "true"


def test_all_equal_single_pairs_positions():
    result = declare_all_signals_equal([1], NAMES, [2], NAMES_AUX)
    assert result == "(= s_1 s_2_aux)"


def test_all_equal_multiple_wraps_in_and():
    result = declare_all_signals_equal([1, 2], NAMES, [1, 2], NAMES_AUX)
    singles = [
        declare_all_signals_equal([1], NAMES, [1], NAMES_AUX),
        declare_all_signals_equal([2], NAMES, [2], NAMES_AUX),
    ]
    assert result.startswith("(and ")
    assert result.endswith(")")
    assert result.index(singles[0]) < result.index(singles[1])


def test_all_equal_2_uses_given_names():
    single = declare_all_signals_equal_2([3], NAMES, ["out"])
    assert single == "(= s_3 out)"
    several = declare_all_signals_equal_2([1, 3], NAMES, ["a", "out"])
    assert several.startswith("(and ")
    assert "(= s_1 a)" in several and "(= s_3 out)" in several


def test_all_equal_agrees_with_named_variant():
    signals = [1, 2]
    plain = declare_all_signals_equal(signals, NAMES, signals, NAMES_AUX)
    named = declare_all_signals_equal_2(signals, NAMES, [NAMES_AUX[s] for s in signals])
    assert plain == named


def test_unknown_signal_raises_key_error():
    with pytest.raises(KeyError):
        declare_all_signals_equal([9], NAMES, [1], NAMES_AUX)
    with pytest.raises(KeyError):
        safety_implication_to_smt2(([9], []), NAMES, NAMES_AUX)


def test_short_counterpart_list_raises_index_error():
    with pytest.raises(IndexError):
        declare_all_signals_equal([1, 2], NAMES, [1], NAMES_AUX)
    with pytest.raises(IndexError):
        declare_all_signals_equal_2([1], NAMES, [])