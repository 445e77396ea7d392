"""Building blocks for SMT-LIB 2 problems over a prime finite field."""

from typing import Mapping, Sequence

FIELD_SORT = "FF0"


def declare_signal(name: str) -> str:
    """Declaration of a field-valued constant called ``name``."""
    return f"(declare-fun {name} () {FIELD_SORT})"


def declare_header(prime: int) -> list[str]:
    """Logic selection and field sort definition for the given prime."""
    return [
        "(set-logic QF_FF)",
        f"(define-sort {FIELD_SORT} () (_ FiniteField {prime}))",
    ]


def _equality(left: str, right: str) -> str:
    return f"(= {left} {right})"


def _conjunction(equalities: Sequence[str]) -> str:
    """``true`` for none, the term itself for one, an ``and`` otherwise."""
    if not equalities:
        return "true"
    if len(equalities) == 1:
        return equalities[0]
    return "(and " + "".join(f" {term} " for term in equalities) + ")"


def _check_lengths(signals: Sequence, signals_aux: Sequence) -> None:
    if len(signals_aux) < len(signals):
        raise IndexError(
            f"{len(signals)} signals but only {len(signals_aux)} counterparts"
        )


def safety_implication_to_smt2(
    implication: tuple[Sequence[int], Sequence[int]],
    names: Mapping[int, str],
    names_aux: Mapping[int, str],
) -> str:
    """Implication: equal copies of the left signals force equal right signals."""
    left, right = implication

    def side(signals: Sequence[int]) -> str:
        return _conjunction([_equality(names[s], names_aux[s]) for s in signals])

    return f"(=> {side(left)} {side(right)})"


def declare_all_signals_equal(
    signals: Sequence[int],
    names: Mapping[int, str],
    signals_aux: Sequence[int],
    names_aux: Mapping[int, str],
) -> str:
    """Conjunction stating each signal equals its counterpart at the same position."""
    _check_lengths(signals, signals_aux)
    return _conjunction(
        [
            _equality(names[signal], names_aux[other])
            for signal, other in zip(signals, signals_aux)
        ]
    )


def declare_all_signals_equal_2(
    signals: Sequence[int],
    names: Mapping[int, str],
    signals_aux: Sequence[str],
) -> str:
    """Like :func:`declare_all_signals_equal`, counterparts given as names."""
    _check_lengths(signals, signals_aux)
    return _conjunction(
        [_equality(names[signal], other) for signal, other in zip(signals, signals_aux)]
    )