"""Interval bounds for linear expressions and products over a prime field.

Field elements above ``field // 2`` are read as negative numbers.
``deductions`` maps a signal to its known ``(min, max)`` interval. Signals
without an entry range over ``[0, field - 1]``.
"""

from typing import Mapping

Bounds = tuple[int, int]
Deductions = Mapping[int, Bounds]
LinearExpression = Mapping[int, int]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def is_positive(value: int, field: int) -> bool:
    """True if the field element ``value`` stands for a non-negative number."""
    return value <= _trunc_div(field, 2)


def check_correct_signs(a: int, b: int) -> bool:
    """True if ``a`` and ``b`` are both non-negative or both negative."""
    return (a >= 0) == (b >= 0)


def check_same_field_round(a: int, b: int, field: int) -> bool:
    """True if ``a`` and ``b`` share a sign and the same multiple of ``field``.

    The multiple is taken by division rounding toward zero.
    """
    return check_correct_signs(a, b) and _trunc_div(a, field) == _trunc_div(b, field)


def _accumulate(
    intervals: list[tuple[int, Bounds]], field: int
) -> Bounds:
    lower = 0
    upper = 0
    for coef, (low, high) in intervals:
        if is_positive(coef, field):
            upper += coef * high
            lower += coef * low
        else:
            neg_coef = field - coef
            upper -= neg_coef * low
            lower -= neg_coef * high
    return lower, upper


def compute_bounds_linear_expression(
    deductions: Deductions, expression: LinearExpression, field: int
) -> Bounds:
    """Lower and upper bound of a linear expression given signal bounds."""
    full = (0, field - 1)
    intervals = [
        (coef, tuple(deductions.get(signal, full)))
        for signal, coef in expression.items()
    ]
    return _accumulate(intervals, field)


def compute_bounds_linear_expression_strict(
    deductions: Deductions, expression: LinearExpression, field: int
) -> Bounds:
    """Like :func:`compute_bounds_linear_expression`, ignoring negative bounds.

    A known interval whose minimum is negative is replaced by ``[0, field - 1]``.
    """
    full = (0, field - 1)
    intervals = []
    for signal, coef in expression.items():
        bounds = deductions.get(signal)
        if bounds is None or bounds[0] < 0:
            bounds = full
        intervals.append((coef, tuple(bounds)))
    return _accumulate(intervals, field)


def compute_bounds_product(min_1: int, max_1: int, min_2: int, max_2: int) -> Bounds:
    """Bounds of the product of two values lying in the given intervals."""
    if min_1 >= 0:
        if min_2 >= 0:
            return min_1 * min_2, max_1 * max_2
        if max_2 >= 0:
            return max_1 * min_2, max_1 * max_2
        return max_1 * min_2, min_1 * max_2
    if max_1 >= 0:
        if min_2 >= 0:
            return min_1 * max_2, max_1 * max_2
        if max_2 >= 0:
            return (
                max(min_1 * max_2, min_2 * max_1),
                max(min_1 * min_2, max_1 * max_2),
            )
        return max_1 * min_2, min_1 * min_2
    if min_2 >= 0:
        return min_1 * max_2, max_1 * min_2
    if max_2 >= 0:
        return min_1 * max_2, min_1 * min_2
    return max_1 * max_2, min_1 * min_2