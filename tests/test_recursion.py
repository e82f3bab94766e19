import math

import pytest

from dsadrills.recursion import (
    alternating_sum,
    array_sum,
    digit_sum,
    factorial,
    fibonacci,
    gcd,
    increasing_sequence,
    is_palindrome_number,
    k_multiples,
    max_element,
    mth_summation,
    power,
    power_linear,
    remove_occurrences,
    render_elements,
)


@pytest.mark.parametrize("n", [1, 2, 5, 10, 20])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_rejects_zero():
    with pytest.raises(ValueError):
        factorial(0)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


@pytest.mark.parametrize("d", range(10))
def test_digit_sum_single_digit(d):
    assert digit_sum(d) == d


@pytest.mark.parametrize("n", [12, 987, 10001, 123456789])
def test_digit_sum_recurrence(n):
    assert digit_sum(n) == n % 10 + digit_sum(n // 10)
    assert digit_sum(n * 10) == digit_sum(n)


def test_digit_sum_negative_is_negated():
    assert digit_sum(-4521) == -digit_sum(4521)


@pytest.mark.parametrize(
    "base, exponent", [(2, 0), (2, 10), (3, 7), (-2, 5), (10, 3), (0, 4)]
)
def test_power_variants_match_builtin(base, exponent):
    assert power(base, exponent) == base**exponent
    assert power_linear(base, exponent) == base**exponent


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)
    with pytest.raises(ValueError):
        power_linear(2, -1)


def test_render_elements_concatenates():
    first, second = [1, 2], [3, 45]
    assert render_elements(first + second) == render_elements(first) + render_elements(second)
    assert render_elements([7]) == "7"
    assert render_elements([]) == ""


def test_max_element():
    values = [3, 9, -1, 9, 4]
    assert max_element(values) == 9
    assert all(v <= max_element(values) for v in values)


def test_max_element_empty():
    with pytest.raises(ValueError):
        max_element([])


def test_array_sum():
    assert array_sum([5]) == 5
    assert array_sum([1, 2, 3, -4]) == sum([1, 2, 3, -4])


def test_array_sum_empty():
    with pytest.raises(ValueError):
        array_sum([])


@pytest.mark.parametrize("n", [1, 3, 4, 10])
def test_mth_summation_first_level(n):
    assert mth_summation(n, 1) == sum(range(n + 1))


@pytest.mark.parametrize("n, m", [(3, 2), (2, 3), (4, 2)])
def test_mth_summation_nesting(n, m):
    assert mth_summation(n, m) == mth_summation(mth_summation(n, m - 1), 1)


def test_mth_summation_rejects_zero_m():
    with pytest.raises(ValueError):
        mth_summation(3, 0)


def test_palindrome_number():
    assert is_palindrome_number(1881) is True
    assert is_palindrome_number(1882) is False
    assert is_palindrome_number(7) is True
    assert is_palindrome_number(10) is False
    assert is_palindrome_number(-121) is False


def test_remove_occurrences():
    result = remove_occurrences("abcax", "a")
    assert result == "bcx"
    assert "a" not in result


def test_remove_occurrences_absent_char():
    assert remove_occurrences("xyz", "a") == "xyz"


def test_remove_occurrences_rejects_multichar():
    with pytest.raises(ValueError):
        remove_occurrences("abc", "ab")


def test_increasing_sequence():
    assert increasing_sequence(5) == list(range(1, 6))
    assert increasing_sequence(0) == []
    assert increasing_sequence(-3) == []


def test_k_multiples():
    result = k_multiples(3, 4)
    assert len(result) == 4
    assert result[0] == 3
    assert all(b - a == 3 for a, b in zip(result, result[1:]))


def test_k_multiples_empty_cases():
    assert k_multiples(0, 5) == []
    assert k_multiples(4, 0) == []


@pytest.mark.parametrize("n", range(1, 15))
def test_alternating_sum_step(n):
    step = n if n % 2 else -n
    assert alternating_sum(n) - alternating_sum(n - 1) == step


def test_alternating_sum_zero_and_negative():
    assert alternating_sum(0) == 0
    with pytest.raises(ValueError):
        alternating_sum(-1)


@pytest.mark.parametrize("a, b", [(12, 18), (18, 12), (0, 9), (9, 0), (0, 0), (17, 5), (100, 75)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_gcd_rejects_negative():
    with pytest.raises(ValueError):
        gcd(-2, 4)