"""Small integer and arithmetic routines."""

from __future__ import annotations


def count_digits(n: int) -> int:
    """Return the number of decimal digits of a positive integer."""
    if n <= 0:
        raise ValueError("digit count is defined for positive integers only")
    return len(str(n))


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def n_choose_r(n: int, r: int) -> int:
    """Return the binomial coefficient C(n, r); zero when ``r`` lies outside 0..n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if r < 0 or r > n:
        return 0
    return factorial(n) // (factorial(n - r) * factorial(r))


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a power of two (1, 2, 4, ...)."""
    if n <= 0:
        return False
    while n % 2 == 0:
        n //= 2
    return n == 1


def _digits(n: int) -> list[int]:
    """Decimal digits of a non-negative integer, least significant first."""
    digits = []
    while n > 0:
        n, last = divmod(n, 10)
        digits.append(last)
    return digits


def reverse_digits(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign; trailing zeros vanish."""
    sign = -1 if n < 0 else 1
    result = 0
    for digit in _digits(abs(n)):
        result = result * 10 + digit
    return sign * result


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``; zero for ``n <= 0``."""
    return sum(_digits(n))


def is_cube_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of the cubes of its digits."""
    if n < 0:
        return False
    return n == sum(d ** 3 for d in _digits(n))


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of its digits each raised to the digit count."""
    if n < 0:
        return False
    digits = _digits(n)
    power = len(digits)
    return n == sum(d ** power for d in digits)


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as a base-two numeral and return its value."""
    return sum(digit << position for position, digit in enumerate(_digits(n)))


def is_palindrome_number(n: int) -> bool:
    """Tell whether a non-negative integer reads the same reversed."""
    if n < 0:
        return False
    return reverse_digits(n) == n


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, never fewer than the leading 0 and 1."""
    terms = [0, 1]
    while len(terms) < count:
        terms.append(terms[-1] + terms[-2])
    return terms


def reverse_four_digit(n: int) -> int:
    """Reverse a four-digit number by place value: thousands, hundreds, tens, units."""
    if n < 0:
        raise ValueError("expected a non-negative number")
    thousands, rest = divmod(n, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, units = divmod(rest, 10)
    return units * 1000 + tens * 100 + hundreds * 10 + thousands


def swap_arithmetic(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with addition and subtraction only."""
    a = a + b
    b = a - b
    a = a - b
    return a, b


def swap_xor(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with exclusive-or only."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def rectangle_area(length: float, breadth: float) -> float:
    """Return the area of a rectangle."""
    return length * breadth


def count_up(n: int) -> list[int]:
    """Return the numbers from 1 to ``n`` in order."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return [1]
    return count_up(n - 1) + [n]