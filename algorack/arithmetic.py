"""Number theory and counting puzzles."""

import math
from bisect import bisect_left
from itertools import combinations

DAYS_IN_YEAR = 365
ALPHABET_SIZE = 26
_GRAY_PIGEONHOLE = 130


def extended_gcd(a, b):
    """Return ``(g, x, y)`` with ``g = gcd(a, b)`` and ``a * x + b * y == g``."""
    if a == 0:
        return b, 0, 1
    g, x1, y1 = extended_gcd(b % a, a)
    return g, y1 - (b // a) * x1, x1


def chinese_remainder(pairs):
    """Smallest non-negative x with ``x % n == r`` for every ``(n, r)`` pair.

    The moduli must be pairwise coprime.
    """
    pairs = list(pairs)
    if any(modulus <= 0 for modulus, _ in pairs):
        raise ValueError("moduli must be positive")
    product = math.prod(modulus for modulus, _ in pairs)
    total = 0
    for modulus, remainder in pairs:
        partial = product // modulus
        try:
            inverse = pow(partial, -1, modulus)
        except ValueError:
            raise ValueError("moduli must be pairwise coprime") from None
        total += partial * remainder * inverse
    result = total % product
    if any(result % modulus != remainder % modulus for modulus, remainder in pairs):
        raise ValueError("moduli must be pairwise coprime")
    return result


def count_divisible(limit, divisors):
    """How many of ``1 .. limit`` are divisible by at least one divisor."""
    divisors = list(divisors)
    if any(d <= 0 for d in divisors):
        raise ValueError("divisors must be positive")
    count = 0
    for size in range(1, len(divisors) + 1):
        sign = 1 if size % 2 else -1
        for subset in combinations(divisors, size):
            count += sign * (limit // math.lcm(*subset))
    return count


def factorial_digits(n):
    """Decimal digits of ``n!`` as a string."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return str(math.factorial(n))


def has_xor_zero_quadruple(values):
    """Tell whether four distinct entries XOR to zero.

    ``values`` is a sequence whose neighbours differ in exactly one bit; for
    such a sequence of 130 or more entries the answer is always yes.
    """
    values = sorted(values)
    size = len(values)
    if size >= _GRAY_PIGEONHOLE:
        return True
    for i, j, k in combinations(range(size - 1), 3):
        target = values[i] ^ values[j] ^ values[k]
        pos = bisect_left(values, target, k + 1)
        if pos < size and values[pos] == target:
            return True
    return False


def divisible_subset(values):
    """1-based indices of a contiguous block whose sum is divisible by ``len(values)``."""
    values = list(values)
    size = len(values)
    if size == 0:
        raise ValueError("values must not be empty")
    first_seen = {0: 0}
    total = 0
    for end, value in enumerate(values, 1):
        total += value
        remainder = total % size
        if remainder in first_seen:
            return list(range(first_seen[remainder] + 1, end + 1))
        first_seen[remainder] = end
    raise ValueError("no block found")


def street_letters(streets, numbers):
    """Letters needed as suffixes to name streets, or None when 26 is not enough."""
    if numbers <= 0:
        raise ValueError("numbers must be positive")
    letters = -(-(streets - numbers) // numbers)
    if letters > ALPHABET_SIZE:
        return None
    return letters


def count_multiples(values, k):
    """Number of values divisible by ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    return sum(1 for value in values if value % k == 0)


def birthday_collision(people):
    """Probability that at least two of ``people`` share a birthday."""
    if people < 0:
        raise ValueError("people must be non-negative")
    distinct = 1.0
    for taken in range(min(people, DAYS_IN_YEAR + 1)):
        distinct *= (DAYS_IN_YEAR - taken) / DAYS_IN_YEAR
    return 1.0 - distinct


def birthday_table():
    """``(people, probability)`` for groups of 5, 10, ... 75 people."""
    return [(people, birthday_collision(people)) for people in range(5, 80, 5)]