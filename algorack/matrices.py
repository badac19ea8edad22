"""Matrix exponentiation and the linear recurrences it solves."""

FIB_MOD = 1_000_000_007
SEQ_MOD = 1_000_000_000
SUMSUMS_MOD = 98_765_431


def _shape(matrix):
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must have equal length")
    return rows, cols


def _check_mod(mod):
    if mod <= 0:
        raise ValueError("modulus must be positive")


def mat_mul(a, b, mod):
    """Product of two matrices with every entry reduced modulo ``mod``."""
    _check_mod(mod)
    _, inner = _shape(a)
    rows_b, _ = _shape(b)
    if inner != rows_b:
        raise ValueError("matrix shapes do not match for multiplication")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) % mod for column in columns]
        for row in a
    ]


def mat_pow(a, n, mod):
    """The square matrix ``a`` raised to the power ``n``, modulo ``mod``."""
    _check_mod(mod)
    rows, cols = _shape(a)
    if rows != cols:
        raise ValueError("only square matrices can be raised to a power")
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = [[int(i == j) % mod for j in range(rows)] for i in range(rows)]
    base = [[x % mod for x in row] for row in a]
    while n:
        if n & 1:
            result = mat_mul(result, base, mod)
        n >>= 1
        if n:
            base = mat_mul(base, base, mod)
    return result


def _fib(k, mod):
    return mat_pow([[1, 1], [1, 0]], k, mod)[0][1]


def fibonacci_range_sum(n, m):
    """Sum of the Fibonacci numbers F(n) .. F(m), modulo 1 000 000 007.

    F(0) = 0 and F(1) = 1.
    """
    if n < 0 or m < 0:
        raise ValueError("indices must be non-negative")
    if n > m:
        raise ValueError("range start must not exceed its end")
    return (_fib(m + 2, FIB_MOD) - _fib(n + 1, FIB_MOD)) % FIB_MOD


def fibonacci_offset_count(n):
    """The sequence 0, 2, then F(n + 3) for n >= 2, modulo 1 000 000 007."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    if n == 1:
        return 2
    return _fib(n + 3, FIB_MOD)


def _check_recurrence(b, c):
    if not b:
        raise ValueError("at least one initial term is required")
    if len(b) != len(c):
        raise ValueError("initial terms and coefficients must have equal length")


def linear_recurrence(b, c, n):
    """The ``n``-th term (1-based) of ``a_i = sum(c_j * a_(i-j))``, modulo 10**9.

    ``b`` gives the first ``k`` terms and ``c`` the coefficients ``c_1 .. c_k``.
    """
    b = list(b)
    c = list(c)
    _check_recurrence(b, c)
    if n < 1:
        raise ValueError("n must be at least 1")
    k = len(b)
    if n <= k:
        return b[n - 1] % SEQ_MOD
    companion = [[int(col == row + 1) for col in range(k)] for row in range(k - 1)]
    companion.append(list(reversed(c)))
    power = mat_pow(companion, n - k, SEQ_MOD)
    return mat_mul(power, [[value] for value in b], SEQ_MOD)[-1][0]


def recurrence_range_sum(b, c, m, n, mod):
    """Sum of the terms ``a_m .. a_n`` of the recurrence, modulo ``mod``."""
    b = list(b)
    c = list(c)
    _check_recurrence(b, c)
    _check_mod(mod)
    if m < 1:
        raise ValueError("m must be at least 1")
    if m > n:
        raise ValueError("range start must not exceed its end")
    k = len(b)
    transition = [[0] * (k + 1) for _ in range(k + 1)]
    transition[0][0] = transition[0][1] = 1
    for row in range(1, k):
        transition[row][row + 1] = 1
    for col in range(1, k + 1):
        transition[k][col] = c[k - col]
    start = [[0]] + [[value] for value in b]

    def prefix(count):
        if count < 1:
            return 0
        return mat_mul(mat_pow(transition, count, mod), start, mod)[0][0]

    return (prefix(n) - prefix(m - 1)) % mod


def sumsums(values, rounds):
    """Values after ``rounds`` rounds in which each becomes the sum of the others.

    Results are reduced modulo 98 765 431.
    """
    values = list(values)
    if rounds < 0:
        raise ValueError("rounds must be non-negative")
    total = sum(values) % SUMSUMS_MOD
    power = mat_pow([[len(values) - 1, 0], [1, -1]], rounds, SUMSUMS_MOD)
    return [
        (power[1][0] * total + power[1][1] * value) % SUMSUMS_MOD for value in values
    ]