"""Dynamic programming over sequences and strings."""

from bisect import bisect_left

_OPERATORS = {
    "&": lambda a, b: a and b,
    "|": lambda a, b: a or b,
    "^": lambda a, b: a != b,
}


def longest_non_decreasing_subsequence(values):
    """Return one longest non-decreasing subsequence of ``values`` as a list."""
    values = list(values)
    if not values:
        return []
    length = [1] * len(values)
    previous = [None] * len(values)
    for i, current in enumerate(values):
        for j, earlier in enumerate(values[:i]):
            if earlier <= current and length[j] + 1 > length[i]:
                length[i] = length[j] + 1
                previous[i] = j
    index = max(range(len(values)), key=length.__getitem__)
    result = []
    while index is not None:
        result.append(values[index])
        index = previous[index]
    result.reverse()
    return result


def longest_increasing_subsequence_length(values):
    """Length of the longest strictly increasing subsequence, in O(n log n)."""
    tails = []
    for value in values:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def longest_common_subsequence(a, b):
    """Return one longest common subsequence of the strings ``a`` and ``b``."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, char_a in enumerate(a, 1):
        for j, char_b in enumerate(b, 1):
            if char_a == char_b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    i, j = len(a), len(b)
    chars = []
    while i and j:
        if a[i - 1] == b[j - 1]:
            chars.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def longest_common_substring(a, b):
    """Return the first longest common contiguous substring of ``a`` and ``b``."""
    best = 0
    end = 0
    previous = [0] * (len(b) + 1)
    for i, char_a in enumerate(a, 1):
        current = [0] * (len(b) + 1)
        for j, char_b in enumerate(b, 1):
            if char_a == char_b:
                current[j] = previous[j - 1] + 1
                if current[j] > best:
                    best = current[j]
                    end = i
        previous = current
    return a[end - best:end]


def edit_distance(a, b):
    """Levenshtein distance: insertions, deletions and substitutions cost one."""
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def ugly_number(n):
    """The ``n``-th number (1-based) whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ugly = [1]
    i2 = i3 = i5 = 0
    while len(ugly) < n:
        nxt = min(ugly[i2] * 2, ugly[i3] * 3, ugly[i5] * 5)
        ugly.append(nxt)
        if nxt == ugly[i2] * 2:
            i2 += 1
        if nxt == ugly[i3] * 3:
            i3 += 1
        if nxt == ugly[i5] * 5:
            i5 += 1
    return ugly[n - 1]


def matrix_chain_cost(dims):
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i + 1]``.
    """
    dims = list(dims)
    if any(d < 0 for d in dims):
        raise ValueError("dimensions must be non-negative")
    size = len(dims)
    if size < 3:
        return 0
    cost = [[0] * size for _ in range(size)]
    for span in range(2, size):
        for lo in range(size - span):
            hi = lo + span
            cost[lo][hi] = min(
                cost[lo][k] + cost[k][hi] + dims[lo] * dims[k] * dims[hi]
                for k in range(lo + 1, hi)
            )
    return cost[0][size - 1]


def count_true_parenthesizations(symbols, operators):
    """Number of ways to parenthesize the expression so that it is true.

    ``symbols`` is a string of ``T`` and ``F``; ``operators`` holds one of
    ``&``, ``|`` or ``^`` between each pair of neighbouring symbols.
    """
    if not symbols:
        raise ValueError("at least one symbol is required")
    if len(operators) != len(symbols) - 1:
        raise ValueError("there must be one operator fewer than symbols")
    if set(symbols) - {"T", "F"}:
        raise ValueError("symbols must be T or F")
    if set(operators) - set(_OPERATORS):
        raise ValueError("operators must be &, | or ^")
    size = len(symbols)
    true = [[0] * size for _ in range(size)]
    false = [[0] * size for _ in range(size)]
    for i, symbol in enumerate(symbols):
        true[i][i] = int(symbol == "T")
        false[i][i] = int(symbol == "F")
    for span in range(1, size):
        for lo in range(size - span):
            hi = lo + span
            for split in range(lo, hi):
                apply = _OPERATORS[operators[split]]
                left = ((True, true[lo][split]), (False, false[lo][split]))
                right = ((True, true[split + 1][hi]), (False, false[split + 1][hi]))
                for left_value, left_ways in left:
                    for right_value, right_ways in right:
                        ways = left_ways * right_ways
                        if apply(left_value, right_value):
                            true[lo][hi] += ways
                        else:
                            false[lo][hi] += ways
    return true[0][size - 1]


def can_jump(steps):
    """Tell whether the last index is reachable from the first.

    From index ``i`` one may move forward by up to ``steps[i]`` places.
    """
    if not steps:
        raise ValueError("steps must not be empty")
    last = len(steps) - 1
    reach = 0
    for index, step in enumerate(steps):
        if index > reach:
            return False
        reach = max(reach, index + step)
        if reach >= last:
            return True
    return True


def max_profit(prices, transactions=2):
    """Best profit from at most ``transactions`` non-overlapping buy/sell pairs."""
    if transactions < 0:
        raise ValueError("transactions must be non-negative")
    holding = [float("-inf")] * (transactions + 1)
    free = [0] * (transactions + 1)
    for price in prices:
        for count in range(transactions, 0, -1):
            free[count] = max(free[count], holding[count] + price)
            holding[count] = max(holding[count], free[count - 1] - price)
    return max(free)