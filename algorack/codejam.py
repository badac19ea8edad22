"""Two short contest problems: shield hacking and the odd/even sort."""


def _damage(program):
    strength = 1
    total = 0
    for instruction in program:
        if instruction == "C":
            strength *= 2
        else:
            total += strength
    return total


def min_hacks(shield, program):
    """Fewest adjacent swaps keeping the program's damage within ``shield``.

    ``program`` holds ``C`` (charge, doubling the beam) and ``S`` (shoot).
    Returns None when no number of swaps is enough.
    """
    if set(program) - {"C", "S"}:
        raise ValueError("program may only contain C and S")
    if program.count("S") > shield:
        return None
    chars = list(program)
    hacks = 0
    while _damage(chars) > shield:
        pos = "".join(chars).rfind("CS")
        chars[pos], chars[pos + 1] = "S", "C"
        hacks += 1
    return hacks


def trouble_sort_error(values):
    """Index of the first place where sorting even and odd slots apart fails.

    Returns None when the result is fully sorted.
    """
    values = list(values)
    merged = list(values)
    merged[0::2] = sorted(values[0::2])
    merged[1::2] = sorted(values[1::2])
    for index, (got, want) in enumerate(zip(merged, sorted(values))):
        if got != want:
            return index
    return None