"""String puzzles: vowel removal, duplicate removal, JSON layout, palindromes."""

from itertools import groupby

_VOWELS = frozenset("aeiou")


def remove_vowels(text):
    """Drop every vowel, in either case, keeping the other characters in order."""
    return "".join(char for char in text if char.lower() not in _VOWELS)


def remove_adjacent_duplicates(text):
    """Remove runs of repeated characters, again and again, until none remain."""
    runs = [(char, sum(1 for _ in group)) for char, group in groupby(text)]
    front = []
    for char, length in reversed(runs):
        if length > 1:
            continue
        if front and front[-1] == char:
            front.pop()
        else:
            front.append(char)
    return "".join(reversed(front))


def pretty_json(text):
    """Lay out compact JSON one item per line, indented with tabs.

    Returns the lines. Trailing text not closed by a bracket or comma is dropped.
    """
    lines = []
    line = ""
    depth = 0
    inside = False
    for pos, char in enumerate(text):
        if char in "{[":
            if not line:
                line = "\t" * depth
            lines.append(line + char)
            line = ""
            depth += 1
            inside = False
        elif char in "}]":
            if line:
                lines.append(line)
            depth -= 1
            line = "\t" * depth + char
            if text[pos + 1:pos + 2] != ",":
                lines.append(line)
                line = ""
            inside = False
        elif char == ",":
            lines.append(line + char)
            line = ""
            inside = False
        else:
            if not inside:
                line += "\t" * depth
            line += char
            inside = True
    return lines


def _lexicographic_permutations(chars):
    items = sorted(chars)
    while True:
        yield "".join(items)
        pivot = next(
            (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
            None,
        )
        if pivot is None:
            return
        successor = next(
            j for j in range(len(items) - 1, pivot, -1) if items[j] > items[pivot]
        )
        items[pivot], items[successor] = items[successor], items[pivot]
        items[pivot + 1:] = reversed(items[pivot + 1:])


def half_palindromes(text):
    """Palindromes from every distinct arrangement of the first half of ``text``.

    The middle character of an odd-length text stays in the middle; the
    results come in lexicographic order of their first half.
    """
    half_len = len(text) // 2
    middle = text[half_len] if len(text) % 2 else ""
    return [
        half + middle + half[::-1]
        for half in _lexicographic_permutations(text[:half_len])
    ]