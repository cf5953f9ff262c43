"""
String similarity used to rank domain candidates
"""

from email_autocorrect.core.email_data import KEYBOARD_MAP


def edit_distance(a, b):
    """
    Classic Levenshtein distance with unit insert/delete/substitute costs
    """
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(min(
                    previous[j] + 1,       # deletion
                    current[j - 1] + 1,    # insertion
                    previous[j - 1] + 1,   # substitution
                ))
        previous = current

    return previous[-1]


def similarity(a, b):
    """
    Normalized Levenshtein similarity in [0, 1]

    Strings whose lengths differ by more than 30% of the longer one score 0
    without running the distance computation.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    max_len = max(len(a), len(b))
    if abs(len(a) - len(b)) > max_len * 0.3:
        return 0.0

    return (max_len - edit_distance(a, b)) / max_len


def keyboard_score(input_text, candidate):
    """
    Position-by-position keystroke score in [0, 1]

    Case-only differences are free, QWERTY-adjacent slips cost 0.5, any
    other mismatch costs 1 and each extra character costs 1. Strings whose
    lengths differ by more than one score 0.
    """
    if input_text == candidate:
        return 1.0

    length_diff = abs(len(input_text) - len(candidate))
    if length_diff > 1:
        return 0.0

    cost = float(length_diff)
    for typed, expected in zip(input_text, candidate):
        if typed == expected:
            continue

        typed_lower = typed.lower()
        expected_lower = expected.lower()
        if typed_lower == expected_lower:
            continue

        if expected_lower in KEYBOARD_MAP.get(typed_lower, ()):
            cost += 0.5
        else:
            cost += 1

    max_len = max(len(input_text), len(candidate))
    return max(0.0, (max_len - cost) / max_len)


def char_differences(a, b):
    """
    Count positional mismatches plus the length difference

    Cheaper and coarser than edit distance; used for company-domain
    near matches where a couple of slipped characters is the expected error.
    """
    mismatches = sum(1 for x, y in zip(a, b) if x != y)
    return mismatches + abs(len(a) - len(b))
