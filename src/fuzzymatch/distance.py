"""Levenshtein edit distance."""


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character edits turning ``a`` into ``b``.

    Insertions, deletions and substitutions each cost 1. Characters are
    compared with plain ``str`` equality, so no Unicode normalization or
    case folding happens here.

    Args:
        a: Source string.
        b: Target string.

    Returns:
        The edit distance, symmetric in its arguments and 0 for equal strings.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Only the previous row of the DP table is needed for the next one
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current

    return previous[-1]
