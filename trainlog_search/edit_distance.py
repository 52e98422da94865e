from typing import List


def levenshtein(a: str, b: str) -> int:
    """
    Insert/delete/substitute edit distance.
    Rolling single row over the shorter string, so memory is O(min(|a|, |b|)).
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    row: List[int] = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        prev = row[0]  # dp[i-1][j-1]
        row[0] = i
        for j, cb in enumerate(b, start=1):
            cur = row[j]
            row[j] = min(
                row[j] + 1,  # deletion
                row[j - 1] + 1,  # insertion
                prev + (0 if ca == cb else 1),  # substitution
            )
            prev = cur
    return row[-1]
