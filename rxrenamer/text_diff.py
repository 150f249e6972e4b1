"""Character level difference between two names, grouped into runs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Iterator


class DiffKind(Enum):
    REMOVED = "removed"
    UNCHANGED = "unchanged"
    NEW = "new"


@dataclass(frozen=True)
class TextDiff:
    """A run of characters that were removed, kept or added."""

    kind: DiffKind
    text: str


def _char_steps(old: str, new: str) -> Iterator[tuple[DiffKind, str]]:
    n, m = len(old), len(new)
    # lcs[i][j] is the longest common subsequence of old[i:] and new[j:].
    lcs = [[0] * (m + 1) for _ in range(n + 1)]
    for i in reversed(range(n)):
        row, below = lcs[i], lcs[i + 1]
        for j in reversed(range(m)):
            if old[i] == new[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])

    i = j = 0
    while i < n or j < m:
        if i < n and j < m and old[i] == new[j]:
            yield DiffKind.UNCHANGED, old[i]
            i += 1
            j += 1
        elif j == m or (i < n and lcs[i + 1][j] >= lcs[i][j + 1]):
            yield DiffKind.REMOVED, old[i]
            i += 1
        else:
            yield DiffKind.NEW, new[j]
            j += 1


def calculate_text_diff(old: str, new: str) -> list[TextDiff]:
    """Diff two strings, merging consecutive characters of the same kind."""
    return [
        TextDiff(kind, "".join(char for _, char in run))
        for kind, run in groupby(_char_steps(old, new), key=lambda step: step[0])
    ]