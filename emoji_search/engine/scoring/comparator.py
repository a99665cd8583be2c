"""Rule-based tie-break comparators.

Every matcher ranks its per-emoji attribute records with an ordered list
of ``ComparatorRule`` objects. Rules are applied in sequence and the first
one that tells the two records apart decides; records equal under every
rule keep their input order (the final sort is stable).

A rule may carry an ``applies`` predicate to scope it to one branch of the
ranking, e.g. "only among exact matches". The predicate is evaluated on the
left-hand record and must depend only on attributes that an earlier rule
has already forced to be equal on both sides.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Generic, TypeVar

A = TypeVar("A")


@dataclass(frozen=True)
class ComparatorRule(Generic[A]):
    """One ranking criterion.

    Attributes:
        name: Short label, used in logs and tests.
        key: Extracts the comparable value from an attribute record.
        descending: When True, larger values rank first (e.g. True before
            False, more matches before fewer).
        applies: Optional predicate restricting the rule to one branch.
    """

    name: str
    key: Callable[[A], Any]
    descending: bool = False
    applies: Callable[[A], bool] | None = None

    def compare(self, a: A, b: A) -> int:
        """Return -1 when ``a`` ranks first, 1 when ``b`` does, 0 on a tie."""
        key_a, key_b = self.key(a), self.key(b)
        if key_a == key_b:
            return 0
        result = -1 if key_a < key_b else 1
        return -result if self.descending else result


def optional_rank(value: int | None) -> tuple[bool, int]:
    """Sort key placing present values first, lowest first, absent last."""
    return (value is None, value if value is not None else 0)


class RankingComparator(Generic[A]):
    """An ordered chain of ``ComparatorRule`` objects."""

    def __init__(self, rules: Iterable[ComparatorRule[A]]):
        self.rules: tuple[ComparatorRule[A], ...] = tuple(rules)

    def compare(self, a: A, b: A) -> int:
        for rule in self.rules:
            if rule.applies is not None and not rule.applies(a):
                continue
            result = rule.compare(a, b)
            if result:
                return result
        return 0

    def is_better(self, candidate: A, current: A | None) -> bool:
        """True when ``candidate`` strictly outranks ``current`` (or there is none)."""
        return current is None or self.compare(candidate, current) < 0

    def rank(self, scored: Sequence[tuple[str, A]]) -> list[str]:
        """Stable-sort (emoji, attributes) pairs best-first and return the emojis."""
        key = cmp_to_key(self.compare)
        ordered = sorted(scored, key=lambda pair: key(pair[1]))
        return [emoji for emoji, _ in ordered]
