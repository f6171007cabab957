"""
Candidate key discovery.

Attributes are split by where they occur in the FDs:
- never on a right-hand side: part of every key
- only on right-hand sides: never part of a minimal key
- on both sides: may or may not be part of a key, searched smallest first
"""

from itertools import combinations
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

from .closure import calculate_closure
from .cover import group_by_lhs, project_fds
from .models import FunctionalDependency, Relation, Schema, sort_key


def partition_attributes(
    schema: Schema, fds: Iterable[FunctionalDependency]
) -> Tuple[Set[str], Set[str], Set[str]]:
    """Return (mandatory, excluded, undecided) attribute sets."""
    lhs_attributes: Set[str] = set()
    rhs_attributes: Set[str] = set()
    for fd in fds:
        lhs_attributes |= fd.lhs
        # A -> A does not make A derivable from anything else
        rhs_attributes |= fd.rhs - fd.lhs

    mandatory = set(schema.attributes) - rhs_attributes
    excluded = (set(schema.attributes) & rhs_attributes) - lhs_attributes
    undecided = set(schema.attributes) - mandatory - excluded
    return mandatory, excluded, undecided


def is_minimal_key(key: Iterable[str], schema: Schema, fds: List[FunctionalDependency]) -> bool:
    key = set(key)
    if calculate_closure(key, fds) != schema.attributes:
        return False
    return all(calculate_closure(key - {attr}, fds) != schema.attributes for attr in key)


def find_candidate_keys(
    schema: Schema,
    fds: Iterable[FunctionalDependency],
    max_keys: Optional[int] = None,
) -> List[FrozenSet[str]]:
    """
    Enumerate every minimal candidate key of ``schema`` under ``fds``.

    Keys come back in tie-break order: fewest attributes first, then the
    lexicographically smallest sorted attribute names. ``max_keys`` stops the
    search once that many keys are found.
    """
    fds = list(fds)
    schema.check(fds)
    mandatory, _, undecided = partition_attributes(schema, fds)

    if calculate_closure(mandatory, fds) == schema.attributes:
        return [frozenset(mandatory)]

    keys: List[FrozenSet[str]] = []
    undecided = sorted(undecided)
    for size in range(1, len(undecided) + 1):
        for extra in combinations(undecided, size):
            candidate = frozenset(mandatory.union(extra))
            if any(key <= candidate for key in keys):
                continue
            if is_minimal_key(candidate, schema, fds):
                keys.append(candidate)
                if max_keys is not None and len(keys) >= max_keys:
                    return sorted(keys, key=sort_key)

    return sorted(keys, key=sort_key)


def choose_primary_key(keys: Iterable[FrozenSet[str]]) -> FrozenSet[str]:
    return min(keys, key=sort_key)


def find_primary_key(schema: Schema, fds: Iterable[FunctionalDependency]) -> FrozenSet[str]:
    return choose_primary_key(find_candidate_keys(schema, fds))


def build_relation(name: str, attributes: Iterable[str], fds: Iterable[FunctionalDependency]) -> Relation:
    """Project ``fds`` onto ``attributes`` and designate the relation's primary key."""
    attributes = frozenset(attributes)
    local_fds = project_fds(attributes, fds)
    key = find_primary_key(Schema(name, sorted(attributes)), local_fds)
    return Relation(name, attributes, group_by_lhs(local_fds), key)
