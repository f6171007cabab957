"""
Checks on a decomposition: lossless join and dependency preservation.

``relations`` may be a Decomposition, a list of Relation objects or a plain
list of attribute collections.
"""

from typing import Dict, FrozenSet, Iterable, List, Tuple

from .closure import calculate_closure
from .cover import minimal_cover
from .models import FunctionalDependency, Relation, Schema


def _attribute_sets(relations) -> List[FrozenSet[str]]:
    return [
        relation.attributes if isinstance(relation, Relation) else frozenset(relation)
        for relation in relations
    ]


def is_lossless_binary(r1: Iterable[str], r2: Iterable[str], fds: Iterable[FunctionalDependency]) -> bool:
    """R1 and R2 join losslessly iff their common attributes determine R1 or R2."""
    r1, r2 = frozenset(r1), frozenset(r2)
    common = calculate_closure(r1 & r2, fds)
    return r1 <= common or r2 <= common


def is_lossless(schema: Schema, relations, fds: Iterable[FunctionalDependency]) -> bool:
    """
    Tableau chase: one row per relation, distinguished symbols on the
    relation's own attributes. FDs equate symbols until nothing changes; the
    join is lossless iff some row ends up fully distinguished.
    """
    fds = minimal_cover(fds)
    attribute_sets = _attribute_sets(relations)
    if not attribute_sets or frozenset().union(*attribute_sets) != schema.attributes:
        return False

    columns = sorted(schema.attributes)
    rows: List[Dict[str, Tuple]] = [
        {attr: ("a",) if attr in attrs else ("b", i) for attr in columns}
        for i, attrs in enumerate(attribute_sets)
    ]

    changed = True
    while changed:
        changed = False
        for fd in fds:
            (target,) = fd.rhs
            groups: Dict[Tuple, List[Dict[str, Tuple]]] = {}
            for row in rows:
                groups.setdefault(tuple(row[attr] for attr in sorted(fd.lhs)), []).append(row)
            for group in groups.values():
                # distinguished symbols sort first
                symbol = min(row[target] for row in group)
                stale = {row[target] for row in group} - {symbol}
                if not stale:
                    continue
                for row in rows:
                    if row[target] in stale:
                        row[target] = symbol
                changed = True

    return any(all(value == ("a",) for value in row.values()) for row in rows)


def lost_dependencies(relations, fds: Iterable[FunctionalDependency]) -> List[FunctionalDependency]:
    """FDs of the minimal cover that cannot be enforced from the relations' projections."""
    fds = list(fds)
    attribute_sets = _attribute_sets(relations)
    lost = []
    for fd in minimal_cover(fds):
        determined = set(fd.lhs)
        while True:
            new_attributes = determined.copy()
            for attrs in attribute_sets:
                new_attributes |= calculate_closure(determined & attrs, fds) & attrs
            if new_attributes == determined:
                break
            determined = new_attributes
        if not fd.rhs <= determined:
            lost.append(fd)
    return lost


def preserves_dependencies(relations, fds: Iterable[FunctionalDependency]) -> bool:
    return not lost_dependencies(relations, fds)
