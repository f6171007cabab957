"""
3NF synthesis (Bernstein): one relation per left-hand side of the minimal
cover, plus a key relation when none of them holds a key of the schema.
The result is lossless-join and dependency preserving.
"""

from typing import FrozenSet, Iterable, List, Optional

from .closure import is_superkey
from .cover import group_by_lhs, minimal_cover
from .keys import build_relation, find_primary_key
from .models import Decomposition, FunctionalDependency, NormalForm, Schema, format_attributes


def remove_dominated(attribute_sets: List[FrozenSet[str]]) -> List[FrozenSet[str]]:
    """Drop duplicates and every set that is a proper subset of another, keeping order."""
    kept: List[FrozenSet[str]] = []
    for attributes in attribute_sets:
        if attributes in kept or any(attributes < other for other in attribute_sets):
            continue
        kept.append(attributes)
    return kept


def synthesize_3nf(
    schema: Schema,
    fds: Iterable[FunctionalDependency],
    name: Optional[str] = None,
    verbose: bool = False,
) -> Decomposition:
    fds = list(fds)
    schema.check(fds)
    prefix = name or schema.name
    if verbose:
        print("Normalizing to 3NF...")

    cover = minimal_cover(fds)
    if verbose:
        print(f"Minimal cover: {[str(fd) for fd in cover]}")

    candidates: List[FrozenSet[str]] = []
    for fd in group_by_lhs(cover):
        attributes = fd.lhs | fd.rhs
        if attributes not in candidates:
            candidates.append(attributes)

    if not any(is_superkey(attributes, schema.attributes, fds) for attributes in candidates):
        key = find_primary_key(schema, fds)
        if verbose:
            print(f"No relation contains a key of {schema.name}; adding key relation {{{format_attributes(key)}}}")
        candidates.append(key)

    candidates = remove_dominated(candidates)
    relations = [
        build_relation(f"{prefix}_{i}", attributes, cover)
        for i, attributes in enumerate(candidates, 1)
    ]
    if verbose:
        print(f"3NF decomposition has {len(relations)} relation(s)")
    return Decomposition(NormalForm.THIRD, relations)
