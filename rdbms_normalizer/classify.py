"""
Dependency classification against a key, and the normal form checks built on it.
"""

from itertools import combinations
from typing import Iterable, List, Optional, Set, Tuple

from .closure import calculate_closure
from .cover import minimal_cover
from .keys import find_candidate_keys, find_primary_key
from .models import Classification, FunctionalDependency, NormalForm, Schema, sort_key


def classify(
    fd: FunctionalDependency,
    primary_key: Iterable[str],
    schema: Schema,
    fds: Iterable[FunctionalDependency],
) -> Classification:
    """
    Label ``fd`` relative to ``primary_key``:

    - KEY_DEFINING: the determinant is exactly the key
    - PARTIAL: the determinant is a proper subset of the key
    - FULL: the determinant contains the key or is another superkey
    - TRANSITIVE: the determinant is not a superkey, so the dependent is
      reached from the key only through it
    """
    fds = list(fds)
    key = frozenset(primary_key)
    schema.check(fds)
    schema.check_attributes(fd.attributes | key)

    if fd.lhs == key:
        return Classification.KEY_DEFINING
    if fd.lhs < key:
        return Classification.PARTIAL
    if fd.lhs >= key or calculate_closure(fd.lhs, fds) >= schema.attributes:
        return Classification.FULL
    return Classification.TRANSITIVE


def dependency_report(
    schema: Schema,
    fds: Iterable[FunctionalDependency],
    primary_key: Optional[Iterable[str]] = None,
) -> List[Tuple[FunctionalDependency, Classification]]:
    fds = list(fds)
    if primary_key is None:
        primary_key = find_primary_key(schema, fds)
    return [(fd, classify(fd, primary_key, schema, fds)) for fd in minimal_cover(fds)]


def prime_attributes(schema: Schema, fds: Iterable[FunctionalDependency]) -> Set[str]:
    prime: Set[str] = set()
    for key in find_candidate_keys(schema, fds):
        prime |= key
    return prime


def partial_dependencies(schema: Schema, fds: Iterable[FunctionalDependency]) -> List[FunctionalDependency]:
    """Non-prime attributes determined by a proper subset of some candidate key (2NF violations)."""
    fds = list(fds)
    keys = find_candidate_keys(schema, fds)
    non_prime = set(schema.attributes) - set().union(*keys)
    found = []
    for key in keys:
        reported = {}
        for size in range(1, len(key)):
            for subset in combinations(sorted(key), size):
                lhs = frozenset(subset)
                already = set().union(*(rhs for sub, rhs in reported.items() if sub < lhs))
                dependents = (calculate_closure(lhs, fds) & non_prime) - already
                if dependents:
                    reported[lhs] = dependents
                    found.append(FunctionalDependency(lhs, dependents))
    return sorted(set(found), key=lambda fd: sort_key(fd.lhs))


def transitive_dependencies(schema: Schema, fds: Iterable[FunctionalDependency]) -> List[FunctionalDependency]:
    """Cover FDs whose non-superkey determinant is not part of any key and whose dependent is non-prime."""
    fds = list(fds)
    keys = find_candidate_keys(schema, fds)
    prime = set().union(*keys)
    found = []
    for fd in minimal_cover(fds):
        if calculate_closure(fd.lhs, fds) >= schema.attributes:
            continue
        if fd.rhs <= prime or any(fd.lhs < key for key in keys):
            continue
        found.append(fd)
    return found


def bcnf_violations(schema: Schema, fds: Iterable[FunctionalDependency]) -> List[FunctionalDependency]:
    fds = list(fds)
    schema.check(fds)
    return [
        fd for fd in minimal_cover(fds)
        if not calculate_closure(fd.lhs, fds) >= schema.attributes
    ]


def third_nf_violations(schema: Schema, fds: Iterable[FunctionalDependency]) -> List[FunctionalDependency]:
    fds = list(fds)
    prime = prime_attributes(schema, fds)
    return [fd for fd in bcnf_violations(schema, fds) if not fd.rhs <= prime]


def highest_normal_form(schema: Schema, fds: Iterable[FunctionalDependency]) -> NormalForm:
    """
    Strongest normal form ``schema`` satisfies. A symbolic schema has atomic
    attributes, so 1NF always holds.
    """
    fds = list(fds)
    if not bcnf_violations(schema, fds):
        return NormalForm.BCNF
    if not third_nf_violations(schema, fds):
        return NormalForm.THIRD
    if not partial_dependencies(schema, fds):
        return NormalForm.SECOND
    return NormalForm.FIRST
