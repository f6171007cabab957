"""
Minimal (canonical) covers, FD-set equivalence and FD projection.
"""

from typing import Dict, FrozenSet, Iterable, List

from .closure import calculate_closure, implies
from .models import FunctionalDependency, sorted_fds


def split_rhs(fds: Iterable[FunctionalDependency]) -> List[FunctionalDependency]:
    """Singleton right-hand sides; trivial parts (A in LHS) are dropped."""
    singletons = []
    for fd in fds:
        singletons.extend(part for part in fd.split() if not part.is_trivial())
    return sorted_fds(singletons)


def _remove_extraneous_attributes(fds: List[FunctionalDependency]) -> bool:
    changed = False
    for i, fd in enumerate(fds):
        lhs = set(fd.lhs)
        for attr in sorted(fd.lhs):
            if len(lhs) == 1:
                break
            if fd.rhs <= calculate_closure(lhs - {attr}, fds):
                lhs.discard(attr)
                # later tests see the reduced FD
                fds[i] = FunctionalDependency(lhs, fd.rhs)
                changed = True
    return changed


def _remove_redundant_fds(fds: List[FunctionalDependency]) -> bool:
    changed = False
    i = 0
    while i < len(fds):
        fd = fds[i]
        other_fds = fds[:i] + fds[i + 1:]
        if implies(other_fds, fd):
            fds.pop(i)
            changed = True
        else:
            i += 1
    return changed


def minimal_cover(fds: Iterable[FunctionalDependency]) -> List[FunctionalDependency]:
    """
    Return a minimal cover of ``fds``:
    1. every right-hand side is a single attribute,
    2. no left-hand side has an extraneous attribute,
    3. no FD follows from the others.

    The steps repeat until none of them changes anything. The input is
    processed in sorted order so the result does not depend on the order the
    FDs were supplied in.
    """
    cover = split_rhs(fds)
    while True:
        reduced = _remove_extraneous_attributes(cover)
        cover[:] = sorted_fds(cover)
        pruned = _remove_redundant_fds(cover)
        if not (reduced or pruned):
            break
    return sorted_fds(cover)


def group_by_lhs(fds: Iterable[FunctionalDependency]) -> List[FunctionalDependency]:
    """Merge FDs sharing a left-hand side: X->A, X->B becomes X->A,B."""
    groups = {}
    for fd in sorted_fds(fds):
        groups.setdefault(fd.lhs, set()).update(fd.rhs)
    return [FunctionalDependency(lhs, rhs) for lhs, rhs in groups.items()]


def equivalent(fds: Iterable[FunctionalDependency], other: Iterable[FunctionalDependency]) -> bool:
    fds, other = list(fds), list(other)
    return all(implies(fds, fd) for fd in other) and all(implies(other, fd) for fd in fds)


def _next_level(level: List[FrozenSet[str]]) -> List[FrozenSet[str]]:
    """Candidates one attribute larger whose every maximal proper subset is in ``level``."""
    kept = set(level)
    ordered = sorted(tuple(sorted(lhs)) for lhs in level)
    candidates = []
    for i, left in enumerate(ordered):
        for right in ordered[i + 1:]:
            if left[:-1] != right[:-1]:
                break
            candidate = frozenset(left + right[-1:])
            if all(candidate - {attr} in kept for attr in candidate):
                candidates.append(candidate)
    return candidates


def project_fds(
    attributes: Iterable[str], fds: Iterable[FunctionalDependency]
) -> List[FunctionalDependency]:
    """
    Project ``fds`` onto ``attributes``: the minimal cover of every FD X->Y
    implied by ``fds`` with X and Y inside ``attributes``.

    Only attributes that occur on some left-hand side can make a closure
    grow, so determinants are drawn from those alone. They are visited level
    by level. A set X is dropped, together with all its supersets, when some
    A in X already follows from X - {A}, or when X is a superkey. Each
    surviving X contributes only what its maximal proper subsets do not
    already determine.
    """
    attributes = frozenset(attributes)
    fds = list(fds)
    determinants = set()
    for fd in fds:
        determinants |= fd.lhs
    determinants &= attributes

    projected = []
    closures: Dict[FrozenSet[str], FrozenSet[str]] = {frozenset(): frozenset()}
    level = [frozenset([attr]) for attr in sorted(determinants)]
    while level:
        survivors = []
        for lhs in level:
            subsets = [lhs - {attr} for attr in lhs]
            if any(attr in closures[lhs - {attr}] for attr in lhs):
                continue
            determined = frozenset(calculate_closure(lhs, fds)) & attributes
            inherited = frozenset().union(*(closures[subset] for subset in subsets))
            if determined - lhs - inherited:
                projected.append(FunctionalDependency(lhs, determined - lhs - inherited))
            closures[lhs] = determined
            if determined != attributes:
                survivors.append(lhs)
        level = _next_level(survivors)
    return minimal_cover(projected)
