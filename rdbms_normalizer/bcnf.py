"""
BCNF decomposition by recursive splitting on violating FDs.

Every split is lossless (the shared attributes are a superkey of one side),
but dependencies may be lost; ``properties.lost_dependencies`` reports which.
"""

from typing import FrozenSet, Iterable, List, Optional

from .closure import calculate_closure
from .cover import project_fds
from .keys import build_relation
from .models import Decomposition, FunctionalDependency, NormalForm, Schema, format_attributes, sort_key
from .synthesis import remove_dominated


def find_violation(
    attributes: FrozenSet[str], local_fds: List[FunctionalDependency]
) -> Optional[FunctionalDependency]:
    """The first FD, in tie-break order, whose left-hand side is not a superkey of ``attributes``."""
    violations = [
        fd for fd in local_fds
        if not calculate_closure(fd.lhs, local_fds) >= attributes
    ]
    if not violations:
        return None
    return min(violations, key=lambda fd: (sort_key(fd.lhs), sort_key(fd.rhs)))


def _decompose(
    attributes: FrozenSet[str], fds: List[FunctionalDependency], verbose: bool
) -> List[FrozenSet[str]]:
    local_fds = project_fds(attributes, fds)
    violation = find_violation(attributes, local_fds)
    if violation is None:
        return [attributes]

    r1 = frozenset(calculate_closure(violation.lhs, local_fds) & attributes)
    r2 = (attributes - r1) | violation.lhs
    if verbose:
        print(f"LHS: {sorted(violation.lhs)}, RHS: {sorted(violation.rhs)} violates BCNF in "
              f"({format_attributes(attributes)}); splitting into "
              f"({format_attributes(r1)}) and ({format_attributes(r2)})")
    return _decompose(r1, fds, verbose) + _decompose(r2, fds, verbose)


def decompose_bcnf(
    schema: Schema,
    fds: Iterable[FunctionalDependency],
    name: Optional[str] = None,
    verbose: bool = False,
) -> Decomposition:
    fds = list(fds)
    schema.check(fds)
    prefix = name or schema.name
    if verbose:
        print("Normalizing to BCNF...")
        print("Identified BCNF violations:")

    leaves = remove_dominated(_decompose(frozenset(schema.attributes), fds, verbose))
    relations = [
        build_relation(f"{prefix}_{i}", attributes, fds)
        for i, attributes in enumerate(leaves, 1)
    ]
    if verbose:
        print(f"BCNF decomposition has {len(relations)} relation(s)")
    return Decomposition(NormalForm.BCNF, relations)
