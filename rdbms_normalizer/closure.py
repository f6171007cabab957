from typing import Iterable, Optional, Set

from .models import FunctionalDependency, Schema


def calculate_closure(
    attributes: Iterable[str],
    fds: Iterable[FunctionalDependency],
    schema: Optional[Schema] = None,
) -> Set[str]:
    """
    Compute X+ : every attribute functionally determined by ``attributes``.

    When ``schema`` is given, the attributes and FDs are checked against it
    first and UnknownAttributeError is raised for anything outside it.
    """
    fds = list(fds)
    closure = set(attributes)
    if schema is not None:
        schema.check_attributes(closure)
        schema.check(fds)

    while True:
        new_attributes = closure.copy()
        for fd in fds:
            if fd.lhs <= closure:
                new_attributes.update(fd.rhs)
        if new_attributes == closure:
            break
        closure = new_attributes
    return closure


def is_superkey(attributes: Iterable[str], universe: Iterable[str], fds: Iterable[FunctionalDependency]) -> bool:
    return calculate_closure(attributes, fds) >= set(universe)


def implies(fds: Iterable[FunctionalDependency], fd: FunctionalDependency) -> bool:
    """True if ``fd`` follows from ``fds`` by Armstrong's axioms."""
    return fd.rhs <= calculate_closure(fd.lhs, fds)
