"""
Symbolic building blocks: schemas, functional dependencies and the
relations a decomposition is made of.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Tuple, Union

from .errors import (
    EmptyDependentError,
    EmptyDeterminantError,
    InconsistentSchemaError,
    UnknownAttributeError,
)

AttributeSet = FrozenSet[str]


def to_attribute_set(attributes: Union[str, Iterable[str]]) -> AttributeSet:
    # a bare string is one attribute name, not a sequence of characters
    if isinstance(attributes, str):
        return frozenset([attributes])
    return frozenset(attributes)


def sort_key(attributes: Iterable[str]) -> Tuple[int, Tuple[str, ...]]:
    """Tie-break order: fewest attributes first, then smallest sorted names."""
    names = tuple(sorted(attributes))
    return len(names), names


def format_attributes(attributes: Iterable[str]) -> str:
    return ",".join(sorted(attributes))


class Classification(Enum):
    FULL = "full"
    PARTIAL = "partial"
    TRANSITIVE = "transitive"
    KEY_DEFINING = "key-defining"


class NormalForm(Enum):
    FIRST = 1
    SECOND = 2
    THIRD = 3
    BCNF = 4

    def __str__(self):
        return "BCNF" if self is NormalForm.BCNF else f"{self.value}NF"


@dataclass(frozen=True)
class FunctionalDependency:
    """X -> Y: every value of ``lhs`` determines exactly one value of ``rhs``."""

    lhs: AttributeSet
    rhs: AttributeSet

    def __init__(self, lhs: Union[str, Iterable[str]], rhs: Union[str, Iterable[str]]):
        lhs = to_attribute_set(lhs)
        rhs = to_attribute_set(rhs)
        if not lhs:
            raise EmptyDeterminantError(f"FD with empty left-hand side: ->{format_attributes(rhs)}")
        if not rhs:
            raise EmptyDependentError(f"FD with empty right-hand side: {format_attributes(lhs)}->")
        object.__setattr__(self, "lhs", lhs)
        object.__setattr__(self, "rhs", rhs)

    @property
    def attributes(self) -> AttributeSet:
        return self.lhs | self.rhs

    def is_trivial(self) -> bool:
        return self.rhs <= self.lhs

    def split(self) -> List["FunctionalDependency"]:
        return [FunctionalDependency(self.lhs, attr) for attr in sorted(self.rhs)]

    def order(self) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
        return tuple(sorted(self.lhs)), tuple(sorted(self.rhs))

    def __str__(self):
        return f"{format_attributes(self.lhs)}->{format_attributes(self.rhs)}"

    def __repr__(self):
        return f"FD({self})"


def sorted_fds(fds: Iterable[FunctionalDependency]) -> List[FunctionalDependency]:
    """Collapse duplicates and order FDs by sorted LHS, then sorted RHS."""
    return sorted(set(fds), key=FunctionalDependency.order)


@dataclass(frozen=True)
class Schema:
    """A named, non-empty set of attributes."""

    name: str
    attributes: AttributeSet

    def __init__(self, name: str, attributes: Union[str, Iterable[str]]):
        names = [attributes] if isinstance(attributes, str) else list(attributes)
        if not names:
            raise InconsistentSchemaError(f"Schema '{name}' has no attributes")
        duplicates = sorted({attr for attr in names if names.count(attr) > 1})
        if duplicates:
            raise InconsistentSchemaError(
                f"Schema '{name}' repeats attribute(s): {', '.join(duplicates)}"
            )
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "attributes", frozenset(names))

    def check_attributes(self, attributes: Iterable[str]) -> None:
        unknown = set(attributes) - self.attributes
        if unknown:
            raise UnknownAttributeError(unknown, self.name)

    def check(self, fds: Iterable[FunctionalDependency]) -> None:
        for fd in fds:
            self.check_attributes(fd.attributes)

    def __str__(self):
        return f"{self.name}({', '.join(sorted(self.attributes))})"


@dataclass
class Relation:
    """One member of a decomposition: attributes, projected FDs and a designated key."""

    name: str
    attributes: AttributeSet
    fds: List[FunctionalDependency] = field(default_factory=list)
    key: AttributeSet = frozenset()

    def as_schema(self) -> Schema:
        return Schema(self.name, sorted(self.attributes))

    def render(self) -> str:
        # key columns first, as in a CREATE TABLE listing
        columns = sorted(self.key) + sorted(self.attributes - self.key)
        return f"{self.name}({', '.join(columns)}) key={{{format_attributes(self.key)}}}"


@dataclass
class Decomposition:
    normal_form: NormalForm
    relations: List[Relation] = field(default_factory=list)

    def attribute_sets(self) -> List[AttributeSet]:
        return [relation.attributes for relation in self.relations]

    def render(self) -> str:
        return "\n".join(relation.render() for relation in self.relations)

    def __iter__(self):
        return iter(self.relations)

    def __len__(self):
        return len(self.relations)
