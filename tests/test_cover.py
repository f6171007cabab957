from itertools import chain, combinations

from rdbms_normalizer.closure import calculate_closure
from rdbms_normalizer.cover import equivalent, group_by_lhs, minimal_cover, project_fds, split_rhs
from rdbms_normalizer.parsing import parse_fds


def as_strings(fds):
    return [str(fd) for fd in fds]


def test_redundant_fd_is_removed():
    fds = parse_fds(["A -> B", "B -> A", "A -> C", "B -> C"])
    cover = minimal_cover(fds)
    assert len(cover) == 3
    assert as_strings(cover) == ["A->B", "B->A", "B->C"]
    assert equivalent(cover, fds)


def test_extraneous_lhs_attribute_is_removed():
    fds = parse_fds(["A, B -> C", "A -> B"])
    assert as_strings(minimal_cover(fds)) == ["A->B", "A->C"]


def test_trivial_parts_are_dropped():
    assert as_strings(minimal_cover(parse_fds(["A, B -> A, C"]))) == ["A,B->C"]
    assert minimal_cover(parse_fds(["A -> A"])) == []


def test_cover_has_singleton_rhs_and_keeps_cycles():
    fds = parse_fds(["A -> B, C", "B -> A"])
    cover = minimal_cover(fds)
    assert all(len(fd.rhs) == 1 for fd in cover)
    assert as_strings(cover) == ["A->B", "A->C", "B->A"]


def test_cover_is_independent_of_input_order(enrollment):
    _, fds = enrollment
    assert minimal_cover(fds) == minimal_cover(list(reversed(fds)))
    assert as_strings(minimal_cover(fds)) == [
        "CID->CName",
        "CID->Hours",
        "CID->Teacher",
        "CID,ID->Grade",
        "ID->Name",
        "ID->Zip",
        "Zip->City",
    ]


def test_cover_preserves_every_closure():
    fds = parse_fds(["A -> B, C", "B -> C", "A -> B", "A, B -> C", "C, D -> E", "E -> D", "A, D -> E"])
    cover = minimal_cover(fds)
    attributes = "ABCDE"
    for subset in chain.from_iterable(combinations(attributes, r) for r in range(len(attributes) + 1)):
        assert calculate_closure(subset, fds) == calculate_closure(subset, cover)
    assert len(cover) < len(split_rhs(fds))


def test_equivalent_detects_different_sets():
    assert not equivalent(parse_fds(["A -> B"]), parse_fds(["B -> A"]))
    assert equivalent(parse_fds(["A -> B", "B -> C", "A -> C"]), parse_fds(["A -> B", "B -> C"]))


def test_group_by_lhs():
    grouped = group_by_lhs(parse_fds(["A -> B", "C -> D", "A -> C"]))
    assert as_strings(grouped) == ["A->B,C", "C->D"]


def test_project_fds_keeps_implied_dependencies():
    fds = parse_fds(["A -> B", "B -> C"])
    assert as_strings(project_fds({"A", "C"}, fds)) == ["A->C"]
    assert project_fds({"A"}, fds) == []


def test_projection_matches_closures_of_every_subset():
    fds = parse_fds(["A -> B", "B, C -> D", "D -> E", "E, F -> A", "G -> F"])
    attributes = "ABDEFG"
    projected = project_fds(set(attributes), fds)
    for subset in chain.from_iterable(combinations(attributes, r) for r in range(len(attributes) + 1)):
        assert calculate_closure(subset, projected) == calculate_closure(subset, fds) & set(attributes)


def test_projection_ignores_attributes_that_determine_nothing():
    fds = parse_fds(["A -> B", "B -> C"])
    assert as_strings(project_fds({"A", "C", "D", "E"}, fds)) == ["A->C"]
    assert project_fds({"C", "D", "E"}, fds) == []
