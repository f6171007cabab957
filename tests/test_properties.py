from rdbms_normalizer.parsing import parse_fds, parse_schema
from rdbms_normalizer.properties import (
    is_lossless,
    is_lossless_binary,
    lost_dependencies,
    preserves_dependencies,
)


def test_binary_lossless_join_test():
    fds = parse_fds(["B -> C"])
    assert is_lossless_binary("AB", "BC", fds)
    assert not is_lossless_binary("AB", "BC", [])
    assert not is_lossless_binary("AB", "CD", fds)


def test_chase_accepts_lossless_decomposition():
    schema = parse_schema("A, B, C")
    fds = parse_fds(["A -> B"])
    assert is_lossless(schema, [{"A", "B"}, {"A", "C"}], fds)
    assert not is_lossless(schema, [{"A", "B"}, {"B", "C"}], fds)


def test_chase_needs_several_rounds():
    schema = parse_schema("A, B, C, D, E")
    fds = parse_fds(["A -> C", "B -> C", "C -> D", "D, E -> C", "C, E -> A"])
    relations = [set("AD"), set("AB"), set("BE"), set("CDE"), set("AE")]
    assert is_lossless(schema, relations, fds)


def test_decomposition_must_cover_the_schema():
    schema = parse_schema("A, B, C")
    assert not is_lossless(schema, [{"A", "B"}], parse_fds(["A -> B"]))
    assert not is_lossless(schema, [], [])


def test_dependency_preservation():
    fds = parse_fds(["A -> B", "B -> C"])
    assert preserves_dependencies([set("AB"), set("BC")], fds)
    # A -> B is lost, although A -> C survives in AC
    assert [str(fd) for fd in lost_dependencies([set("AC"), set("BC")], fds)] == ["A->B"]


def test_dependency_preserved_across_relations():
    fds = parse_fds(["A -> B", "B -> C", "C -> A"])
    # C -> A is enforced through C -> B and B -> A
    assert preserves_dependencies([set("AB"), set("BC")], fds)
