import pytest

from rdbms_normalizer.classify import (
    bcnf_violations,
    classify,
    dependency_report,
    highest_normal_form,
    partial_dependencies,
    prime_attributes,
    transitive_dependencies,
)
from rdbms_normalizer.errors import UnknownAttributeError
from rdbms_normalizer.models import Classification, NormalForm
from rdbms_normalizer.parsing import parse_fd, parse_fds, parse_schema

KEY = {"ID", "CID"}


def test_classify_against_composite_key(enrollment):
    schema, fds = enrollment
    assert classify(parse_fd("ID, CID -> Grade"), KEY, schema, fds) is Classification.KEY_DEFINING
    assert classify(parse_fd("ID -> Name"), KEY, schema, fds) is Classification.PARTIAL
    assert classify(parse_fd("CID -> Teacher"), KEY, schema, fds) is Classification.PARTIAL
    assert classify(parse_fd("Zip -> City"), KEY, schema, fds) is Classification.TRANSITIVE
    assert classify(parse_fd("ID, CID, Zip -> Grade"), KEY, schema, fds) is Classification.FULL


def test_other_superkey_is_full():
    schema = parse_schema("A, B, C")
    fds = parse_fds(["A -> B", "B -> A", "A -> C"])
    assert classify(parse_fd("B -> C"), {"A"}, schema, fds) is Classification.FULL


def test_classify_rejects_unknown_key(enrollment):
    schema, fds = enrollment
    with pytest.raises(UnknownAttributeError):
        classify(parse_fd("Zip -> City"), {"SSN"}, schema, fds)


def test_dependency_report_uses_primary_key(enrollment):
    schema, fds = enrollment
    report = {str(fd): label for fd, label in dependency_report(schema, fds)}
    assert report["CID,ID->Grade"] is Classification.KEY_DEFINING
    assert report["ID->Zip"] is Classification.PARTIAL
    assert report["Zip->City"] is Classification.TRANSITIVE


def test_violations_in_enrollment(enrollment):
    schema, fds = enrollment
    assert prime_attributes(schema, fds) == KEY
    assert [str(fd) for fd in partial_dependencies(schema, fds)] == [
        "CID->CName,Hours,Teacher",
        "ID->City,Name,Zip",
    ]
    assert [str(fd) for fd in transitive_dependencies(schema, fds)] == ["Zip->City"]
    assert "CID,ID->Grade" not in [str(fd) for fd in bcnf_violations(schema, fds)]
    assert highest_normal_form(schema, fds) is NormalForm.FIRST


def test_transitive_dependency_only_is_second_normal_form():
    schema = parse_schema("ID, Name, Zip, City")
    fds = parse_fds(["ID -> Name, Zip", "Zip -> City"])
    assert partial_dependencies(schema, fds) == []
    assert highest_normal_form(schema, fds) is NormalForm.SECOND


def test_prime_dependent_is_third_normal_form(teaching):
    schema, fds = teaching
    assert prime_attributes(schema, fds) == {"S", "J", "T"}
    assert [str(fd) for fd in bcnf_violations(schema, fds)] == ["T->J"]
    assert highest_normal_form(schema, fds) is NormalForm.THIRD
    assert str(NormalForm.THIRD) == "3NF"


def test_key_determined_relation_is_bcnf():
    schema = parse_schema("A, B, C")
    assert highest_normal_form(schema, parse_fds(["A -> B, C"])) is NormalForm.BCNF
    assert highest_normal_form(schema, []) is NormalForm.BCNF
    assert str(NormalForm.BCNF) == "BCNF"


def test_determinant_overlapping_the_key_is_transitive(enrollment):
    schema, fds = enrollment
    # ID is part of the key, Zip is not; {ID, Zip} is no superkey
    assert classify(parse_fd("ID, Zip -> City"), KEY, schema, fds) is Classification.TRANSITIVE
