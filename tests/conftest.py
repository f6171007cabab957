import pytest

from rdbms_normalizer.parsing import parse_fds, parse_schema

ENROLLMENT_ATTRIBUTES = "ID, Name, City, Zip, CID, CName, Hours, Grade, Teacher"
ENROLLMENT_FDS = [
    "ID -> Name, City, Zip",
    "Zip -> City",
    "CID -> CName, Hours, Teacher",
    "ID, CID -> Grade",
]


@pytest.fixture
def enrollment():
    return parse_schema(ENROLLMENT_ATTRIBUTES), parse_fds(ENROLLMENT_FDS)


@pytest.fixture
def teaching():
    # student, subject, teacher: 3NF but not BCNF
    return parse_schema("S, J, T"), parse_fds(["S, J -> T", "T -> J"])
