from .bcnf import decompose_bcnf
from .classify import classify, dependency_report, highest_normal_form
from .closure import calculate_closure
from .cover import equivalent, minimal_cover, project_fds
from .errors import (
    EmptyDependentError,
    EmptyDeterminantError,
    FDParseError,
    InconsistentSchemaError,
    NormalizationError,
    UnknownAttributeError,
)
from .keys import choose_primary_key, find_candidate_keys, find_primary_key
from .models import (
    Classification,
    Decomposition,
    FunctionalDependency,
    NormalForm,
    Relation,
    Schema,
)
from .parsing import parse_fd, parse_fds, parse_schema
from .properties import is_lossless, preserves_dependencies
from .synthesis import synthesize_3nf

__all__ = [
    "calculate_closure",
    "find_candidate_keys",
    "find_primary_key",
    "choose_primary_key",
    "minimal_cover",
    "equivalent",
    "project_fds",
    "classify",
    "dependency_report",
    "highest_normal_form",
    "synthesize_3nf",
    "decompose_bcnf",
    "is_lossless",
    "preserves_dependencies",
    "parse_fd",
    "parse_fds",
    "parse_schema",
    "Schema",
    "FunctionalDependency",
    "Relation",
    "Decomposition",
    "Classification",
    "NormalForm",
    "NormalizationError",
    "UnknownAttributeError",
    "EmptyDeterminantError",
    "EmptyDependentError",
    "InconsistentSchemaError",
    "FDParseError",
]
