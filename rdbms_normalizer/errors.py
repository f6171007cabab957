from typing import Iterable


class NormalizationError(Exception):
    """Base class for every error raised by the normalizer."""


class UnknownAttributeError(NormalizationError):
    def __init__(self, attributes: Iterable[str], schema_name: str = ""):
        self.attributes = sorted(attributes)
        where = f" in schema '{schema_name}'" if schema_name else ""
        super().__init__(f"Unknown attribute(s){where}: {', '.join(self.attributes)}")


class EmptyDeterminantError(NormalizationError):
    pass


class EmptyDependentError(NormalizationError):
    pass


class InconsistentSchemaError(NormalizationError):
    pass


class FDParseError(NormalizationError):
    pass
