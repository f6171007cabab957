"""
Row-level checks with pandas: do the FDs hold on sample data, and do the
projections of the data onto a decomposition join back to the original rows?
"""

from functools import reduce
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from .errors import UnknownAttributeError
from .models import FunctionalDependency


def read_data(file_path: str) -> pd.DataFrame:
    print(f"Reading data from {file_path}...")
    if Path(file_path).suffix.lower() in (".xlsx", ".xls"):
        df = pd.read_excel(file_path)
    else:
        df = pd.read_csv(file_path)
    print(f"Data read successfully. Shape: {df.shape}")
    return df


def _check_columns(df: pd.DataFrame, attributes: Iterable[str]) -> None:
    missing = set(attributes) - set(df.columns)
    if missing:
        raise UnknownAttributeError(missing, "sample data")


def fd_holds(df: pd.DataFrame, fd: FunctionalDependency) -> bool:
    """True if rows agreeing on the FD's left-hand side also agree on its right-hand side."""
    _check_columns(df, fd.attributes)
    if df.empty:
        return True
    dependents = sorted(fd.rhs - fd.lhs)
    if not dependents:
        return True
    counts = df.groupby(sorted(fd.lhs), dropna=False)[dependents].nunique(dropna=False)
    return bool((counts <= 1).all().all())


def violated_fds(df: pd.DataFrame, fds: Iterable[FunctionalDependency]) -> List[FunctionalDependency]:
    return [fd for fd in fds if not fd_holds(df, fd)]


def project_rows(df: pd.DataFrame, relations) -> List[pd.DataFrame]:
    """One duplicate-free projection of ``df`` per relation of the decomposition."""
    tables = []
    for relation in relations:
        columns = sorted(relation.attributes)
        _check_columns(df, columns)
        tables.append(df[columns].drop_duplicates().reset_index(drop=True))
    return tables


def natural_join(frames: List[pd.DataFrame]) -> pd.DataFrame:
    def join(left: pd.DataFrame, right: pd.DataFrame) -> pd.DataFrame:
        shared = [col for col in left.columns if col in right.columns]
        if shared:
            return left.merge(right, on=shared, how="inner")
        return left.merge(right, how="cross")

    return reduce(join, frames).drop_duplicates().reset_index(drop=True)


def is_lossless_on(df: pd.DataFrame, relations) -> bool:
    """
    Project ``df`` onto each relation and rejoin. The join always contains
    the original rows, so it is lossless on this data iff no spurious rows
    appear.
    """
    relations = list(relations)
    columns = sorted(set().union(*(relation.attributes for relation in relations)))
    _check_columns(df, columns)
    original = df[columns].drop_duplicates()
    joined = natural_join(project_rows(df, relations))
    return len(joined[columns].drop_duplicates()) == len(original)
