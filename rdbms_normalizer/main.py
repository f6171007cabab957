import argparse
import sys
from typing import List, Optional

from .bcnf import decompose_bcnf
from .classify import dependency_report, highest_normal_form
from .cover import minimal_cover
from .errors import FDParseError, NormalizationError
from .keys import find_candidate_keys
from .models import Decomposition, FunctionalDependency, Schema, format_attributes
from .parsing import parse_fd, parse_fds, parse_schema
from .properties import is_lossless, lost_dependencies
from .sampling import is_lossless_on, read_data, violated_fds
from .synthesis import synthesize_3nf


def prompt_functional_dependencies() -> List[FunctionalDependency]:
    fds = []
    print("Enter functional dependencies one by one in the format 'A, B -> C, D'. Type 'done' when finished:")

    while True:
        user_input = input("FD: ")
        if user_input.strip().lower() == "done":
            break
        if not user_input.strip():
            continue
        try:
            fds.append(parse_fd(user_input))
        except FDParseError as e:
            print(e)

    return fds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rdbms-normalizer",
        description="Find keys and decompose a relation schema into 3NF or BCNF",
    )
    parser.add_argument("--schema", required=True, help="Comma-separated attribute list, e.g. 'A,B,C'")
    parser.add_argument("--name", default="R", help="Relation name (default: R)")
    parser.add_argument("--fds", help="File with one FD per line ('A,B->C'); prompts when omitted")
    parser.add_argument("--form", type=str.upper, choices=["3NF", "BCNF", "BOTH"], default="3NF",
                        help="Target normal form: 3NF, BCNF or both (default: 3NF)")
    parser.add_argument("--data", help="CSV or Excel file with sample rows to validate against")
    parser.add_argument("--max-keys", type=int, default=None, help="Stop after this many candidate keys")
    parser.add_argument("--verbose", action="store_true", help="Print each normalization step")
    return parser


def report_decomposition(
    decomposition: Decomposition, schema: Schema, fds: List[FunctionalDependency]
) -> None:
    print(f"{decomposition.normal_form} decomposition:")
    print(decomposition.render())
    print(f"Lossless join: {is_lossless(schema, decomposition, fds)}")
    lost = lost_dependencies(decomposition, fds)
    if lost:
        print(f"Dependencies not preserved: {', '.join(str(fd) for fd in lost)}")
    else:
        print("Dependency preserving: True")
    print()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        schema = parse_schema(args.schema, args.name)
        if args.fds:
            with open(args.fds, "r", encoding="utf-8") as f:
                fds = parse_fds(f)
        else:
            fds = prompt_functional_dependencies()
        schema.check(fds)
        print(f"Schema: {schema}")
        print(f"Functional Dependencies: {', '.join(str(fd) for fd in fds) or '(none)'}\n")

        keys = find_candidate_keys(schema, fds, max_keys=args.max_keys)
        print(f"Candidate keys: {', '.join('{' + format_attributes(key) + '}' for key in keys)}")
        print(f"Primary key: {{{format_attributes(keys[0])}}}")
        print(f"Minimal cover: {', '.join(str(fd) for fd in minimal_cover(fds)) or '(empty)'}")
        print("Dependencies relative to the primary key:")
        for fd, classification in dependency_report(schema, fds, keys[0]):
            print(f"  {fd} ({classification.value})")
        print(f"Highest normal form: {highest_normal_form(schema, fds)}\n")

        decompositions = []
        if args.form in ("3NF", "BOTH"):
            decompositions.append(synthesize_3nf(schema, fds, verbose=args.verbose))
        if args.form in ("BCNF", "BOTH"):
            decompositions.append(decompose_bcnf(schema, fds, verbose=args.verbose))
        for decomposition in decompositions:
            report_decomposition(decomposition, schema, fds)

        if args.data:
            df = read_data(args.data)
            violations = violated_fds(df, fds)
            if violations:
                print(f"FDs violated by the data: {', '.join(str(fd) for fd in violations)}")
            else:
                print("All FDs hold on the data.")
            for decomposition in decompositions:
                print(f"{decomposition.normal_form} rejoins losslessly on the data: "
                      f"{is_lossless_on(df, decomposition)}")
    except (NormalizationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
