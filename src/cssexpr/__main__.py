"""CLI entry-point for cssexpr.

Usage:
    python -m cssexpr "<expr>"
    python -m cssexpr "<expr>" --json
    python -m cssexpr eval <expr> [<expr> ...] [--json]
    python -m cssexpr check <expr> (--field NAME | --min N --max N)
    python -m cssexpr commit <expr> --current CSS --field NAME [--json]
    python -m cssexpr fields [--json]
    python -m cssexpr validate <instance.json> <schema_name>

Negative option values work in either form: ``--current -2px`` or
``--current=-2px``. Expressions starting with '-' go after ``--``.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path

import jsonschema

from cssexpr import __version__
from cssexpr.api import (
    check_field as _api_check_field,
    commit_field as _api_commit_field,
    evaluate_expression as _api_evaluate_expression,
    evaluate_many as _api_evaluate_many,
)
from cssexpr.contracts.load import validate_instance
from cssexpr.errors import InvalidExpression
from cssexpr.policy.fields import FIELDS, FieldSpec
from cssexpr.utils.exit_codes import ExitCode
from cssexpr.utils.json_norm import stable_json_dump

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


def _add_json_flag(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the result as JSON to stdout.",
    )


def _add_verbose_flag(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug output to stderr.",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cssexpr",
        description="Evaluate CSS value expressions such as '(2 + 3) * 4em'.",
    )
    sub = p.add_subparsers(dest="command")
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    _add_verbose_flag(p)

    # ── eval subcommand ─────────────────────────────────────────────
    eval_p = sub.add_parser(
        "eval",
        help="Evaluate one or more expressions.",
    )
    eval_p.add_argument("expressions", nargs="+", help="Expressions to evaluate.")
    _add_json_flag(eval_p)

    # ── check subcommand ────────────────────────────────────────────
    check_p = sub.add_parser(
        "check",
        help="Report whether an expression is valid for a field.",
    )
    check_p.add_argument("expression", help="Expression to check.")
    check_p.add_argument(
        "--field",
        choices=sorted(FIELDS),
        default=None,
        help="Field preset supplying the allowed range.",
    )
    check_p.add_argument("--min", dest="min_value", type=float, default=None)
    check_p.add_argument("--max", dest="max_value", type=float, default=None)
    _add_json_flag(check_p)

    # ── commit subcommand ───────────────────────────────────────────
    commit_p = sub.add_parser(
        "commit",
        help="Commit an expression to a field, reverting on failure.",
    )
    commit_p.add_argument("expression", help="Text typed into the field.")
    commit_p.add_argument(
        "--current",
        required=True,
        help="Currently committed value, e.g. '1.5em'.",
    )
    commit_p.add_argument(
        "--field",
        choices=sorted(FIELDS),
        required=True,
        help="Field preset.",
    )
    _add_json_flag(commit_p)

    # ── fields subcommand ───────────────────────────────────────────
    fields_p = sub.add_parser(
        "fields",
        help="List the field presets.",
    )
    _add_json_flag(fields_p)

    # ── validate subcommand ─────────────────────────────────────────
    val_p = sub.add_parser(
        "validate",
        help="Validate a JSON instance against a bundled schema.",
    )
    val_p.add_argument("instance", type=Path, help="Path to the JSON file to validate.")
    val_p.add_argument("schema_name", help="Schema filename, e.g. evaluation.schema.json")

    return p


def _build_default_parser() -> argparse.ArgumentParser:
    """Parser for default positional mode.

    Argparse subparsers greedily consume the first positional token, so
    ``cssexpr '2 + 3px' --json`` would be read as an unknown command.  This
    parser is used when the first positional token is *not* a known
    subcommand.
    """
    p = argparse.ArgumentParser(
        prog="cssexpr",
        description="Evaluate CSS value expressions such as '(2 + 3) * 4em'.",
    )
    p.add_argument(
        "expression",
        help="Expression to evaluate, e.g. '-1.5 * (2 + 3)px'. "
        "Put expressions that start with '-' after '--'.",
    )
    _add_json_flag(p)
    _add_verbose_flag(p)
    p.set_defaults(command=None)
    return p


def _first_positional(argv: list[str]) -> str | None:
    for i, a in enumerate(argv):
        if a == "--":
            return argv[i + 1] if i + 1 < len(argv) else None
        if not a.startswith("-") or " " in a:
            return a
    return None


_VALUE_OPTIONS = ("--current", "--min", "--max")


def _join_signed_values(argv: list[str]) -> list[str]:
    """Rewrite ``--current -2px`` as ``--current=-2px``.

    Argparse reads a value starting with '-' as another option, so negative
    values for these options would otherwise fail to parse.
    """
    out: list[str] = []
    i = 0
    while i < len(argv):
        a = argv[i]
        if a == "--":
            out.extend(argv[i:])
            break
        if a in _VALUE_OPTIONS and i + 1 < len(argv) and argv[i + 1].startswith("-"):
            out.append(f"{a}={argv[i + 1]}")
            i += 2
            continue
        out.append(a)
        i += 1
    return out


# ── handlers ────────────────────────────────────────────────────────


def _handle_eval(args: argparse.Namespace) -> int:
    results = _api_evaluate_many(args.expressions)
    if args.json_out:
        stable_json_dump(results, sys.stdout)
    else:
        for r in results:
            if r["ok"]:
                print(r["css"])
            else:
                print(f"error: {r['expression']!r}: {r['error']}", file=sys.stderr)
    if all(r["ok"] for r in results):
        return ExitCode.SUCCESS
    return ExitCode.INVALID


def _handle_check(args: argparse.Namespace) -> int:
    if args.field is not None:
        field: str | FieldSpec = args.field
    elif args.min_value is not None or args.max_value is not None:
        try:
            field = FieldSpec(
                name="custom",
                min_value=args.min_value if args.min_value is not None else -math.inf,
                max_value=args.max_value if args.max_value is not None else math.inf,
            )
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return ExitCode.ERROR
    else:
        print("error: check requires --field or --min/--max.", file=sys.stderr)
        return ExitCode.ERROR

    result = _api_check_field(args.expression, field)
    if args.json_out:
        stable_json_dump(result, sys.stdout)
    else:
        print("valid" if result["valid"] else "invalid")
    return ExitCode.SUCCESS if result["valid"] else ExitCode.INVALID


def _handle_commit(args: argparse.Namespace) -> int:
    try:
        result = _api_commit_field(
            args.expression, current=args.current, field=args.field
        )
    except InvalidExpression as e:
        print(f"error: --current: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json_out:
        stable_json_dump(result, sys.stdout)
    else:
        print(result["value"]["css"])
        if result["reverted"]:
            print(f"reverted: {result.get('error', '')}", file=sys.stderr)
    return ExitCode.SUCCESS if result["valid"] else ExitCode.INVALID


def _handle_fields(args: argparse.Namespace) -> int:
    if args.json_out:
        stable_json_dump([f.to_dict() for f in FIELDS.values()], sys.stdout)
        return ExitCode.SUCCESS
    for f in FIELDS.values():
        units = ", ".join(f.allowed_units)
        print(f"{f.name:<16} [{f.min_value:g}, {f.max_value:g}]  units: {units}")
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    try:
        instance = json.loads(args.instance.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"error: cannot read {args.instance}: {e}", file=sys.stderr)
        return ExitCode.ERROR
    try:
        validate_instance(instance, args.schema_name)
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except jsonschema.ValidationError as e:
        print(f"invalid: {e.message}", file=sys.stderr)
        return ExitCode.INVALID
    print(f"valid: {args.instance} matches {args.schema_name}")
    return ExitCode.SUCCESS


_HANDLERS = {
    "eval": _handle_eval,
    "check": _handle_check,
    "commit": _handle_commit,
    "fields": _handle_fields,
    "validate": _handle_validate,
}


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an ``ExitCode``."""
    effective_argv = _join_signed_values(
        list(argv) if argv is not None else sys.argv[1:]
    )

    first_positional = _first_positional(effective_argv)
    if first_positional is not None and first_positional not in _HANDLERS:
        args = _build_default_parser().parse_args(effective_argv)
    else:
        args = _build_parser().parse_args(effective_argv)
    _configure_logging(args.verbose)

    handler = _HANDLERS.get(args.command)
    if handler is not None:
        return handler(args)

    # ── default positional-expression mode ──────────────────────────
    if getattr(args, "expression", None) is None:
        print("error: please provide an expression or use a subcommand.", file=sys.stderr)
        return ExitCode.ERROR

    try:
        result = _api_evaluate_expression(args.expression)
    except InvalidExpression as e:
        logger.debug(f"rejected {args.expression!r}: {e.reason}")
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.INVALID

    if args.json_out:
        stable_json_dump(result, sys.stdout)
    else:
        print(result["css"])
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
