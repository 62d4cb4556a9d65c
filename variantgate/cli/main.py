"""Command-line frontend for the variantgate core engine."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from variantgate.core.api import parse_configuration, resolve_draft, validate_draft
from variantgate.core.canonical.helpers import suggest_slug
from variantgate.core.errors import DraftParseError, DraftValidationError
from variantgate.core.payload import build_submission_payload
from variantgate.core.resolve import inheritance_hints

load_dotenv(Path(__file__).resolve().parents[2] / ".env")

EXIT_INVALID = 1
EXIT_UNPARSABLE = 2


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _load_draft(path: str) -> Any:
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise DraftParseError(f"Could not read draft {path}: {exc}") from exc
    return parse_configuration(payload)


def _cmd_validate(args: argparse.Namespace) -> int:
    configuration = _load_draft(args.input)
    try:
        outcome = validate_draft(configuration, strict=args.strict or None)
    except DraftValidationError as exc:
        _json_dump(exc.outcome.to_dict())
        return EXIT_INVALID
    _json_dump(outcome.to_dict())
    return 0 if outcome.valid else EXIT_INVALID


def _cmd_resolve(args: argparse.Namespace) -> int:
    configuration = _load_draft(args.input)
    _json_dump(
        [
            {**effective.to_dict(), "hints": inheritance_hints(effective)}
            for effective in resolve_draft(configuration)
        ]
    )
    return 0


def _cmd_payload(args: argparse.Namespace) -> int:
    configuration = _load_draft(args.input)
    outcome = validate_draft(configuration, strict=False)
    if not outcome.valid:
        _json_dump(outcome.to_dict())
        return EXIT_INVALID
    _json_dump(build_submission_payload(configuration))
    return 0


def _cmd_slug(args: argparse.Namespace) -> int:
    _json_dump({"slug": suggest_slug(args.name)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="variantgate", description="Product draft validation CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_cmd = subparsers.add_parser("validate", help="Validate a product draft JSON file")
    validate_cmd.add_argument("input", help="Draft JSON file path")
    validate_cmd.add_argument("--strict", action="store_true")
    validate_cmd.set_defaults(func=_cmd_validate)

    resolve_cmd = subparsers.add_parser("resolve", help="Show effective per-variant values")
    resolve_cmd.add_argument("input", help="Draft JSON file path")
    resolve_cmd.set_defaults(func=_cmd_resolve)

    payload_cmd = subparsers.add_parser("payload", help="Build the submission payload for a valid draft")
    payload_cmd.add_argument("input", help="Draft JSON file path")
    payload_cmd.set_defaults(func=_cmd_payload)

    slug_cmd = subparsers.add_parser("slug", help="Suggest a URL slug for a product name")
    slug_cmd.add_argument("name")
    slug_cmd.set_defaults(func=_cmd_slug)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except DraftParseError as exc:
        parser.exit(status=EXIT_UNPARSABLE, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
