"""
dietmind_core.cli
=================

Minimal command line entry point.

Subcommands
-----------
- `parse <file>`: extract a plan from a markdown file already generated
  (`-` reads stdin) and print it as JSON. Useful to check how the scanner
  handles a real LLM answer without spending tokens.
- `generate`: run the full pipeline (prompt → LLM → extract) for a profile
  given on the command line and print the response payload.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .domain_models import DietaryProfile
from .engine import build_response_payload, run_meal_plan_pipeline
from .plan_parser import extract


def _read_document(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8-sig")


def _cmd_parse(args: argparse.Namespace) -> int:
    markdown = _read_document(args.file)
    plan = extract(markdown)
    payload = build_response_payload(plan, markdown)
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    profile = DietaryProfile(
        dietary_preference=args.preference,
        allergies=args.allergy,
        age_stage=args.age_stage,
        medical_conditions=args.condition,
        activity_level=args.activity,
    )
    result = run_meal_plan_pipeline(profile=profile)
    print(json.dumps(result["payload"], ensure_ascii=False, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dietmind", description="DietMind meal plan tools")
    sub = parser.add_subparsers(dest="command", required=True)

    p_parse = sub.add_parser("parse", help="Extract a plan from a markdown file")
    p_parse.add_argument("file", help="Markdown file to parse ('-' for stdin)")
    p_parse.set_defaults(func=_cmd_parse)

    p_gen = sub.add_parser("generate", help="Generate a plan with the LLM")
    p_gen.add_argument("--preference", default="vegetarian", help="Dietary preference")
    p_gen.add_argument("--allergy", action="append", default=[], help="Allergy (repeatable)")
    p_gen.add_argument("--age-stage", default="adult")
    p_gen.add_argument("--condition", action="append", default=[], help="Medical condition (repeatable)")
    p_gen.add_argument("--activity", default="moderate", help="Activity level")
    p_gen.set_defaults(func=_cmd_generate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
