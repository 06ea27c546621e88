"""
hangul_corrector/cli.py

Command-line interface for the correction engine.

    hangul-corrector correct "나 어제 학교 가요" --level jondaetmal
    hangul-corrector explain "밥를 먹었다"
    hangul-corrector register "가야겠다" --level jondaetmal
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from hangul_corrector.core.domain.corrector import explain
from hangul_corrector.core.domain.models import SpeechLevel
from hangul_corrector.core.domain.register import enforce_register
from hangul_corrector.shared.config import settings
from hangul_corrector.shared.container import container
from hangul_corrector.shared.logging_config import configure_logging

LEVEL_CHOICES = [level.value for level in SpeechLevel]


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _add_text_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text",
        nargs="?",
        default="-",
        help="Sentence to process. If omitted or '-', read from stdin.",
    )


def _add_level_argument(parser: argparse.ArgumentParser, required: bool = False) -> None:
    parser.add_argument(
        "--level",
        choices=LEVEL_CHOICES,
        required=required,
        default=None if required else settings.DEFAULT_SPEECH_LEVEL.value,
        help="Target speech level: 'banmal' (plain) or 'jondaetmal' (polite).",
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hangul-corrector",
        description="Rule-based Korean sentence correction (particles, tense, speech level).",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    cor = subparsers.add_parser(
        "correct",
        help="Correct a sentence and render it in a speech level.",
    )
    _add_text_argument(cor)
    _add_level_argument(cor)
    cor.add_argument(
        "--json",
        action="store_true",
        help="Print {'result', 'notes'} as JSON instead of plain text.",
    )

    exp = subparsers.add_parser(
        "explain",
        help="List the rule categories that would fire, without rewriting.",
    )
    _add_text_argument(exp)

    reg = subparsers.add_parser(
        "register",
        help="Apply only the speech-level safety net.",
    )
    _add_text_argument(reg)
    _add_level_argument(reg, required=True)

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read_text(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    return value


def _print_notes(notes: List[str]) -> None:
    for note in notes:
        print(f"- {note}")


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_correct(args: argparse.Namespace) -> int:
    """
    Handle `hangul-corrector correct`.
    """
    use_case = container.correct_sentence_use_case()
    result = asyncio.run(use_case.execute(_read_text(args.text), args.level))

    if args.json:
        payload = {"result": result.corrected, "notes": result.notes}
        print(json.dumps(payload, ensure_ascii=False))
        return 0

    if result.corrected:
        print(result.corrected)
    else:
        print("[Empty input]", file=sys.stderr)
    _print_notes(result.notes)
    return 0


def _cmd_explain(args: argparse.Namespace) -> int:
    _print_notes(explain(_read_text(args.text)))
    return 0


def _cmd_register(args: argparse.Namespace) -> int:
    print(enforce_register(_read_text(args.text), args.level))
    return 0


_COMMANDS = {
    "correct": _cmd_correct,
    "explain": _cmd_explain,
    "register": _cmd_register,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(log_format="console", log_level="WARNING")

    handler = _COMMANDS.get(args.command)
    if handler is None:
        parser.error(f"Unknown command: {args.command}")
        return

    raise SystemExit(handler(args))


if __name__ == "__main__":
    main()
