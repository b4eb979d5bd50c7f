"""Command-line interface for langlex."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from langlex.errors import LexError
from langlex.tokens import DEFAULT_KEYWORDS, Token


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    keywords: frozenset[str]
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="langlex",
        description="Tokenize a source file and print one token per line",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-k",
        "--keyword",
        action="append",
        default=[],
        metavar="WORD",
        help="Extra reserved word (repeatable)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover langlex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens with positions to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "langlex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags. A config keyword list
    replaces the defaults; ``--keyword`` flags add to whatever is in effect.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    keywords = set(DEFAULT_KEYWORDS)
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_keywords = cfg_lexer.get("keywords")
        if isinstance(cfg_keywords, list):
            keywords = {str(k) for k in cfg_keywords}
    keywords.update(args.keyword)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        keywords=frozenset(keywords),
        debug=args.debug,
    )


def format_tokens(tokens: list[Token]) -> str:
    """Render tokens as ``<kind>\\t<text>`` lines."""
    return "".join(f"{tok.kind.value}\t{tok.text}\n" for tok in tokens)


def lex_file(options: CliOptions) -> str:
    """Read and tokenize a source file, returning the printable listing."""
    from langlex.debug import dump_tokens
    from langlex.lexer import Tokenizer

    source = options.input_file.read_text(encoding="utf-8")
    tokenizer = Tokenizer(source, options.keywords)

    tokens: list[Token] = []
    while not tokenizer.at_end():
        tokens.append(tokenizer.next_token())  # type: ignore[arg-type]

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    return format_tokens(tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        listing = lex_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except LexError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(listing, encoding="utf-8")
    else:
        sys.stdout.write(listing)

    return 0
