"""CLI for passutils — generate one or more passwords under class and minimum-count constraints."""

import argparse
import json
import logging
import sys
from dataclasses import replace

from rich import print
from rich.markup import escape
from rich.text import Text

from .charsets import GenerationOptions
from .config import load_config
from .errors import PassUtilsError
from .generator import generate_multiple_passwords
from .requirements import Requirements

logger = logging.getLogger(__name__)

def _options_from_args(args, base):
    overrides = {}
    if args.no_upper:
        overrides["uppercase"] = False
    if args.no_lower:
        overrides["lowercase"] = False
    if args.no_digits:
        overrides["numbers"] = False
    if args.no_symbols:
        overrides["symbols"] = False
    if args.no_similar:
        overrides["similar"] = False
    if args.exclude is not None:
        overrides["exclude"] = args.exclude
    return replace(GenerationOptions.from_mapping(base), **overrides)

def _requirements_from_args(args, base):
    overrides = {}
    for name in ("min_upper", "min_lower", "min_numbers", "min_symbols"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    # config may use camelCase keys; flags win
    return replace(Requirements.from_mapping(base), **overrides)

def cmd_generate(args, cfg):
    length = args.length if args.length is not None else cfg["length"]
    copies = args.copies if args.copies is not None else cfg["copies"]
    try:
        passwords = generate_multiple_passwords(
            copies,
            length,
            _options_from_args(args, cfg.get("options")),
            _requirements_from_args(args, cfg.get("requirements")),
        )
    except PassUtilsError as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"[red]Failed to generate password: {escape(str(e))}[/red]", file=sys.stderr)
        return 2

    if args.json:
        sys.stdout.write(json.dumps(passwords) + "\n")
    else:
        for i, pw in enumerate(passwords):
            # Text is not parsed for markup or :emoji: codes
            print(Text.assemble((f"Password #{i+1}: ", "bold green"), pw))
    return 0

def build_parser():
    parser = argparse.ArgumentParser(prog="passutils")
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity",
    )
    parser.add_argument("--config", type=str, help="Path to a JSON config file with defaults")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, help="Password length (default from config: 16)")
    gen.add_argument("--copies", type=int, help="How many passwords to generate (default from config: 1)")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-similar", action="store_true", help="Leave out look-alike characters (i l L I | ` o O 0)")
    gen.add_argument("--exclude", type=str, help="Characters that must never appear")
    gen.add_argument("--min-upper", type=int, help="Minimum uppercase characters")
    gen.add_argument("--min-lower", type=int, help="Minimum lowercase characters")
    gen.add_argument("--min-numbers", type=int, help="Minimum digits")
    gen.add_argument("--min-symbols", type=int, help="Minimum symbols")
    gen.add_argument("--json", action="store_true", help="Output as JSON array")
    gen.set_defaults(func=cmd_generate)
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    cfg = load_config(args.config)
    return args.func(args, cfg)

if __name__ == "__main__":
    sys.exit(main())
