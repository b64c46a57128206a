"""Command-line front end: ``chess960 decode 518``, ``chess960 random`` ..."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Mapping

from chess960.core import (
    ID_COUNT,
    Arrangement,
    Color,
    decode,
    default_random_source,
    encode,
    generate,
)
from chess960.core.generator import RandomSource
from chess960.core.lookup import arrangement_at, id_of
from chess960.core.validation import coerce_pieces, violations
from chess960.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def render(arrangement: Arrangement, settings: AppSettings) -> str:
    if settings.symbols == "unicode":
        return arrangement.to_unicode(settings.color)
    return arrangement.to_string(settings.color)


def _oriented(arrangement: Arrangement, settings: AppSettings) -> Arrangement:
    return arrangement.mirror() if settings.mirror else arrangement


def _random_source(settings: AppSettings) -> RandomSource:
    if settings.seed is None:
        return default_random_source()
    _LOGGER.info("Using seeded random source (seed=%d)", settings.seed)
    return random.Random(settings.seed)


def cmd_decode(args: argparse.Namespace, settings: AppSettings) -> int:
    status = 0
    for identifier in args.ids:
        arrangement = decode(identifier)
        if arrangement is None:
            print(f"Invalid identifier: {identifier} (expected 0-959)", file=sys.stderr)
            status = 1
            continue
        print(render(_oriented(arrangement, settings), settings))
    return status


def cmd_encode(args: argparse.Namespace, settings: AppSettings) -> int:
    status = 0
    for text in args.arrangements:
        identifier = encode(text)
        if identifier is None:
            print(f"Invalid arrangement: {text}", file=sys.stderr)
            status = 1
            continue
        print(identifier)
    return status


def cmd_validate(args: argparse.Namespace, settings: AppSettings) -> int:
    status = 0
    for text in args.arrangements:
        pieces = coerce_pieces(text)
        if pieces is None:
            problems = ["needs eight piece letters (K, Q, R, B, N)"]
        else:
            problems = violations(pieces)
        if problems:
            print(f"{text}: invalid ({'; '.join(problems)})")
            status = 1
        else:
            print(f"{text}: valid")
    return status


def cmd_random(args: argparse.Namespace, settings: AppSettings) -> int:
    if args.count < 1:
        print("Count must be at least 1", file=sys.stderr)
        return 2
    rng = _random_source(settings)
    for _ in range(args.count):
        arrangement = _oriented(generate(rng), settings)
        line = render(arrangement, settings)
        if args.with_id:
            line = f"{encode(arrangement)} {line}"
        print(line)
    return 0


def cmd_table(args: argparse.Namespace, settings: AppSettings) -> int:
    for identifier in range(ID_COUNT):
        arrangement = decode(identifier)
        assert arrangement is not None
        print(f"{identifier} {render(arrangement, settings)}")
    return 0


def cmd_check(args: argparse.Namespace, settings: AppSettings) -> int:
    """Cross-check the codec against the reference table."""
    mismatches = 0
    for identifier in range(ID_COUNT):
        expected = arrangement_at(identifier)
        decoded = decode(identifier)
        if (
            decoded != expected
            or encode(expected) != identifier
            or id_of(decoded) != identifier
        ):
            _LOGGER.error(
                "Mismatch at %d: table=%s decoded=%s", identifier, expected, decoded
            )
            mismatches += 1
    print(f"{ID_COUNT - mismatches}/{ID_COUNT} positions agree with the table")
    return 1 if mismatches else 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="chess960", description="Chess960 starting positions"
    )
    ap.add_argument("--unicode", action="store_true", help="print chess glyphs")
    ap.add_argument("--black", action="store_true", help="print Black's pieces")
    ap.add_argument(
        "--mirror", action="store_true", help="mirror decoded/generated ranks"
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sd = sub.add_parser("decode", help="Arrangement for identifiers")
    sd.add_argument("ids", type=int, nargs="+", metavar="ID")
    sd.set_defaults(fn=cmd_decode)

    se = sub.add_parser("encode", help="Identifier for arrangements")
    se.add_argument("arrangements", nargs="+", metavar="ARRANGEMENT")
    se.set_defaults(fn=cmd_encode)

    sv = sub.add_parser("validate", help="Check arrangements against the rules")
    sv.add_argument("arrangements", nargs="+", metavar="ARRANGEMENT")
    sv.set_defaults(fn=cmd_validate)

    sr = sub.add_parser("random", help="Generate random arrangements")
    sr.add_argument("--count", "-n", type=int, default=1)
    sr.add_argument("--seed", type=int, default=None)
    sr.add_argument("--with-id", action="store_true")
    sr.set_defaults(fn=cmd_random)

    st = sub.add_parser("table", help="List all 960 positions")
    st.set_defaults(fn=cmd_table)

    sc = sub.add_parser("check", help="Verify the codec against the reference table")
    sc.set_defaults(fn=cmd_check)
    return ap


def _settings_from(
    args: argparse.Namespace, environ: Mapping[str, str] | None
) -> AppSettings:
    settings = AppSettings.from_env(environ)
    if args.unicode:
        settings.symbols = "unicode"
    if args.black:
        settings.color = Color.BLACK
    if args.mirror:
        settings.mirror = True
    if args.verbose:
        settings.log_level = "DEBUG"
    if getattr(args, "seed", None) is not None:
        settings.seed = args.seed
    return settings


def main(
    argv: list[str] | None = None, environ: Mapping[str, str] | None = None
) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = _settings_from(args, environ)
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    logging.basicConfig(
        level=settings.log_level_number,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return int(args.fn(args, settings))


if __name__ == "__main__":
    raise SystemExit(main())
