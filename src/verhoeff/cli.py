"""
Verhoeff command-line interface.

A thin front end over the public library API: compute, validate and append
check digits, validate fixed-length identifiers and display them grouped or
masked.  Results go to STDOUT, diagnostics (input errors, ``--verbose``
details) go to STDERR through the logger.

Exit codes:

* ``0`` – success / valid
* ``1`` – well-formed input with a wrong check digit
* ``2`` – malformed input (non-digit characters, empty input, wrong length)

---

# Quick ways to run the script

>>> verhoeff compute 236
3

>>> verhoeff validate 2363
valid

>>> verhoeff check-id 123456789010 --length 12
valid

>>> verhoeff format 123456789010 --mask
XXXX XXXX 9010

>>> verhoeff demo
"""

import argparse
import logging
from typing import List, Optional

from verhoeff.checksum import compute_checksum_strict, validate, validate_strict
from verhoeff.errors import VerhoeffError
from verhoeff.identifiers import (
    AADHAAR_FORMAT,
    DEFAULT_ID_LENGTH,
    DEFAULT_SHOW_LAST,
    IdFormat,
    format_id,
    mask_id,
    validate_fixed_length_id,
)
from verhoeff.logger import prepare_logger

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_INPUT_ERROR = 2

SEPARATOR_LINE = "=" * 50

logger = logging.getLogger("verhoeff.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verhoeff",
        description="Compute and verify Verhoeff check digits.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-step details to STDERR.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    compute = subparsers.add_parser("compute", help="Print the check digit for NUMBER.")
    compute.add_argument("number")

    validate_cmd = subparsers.add_parser(
        "validate", help="Check NUMBER whose last digit is the check digit."
    )
    validate_cmd.add_argument("number")

    append = subparsers.add_parser("append", help="Print NUMBER with its check digit appended.")
    append.add_argument("number")

    check_id = subparsers.add_parser("check-id", help="Validate a fixed-length identifier.")
    check_id.add_argument("number")
    check_id.add_argument(
        "--length",
        type=int,
        default=DEFAULT_ID_LENGTH,
        help=f"Required length including the check digit (default: {DEFAULT_ID_LENGTH}).",
    )

    format_cmd = subparsers.add_parser("format", help="Print an identifier in groups.")
    format_cmd.add_argument("number")
    format_cmd.add_argument("--mask", action="store_true", help="Hide all but the last digits.")
    format_cmd.add_argument(
        "--show-last",
        type=int,
        default=DEFAULT_SHOW_LAST,
        help=f"Digits left visible with --mask (default: {DEFAULT_SHOW_LAST}).",
    )
    format_cmd.add_argument(
        "--length",
        type=int,
        default=AADHAAR_FORMAT.length,
        help=f"Identifier length (default: {AADHAAR_FORMAT.length}).",
    )

    subparsers.add_parser("demo", help="Walk through the library features.")
    return parser


def _report(is_valid: bool) -> int:
    print("valid" if is_valid else "invalid")
    return EXIT_OK if is_valid else EXIT_INVALID


def _run_compute(args: argparse.Namespace) -> int:
    check_digit = compute_checksum_strict(args.number)
    logger.debug("check digit for %s: %d", args.number, check_digit)
    print(check_digit)
    return EXIT_OK


def _run_validate(args: argparse.Namespace) -> int:
    return _report(validate_strict(args.number))


def _run_append(args: argparse.Namespace) -> int:
    # strict call: append_checksum() would hide malformed input
    check_digit = compute_checksum_strict(args.number)
    print(f"{args.number}{check_digit}")
    return EXIT_OK


def _run_check_id(args: argparse.Namespace) -> int:
    if args.length < 2:
        logger.error("--length must be >= 2, got %d", args.length)
        return EXIT_INPUT_ERROR
    return _report(validate_fixed_length_id(args.number, required_length=args.length))


def _run_format(args: argparse.Namespace) -> int:
    if args.length < 2:
        logger.error("--length must be >= 2, got %d", args.length)
        return EXIT_INPUT_ERROR

    id_format = IdFormat(
        name="cli",
        length=args.length,
        group_size=min(AADHAAR_FORMAT.group_size, args.length),
    )
    if args.mask:
        if not 0 <= args.show_last <= id_format.length:
            logger.error(
                "--show-last must be in [0, %d], got %d", id_format.length, args.show_last
            )
            return EXIT_INPUT_ERROR
        print(mask_id(args.number, id_format, show_last=args.show_last))
    else:
        print(format_id(args.number, id_format))
    return EXIT_OK


def _detection_line(label: str, original: str, modified: str) -> None:
    status = "missed" if validate(modified) else "detected"
    print(f"   {label}: {original} -> {modified} ({status})")


def _run_demo(args: argparse.Namespace) -> int:
    print("Verhoeff Checksum Examples")
    print(SEPARATOR_LINE)

    print("\n1. Calculating checksum:")
    for number in ("12345", "987654321", "1111111111"):
        print(f"   {number} -> checksum: {compute_checksum_strict(number)}")

    print("\n2. Validating numbers:")
    for number in ("123451", "123450"):
        print(f"   {number} -> {'valid' if validate(number) else 'invalid'}")

    print("\n3. Appending checksums:")
    for number in ("12345678901", "98765432109", "55555555555"):
        print(f"   {number} -> {number}{compute_checksum_strict(number)}")

    print("\n4. Fixed-length ID validation:")
    payload = "12345678901"
    for number in (f"{payload}{compute_checksum_strict(payload)}", "12345"):
        try:
            outcome = "valid" if validate_fixed_length_id(number) else "invalid checksum"
        except VerhoeffError as e:
            outcome = f"error: {e}"
        print(f"   {format_id(number)} -> {outcome}")

    print("\n5. Error detection:")
    complete = f"12345{compute_checksum_strict('12345')}"
    _detection_line("single digit", complete, complete[:2] + "9" + complete[3:])
    _detection_line("transposition", complete, complete[0] + complete[2] + complete[1] + complete[3:])

    print(f"\n{SEPARATOR_LINE}")
    return EXIT_OK


COMMANDS = {
    "compute": _run_compute,
    "validate": _run_validate,
    "append": _run_append,
    "check-id": _run_check_id,
    "format": _run_format,
    "demo": _run_demo,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    prepare_logger("verhoeff.cli", logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return COMMANDS[args.command](args)
    except VerhoeffError as e:
        logger.warning("%s: %s", args.command, e)
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
