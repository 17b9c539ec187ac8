"""Command line interface for biotools."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from biotools.config import BiotoolsConfig, load_config
from biotools.errors import (
    BiotoolsError,
    RemoteOperationError,
    ServiceError,
    UnsupportedOperationError,
)
from biotools.io import looks_like_fasta, parse_fasta_string, read_fasta
from biotools.operations import REMOTE_OPERATIONS, available_operations, dispatch
from biotools.results import OperationResult, Result
from biotools.service import ServiceClient
from biotools.stats import composition_breakdown

LOGGER = logging.getLogger(__name__)

# (label, sequence); label is None for a bare sequence
SequenceInput = Tuple[Optional[str], str]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biotools",
        description="Classify, transform and summarise DNA, RNA and protein sequences.",
        epilog="Use 'biotools operations' to list the available operations.",
    )
    parser.add_argument(
        "operation",
        help="Operation to run, e.g. reverse-complement, translate, stats.",
    )
    parser.add_argument(
        "sequence",
        nargs="?",
        help="Sequence text. Read from --fasta or stdin when omitted.",
    )
    parser.add_argument(
        "--fasta",
        type=Path,
        help="FASTA file (plain or .gz); every record is processed.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--api-url",
        help="Base URL of the sequence service for remote-only operations.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )
    return parser


def _configure_logging(config: BiotoolsConfig, verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(config.log_level)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _collect_inputs(args: argparse.Namespace) -> List[SequenceInput]:
    if args.sequence is not None:
        return [(None, args.sequence)]

    if args.fasta is not None:
        if not args.fasta.exists():
            raise FileNotFoundError(f"FASTA file not found: {args.fasta}")
        return [(record.id, record.sequence) for record in read_fasta(args.fasta)]

    text = sys.stdin.read()
    if looks_like_fasta(text):
        return [(record.id, record.sequence) for record in parse_fasta_string(text)]
    return [(None, text.rstrip("\r\n"))]


def _run_operation(operation: str, sequence: str, config: BiotoolsConfig) -> Result:
    try:
        return dispatch(operation, sequence)
    except RemoteOperationError:
        if not config.api_base_url:
            raise
        client = ServiceClient(config)
        if not client.is_available():
            raise ServiceError(
                f"Operation '{operation}' requires the sequence service, "
                f"but {config.api_base_url} is offline"
            ) from None
        LOGGER.info("Forwarding %s to %s", operation, config.api_base_url)
        return client.run(operation, sequence)


def format_result(result: Result) -> str:
    """Render a result as plain text."""
    if isinstance(result, OperationResult):
        return result.result

    lines = [
        f"Sequence type: {result.sequence_type.value.upper()}",
        f"Length: {result.length}",
    ]
    if result.gc_content is not None:
        lines.append(f"GC content: {result.gc_content}%")
    if result.molecular_weight is not None:
        lines.append(f"Molecular weight: {result.molecular_weight:,} Da")

    breakdown = composition_breakdown(result.composition)
    if breakdown:
        lines.append("Composition:")
        for entry in breakdown:
            lines.append(f"  {entry.symbol}  {entry.count}  {entry.percent}%")
    return "\n".join(lines)


def _print_results(outputs: List[Tuple[Optional[str], Result]], as_json: bool) -> None:
    if as_json:
        if len(outputs) == 1 and outputs[0][0] is None:
            print(json.dumps(outputs[0][1].to_dict(), indent=2))
        else:
            payload = [{"id": label, **result.to_dict()} for label, result in outputs]
            print(json.dumps(payload, indent=2))
        return

    for label, result in outputs:
        if label is not None:
            print(f">{label}")
        print(format_result(result))


def _print_operations() -> None:
    print("Local operations:")
    for operation in available_operations():
        print(f"  {operation}")
    print("Remote operations (require the sequence service):")
    for operation in sorted(REMOTE_OPERATIONS):
        print(f"  {operation}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    api_url = args.api_url.rstrip("/") if args.api_url else None
    config = config.override(
        api_base_url=api_url,
        output_format="json" if args.json else None,
    )
    _configure_logging(config, args.verbose)

    if args.operation == "operations":
        _print_operations()
        return 0

    try:
        inputs = _collect_inputs(args)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    outputs = []
    try:
        for label, sequence in inputs:
            outputs.append((label, _run_operation(args.operation, sequence, config)))
    except UnsupportedOperationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except BiotoolsError as exc:
        prefix = f"{label}: " if label else ""
        print(f"error: {prefix}{exc}", file=sys.stderr)
        return 1

    _print_results(outputs, config.output_format == "json")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
