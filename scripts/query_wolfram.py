#!/usr/bin/env python3
"""
Script to run queries against the Wolfram|Alpha APIs from the command line.

This script:
1. Loads the client configuration (project_config_wolfram.yml + config/.env.<env>)
2. Sends one query to the chosen endpoint
3. Prints pods, warnings and assumption alternatives, or the plain answer

Usage:
    python scripts/query_wolfram.py query "dow chemical"
    python scripts/query_wolfram.py short "distance to the moon" --units imperial --timeout 5
    python scripts/query_wolfram.py simple "price of gold" --output gold.gif
    python scripts/query_wolfram.py recognize "gold price" --mode voice
"""

import argparse
import logging
import shutil
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wolfram_query.query_api.client import WolframClient
from wolfram_query.query_api.config import DEFAULT_CONFIG_PATH, ENVIRONMENTS, ClientConfig
from wolfram_query.query_api.decoder.query_decoder import decode_query_result, pretty_json
from wolfram_query.query_api.defs import Mode, Unit
from wolfram_query.query_api.entities.query_result import QueryResult
from wolfram_query.query_api.errors import WolframError


def print_query_result(result: QueryResult) -> None:
    """Print the pods, warnings and assumption alternatives of a result."""
    print(f"\n{'='*80}")
    print(f"Query: {result.query}")
    print(f"Success: {result.success}  Pods: {len(result.pods)}  Timing: {result.timing}s")
    print(f"{'='*80}\n")

    if result.error and result.error_detail is not None:
        print(f"ERROR {result.error_detail.code}: {result.error_detail.msg}")

    for pod in result.pods:
        print(f"[{pod.position}] {pod.title} ({pod.scanner})")
        for subpod in pod.subpods:
            if subpod.title:
                print(f"    {subpod.title}:")
            for line in subpod.plaintext.splitlines():
                print(f"    {line}")
        if pod.states:
            print(f"    States: {', '.join(state.name for state in pod.states)}")

    for spellcheck in result.warnings.spellchecks:
        print(f"\nWarning: {spellcheck.text}")
    for translation in result.warnings.translations:
        print(f"\nWarning: {translation.text}")
    for reinterpretation in result.warnings.reinterpretations:
        print(f"\nWarning: {reinterpretation.text} {reinterpretation.new}")

    actions = result.assumptions.for_action_display()
    if actions:
        print("\nAssumptions:")
        for action in actions:
            print(f"  {action.label}")
            print(f"      [{action.button_label}] assumption={action.action}")

    for source in result.sources:
        print(f"\nSource: {source.text} {source.url}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the Wolfram|Alpha APIs")
    parser.add_argument(
        "endpoint",
        choices=["query", "simple", "short", "spoken", "recognize"],
        help="API to call",
    )
    parser.add_argument("text", help="Natural-language query")
    parser.add_argument("--env", choices=ENVIRONMENTS, default="local", help="Configuration environment (default: local)")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to the YAML configuration")
    parser.add_argument("--app-id", help="AppID, overrides configuration")
    parser.add_argument("--units", choices=[u.value for u in Unit], default=Unit.METRIC.value)
    parser.add_argument("--timeout", type=int, default=0, help="Server-side timeout in seconds (short/spoken)")
    parser.add_argument("--mode", choices=["default", "voice"], default="default", help="Recognizer mode")
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra query parameter (query/simple), may be repeated",
    )
    parser.add_argument("--output", type=Path, help="File to write the simple API image to")
    parser.add_argument("--raw", action="store_true", help="Print the raw JSON of a full query")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_params(pairs: list[str]) -> dict[str, list[str]]:
    """Parse repeated KEY=VALUE options into a parameter mapping."""
    params: dict[str, list[str]] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        params.setdefault(key, []).append(value)
    return params


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        params = parse_params(args.param)
    except ValueError as e:
        parser.error(str(e))

    try:
        if args.app_id:
            config = ClientConfig(app_id=args.app_id)
        else:
            config = ClientConfig.from_yaml_and_env(config_path=args.config, env=args.env)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1

    client = WolframClient(config)

    try:
        if args.endpoint == "query":
            raw = client.get_query_result_raw(args.text, params)
            if args.raw:
                print(pretty_json(raw))
            print_query_result(decode_query_result(raw, args.text))

        elif args.endpoint == "simple":
            response, url = client.get_simple_query(args.text, params)
            with response:
                if args.output:
                    with open(args.output, "wb") as f:
                        shutil.copyfileobj(response.raw, f)
                    print(f"Image saved to: {args.output}")
                else:
                    print(f"Image available at: {url}")

        elif args.endpoint in ("short", "spoken"):
            units = Unit(args.units)
            if args.endpoint == "short":
                print(client.get_short_answer(args.text, units, args.timeout))
            else:
                print(client.get_spoken_answer(args.text, units, args.timeout))

        elif args.endpoint == "recognize":
            mode = Mode.VOICE if args.mode == "voice" else Mode.DEFAULT
            recognized = client.get_fast_query_recognizer(args.text, mode)
            print(f"Version: {recognized.version}  Build: {recognized.build_number}")
            for match in recognized.query:
                summary = match.summary_box.path if match.summary_box else "-"
                print(
                    f"  {match.i}: accepted={match.accepted} domain={match.domain} "
                    f"score={match.result_significance_score} timing={match.timing} summary={summary}"
                )

    except (WolframError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
