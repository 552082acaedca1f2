#!/usr/bin/env python3
"""Sample normalization harness for manual validation.

Runs every JSON payload in a fixtures directory through the normalizer,
prints the per-section preview for each one and checks that normalizing the
result again changes nothing.

Usage:
    # Run the bundled fixtures
    python scripts/normalize_sample.py

    # Custom fixtures directory and configuration
    python scripts/normalize_sample.py --fixtures /tmp/payloads --config cv_normalizer.yaml

    # Also dump the canonical JSON of each payload
    python scripts/normalize_sample.py --show-profile
"""

import argparse
import json
import sys
from datetime import date
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from cv_normalizer.aggregation import ProfileNormalizer
from cv_normalizer.config.environment import load_environment_config
from cv_normalizer.config.exceptions import ConfigurationError
from cv_normalizer.config.loader import load_config
from cv_normalizer.logging.config import configure_logging
from cv_normalizer.summary import summarize


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_summary_table(sections):
    """Print the summary sections as a two-column table."""
    rows = [(section.category, str(section.count)) for section in sections]
    if not rows:
        print("(empty profile)")
        return

    label_width = max(len(label) for label, _ in rows)
    print("┌" + "─" * (label_width + 2) + "┬" + "─" * 9 + "┐")
    print(f"│ {'Section':<{label_width}} │ {'Count':<7} │")
    print("├" + "─" * (label_width + 2) + "┼" + "─" * 9 + "┤")
    for label, count in rows:
        print(f"│ {label:<{label_width}} │ {count:<7} │")
    print("└" + "─" * (label_width + 2) + "┴" + "─" * 9 + "┘")

    for section in sections:
        print(f"\n{section.category}:")
        for item in section.items:
            print(f"  - {item}")


def main():
    """Main entry point for the sample normalization harness."""
    parser = argparse.ArgumentParser(
        description="Normalize sample CV payloads and print their previews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--fixtures",
        type=Path,
        default=Path("tests/fixtures"),
        help="Directory of JSON payloads (default: tests/fixtures)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: built-in defaults)",
    )
    parser.add_argument(
        "--show-profile",
        action="store_true",
        help="Print the canonical JSON of each payload",
    )
    args = parser.parse_args()

    load_dotenv()

    try:
        env_config = load_environment_config()
        config = load_config(args.config, env_config=env_config)
    except ConfigurationError as e:
        print(f"✗ {e}")
        return 1

    configure_logging(config.logging, environment=env_config.environment, stream=sys.stderr)

    payload_files = sorted(args.fixtures.glob("*.json"))
    if not payload_files:
        print(f"✗ No JSON payloads found in {args.fixtures}")
        return 1

    # Fixed date keeps defaulted certificate dates stable between runs
    normalizer = ProfileNormalizer(config=config, today=date.today())
    failures = 0

    for payload_file in payload_files:
        print_header(f"Payload: {payload_file.name}")
        payload = json.loads(payload_file.read_text(encoding="utf-8"))

        result = normalizer.normalize_with_report(payload)
        shapes = ", ".join(f"{c.value}={s.value}" for c, s in result.shapes.items()) or "none"
        print(f"Detected shapes: {shapes}")
        print(f"Defaulted certificate dates: {result.defaulted_dates}\n")

        print_summary_table(summarize(result.profile, config=config))

        if args.show_profile:
            print("\n" + json.dumps(result.profile.to_dict(), indent=2, ensure_ascii=False))

        again = normalizer.normalize(result.profile.to_dict())
        if again.to_dict() == result.profile.to_dict():
            print("\n✓ Idempotent")
        else:
            failures += 1
            print("\n✗ Re-normalizing the result changed it")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
