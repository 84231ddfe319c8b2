"""
Command-line interface for league pairings.
"""

import argparse
import json
import sys
import yaml
from pydantic import ValidationError
from .config import load_config
from .models import pairing_to_dict, pairing_from_dict
from .teams import canonicalize_teams
from .matchups import generate_season_schedule, get_schedule_summary
from .validation import validate_week, validate_season
from .passes import normalize_week
from .export import write_excel


def _print_violations(label, messages):
    if messages:
        print(f"{label}:", file=sys.stderr)
        for message in messages:
            print(f"  - {message}", file=sys.stderr)


def _write_json(data, out_path):
    if out_path:
        with open(out_path, 'w') as f:
            json.dump(data, f, indent=2)
        print(f"Written to: {out_path}")
    else:
        print(json.dumps(data, indent=2))


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="League Pairings - round-robin season schedules and week repair"
    )

    parser.add_argument(
        "--config",
        required=True,
        help="Path to YAML league configuration file"
    )

    parser.add_argument(
        "--out",
        help="Output path (.xlsx for Excel, .json for JSON); JSON to stdout if omitted"
    )

    parser.add_argument(
        "--weeks",
        type=int,
        help="Season length in weeks (overrides reg_season_weeks from config)"
    )

    parser.add_argument(
        "--week-file",
        help="Path to a JSON list of edited pairings to normalize instead of generating a season"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args(argv)

    if args.weeks is not None and args.weeks < 0:
        parser.error("--weeks must not be negative")

    try:
        print("Loading configuration...", file=sys.stderr)
        config = load_config(args.config)
        roster = canonicalize_teams(config.get_teams(), config.reserved_identities)
        print(f"Loaded {len(roster)} teams", file=sys.stderr)

        if args.week_file:
            with open(args.week_file, 'r') as f:
                rows = json.load(f)
            if not isinstance(rows, list):
                raise ValueError("Week file must contain a JSON list of pairings")

            week = [pairing_from_dict(row, roster) for row in rows]
            _print_violations("Violations in submitted week", validate_week(week, roster))

            normalized = normalize_week(week, roster)
            print(f"Normalized week has {len(normalized)} pairings", file=sys.stderr)
            _write_json([pairing_to_dict(p) for p in normalized], args.out)
            return

        total_weeks = args.weeks if args.weeks is not None else config.reg_season_weeks
        print(f"Generating {total_weeks} weeks...", file=sys.stderr)
        season = generate_season_schedule(roster, total_weeks, config.reserved_identities)

        violations = validate_season(season, roster)
        if violations['errors']:
            _print_violations("ERRORS found in schedule", violations['errors'])
        if violations['warnings'] and args.verbose:
            _print_violations("WARNINGS found in schedule", violations['warnings'])

        if args.out and args.out.endswith('.xlsx'):
            write_excel(season, config, args.out)
        else:
            _write_json(
                {str(w): [pairing_to_dict(p) for p in season[w]] for w in sorted(season)},
                args.out
            )

        if args.verbose:
            summary = get_schedule_summary(season)
            print(f"Weeks: {summary.get('weeks', 0)}", file=sys.stderr)
            print(f"Matches: {summary.get('total_matches', 0)}", file=sys.stderr)
            print(f"Byes: {summary.get('total_byes', 0)}", file=sys.stderr)

    except FileNotFoundError as e:
        print(f"ERROR: File not found: {e}", file=sys.stderr)
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"ERROR: Invalid YAML configuration: {e}", file=sys.stderr)
        sys.exit(1)
    except ValidationError as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
