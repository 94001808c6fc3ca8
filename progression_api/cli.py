"""
Progression engine CLI.

Usage:
    progression-engine presets
    progression-engine compute --preset gzclp --results results.json
    progression-engine compute --definition program.yaml --config config.json --format table
    progression-engine validate --definition program.json --config config.json

Definitions, configs and results are read from JSON or YAML files (by suffix).
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

import sentry_sdk
import yaml
from pydantic import ValidationError

from progression_api.application.exceptions import ProgressionEngineError
from progression_api.backend.settings import Settings, get_settings
from progression_api.models.program import ProgramDefinition
from progression_api.models.rows import GenericWorkoutRow
from progression_api.programs import get_preset, list_presets
from progression_api.services.program_validator import ProgramValidator
from progression_api.services.progression_engine import ProgressionEngine

logger = logging.getLogger(__name__)


def load_document(path: str) -> Any:
    """Load a JSON or YAML document; YAML for .yaml/.yml, JSON otherwise."""
    file_path = Path(path)
    with open(file_path, "r", encoding="utf-8") as f:
        if file_path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def resolve_inputs(args: argparse.Namespace) -> Tuple[ProgramDefinition, dict]:
    """Definition and config named by the command line arguments."""
    if args.preset:
        preset = get_preset(args.preset)
        definition = preset.definition
        config = dict(preset.default_config)
    else:
        definition = ProgramDefinition.model_validate(load_document(args.definition))
        config = {}

    if args.config:
        config.update(load_document(args.config) or {})
    return definition, config


def format_table(rows: List[GenericWorkoutRow]) -> str:
    """Render rows as a plain text table, one line per slot."""
    lines = []
    for row in rows:
        lines.append(f"#{row.index + 1} {row.day_name}")
        for slot in row.slots:
            reps = f"{slot.reps}+" if slot.is_amrap else str(slot.reps)
            flags = "".join(
                flag
                for flag, enabled in (("*", slot.is_changed), ("v", slot.is_deload))
                if enabled
            )
            result = slot.result.value if slot.result else "-"
            lines.append(
                f"  {slot.slot_id:<20} {slot.weight:>7g}  {slot.sets}x{reps:<4} "
                f"stage {slot.stage + 1}/{slot.stages_count}  {result:<7} {flags}".rstrip()
            )
    return "\n".join(lines)


def cmd_presets(args: argparse.Namespace) -> int:
    for preset in list_presets():
        definition = preset.definition
        print(f"{definition.id:<18} {definition.name} ({definition.total_workouts} workouts)")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    definition, config = resolve_inputs(args)
    result = ProgramValidator().validate(definition, config)
    for issue in result.issues:
        location = f"{issue.location}: " if issue.location else ""
        print(f"[{issue.severity.value}] {location}{issue.message}")
    print(result.summary)
    return 0 if result.is_valid else 1


def cmd_compute(args: argparse.Namespace) -> int:
    definition, config = resolve_inputs(args)
    results = load_document(args.results) if args.results else {}
    # YAML reads an unquoted index such as `0:` as an int
    results = {str(index): entries for index, entries in (results or {}).items()}

    rows = ProgressionEngine().compute(definition, config, results)

    if args.format == "table":
        output = format_table(rows)
    else:
        output = json.dumps(
            [row.model_dump(mode="json", by_alias=True) for row in rows],
            indent=2,
        )

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output + "\n")
        logger.info("Wrote %d workout(s) to %s", len(rows), args.output)
    else:
        print(output)
    return 0


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--preset", help="Preset program id (see 'presets')")
    source.add_argument("--definition", help="Program definition file (JSON or YAML)")
    parser.add_argument(
        "--config",
        help="Starting config file; overrides preset defaults key by key",
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="progression-engine",
        description="Compute prescribed workouts from a program definition and recorded results",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    presets_parser = subparsers.add_parser("presets", help="List preset programs")
    presets_parser.set_defaults(func=cmd_presets)

    validate_parser = subparsers.add_parser("validate", help="Check a definition against its config")
    _add_input_arguments(validate_parser)
    validate_parser.set_defaults(func=cmd_validate)

    compute_parser = subparsers.add_parser("compute", help="Compute every workout row")
    _add_input_arguments(compute_parser)
    compute_parser.add_argument("--results", help="Results map file (JSON or YAML)")
    compute_parser.add_argument(
        "--format",
        choices=["json", "table"],
        default=settings.default_output_format,
        help="Output format",
    )
    compute_parser.add_argument("-o", "--output", help="Output file path (default: stdout)")
    compute_parser.set_defaults(func=cmd_compute)

    return parser


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn and not settings.is_test:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for progression-engine")


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _init_sentry(settings)

    args = build_parser(settings).parse_args(argv)

    try:
        return args.func(args)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
    except yaml.YAMLError as e:
        print(f"Error: Invalid YAML: {e}", file=sys.stderr)
    except ValidationError as e:
        print(f"Error: Invalid program definition: {e}", file=sys.stderr)
    except ProgressionEngineError as e:
        print(f"Error: {e}", file=sys.stderr)
        for issue in getattr(e, "issues", []):
            if issue != str(e):
                print(f"  - {issue}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
