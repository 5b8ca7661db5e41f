"""eib CLI: image definition commands."""

import argparse
import json
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Optional


def main():
    """Main CLI entry point for eib commands."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        eib_version = get_version("edge-image-builder")
    except PackageNotFoundError:
        eib_version = "dev"

    parser = argparse.ArgumentParser(
        prog="eib",
        description="eib: Load and check edge image definitions"
    )
    parser.add_argument("--version", action="version", version=f"eib {eib_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--config-dir",
        type=Path,
        required=True,
        help="Image configuration directory"
    )
    parent_parser.add_argument(
        "--config-file",
        default="definition.yaml",
        help="Definition file name, relative to --config-dir (defaults to 'definition.yaml')"
    )
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that an image definition loads",
        parents=[parent_parser]
    )
    validate_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write validate.json to this directory"
    )

    # arch command
    subparsers.add_parser(
        "arch",
        help="Print the short architecture name for an image definition",
        parents=[parent_parser]
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s [%(name)s] %(message)s",
    )

    def _write_validation_result(result, output_dir: Optional[Path], filename: str) -> None:
        result_dict = result.model_dump()
        if output_dir is not None:
            output_dir.mkdir(parents=True, exist_ok=True)
            report_out = output_dir / filename
            report_out.write_text(json.dumps(result_dict, indent=2, sort_keys=True) + "\n", encoding="utf-8")
            if not args.quiet:
                print("[OK] Validation complete")
                print(f"  Report: {report_out}")
        else:
            if not args.quiet:
                status = "OK" if result.ok else "FAILED"
                print(f"[{status}] Validation complete")
        if not args.quiet:
            print(f"  Status: {'OK' if result.ok else 'FAILED'}")
            print(f"  Errors: {len(result.errors)}")
            print(f"  Warnings: {len(result.warnings)}")
            for issue in result.errors + result.warnings:
                print(f"  - {issue.code}: {issue.message}")
        if not result.ok:
            sys.exit(1)

    if args.command == "validate":
        from .api import validate

        definition_path = (args.config_dir / args.config_file).resolve()
        output_dir = Path(args.output_dir).resolve() if args.output_dir else None

        result = validate(definition_path)
        _write_validation_result(result, output_dir, "validate.json")
    elif args.command == "arch":
        from .api import load_definition
        from .image import DefinitionParseError

        try:
            definition = load_definition(args.config_dir.resolve(), args.config_file)
        except (OSError, DefinitionParseError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        arch = definition.image.arch
        if not arch.is_known:
            print(f"Error: unknown arch: {arch}", file=sys.stderr)
            sys.exit(1)
        print(arch.short())
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
