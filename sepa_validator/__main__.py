"""
SEPA Validator - Main Entry Point

Validates SEPA XML files from the command line.
"""

import asyncio
import codecs
import json
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

from .core.config import Config, get_config, load_config
from .core.exceptions import ConfigurationException
from .report import render_result
from .schema.xsd import validate_against_schema
from .validators.sepa_validator import SepaValidator

EMPTY_INPUT_MESSAGE = "Please provide XML content to validate"
UNREADABLE_FILE_MESSAGE = "Unable to read file"

XML_ENCODING_PATTERN = re.compile(rb"""^\s*<\?xml[^>]*?encoding=["']([A-Za-z0-9._-]+)["']""")


def _read_xml(path: Path) -> str:
    """Read a file and decode it with the encoding named by its BOM or XML declaration."""
    raw = path.read_bytes()

    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return raw.decode("utf-16")
    if raw.startswith(codecs.BOM_UTF8):
        return raw.decode("utf-8-sig")

    match = XML_ENCODING_PATTERN.match(raw)
    encoding = match.group(1).decode("ascii") if match else "utf-8"
    return raw.decode(encoding)


def _print_failure(path: Path, message: str, as_json: bool) -> None:
    if as_json:
        print(json.dumps({"file": str(path), "valid": False, "message": message}, ensure_ascii=False))
    else:
        print(f"{path}: {message}")


async def _validate_files(validator: SepaValidator, paths: List[Path], as_json: bool) -> bool:
    all_valid = True
    logger = logging.getLogger(__name__)

    for path in paths:
        try:
            xml_text = _read_xml(path)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            logger.error(f"Cannot read {path}: {e}")
            all_valid = False
            _print_failure(path, f"{UNREADABLE_FILE_MESSAGE}: {e}", as_json)
            continue

        if not xml_text.strip():
            all_valid = False
            _print_failure(path, EMPTY_INPUT_MESSAGE, as_json)
            continue

        result = await validator.validate_with_schema(xml_text)
        all_valid = all_valid and result.is_valid

        if as_json:
            print(json.dumps({"file": str(path), **result.to_dict()}, ensure_ascii=False))
        else:
            print(f"== {path}")
            print(render_result(result))
            print()

    return all_valid


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the SEPA validator CLI."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Validate SEPA credit transfer (pain.001) and direct debit (pain.008) XML files"
    )

    parser.add_argument("files", nargs="+", type=Path, help="XML files to validate")
    parser.add_argument(
        "--schema", action="store_true", help="Also validate against the official XSD"
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON lines")

    # Logging
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level",
    )

    # Configuration
    parser.add_argument("--config", type=str, help="Configuration file path")

    args = parser.parse_args(argv)

    try:
        config: Config = load_config(args.config) if args.config else get_config()
    except ConfigurationException as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, (args.log_level or config.log_level.value).upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logger = logging.getLogger(__name__)

    missing = [p for p in args.files if not p.is_file()]
    if missing:
        for path in missing:
            logger.error(f"File not found: {path}")
        return 2

    use_schema = args.schema or config.schema.enabled
    validator = SepaValidator(
        schema_validator=validate_against_schema if use_schema else None,
        config=config,
    )

    all_valid = asyncio.run(_validate_files(validator, args.files, args.json))
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
