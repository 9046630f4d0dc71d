#!/usr/bin/env python
"""
Convert ingredient quantities from the command line.

    python scripts/quantity_tool.py parse "1 1/4" "½" "0,5"
    python scripts/quantity_tool.py format 2.25 0.375
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from recipebook.app.core.config import get_settings
from recipebook.app.services.quantity_formatter import format_quantity
from recipebook.app.services.quantity_parser import MalformedQuantity, parse_quantity

logger = logging.getLogger("quantity_tool")

USAGE = "Usage: python scripts/quantity_tool.py parse|format VALUE [VALUE ...]"


def run(command: str, values: List[str]) -> int:
    failed = False
    for raw in values:
        try:
            value = parse_quantity(raw)
        except MalformedQuantity as exc:
            logger.error("%r: %s", raw, exc)
            failed = True
            continue
        print(value if command == "parse" else format_quantity(value))
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2 or args[0] not in ("parse", "format"):
        logger.error(USAGE)
        return 2

    repo_root = Path(__file__).resolve().parents[1]
    env_path = repo_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    logging.basicConfig(level=get_settings().log_level)
    return run(args[0], args[1:])


if __name__ == "__main__":
    sys.exit(main())
