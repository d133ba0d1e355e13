"""CLI entrypoint for compiling a configuration into an index file."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from sitedex.config import load_config
from sitedex.errors import DocumentErrors, NoValidFiles
from sitedex.index.builder import build
from sitedex.models import Index

logger = logging.getLogger(__name__)


def _summary(index: Index) -> dict[str, object]:
    return {
        "entries": len(index.entries),
        "containers": len(index.containers),
        "errors": len(index.errors),
        "error_details": [error.to_dict() for error in index.errors],
    }


def _write_index(index: Index, output: Path) -> None:
    output.write_text(json.dumps(index.to_dict(), ensure_ascii=False), encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compile documents into a search index")
    parser.add_argument("--config", required=True, help="TOML or JSON build configuration")
    parser.add_argument("--output", default=None, help="Where to write the index as JSON")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
    )

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as exc:
        logger.error("Configuration error: %s", exc)
        return 2

    try:
        index = build(config)
    except NoValidFiles as exc:
        print(json.dumps({"error": str(exc)}, ensure_ascii=True, indent=2))
        return 1
    except DocumentErrors as exc:
        if args.output:
            _write_index(exc.index, Path(args.output))
        payload = _summary(exc.index)
        payload["error"] = str(exc)
        print(json.dumps(payload, ensure_ascii=True, indent=2))
        return 1

    if args.output:
        _write_index(index, Path(args.output))
    print(json.dumps(_summary(index), ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
