"""Export assignments from the configured store to a CSV file.

Usage:
    python -m topic_picker.tools.export_assignments
    python -m topic_picker.tools.export_assignments --output out.csv
    python -m topic_picker.tools.export_assignments --channel Banca --room 2
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from topic_picker.adapters.csv_export.exporter import export_filename, write_csv
from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.config import settings
from topic_picker.domain.errors import StoreError
from topic_picker.domain.policies.dashboard import AssignmentFilter, filter_assignments
from topic_picker.domain.value_objects.enums import Category, Channel
from topic_picker.infrastructure.api.dependencies import build_store

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def export(store: AssignmentStore, output: Path, criteria: AssignmentFilter) -> int:
    """Write matching assignments to *output*. Returns the number of rows."""
    assignments = filter_assignments(await store.fetch_all(), criteria)
    with open(output, "w", encoding="utf-8", newline="") as f:
        count = write_csv(assignments, f)
    logger.info("Exported %d assignments to %s", count, output)
    return count


async def _main(args: argparse.Namespace) -> int:
    store, engine = build_store(settings)
    criteria = AssignmentFilter(
        channel=Channel(args.channel) if args.channel else None,
        category=Category(args.category) if args.category else None,
        room=args.room,
    )
    try:
        await export(store, Path(args.output or export_filename()), criteria)
    except StoreError as e:
        logger.error("Export failed: %s", e)
        return 1
    finally:
        if engine is not None:
            await engine.dispose()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export trainer assignments to CSV")
    parser.add_argument("--output", "-o", help="destination file (default: dated name)")
    parser.add_argument("--channel", choices=[c.value for c in Channel])
    parser.add_argument("--category", choices=[c.value for c in Category])
    parser.add_argument("--room", type=int)
    return asyncio.run(_main(parser.parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
