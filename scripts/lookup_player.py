from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from lineup.client import ThunderInsightsClient
from lineup.config import get_settings
from lineup.export import (
    RESULTS_REGION,
    SCREENSHOT_FILENAME,
    AssetCache,
    GridCapture,
    clipboard_text,
    vehicles_frame,
)
from lineup.workflow import SearchWorkflow, ViewStore


def main() -> int:
    parser = argparse.ArgumentParser(description="Look up a player's vehicle lineup.")
    parser.add_argument("name", help="Player name to search for")
    parser.add_argument(
        "--screenshot",
        nargs="?",
        const=SCREENSHOT_FILENAME,
        help=f"Write the result grid as PNG (default file: {SCREENSHOT_FILENAME})",
    )
    parser.add_argument("--csv", help="Write the full result list as CSV to this path")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    with ThunderInsightsClient(settings) as client:
        state = SearchWorkflow(client, ViewStore()).submit(args.name)
        message = state.field_error or state.error
        if message:
            print(message, file=sys.stderr)
            return 1

        print(clipboard_text(state.vehicles))

        if args.csv:
            vehicles_frame(state.vehicles).to_csv(args.csv, index=False)
        if args.screenshot:
            capture = GridCapture(AssetCache(client))
            capture.register(RESULTS_REGION, state.vehicles)
            Path(args.screenshot).write_bytes(capture.capture_region(RESULTS_REGION))

    return 0


if __name__ == "__main__":
    sys.exit(main())
