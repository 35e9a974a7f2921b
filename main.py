#   Entry point of the ICT log maker
#
#   Tasks of the script:
#       1. Reads the settings file and applies command line overrides
#       2. Builds the test catalog and the export scheduler
#       3. Runs the control API, or only the export loop with --headless

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

import uvicorn

from ict_logmaker.app import create_app
from ict_logmaker.config.settings_manager import SETTINGS_FILE, SettingsManager
from ict_logmaker.controller import LogMakerController
from ict_logmaker.logging.logger import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Writes simulated ICT log files")
    parser.add_argument("--settings", type=Path, default=SETTINGS_FILE)
    parser.add_argument("--output-dir", type=Path, default=None)
    parser.add_argument("--enable", action="store_true", default=None, help="Start exporting immediately")
    parser.add_argument("--headless", action="store_true", help="Run the export loop without the control API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level.upper())

    manager = SettingsManager(args.settings)
    settings = manager.load(output_directory=args.output_dir, enabled=args.enable)
    controller = LogMakerController(settings, manager)

    if args.headless:
        if not settings.enabled:
            logger.warning("Exporting is disabled and headless mode has no control API, pass --enable")
            return
        try:
            asyncio.run(controller.ticker.run())
        except KeyboardInterrupt:
            pass
        return

    uvicorn.run(create_app(controller), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
