"""
Weather Locator - current weather for a city or device location, dood!
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

import lib.utils as utils
from internal.config.manager import ConfigManager
from internal.presentation import ConsoleApp, renderState
from internal.services.weather import WeatherOrchestrator
from lib.logging_utils import initLogging

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO)
# set higher logging level for httpx to avoid all GET requests being logged
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


class WeatherLocator:
    """Wires configuration, logging and weather orchestrator together."""

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        self.configManager = ConfigManager(configPath, configDirs)

        initLogging(self.configManager.getLoggingConfig())

        self.orchestrator = WeatherOrchestrator.fromConfig(self.configManager)

    async def runOnce(self, city: Optional[str] = None, locate: bool = False) -> int:
        """Run single flow, print result. Returns process exit code."""
        if locate:
            await self.orchestrator.locateDevice()
        elif not (city or "").strip():
            print("Error: City name is empty", file=sys.stderr)
            return 2
        else:
            await self.orchestrator.searchByName(city or "")

        state = self.orchestrator.state
        for line in renderState(state):
            print(line)
        return 1 if state.error else 0

    def run(self, city: Optional[str] = None, locate: bool = False) -> int:
        if city is not None or locate:
            return asyncio.run(self.runOnce(city=city, locate=locate))

        asyncio.run(ConsoleApp(self.orchestrator).run())
        return 0


def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Weather Locator - current weather by city name or location, dood!")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times), dood!",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit, dood!",
    )
    oneShot = parser.add_mutually_exclusive_group()
    oneShot.add_argument(
        "--city",
        metavar="NAME",
        help="Show weather for city and exit",
    )
    oneShot.add_argument(
        "--locate",
        action="store_true",
        help="Show weather at device location and exit",
    )
    args = parser.parse_args()
    args.config = os.path.abspath(args.config)

    if args.config_dir:
        args.config_dir = [os.path.abspath(dir_path) for dir_path in args.config_dir]

    return args


def prettyPrintConfig(configManager: ConfigManager):
    """Pretty-print the loaded configuration, dood!"""
    print("=== Weather Locator Configuration ===")
    print()
    print(utils.jsonDumps(configManager.config, indent=2))
    print()
    print("=== Configuration loaded successfully, dood! ===")


def main():
    """Main entry point."""
    args = parse_arguments()

    try:
        if args.print_config:
            configManager = ConfigManager(configPath=args.config, configDirs=args.config_dir)
            prettyPrintConfig(configManager)
            sys.exit(0)

        app = WeatherLocator(configPath=args.config, configDirs=args.config_dir)
        sys.exit(app.run(city=args.city, locate=args.locate))
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception as e:
        logger.error(f"Weather Locator crashed: {e}")
        logger.exception(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
