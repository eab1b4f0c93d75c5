"""Print current weather (and optionally moon phase and temperature) as emoji for a status bar."""
import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from cache_store import CacheStore
from geolocation import IpInfoLocator
from weather_data import ConditionsError
from weather_service import WAIT_MINUTES_DEFAULT, ConditionsConfig, ConditionsService
from wunderground_provider import WundergroundProvider


def non_negative_int(value: str) -> int:
    minutes = int(value)
    if minutes < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return minutes


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("current-conditions", description=__doc__)
    parser.add_argument("-w", "--wait", type=non_negative_int, default=WAIT_MINUTES_DEFAULT,
                        help="Number of minutes to wait before checking")
    parser.add_argument("-d", "--debug", action="store_true", help="Turn on debug mode")
    parser.add_argument("-k", "--key", default=None, help="API key for api.wunderground.com")
    parser.add_argument("-z", "--zip", default=None, help="Force zip code (skip ipinfo.io lookup)")
    parser.add_argument("-f", "--force", action="store_true", help="Force lookup (don't use cached data)")
    parser.add_argument("-m", "--moon", action="store_true", help="Include the phase of the moon (at night)")
    parser.add_argument("-t", "--temp", action="store_true", help="Show the temperature in Fahrenheit")
    parser.add_argument("--cache-file", default=None, help="Cache file (default: ~/.current_conditions)")
    return parser.parse_args(argv)


def setup_logging(debug: bool) -> None:
    log_level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def load_config(args: argparse.Namespace) -> ConditionsConfig:
    """Merge flags with the environment; flags win."""
    config = ConditionsConfig(
        wait_minutes=args.wait,
        zip_code=args.zip or os.getenv("CURRENT_CONDITIONS_ZIP") or None,
        force=args.force,
        show_moon=args.moon,
        show_temp=args.temp,
    )
    logging.debug("Configuration loaded: %s", config)
    return config


def build_service(args: argparse.Namespace, config: ConditionsConfig) -> ConditionsService:
    api_key = args.key or os.getenv("WUNDERGROUND_API_KEY", "")
    if not api_key:
        logging.debug("No Weather Underground API key configured")
    return ConditionsService(
        provider=WundergroundProvider(api_key=api_key),
        config=config,
        cache=CacheStore(args.cache_file),
        locator=IpInfoLocator(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.debug)
    logging.debug("Debug mode ON")
    load_dotenv()

    config = load_config(args)
    service = build_service(args, config)

    try:
        line = service.get_status_line()
    except ConditionsError as err:
        logging.error("Fatal error: %s", err)
        return 1

    print(line)
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
