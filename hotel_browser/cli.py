"""
Command-line interface for Hotel Browser.

Provides ``serve`` to run the API and ``browse`` to page through search
results in the terminal, one batch per Enter key press.
"""

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

import asyncio
import argparse
import logging
import sys
from typing import Callable, Optional

from hotel_browser.client import HotelApiClient
from hotel_browser.config import get_app_settings
from hotel_browser.models import FilterCriteria, Hotel
from hotel_browser.presenter import IncrementalListPresenter, PresenterStatus, VisibilityTrigger


# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def format_hotel(hotel: Hotel) -> str:
    """
    Format a hotel record for console output.

    Args:
        hotel: Hotel to format

    Returns:
        Multi-line string representation of the hotel
    """
    lines = [
        f"🏨 {hotel.hotel_name}",
        f"   Rating: {_format_number(hotel.hotel_rating)}",
        f"   City: {hotel.city}",
        f"   Price: {_format_number(hotel.hotel_price)}",
    ]

    features = hotel.features()
    if features:
        lines.append(f"   Features: {', '.join(features)}")

    lines.append("")  # Blank line for spacing

    return "\n".join(lines)


async def run_browse(
    criteria: FilterCriteria,
    api_url: Optional[str] = None,
    batch_size: Optional[int] = None,
    read_line: Callable[[str], str] = input,
    verbose: bool = False
) -> int:
    """
    Fetch hotels and reveal them batch by batch in the terminal.

    Reaching the prompt stands in for the sentinel scrolling into view:
    pressing Enter reports it fully visible and reveals the next batch.

    Args:
        criteria: Search filters
        api_url: Base URL of the API (defaults to configuration)
        batch_size: Results per batch (defaults to configuration)
        read_line: Prompt function, replaceable for tests
        verbose: Enable verbose logging output

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    if criteria.is_empty():
        print("\n🔍 Searching all hotels...")
    else:
        filters = ", ".join(f"{name}={value}" for name, value in criteria.to_query_params().items())
        print(f"\n🔍 Searching hotels ({filters})...")

    settings = get_app_settings()
    trigger = VisibilityTrigger(threshold=settings.presenter.visibility_threshold)

    async with HotelApiClient(base_url=api_url) as client:
        presenter = IncrementalListPresenter(
            client.fetch_hotels,
            batch_size=batch_size or settings.presenter.batch_size,
            trigger=trigger
        )
        try:
            state = await presenter.submit_search(criteria)

            if state.status is PresenterStatus.ERROR:
                print(f"❌ Error: {state.error}", file=sys.stderr)
                return 1

            if not state.results:
                print("No hotels found matching your criteria.")
                return 0

            print(f"\nFound {presenter.total} hotel(s)\n")
            shown = 0
            while True:
                for hotel in presenter.visible_hotels[shown:]:
                    print(format_hotel(hotel))
                shown = presenter.state.revealed_count

                if not presenter.has_more:
                    break

                answer = read_line(f"-- {shown}/{presenter.total} shown, Enter for more, q to quit -- ")
                if answer.strip().lower() == "q":
                    break
                trigger.report_visibility(1.0)

            return 0
        finally:
            presenter.teardown()


def run_server(host: Optional[str] = None, port: Optional[int] = None) -> int:
    """Run the API with uvicorn."""
    import uvicorn

    api = get_app_settings().api
    uvicorn.run("hotel_browser.main:app", host=host or api.host, port=port or api.port, reload=False)
    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="hotel-browser",
        description="Search hotels by name, city and price",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the API and web pages
  hotel-browser serve --port 8000

  # Browse every hotel
  hotel-browser browse

  # Hotels in Goa between 2000 and 5000
  hotel-browser browse --city goa --min-price 2000 --max-price 5000

  # Name search against another server
  hotel-browser browse --name palace --api-url http://hotels.internal:8000
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", type=str, default=None, help="Bind address")
    serve.add_argument("--port", type=int, default=None, help="Bind port")

    browse = subparsers.add_parser("browse", help="Browse search results in the terminal")
    browse.add_argument("--name", type=str, default=None, help="Hotel name contains (case-insensitive)")
    browse.add_argument("--city", type=str, default=None, help="City (exact, case-insensitive)")
    browse.add_argument("--min-price", type=str, default=None, help="Minimum price (inclusive)")
    browse.add_argument("--max-price", type=str, default=None, help="Maximum price (inclusive)")
    browse.add_argument("--api-url", type=str, default=None, help="Base URL of the API")
    browse.add_argument("--batch-size", type=int, default=None, help="Hotels shown per batch")
    browse.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging output"
    )

    return parser


def main(argv=None) -> int:
    """
    Main entry point for the CLI application.

    Returns:
        Exit code (0 for success, 1 for error, 130 if interrupted)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        return run_server(host=args.host, port=args.port)

    if args.batch_size is not None and args.batch_size < 1:
        parser.error("--batch-size must be a positive integer")

    criteria = FilterCriteria.from_query_params(
        hotel_name=args.name,
        hotel_city=args.city,
        min_price=args.min_price,
        max_price=args.max_price
    )

    try:
        return asyncio.run(
            run_browse(
                criteria,
                api_url=args.api_url,
                batch_size=args.batch_size,
                verbose=args.verbose
            )
        )
    except (KeyboardInterrupt, EOFError):
        print("\n\n⚠️  Browsing interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.exception(f"Unexpected error in main: {str(e)}")
        print(f"❌ Unexpected error: {str(e)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
