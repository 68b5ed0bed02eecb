from __future__ import annotations

import argparse
import asyncio
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from quick_news.config.settings import Settings, require_api_key
from quick_news.kit.errors import ApiError, ConfigError
from quick_news.newsapi.client import NewsAPI
from quick_news.newsapi.models import Country, Endpoint
from quick_news.reporting.terminal import make_console, render_articles

logger = logging.getLogger(__name__)

console = make_console()


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_file_handler: Optional[RotatingFileHandler] = None


def setup_logging(settings: Settings, verbose: bool = False) -> RotatingFileHandler:
    """Send logs to the rotating file only; the terminal belongs to the headlines."""
    global _file_handler
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.INFO)
    log_path = Path(settings.log_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    if _file_handler is not None:
        root.removeHandler(_file_handler)
        _file_handler.close()
    _file_handler = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=5, encoding="utf-8")
    _file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_file_handler)
    root.setLevel(level)
    return _file_handler


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quick-news", description="Top news headlines in your terminal")
    parser.add_argument("--sync", action="store_true", help="Use the blocking HTTP client")
    parser.add_argument("--endpoint", choices=[e.value for e in Endpoint], default=Endpoint.TOP_HEADLINES.value)
    parser.add_argument("--country", choices=[c.value for c in Country], default=Country.IN.value)
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = Settings()
    setup_logging(settings, verbose=args.verbose)

    try:
        api_key = require_api_key(settings)
        newsapi = NewsAPI(api_key, base_url=settings.newsapi_base_url)
        newsapi.endpoint(Endpoint(args.endpoint)).country(Country(args.country))

        if args.sync:
            response = newsapi.fetch()
        else:
            response = asyncio.run(newsapi.fetch_async())
    except (ConfigError, ApiError) as e:
        logger.debug("Run failed", exc_info=True)
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    render_articles(response.articles, console=console)


if __name__ == "__main__":
    main()
