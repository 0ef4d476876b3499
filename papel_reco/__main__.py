from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

from papel_reco.auth import StaticTokenProvider
from papel_reco.config import Config, load_config
from papel_reco.logging_setup import setup_logging
from papel_reco.metrics.metrics import Metrics
from papel_reco.recommendations.client import RecommendationClient
from papel_reco.recommendations.screen import RecommendationScreen


logger = logging.getLogger(__name__)


class ConsoleNavigator:
    def open_article(self, article_id: str) -> None:
        logger.info("navigating to article %s", article_id)
        print(f"open article {article_id}")


def _parse_args(argv: list[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(prog="papel-reco")
    parser.add_argument(
        "--env",
        default=".env",
        help="Path to .env file (default: .env).",
    )
    parser.add_argument(
        "--open",
        type=int,
        default=None,
        metavar="INDEX",
        help="Select the recommended article at INDEX after loading.",
    )
    return parser, parser.parse_args(argv)


async def run(config: Config, open_index: int | None, parser: argparse.ArgumentParser, metrics: Metrics | None = None) -> None:
    client = RecommendationClient(
        timeout_seconds=config.http_timeout_seconds,
        user_agent=config.user_agent,
    )
    screen = RecommendationScreen(
        client=client,
        token_provider=StaticTokenProvider(config.auth_token),
        url=config.recommendations_url,
        navigator=ConsoleNavigator(),
        metrics=metrics,
    )
    try:
        await screen.on_mount()
        print(screen.render())

        if open_index is not None:
            count = screen.view_model.item_count()
            if not 0 <= open_index < count:
                parser.error(f"--open {open_index} out of range, {count} article(s) listed")
            screen.on_item_selected(open_index)
    finally:
        screen.on_unmount()
        await client.aclose()


def main(argv: list[str] | None = None) -> None:
    parser, args = _parse_args(argv)
    env_path = Path(args.env)
    if env_path.exists():
        load_dotenv(env_path)
    else:
        load_dotenv()

    config = load_config()
    setup_logging(config.log_level, config.log_file)

    metrics: Metrics | None = None
    if config.metrics_enabled:
        metrics = Metrics()
        metrics.start_server(config.metrics_bind, config.metrics_port)

    asyncio.run(run(config, args.open, parser, metrics))


if __name__ == "__main__":
    main()
