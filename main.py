#!/usr/bin/env python
"""CLI for the Spaceflight News reader."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator

from spaceflight_news.config import (
    SpaceflightNewsConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from spaceflight_news.controller import ArticleListController
from spaceflight_news.data import Article, ListState
from spaceflight_news.errors import AppError
from spaceflight_news.repository import ArticleRepository
from spaceflight_news.url import extract_domain

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: Literal["list", "search", "detail", "clear-cache"]
    config: Path
    query: str = ""
    article_id: int | None = None
    pages: int = 1
    cache_path: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("pages")
    @classmethod
    def pages_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("--pages must be at least 1")
        return v


def print_article(index: int, article: Article) -> None:
    print(f"{index}. {article.title}")
    print(f"   Source: {article.news_site} ({extract_domain(article.url)})")
    print(f"   URL: {article.url}")
    print(f"   Published: {article.published_at}")


def print_state(state: ListState) -> None:
    if state.error_message:
        print(f"\n{state.error_message}")
    if state.is_search_mode:
        print(f"\nSearch '{state.search_text}': {state.search_state}")
    print(f"\n{len(state.articles)} articles:\n")
    for i, article in enumerate(state.articles, 1):
        print_article(i, article)
    if state.toast_message:
        print(f"\n[{state.toast_message}]")


async def run_detail(repository: ArticleRepository, article_id: int) -> int:
    try:
        article = await repository.fetch_article_detail(article_id)
    except AppError as e:
        logger.error(e.user_message)
        return 1
    print_article(1, article)
    if article.secure_image_url:
        print(f"   Image: {article.secure_image_url}")
    print(f"\n{article.summary}")
    return 0


async def run(args: CLIArgs, config: SpaceflightNewsConfig) -> int:
    """Execute one command against the configured object graph.

    Args:
        args: Validated CLI arguments.
        config: Loaded configuration.

    Returns:
        Process exit code.
    """
    controller, repository = create_from_config(config, cache_path_override=args.cache_path)

    try:
        if args.command == "detail" and args.article_id is not None:
            return await run_detail(repository, args.article_id)
        return await run_list_command(controller, args)
    finally:
        await controller.aclose()


async def run_list_command(controller: ArticleListController, args: CLIArgs) -> int:
    if args.command == "clear-cache":
        await controller.clear_cache()
        print_state(controller.state)
        return 0

    if args.command == "search":
        controller.set_search_text(args.query)
        await controller.search_articles()
    else:
        await controller.load_initial_data()
        if controller.state.is_search_mode:
            controller.set_search_text("")
            await controller.fetch_articles()
        for _ in range(args.pages - 1):
            await controller.load_more_articles()

    print_state(controller.state)
    return 1 if controller.state.error_message else 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Browse spaceflight news articles.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--cache-path",
        type=str,
        default=None,
        help="Override the file cache location",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List the latest articles")
    list_parser.add_argument("--pages", type=int, default=1, help="Number of pages to load")

    search_parser = subparsers.add_parser("search", help="Search articles")
    search_parser.add_argument("query", help="Search text (at least 3 characters)")

    detail_parser = subparsers.add_parser("detail", help="Show one article")
    detail_parser.add_argument("article_id", type=int, help="Article id")

    subparsers.add_parser("clear-cache", help="Remove cached articles")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            query=getattr(ns, "query", ""),
            article_id=getattr(ns, "article_id", None),
            pages=getattr(ns, "pages", 1),
            cache_path=ns.cache_path,
        )
        config = load_config(args.config)
    except Exception as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    try:
        sys.exit(asyncio.run(run(args, config)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
