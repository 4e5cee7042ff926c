#!/usr/bin/env python3
"""
Blog Report Script.

Prints like and authorship statistics for every blog in the database.

Usage:
    uv run python auto/blog_report.py
    uv run python auto/blog_report.py --top 5
"""

from argparse import ArgumentParser, Namespace
from asyncio import run as asyncio_run
from pathlib import Path
from sys import path as sys_path

from rich.console import Console
from rich.table import Table

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys_path.insert(0, str(project_root))

from bloglist.data import favorite_blog, most_blogs, most_likes, total_likes  # noqa: E402
from bloglist.db import close_db, transaction  # noqa: E402
from bloglist.models import BlogDB  # noqa: E402
from bloglist.repositories import BlogRepository  # noqa: E402

console = Console()


def parse_args() -> Namespace:
    parser = ArgumentParser(description="Print blog statistics.")
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of most-liked blogs to list (default: 10)",
    )
    return parser.parse_args()


def summary_table(blogs: list[BlogDB]) -> Table:
    """Build the four-statistics summary table."""
    table = Table(title="Blog statistics")
    table.add_column("Statistic", style="cyan")
    table.add_column("Value", style="bold")

    table.add_row("Blogs", str(len(blogs)))
    table.add_row("Total likes", str(total_likes(blogs)))

    favorite = favorite_blog(blogs)
    table.add_row(
        "Favorite blog",
        f"{favorite.title} by {favorite.author or 'unknown'} ({favorite.likes} likes)"
        if favorite
        else "-",
    )

    prolific = most_blogs(blogs)
    table.add_row(
        "Most blogs",
        f"{prolific.author} ({prolific.blogs} blogs)" if prolific else "-",
    )

    liked = most_likes(blogs)
    table.add_row(
        "Most likes",
        f"{liked.author} ({liked.likes} likes)" if liked else "-",
    )
    return table


def top_table(blogs: list[BlogDB], top: int) -> Table:
    table = Table(title=f"Top {top} blogs by likes")
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("Likes", justify="right")

    # sorted() is stable, so equal likes keep creation order
    for blog in sorted(blogs, key=lambda b: b.likes, reverse=True)[:top]:
        table.add_row(blog.title, blog.author or "-", str(blog.likes))
    return table


async def main() -> None:
    args = parse_args()

    try:
        async with transaction() as session:
            blogs = await BlogRepository(session).get_all()
    finally:
        await close_db()

    console.print(summary_table(blogs))
    if blogs:
        console.print(top_table(blogs, args.top))


if __name__ == "__main__":
    asyncio_run(main())
