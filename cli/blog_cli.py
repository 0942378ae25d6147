"""Command line front end for browsing the blog."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from inkwell.config import Settings
from inkwell.main import configure_logging, create_app
from inkwell.services.datetime_service import format_display_date

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inkwell.main import BlogApp
    from inkwell.schemas.listing import HighlightSegment, ListingPage, PostCard

HIGHLIGHT_ON = "\x1b[7m"
HIGHLIGHT_OFF = "\x1b[0m"


def render_segments(segments: Sequence[HighlightSegment], *, color: bool = True) -> str:
    """Join highlight segments, marking matches with reverse video or brackets."""
    parts: list[str] = []
    for segment in segments:
        if not segment.is_match:
            parts.append(segment.text)
        elif color:
            parts.append(f"{HIGHLIGHT_ON}{segment.text}{HIGHLIGHT_OFF}")
        else:
            parts.append(f"[{segment.text}]")
    return "".join(parts)


def format_card(card: PostCard, *, color: bool = True) -> str:
    marker = "* " if card.featured else ""
    lines = [
        f"{marker}{render_segments(card.title, color=color)}",
        f"  {card.category} | {card.published_label} | {card.author} | {card.read_time_label}",
        f"  {render_segments(card.excerpt, color=color)}",
        f"  {card.href}",
    ]
    return "\n".join(lines)


def print_listing(page: ListingPage, *, color: bool = True) -> None:
    if page.summary:
        print(page.summary)
        print()
    if page.is_empty:
        print("No posts found")
        print("Try adjusting your search terms or browse all categories.")
        return
    for card in page.cards:
        print(format_card(card, color=color))
        print()
    if page.show_pagination:
        print(f"Page {page.pagination.current_page} of {page.pagination.total_pages}")


def cmd_list(app: BlogApp, args: argparse.Namespace) -> None:
    if args.category is not None and args.category not in app.listing.categories:
        print(f"Warning: no published posts in category '{args.category}'", file=sys.stderr)
    app.listing.set_query(args.query or "")
    app.listing.select_category(args.category)
    app.listing.go_to_page(args.page)
    print_listing(app.listing.render(), color=args.color)


def cmd_show(app: BlogApp, args: argparse.Namespace) -> None:
    post = app.store.get_by_slug(args.slug)
    if post is None:
        print(f"Error: No post with slug '{args.slug}'")
        sys.exit(1)
    print(post.title)
    print(f"{post.author} | {format_display_date(post.published_at)} | {post.read_time} min read")
    print(f"Category: {post.category}")
    if post.tags:
        print(f"Tags: {', '.join(post.tags)}")
    print()
    print(post.content)


def cmd_home(app: BlogApp, args: argparse.Namespace) -> None:
    home = app.home()
    print(home.site_title)
    print(home.site_description)
    if home.featured:
        print()
        print("Featured")
        for card in home.featured:
            print(format_card(card, color=args.color))
    if home.recent:
        print()
        print("Recent")
        for card in home.recent:
            print(format_card(card, color=args.color))


def cmd_categories(app: BlogApp, args: argparse.Namespace) -> None:
    for category in app.listing.categories:
        print(category)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inkwell",
        description="Browse and search Inkwell blog posts",
    )
    parser.add_argument("--dir", "-d", help="Content directory (default: built-in sample posts)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        help="Mark search matches with [brackets] instead of ANSI colors",
    )

    subparsers = parser.add_subparsers(dest="command")
    list_parser = subparsers.add_parser("list", help="List posts with search and pagination")
    list_parser.add_argument("--query", "-q", default="", help="Search text")
    list_parser.add_argument("--category", "-c", help="Only posts in this category")
    list_parser.add_argument("--page", "-p", type=int, default=1, help="Page number")

    show_parser = subparsers.add_parser("show", help="Show a single post")
    show_parser.add_argument("slug", help="Post slug")

    subparsers.add_parser("home", help="Show featured and recent posts")
    subparsers.add_parser("categories", help="List post categories")
    return parser


COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "home": cmd_home,
    "categories": cmd_categories,
}


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return

    settings = Settings()
    updates: dict[str, object] = {}
    if args.dir:
        updates["content_dir"] = Path(args.dir).resolve()
    if args.debug:
        updates["debug"] = True
    settings = settings.model_copy(update=updates)
    configure_logging(settings.debug, quiet=True)

    try:
        app = create_app(settings)
    except (NotADirectoryError, ValueError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    COMMANDS[args.command](app, args)


if __name__ == "__main__":
    main()
