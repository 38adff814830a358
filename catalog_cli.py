"""
Catalog Browser — command-line client for the catalog API.

Lists, searches, pages through and adds items through a running API server.

Usage:
    python catalog_cli.py list
    python catalog_cli.py list --q electronics --page 2 --limit 10
    python catalog_cli.py show 1
    python catalog_cli.py add --name "Desk Lamp" --category Furniture --price 49.5
    python catalog_cli.py stats
    python catalog_cli.py --api http://localhost:3001/api list
"""

import argparse
import sys
import textwrap

from client.data import CatalogClient
from client.views import ItemListView
from utils.errors import CatalogError


# ── Display ───────────────────────────────────────────────────────────────────

def _format_price(value) -> str:
    try:
        return f"${float(value):,.2f}"
    except (TypeError, ValueError):
        return "—"


def display_items(items: list[dict], summary: str) -> None:
    print(f"\n  {summary}")
    if not items:
        print("  No items found.")
        return
    print(f"  {'ID':>15}  {'Name':<32} {'Category':<18} {'Price':>12}")
    print(f"  {'-' * 15}  {'-' * 32} {'-' * 18} {'-' * 12}")
    for item in items:
        print(
            f"  {item['id']:>15}  {item['name'][:32]:<32} "
            f"{item['category'][:18]:<18} {_format_price(item['price']):>12}"
        )


def display_item(item: dict) -> None:
    print("=" * 65)
    print(f"  {item['name']}")
    print("=" * 65)
    print(f"  ID:       {item['id']}")
    print(f"  Category: {item['category']}")
    print(f"  Price:    {_format_price(item['price'])}")


def display_stats(stats: dict) -> None:
    print("=" * 65)
    print("  CATALOG STATISTICS")
    print("=" * 65)
    print(f"  Items:          {stats['total']:,}")
    print(f"  Average price:  {_format_price(stats['averagePrice'])}")
    price_range = stats["priceRange"]
    print(f"  Price range:    {_format_price(price_range['min'])} - "
          f"{_format_price(price_range['max'])}")
    if stats["categories"]:
        print("\n  By category:")
        for name, count in sorted(stats["categories"].items(),
                                  key=lambda kv: (-kv[1], kv[0])):
            print(f"    {name:<30} {count:>6,}")
    if stats.get("lastUpdated"):
        print(f"\n  Computed at {stats['lastUpdated']}")


# ── Commands ──────────────────────────────────────────────────────────────────

def cmd_list(client: CatalogClient, args: argparse.Namespace) -> None:
    if args.local:
        # Fetch everything once, then search and page on the client
        client.fetch_items()
        view = ItemListView(client.items, page_size=args.limit or 10)
        view.set_search(args.q or "")
        view.go_to(args.page)
        display_items(view.page_items, view.summary())
        print(f"\n  Page {view.current_page} of {max(view.total_pages, 1)}")
        return

    client.fetch_items(q=args.q, page=args.page, limit=args.limit)
    pagination = client.pagination
    if pagination is None:
        display_items(client.items, f"Showing {len(client.items)} item(s)")
        return
    summary = (f'Found {pagination["total"]} item(s) matching "{args.q}"'
               if args.q else f"Showing {pagination['total']} item(s)")
    display_items(client.items, summary)
    nav = []
    if pagination["hasPrev"]:
        nav.append(f"--page {pagination['page'] - 1} for previous")
    if pagination["hasNext"]:
        nav.append(f"--page {pagination['page'] + 1} for next")
    print(f"\n  Page {pagination['page']} of {max(pagination['totalPages'], 1)}"
          + (f" ({', '.join(nav)})" if nav else ""))


def cmd_show(client: CatalogClient, args: argparse.Namespace) -> None:
    display_item(client.fetch_item_by_id(args.id))


def cmd_add(client: CatalogClient, args: argparse.Namespace) -> None:
    item = client.create_item(
        {"name": args.name, "category": args.category, "price": args.price}
    )
    print(f"  Created item {item['id']}: {item['name']} ({item['category']})")


def cmd_stats(client: CatalogClient, args: argparse.Namespace) -> None:
    display_stats(client.fetch_stats())


# ── CLI ───────────────────────────────────────────────────────────────────────

def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse the item catalog through its REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""
            Examples:
              python catalog_cli.py list --q desk
              python catalog_cli.py list --page 2 --limit 2
              python catalog_cli.py list --local --q chair
              python catalog_cli.py show 1
              python catalog_cli.py add --name "Desk Lamp" --category Furniture --price 49.5
              python catalog_cli.py stats
        """),
    )
    parser.add_argument("--api", default=None,
                        help="API base URL (default: CATALOG_API_URL or http://localhost:3001/api)")
    sub = parser.add_subparsers(dest="command")

    p_list = sub.add_parser("list", help="List or search items")
    p_list.add_argument("--q", default=None, help="Search name and category")
    p_list.add_argument("--page", type=_positive_int, default=1, help="Page number (default: 1)")
    p_list.add_argument("--limit", type=_positive_int, default=None, help="Items per page")
    p_list.add_argument("--local", action="store_true",
                        help="Fetch all items and search/paginate client-side")
    p_list.set_defaults(func=cmd_list)

    p_show = sub.add_parser("show", help="Show one item")
    p_show.add_argument("id", help="Item id")
    p_show.set_defaults(func=cmd_show)

    p_add = sub.add_parser("add", help="Create an item")
    p_add.add_argument("--name", required=True)
    p_add.add_argument("--category", required=True)
    p_add.add_argument("--price", type=float, required=True)
    p_add.set_defaults(func=cmd_add)

    p_stats = sub.add_parser("stats", help="Show catalog statistics")
    p_stats.set_defaults(func=cmd_stats)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 0

    with CatalogClient(base_url=args.api) as client:
        try:
            args.func(client, args)
        except CatalogError as exc:
            print(f"ERROR: {exc.message}", file=sys.stderr)
            print("  Check that the API is running, then try again.", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
