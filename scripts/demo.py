#!/usr/bin/env python3
"""
Command-line demo for product discovery and pricing.

Usage:
    python scripts/demo.py --search tea                 # Filter the grid
    python scripts/demo.py --search tea --category tea  # Filter within a category
    python scripts/demo.py --suggest latte --limit 3    # Fuzzy suggestions
    python scripts/demo.py --price p-latte --option size=Large --quantity 2
"""
import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from storefront import create_controller
from storefront.core.config import get_config
from storefront.data.catalog_store import load_catalog_file
from storefront.errors import StorefrontError
from storefront.pricing.options import can_add_to_cart, find_option
from storefront.search.highlight import render_segments
from storefront.utils.logger import set_log_level


def display_search(controller, query: str, category: str) -> None:
    """Display filtered products with the query highlighted."""
    results = controller.search(query, category)

    print("\n" + "=" * 60)
    print(f"RESULTS for {query!r}" + (f" in {category!r}" if category else ""))
    print("=" * 60)

    if not results:
        print("  (No products match)")
    for i, product in enumerate(results, 1):
        title = render_segments(controller.highlight(product.title, query))
        stock = "" if product.in_stock else " (out of stock)"
        print(f"  {i}. {title} - {controller.format_price(product.amount)}{stock}")


def display_suggestions(controller, query: str, limit: int) -> None:
    suggestions = controller.suggest(query, limit=limit)

    print("\n" + "-" * 40)
    print(f"Suggestions for {query!r}:")
    if not suggestions:
        print("  (none)")
    for i, title in enumerate(suggestions, 1):
        print(f"  [{i}] {title}")


def display_price(controller, product_id: str, option_args: list, quantity: int) -> None:
    """Price a product configuration given as group=label pairs."""
    product = next((p for p in controller.products if p.id == product_id), None)
    if product is None:
        raise StorefrontError(f"Unknown product {product_id!r}")

    selected = {}
    for arg in option_args:
        group_key, _, label = arg.partition("=")
        selected[group_key] = find_option(product, group_key, label)

    if not product.in_stock:
        print("Warning: product is out of stock and cannot be added to the cart")
    elif not can_add_to_cart(product, selected):
        print("Warning: not all required options are selected")

    pricing = controller.price(product, selected, quantity)
    print(f"\n{product.title} x{quantity}")
    print(f"  Unit:  {controller.format_price(pricing.unit_price)}")
    print(f"  Total: {controller.format_price(pricing.total_price)}")


def main():
    parser = argparse.ArgumentParser(description='Storefront discovery & pricing demo')
    parser.add_argument('--catalog', type=str, default=None,
                        help='Path to catalog JSON (defaults to the configured catalog)')
    parser.add_argument('--search', type=str, default=None,
                        help='Submitted search query')
    parser.add_argument('--category', type=str, default=None,
                        help='Category id to narrow to')
    parser.add_argument('--suggest', type=str, default=None,
                        help='Partial query to suggest titles for')
    parser.add_argument('--limit', type=int, default=None,
                        help='Maximum number of suggestions')
    parser.add_argument('--price', type=str, default=None,
                        help='Product id to price')
    parser.add_argument('--option', action='append', default=[],
                        help='Selected option as group=label (repeatable)')
    parser.add_argument('--quantity', type=int, default=1,
                        help='Quantity for --price')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args()

    if args.verbose:
        set_log_level("DEBUG")

    config = get_config()
    try:
        products = load_catalog_file(args.catalog or config.catalog_path,
                                     skip_invalid=config.skip_invalid_rows)
        controller = create_controller(products, config=config)

        if args.suggest is not None:
            display_suggestions(controller, args.suggest, args.limit)
        if args.search is not None or args.category:
            display_search(controller, args.search or "", args.category)
        if args.price:
            display_price(controller, args.price, args.option, args.quantity)
    except StorefrontError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
