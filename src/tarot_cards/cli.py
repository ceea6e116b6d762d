"""
Command-line interface to inspect Tarot cards.

Usage examples:

    python -m tarot_cards.cli describe KH --theme hearts
    python -m tarot_cards.cli describe T21 --theme trump
    python -m tarot_cards.cli deck --json
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Optional

from .cards import Card, Color, Theme, TRUMP_THEME
from .deck import count_oudlers, make_deck_78, parse_card, total_points

THEME_CHOICES = ["trump"] + [c.value for c in Color]


def parse_theme(name: str) -> Theme:
    if name == "trump":
        return TRUMP_THEME
    return Theme.of(Color(name))


def _card_summary(card: Card, theme: Optional[Theme] = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "card": str(card),
        "points": card.points(),
        "oudler": card.is_oudler(),
    }
    if theme is not None:
        data["theme"] = str(theme)
        data["rank"] = card.rank(theme)
    return data


def _cmd_describe(args: argparse.Namespace) -> None:
    try:
        card = parse_card(args.card)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2)

    theme = parse_theme(args.theme) if args.theme else None
    data = _card_summary(card, theme)
    if args.json:
        print(json.dumps(data))
        return
    line = f"{data['card']}: {data['points']} points"
    if data["oudler"]:
        line += " (oudler)"
    if theme is not None:
        line += f", rank {data['rank']} in a {data['theme']} trick"
    print(line)


def _cmd_deck(args: argparse.Namespace) -> None:
    deck = make_deck_78()
    if args.json:
        payload = {
            "cards": [_card_summary(c) for c in deck],
            "total_points": total_points(deck),
            "oudlers": count_oudlers(deck),
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    for c in deck:
        print(f"{str(c):>5}  {c.points():.1f}")
    print(f"{len(deck)} cards, {total_points(deck):.1f} points, {count_oudlers(deck)} oudlers")


def _add_describe_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "describe",
        help="Show the points of a card and its rank under a trick theme.",
    )
    parser.add_argument(
        "card",
        help='Card label, e.g. "KH", "7D", "10♣", "T21" or "Fool".',
    )
    parser.add_argument(
        "--theme",
        choices=THEME_CHOICES,
        default=None,
        help="Theme of the trick used to compute the rank.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON object instead of text.",
    )
    parser.set_defaults(func=_cmd_describe)


def _add_deck_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "deck",
        help="List the 78 cards of the deck with their points.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON document instead of text.",
    )
    parser.set_defaults(func=_cmd_deck)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tarot-cards", description="French Tarot card model CLI.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_describe_parser(subparsers)
    _add_deck_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
