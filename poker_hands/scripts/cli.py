#!/usr/bin/env python3
"""Command-line tool for classifying and ranking five-card poker hands.

Commands:
- rs: deal one random hand and evaluate it
- rm: deal N random hands and rank them
- prompt: type in your own hands and rank them

Usage:
    python -m poker_hands.scripts.cli rs
    python -m poker_hands.scripts.cli rm --input 5 --seed 42
    python -m poker_hands.scripts.cli prompt

Card strings are ten characters of alternating rank and suit, any case,
with hands separated by commas: 3s4h5d6c7s,9H3CTSQSAS,4DASAC7H9C
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from poker_hands.dealing.random_hands import RandomHandGenerator
from poker_hands.engine.ranking import rank_hands
from poker_hands.rules import Card, Hand, HandResult, PokerHandsError, parse_hands
from poker_hands.rules.parsing import EXAMPLE_HANDS
from poker_hands.utils.seeding import set_seed

console = Console()
logger = logging.getLogger(__name__)

# Colors per strength order band
ORDER_STYLES = {
    1: "bold magenta",
    2: "bold magenta",
    3: "bold red1",
    4: "bold red1",
    5: "bold yellow",
    6: "bold yellow",
    7: "green1",
    8: "green1",
    9: "cyan1",
    10: "white",
}

SUIT_STYLES = {"S": "cyan1", "H": "red1", "D": "red1", "C": "green1"}


@dataclass
class CliConfig:
    """Settings for one CLI run."""

    command: str = "rs"
    num_hands: int = 0
    seed: Optional[int] = None
    unique: bool = False
    log_level: str = "WARNING"


# ==============================================================================
# Rendering
# ==============================================================================


def format_cards(cards: Iterable[Card]) -> str:
    return " ".join(str(c) for c in cards)


def cards_text(cards: Iterable[Card]) -> Text:
    """Cards as colored rich Text, one style per suit."""
    text = Text()
    for i, card in enumerate(cards):
        if i:
            text.append(" ")
        code = str(card)
        text.append(code, style=SUIT_STYLES.get(code[-1], "white"))
    return text


def render_results(results: Sequence[HandResult]) -> Table:
    """Standing table, one row per result in the given order."""
    table = Table(title="Results", box=box.SIMPLE, show_header=True)
    table.add_column("Place", justify="right")
    table.add_column("Hand ID", justify="right")
    table.add_column("Rank")
    table.add_column("Rank Order", justify="right")
    table.add_column("Cards")

    for place, result in enumerate(results, start=1):
        style = ORDER_STYLES.get(result.rank_order, "white")
        table.add_row(
            str(place),
            str(result.hand_id),
            Text(result.rank, style=style),
            str(result.rank_order),
            cards_text(result.cards),
        )
    return table


def render_winner(result: HandResult) -> Panel:
    body = Text.assemble(
        ("Win Hand ID: ", "bold"),
        f"{result.hand_id}  ",
        ("Rank: ", "bold"),
        (result.rank, ORDER_STYLES.get(result.rank_order, "white")),
        f"  (order {result.rank_order})  ",
        cards_text(result.cards),
    )
    return Panel(body, title="Congrats!", border_style="green")


def report(results: List[HandResult], out: Console) -> None:
    """Print the winner and the full standing."""
    if not results:
        out.print("[yellow]No hands to rank.[/yellow]")
        return

    winner = results[0]
    logger.info(
        "Win Hand ID:%d, Rank: %s, RankOrder: %d, Cards: %s",
        winner.hand_id,
        winner.rank,
        winner.rank_order,
        format_cards(winner.cards),
    )
    out.print(render_winner(winner))
    out.print(render_results(results))


# ==============================================================================
# Commands
# ==============================================================================


def run_single(config: CliConfig, out: Console) -> int:
    """Deal one random hand and evaluate it."""
    generator = RandomHandGenerator(seed=config.seed, unique=config.unique)
    hand = generator.deal(1)
    logger.info("Cards: %s", format_cards(hand.cards))

    if not hand.has_valid_ranks():
        logger.error("Invalid ranks: %s", hand)
        out.print(Text(f"Invalid ranks: {hand}", style="red"))
        return 1
    if not hand.has_valid_suits():
        logger.error("Invalid suits: %s", hand)
        out.print(Text(f"Invalid suits: {hand}", style="red"))
        return 1

    label, order = hand.evaluate()
    out.print(Text.assemble("Cards: ", cards_text(hand.cards)))
    out.print(
        f"Rank Order: [bold]{order}[/bold], "
        f"Rank Title: [{ORDER_STYLES.get(order, 'white')}]{escape(label)}[/]"
    )
    return 0


def run_multi(config: CliConfig, out: Console) -> int:
    """Deal ``config.num_hands`` random hands and rank them."""
    if config.num_hands < 1:
        logger.error("Invalid input: %d", config.num_hands)
        out.print(Text(f"Invalid input: {config.num_hands}. Please provide hands more than 0", style="red"))
        return 1

    generator = RandomHandGenerator(seed=config.seed, unique=config.unique)
    hands = generator.deal_many(config.num_hands)
    report(rank_hands(hands), out)
    return 0


def prompt_hand_count(out: Console) -> int:
    """Ask how many hands to create.

    Raises:
        ValueError: If the answer is not a positive integer
    """
    raw = Prompt.ask(
        "Input Number of hands [dim]ex) 5[/dim]",
        console=out,
    ).strip()
    if not raw:
        raise ValueError("Please provide how many hands you want to create ex) 5")
    try:
        count = int(raw)
    except ValueError:
        raise ValueError(f"Not a number: {raw!r}") from None
    if count < 1:
        raise ValueError("Please provide hands more than 0")
    return count


def prompt_hands(out: Console, count: int) -> List[Hand]:
    """Ask for ``count`` comma-separated hand strings and parse them."""
    raw = Prompt.ask(
        f"Input Cards [dim]ex) {EXAMPLE_HANDS}[/dim]",
        console=out,
    )
    if not raw.strip():
        raise ValueError(
            "Please provide cards for each hand, separated by commas. "
            "Each hand must be five Rank and Suit pairs"
        )
    logger.info("Input cards: %s", raw)
    return parse_hands(raw, expected=count)


def run_prompt(config: CliConfig, out: Console) -> int:
    """Read hands from the user and rank them."""
    try:
        count = prompt_hand_count(out)
        logger.info("Input hands: %d", count)
        hands = prompt_hands(out, count)
    except (PokerHandsError, ValueError) as exc:
        logger.error("Prompt failed: %s", exc)
        out.print(Text(str(exc), style="red"))
        return 1

    report(rank_hands(hands), out)
    return 0


COMMANDS = {
    "rs": run_single,
    "rm": run_multi,
    "prompt": run_prompt,
}


# ==============================================================================
# Main
# ==============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poker-hands",
        description="Classify and rank five-card poker hands",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for dealing (random if omitted)")
    parser.add_argument(
        "--unique",
        action="store_true",
        help="Deal distinct cards within each hand (default: independent draws)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("rs", help="Random-Single-Hand: Generate random a hand and evaluate")
    rm = sub.add_parser("rm", help="Random-Multi-Hands: Generate random multi hands and evaluate")
    rm.add_argument("--input", type=int, default=0, help="Number of hands")
    sub.add_parser("prompt", help="Prompt: Create hands from your input and evaluate")
    return parser


def config_from_args(args: argparse.Namespace) -> CliConfig:
    return CliConfig(
        command=args.command,
        num_hands=getattr(args, "input", 0),
        seed=args.seed,
        unique=args.unique,
        log_level=args.log_level,
    )


def main(argv: Optional[Sequence[str]] = None, out: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    out = out or console

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Dealing always runs from a known seed so any run can be replayed
    config.seed = set_seed(config.seed)
    logger.info("Using seed: %d", config.seed)

    try:
        return COMMANDS[config.command](config, out)
    except KeyboardInterrupt:
        out.print("\n[dim]Cancelled.[/dim]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
