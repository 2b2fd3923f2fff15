"""Tests for the command-line tool."""

import io

import pytest
from rich.console import Console

from poker_hands.rules import parse_hand
from poker_hands.engine import rank_hands
from poker_hands.scripts import cli
from poker_hands.utils import seeding


@pytest.fixture
def out():
    return Console(file=io.StringIO(), width=200)


def output(console: Console) -> str:
    return console.file.getvalue()


def answer_with(monkeypatch, answers):
    replies = iter(answers)
    monkeypatch.setattr(cli.Prompt, "ask", lambda *args, **kwargs: next(replies))


def deal_with(*seed_args) -> str:
    console = Console(file=io.StringIO(), width=200)
    assert cli.main([*seed_args, "rm", "--input", "6"], out=console) == 0
    return output(console)


class TestParser:
    def test_rm_input(self):
        args = cli.build_parser().parse_args(["--seed", "4", "rm", "--input", "3"])
        config = cli.config_from_args(args)
        assert config.command == "rm"
        assert config.num_hands == 3
        assert config.seed == 4
        assert not config.unique

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestRandomCommands:
    def test_single_hand(self, out):
        assert cli.main(["--seed", "1", "rs"], out=out) == 0
        text = output(out)
        assert "Rank Order:" in text
        assert "Rank Title:" in text

    def test_multi_hands(self, out):
        assert cli.main(["--seed", "2", "rm", "--input", "4"], out=out) == 0
        text = output(out)
        assert "Congrats!" in text
        assert "Results" in text

    def test_multi_hands_rejects_zero(self, out):
        assert cli.main(["rm", "--input", "0"], out=out) == 1
        assert "Invalid input: 0" in output(out)

    def test_multi_hands_unique(self, out):
        assert cli.main(["--seed", "2", "--unique", "rm", "--input", "3"], out=out) == 0

    def test_seed_decides_the_deal(self):
        assert deal_with("--seed", "5") == deal_with("--seed", "5")
        assert deal_with("--seed", "5") != deal_with("--seed", "6")

    def test_missing_seed_is_generated_and_used(self, monkeypatch):
        monkeypatch.setattr(seeding.random, "randint", lambda low, high: 5)
        assert deal_with() == deal_with("--seed", "5")


class TestPromptCommand:
    def test_prompt_ranks_hands(self, monkeypatch, out):
        answer_with(monkeypatch, ["2", "2h8djc5has, 2s3s4s5s6s"])
        assert cli.main(["prompt"], out=out) == 0
        text = output(out)
        assert "Win Hand ID: 2" in text
        assert "Straight Flush" in text
        assert "High Card - {A}" in text

    def test_prompt_zero_hands(self, monkeypatch, out):
        answer_with(monkeypatch, ["0"])
        assert cli.main(["prompt"], out=out) == 1
        assert "more than 0" in output(out)

    def test_prompt_not_a_number(self, monkeypatch, out):
        answer_with(monkeypatch, ["three"])
        assert cli.main(["prompt"], out=out) == 1

    def test_prompt_count_mismatch(self, monkeypatch, out):
        answer_with(monkeypatch, ["3", "2S3S4S5S6S"])
        assert cli.main(["prompt"], out=out) == 1
        assert "same number" in output(out)

    def test_prompt_bad_rank(self, monkeypatch, out):
        answer_with(monkeypatch, ["1", "1S3S4S5S6S"])
        assert cli.main(["prompt"], out=out) == 1
        assert "rank should be" in output(out)

    def test_prompt_reports_bracketed_input_verbatim(self, monkeypatch, out):
        answer_with(monkeypatch, ["1", "[/x]S3S4S5"])
        assert cli.main(["prompt"], out=out) == 1
        text = output(out)
        assert "invalid card string: [/x]S3S4S5." in text
        assert "rank should be" in text

    def test_prompt_bracketed_input_wrong_length(self, monkeypatch, out):
        answer_with(monkeypatch, ["1", "[/x]S3S4S5S"])
        assert cli.main(["prompt"], out=out) == 1
        text = output(out)
        assert "invalid card string: [/x]S3S4S5S." in text
        assert "card string should be like this" in text


class TestRendering:
    def test_render_results_rows(self):
        hands = [parse_hand("2S3S4S5S6S", 1), parse_hand("2H8D8C5H6S", 2)]
        table = cli.render_results(rank_hands(hands))
        assert table.row_count == 2

    def test_format_cards(self):
        hand = parse_hand("tsjsqsksas", 1)
        assert cli.format_cards(hand.cards) == "TS JS QS KS AS"
