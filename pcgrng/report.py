"""Demonstration report for a seeded generator.

Each round draws six raw words, retreats six steps and draws them again
(showing that ``retreat`` rewinds exactly), then tosses 65 coins, rolls 33
dice and deals a shuffled 52-card deck. The output is fully determined by
the seed, so the report doubles as a cross-implementation regression
fixture: seed (42, 54) reproduces the classic pcg32 demo output.
"""

from __future__ import annotations

from dataclasses import dataclass

from .pcg32 import PCG32
from .pcg64 import PCG64

RANKS = "A23456789TJQK"
SUITS = "hcds"
NUM_CARDS = 52

WORDS_PER_ROUND = 6
NUM_COINS = 65
NUM_ROLLS = 33


@dataclass
class ReportParams:
    bits: int = 32
    seed: int = 42
    sequence: int = 54
    rounds: int = 5

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            raise ValueError(f"bits must be 32 or 64, got {self.bits}")
        if self.rounds < 0:
            raise ValueError(f"rounds must be non-negative, got {self.rounds}")


@dataclass
class ReportRound:
    words: list[int]
    again: list[int]
    coins: str
    rolls: list[int]
    cards: list[str]


def make_generator(params: ReportParams) -> PCG32 | PCG64:
    if params.bits == 32:
        return PCG32().seed(params.seed, params.sequence)
    return PCG64().seed(
        params.seed, params.seed, params.sequence, params.sequence
    )


def _draw(rng: PCG32 | PCG64) -> int:
    if isinstance(rng, PCG64):
        return rng.next_u64()
    return rng.next_u32()


def card_name(card: int) -> str:
    return RANKS[card // len(SUITS)] + SUITS[card % len(SUITS)]


def run_round(rng: PCG32 | PCG64) -> ReportRound:
    words = [_draw(rng) for _ in range(WORDS_PER_ROUND)]
    rng.retreat(WORDS_PER_ROUND)
    again = [_draw(rng) for _ in range(WORDS_PER_ROUND)]

    coins = "".join("TH"[rng.bounded(2)] for _ in range(NUM_COINS))
    rolls = [rng.bounded(6) + 1 for _ in range(NUM_ROLLS)]

    deck = list(range(NUM_CARDS))
    rng.shuffle(deck)
    cards = [card_name(c) for c in deck]

    return ReportRound(words, again, coins, rolls, cards)


def build_report(params: ReportParams) -> list[ReportRound]:
    rng = make_generator(params)
    return [run_round(rng) for _ in range(params.rounds)]


def _header(bits: int) -> list[str]:
    # State size counts the 64-bit words a generator holds: state and
    # increment per PCG32 stream.
    if bits == 32:
        name, result = "pcg32", "32-bit unsigned int (uint32)"
        state_type = "PCG32 (16 bytes)"
    else:
        name, result = "pcg32x2", "64-bit unsigned int (uint64)"
        state_type = "PCG64 (32 bytes)"
    return [
        f"{name} random:",
        f"      -  result:      {result}",
        "      -  period:      2^64   (* 2^63 streams)",
        f"      -  state type:  {state_type}",
        "      -  output func: XSH-RR",
        "",
    ]


def _format_words(label: str, words: list[int], bits: int) -> str:
    if bits == 32:
        return f"  {label}:" + "".join(f" 0x{w:08x}" for w in words)
    # Three 64-bit words per line.
    line = f"  {label}:"
    for i, w in enumerate(words):
        if i > 0 and i % 3 == 0:
            line += "\n\t"
        line += f" 0x{w:016x}"
    return line


def _format_cards(cards: list[str]) -> str:
    line = "  Cards:"
    for i, card in enumerate(cards):
        line += f" {card}"
        if (i + 1) % 22 == 0:
            line += "\n\t"
    return line


def format_rounds(params: ReportParams) -> str:
    lines = []
    label = f"{params.bits}bit"
    for n, rnd in enumerate(build_report(params), start=1):
        lines.append(f"Round {n}:")
        lines.append(_format_words(label, rnd.words, params.bits))
        lines.append(_format_words("Again", rnd.again, params.bits))
        lines.append("  Coins: " + rnd.coins)
        lines.append("  Rolls:" + "".join(f" {r}" for r in rnd.rolls))
        lines.append(_format_cards(rnd.cards))
    return "".join(line + "\n" for line in lines)


def format_report(params: ReportParams) -> str:
    """Header followed by every round, as printed by ``scripts/report.py``."""
    return "\n".join(_header(params.bits)) + "\n" + format_rounds(params)
