"""Tests for the demonstration report against the reference example output."""

from pathlib import Path

import pytest

from pcgrng.pcg32 import PCG32
from pcgrng.pcg64 import PCG64
from pcgrng.report import (
    NUM_CARDS,
    NUM_COINS,
    NUM_ROLLS,
    ReportParams,
    build_report,
    card_name,
    format_report,
    format_rounds,
    make_generator,
)

TESTDATA = Path(__file__).parent / "testdata"


def _fixture(bits: int) -> str:
    return (TESTDATA / f"report{bits}_seed42_seq54.txt").read_text()


@pytest.mark.parametrize("bits", [32, 64])
def test_rounds_match_reference(bits):
    assert format_rounds(ReportParams(bits=bits)) == _fixture(bits)


HEADERS = {
    32: (
        "pcg32 random:\n"
        "      -  result:      32-bit unsigned int (uint32)\n"
        "      -  period:      2^64   (* 2^63 streams)\n"
        "      -  state type:  PCG32 (16 bytes)\n"
        "      -  output func: XSH-RR\n"
        "\n"
    ),
    64: (
        "pcg32x2 random:\n"
        "      -  result:      64-bit unsigned int (uint64)\n"
        "      -  period:      2^64   (* 2^63 streams)\n"
        "      -  state type:  PCG64 (32 bytes)\n"
        "      -  output func: XSH-RR\n"
        "\n"
    ),
}


@pytest.mark.parametrize("bits", [32, 64])
def test_report_is_header_then_rounds(bits):
    text = format_report(ReportParams(bits=bits))
    assert text == HEADERS[bits] + _fixture(bits)


def test_again_repeats_words():
    for rnd in build_report(ReportParams(bits=64, seed=1, sequence=2, rounds=3)):
        assert rnd.again == rnd.words


def test_round_shapes():
    (rnd,) = build_report(ReportParams(rounds=1))
    assert len(rnd.coins) == NUM_COINS
    assert set(rnd.coins) <= {"H", "T"}
    assert len(rnd.rolls) == NUM_ROLLS
    assert all(1 <= r <= 6 for r in rnd.rolls)
    assert sorted(rnd.cards) == sorted(card_name(c) for c in range(NUM_CARDS))


def test_zero_rounds():
    assert build_report(ReportParams(rounds=0)) == []
    assert format_rounds(ReportParams(rounds=0)) == ""


def test_card_names():
    assert card_name(0) == "Ah"
    assert card_name(3) == "As"
    assert card_name(51) == "Ks"


def test_make_generator():
    assert make_generator(ReportParams(bits=32)) == PCG32().seed(42, 54)
    assert make_generator(ReportParams(bits=64)) == PCG64().seed(42, 42, 54, 54)


@pytest.mark.parametrize("kwargs", [{"bits": 16}, {"rounds": -1}])
def test_invalid_params(kwargs):
    with pytest.raises(ValueError):
        ReportParams(**kwargs)
