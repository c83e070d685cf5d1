"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from fenkit.core.notation import STARTING_FEN, Fen, parse_fen

# Positions taken from real games; every one is in canonical form.
CANONICAL_FENS = (
    STARTING_FEN,
    "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w Kkq c6 0 2",
    "rnbqkbnr/pp1ppppp/8/2p5/4P3/8/PPPP1PPP/RNBQKBNR w KQkq c6 0 1",
    "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
    "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
    "r1bqkbnr/pppp1ppp/2n5/4p3/3P4/5N2/PPP1PPPP/RNBQKB1R b KQ - 2 3",
    "8/8/4k3/8/8/4K3/8/8 w - - 0 1",
    "8/8/8/8/8/8/8/8 w Qk - 0 1",
)


@pytest.fixture
def start() -> Fen:
    """The standard starting position, freshly parsed."""
    return parse_fen(STARTING_FEN)


@pytest.fixture(params=CANONICAL_FENS)
def canonical_fen(request: pytest.FixtureRequest) -> str:
    return request.param
