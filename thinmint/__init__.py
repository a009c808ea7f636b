"""Bitboard chess core: bitboards, board state, attack generation and evaluation terms."""

__version__ = "0.1.0"
__all__ = ["bitboard", "board", "attacks", "evaluation"]