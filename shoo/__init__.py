"""Blackjack rules engine - 100% UI-agnostic."""

from shoo.cards import Card, Shoe, Rank, Suit
from shoo.hand import Blackjack, Bust, Hand, Hard, Outcome, Soft, evaluate_hands
from shoo.game import Table, TableState

__all__ = [
    "Card",
    "Shoe",
    "Rank",
    "Suit",
    "Hand",
    "Hard",
    "Soft",
    "Blackjack",
    "Bust",
    "Outcome",
    "evaluate_hands",
    "Table",
    "TableState",
]
