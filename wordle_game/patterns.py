"""
patterns.py

Scores guesses against the target word and folds the results into the
per-letter keyboard knowledge.

Each scored tile carries a LetterOutcome. Outcomes are ordered by how much
they tell the player about a letter:

    0 = unknown (never guessed)
    1 = absent
    2 = present (in the word, wrong position)
    3 = exact match

so the keyboard state for a letter is simply the max outcome seen so far.
"""

from enum import IntEnum
from typing import NamedTuple

import numpy as np


WORD_LENGTH = 5
MAX_GUESSES = 6
ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class LetterOutcome(IntEnum):
    UNKNOWN = 0
    ABSENT = 1
    PRESENT = 2
    EXACT_MATCH = 3


class ScoredLetter(NamedTuple):
    letter: str
    outcome: LetterOutcome


class GuessRecord(tuple):
    """An immutable row of (letter, outcome) pairs for one submitted guess."""

    __slots__ = ()

    def __new__(cls, letters):
        return super().__new__(
            cls,
            (ScoredLetter(letter, LetterOutcome(outcome)) for letter, outcome in letters),
        )

    @property
    def word(self) -> str:
        return "".join(tile.letter for tile in self)

    @property
    def outcomes(self) -> tuple:
        return tuple(tile.outcome for tile in self)

    @property
    def is_win(self) -> bool:
        return len(self) > 0 and all(
            tile.outcome == LetterOutcome.EXACT_MATCH for tile in self
        )

    def __repr__(self):
        return f"GuessRecord({self.word!r}, {[o.name for o in self.outcomes]})"


def letter_indices(word: str) -> np.ndarray:
    """Map a lowercase a-z word to alphabet indices 0..25."""
    try:
        raw = word.encode("ascii")
    except UnicodeEncodeError as exc:
        raise ValueError(f"word must be lowercase a-z: {word!r}") from exc

    indices = np.frombuffer(raw, dtype=np.uint8).astype(np.int64) - ord("a")
    if indices.size and (indices.min() < 0 or indices.max() >= len(ALPHABET)):
        raise ValueError(f"word must be lowercase a-z: {word!r}")
    return indices


def score(target: str, guess: str) -> GuessRecord:
    """
    Score a guess against the target word.

    This implementation matches standard Wordle duplicate-letter rules:

    1. First mark exact matches (correct letter in correct position).
       Each exact match consumes one instance of that letter from the target.

    2. Then mark present letters (correct letter, wrong position) only if
       unused instances of that letter remain in the target. Everything
       else is absent.

    Letter budgets live in a 26-slot array scoped to this call.
    """
    if len(target) != len(guess):
        raise ValueError(
            f"guess length {len(guess)} does not match target length {len(target)}"
        )

    target_idx = letter_indices(target)
    guess_idx = letter_indices(guess)

    budgets = np.bincount(target_idx, minlength=len(ALPHABET))
    result = [LetterOutcome.UNKNOWN] * len(guess)

    # First pass: mark exact matches and consume letters
    for i in range(len(guess)):
        if guess_idx[i] == target_idx[i]:
            result[i] = LetterOutcome.EXACT_MATCH
            budgets[guess_idx[i]] -= 1

    # Second pass: present where letters remain unused, absent otherwise
    for i in range(len(guess)):
        if result[i] != LetterOutcome.UNKNOWN:
            continue
        if budgets[guess_idx[i]] > 0:
            result[i] = LetterOutcome.PRESENT
            budgets[guess_idx[i]] -= 1
        else:
            result[i] = LetterOutcome.ABSENT

    return GuessRecord(zip(guess, result))


def new_knowledge() -> np.ndarray:
    """Keyboard knowledge for a fresh game: every letter unknown."""
    return np.full(len(ALPHABET), int(LetterOutcome.UNKNOWN), dtype=np.uint8)


def fold_knowledge(knowledge: np.ndarray, record: GuessRecord) -> np.ndarray:
    """
    Raise each guessed letter's slot to the best outcome seen for it.

    Updates ``knowledge`` in place and returns it. A slot is never lowered,
    so an exact match survives later guesses that score the same letter
    absent somewhere else.
    """
    indices = letter_indices(record.word)
    outcomes = np.array([int(o) for o in record.outcomes], dtype=np.uint8)
    np.maximum.at(knowledge, indices, outcomes)
    return knowledge
