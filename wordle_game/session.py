"""
session.py

One game of up to six guesses against a fixed target word.

The session owns the scored guess history and the keyboard knowledge. It
is mutated only through GameSession.guess(); renderers read it.
"""

import random

from wordle_game.patterns import (
    ALPHABET,
    MAX_GUESSES,
    LetterOutcome,
    fold_knowledge,
    new_knowledge,
    score,
)
from wordle_game.words import choose_target, valid_words


ACTIVE = "active"
WON = "won"
LOST = "lost"


class GameError(ValueError):
    """A rejected guess. The session is left exactly as it was."""


class InvalidWord(GameError):
    def __init__(self, word):
        super().__init__(f"'{word}' is not a valid word")
        self.word = word


class OutOfGuesses(GameError):
    def __init__(self):
        super().__init__("out of guesses")


class GameSession:
    def __init__(self, target, valid):
        self._target = target
        self.valid = frozenset(valid) | {target}
        self.history = []
        self.knowledge = new_knowledge()
        self.won = False
        self.over = False

    @property
    def target(self):
        return self._target

    @property
    def turn(self):
        """1-based number of the next guess."""
        return len(self.history) + 1

    @property
    def state(self):
        if self.won:
            return WON
        if self.over:
            return LOST
        return ACTIVE

    def is_over(self):
        return self.over

    def has_won(self):
        return self.won

    def knowledge_for(self, letter):
        letter = letter.lower()
        if len(letter) != 1 or letter not in ALPHABET:
            raise ValueError(f"letter must be a single a-z character: {letter!r}")
        return LetterOutcome(int(self.knowledge[ALPHABET.index(letter)]))

    def keyboard(self):
        """Aggregated outcome for every letter, keyed by letter."""
        return {letter: self.knowledge_for(letter) for letter in ALPHABET}

    def guess(self, raw):
        """
        Submit one guess.

        Raises OutOfGuesses once the game has finished and InvalidWord for
        anything outside the dictionary (including malformed input). A
        rejected guess does not use up a turn.
        """
        if self.over or len(self.history) >= MAX_GUESSES:
            raise OutOfGuesses()

        word = raw.strip().lower()
        if len(word) != len(self._target) or word not in self.valid:
            raise InvalidWord(word)

        record = score(self._target, word)
        self.history.append(record)
        fold_knowledge(self.knowledge, record)

        if word == self._target:
            self.won = True
            self.over = True
        elif len(self.history) == MAX_GUESSES:
            self.over = True

        return record


def new_game(answers, allowed, choose=random.choice):
    """Start a session with a target drawn from ``answers`` by ``choose``."""
    target = choose_target(answers, choose)
    return GameSession(target, valid_words(answers, allowed))
