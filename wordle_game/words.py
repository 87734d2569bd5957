"""
words.py

Handles loading and organizing the word lists.
"""

import random
from pathlib import Path

from wordle_game.patterns import ALPHABET, WORD_LENGTH


# Bundled lists live next to the package, independent of the working directory.
DATA_DIR = Path(__file__).resolve().parent.parent / "data"
ANSWERS_PATH = DATA_DIR / "answers.txt"
ALLOWED_PATH = DATA_DIR / "allowed.txt"


def is_well_formed(word):
    return len(word) == WORD_LENGTH and all(c in ALPHABET for c in word)


def load_word_list(path):
    """Load a newline-separated word list into a Python list."""
    words = []
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            word = line.strip().lower()
            if not word:
                continue
            if not is_well_formed(word):
                raise ValueError(
                    f"{path}:{lineno}: not a {WORD_LENGTH}-letter word: {word!r}"
                )
            words.append(word)
    return words


def load_words(answers_path=ANSWERS_PATH, allowed_path=ALLOWED_PATH):
    """
    Returns:
        answers: list of words that may be chosen as the target
        allowed: list of extra words accepted as guesses only
    """
    answers = load_word_list(answers_path)
    allowed = load_word_list(allowed_path)
    if not answers:
        raise ValueError(f"no candidate target words in {answers_path}")
    return answers, allowed


def valid_words(answers, allowed):
    """Every word accepted as a guess: targets plus the extended dictionary."""
    return frozenset(answers) | frozenset(allowed)


def choose_target(answers, choose=random.choice):
    """Pick the target word uniformly from the candidate list."""
    if not answers:
        raise ValueError("cannot choose a target from an empty word list")
    return choose(list(answers))
