"""
wordle.py

Terminal Wordle.

A five-letter target word is drawn from the answer list; you get six
guesses. After each guess the board shows:

    green  = right letter, right position
    yellow = in the word, wrong position
    plain  = not in the word (greyed out on the keyboard)

Optional:
-seed N: seed the random target choice for a reproducible game.
-answers PATH / -allowed PATH: use other word lists (one word per line).
"""

import argparse
import random
import sys

from wordle_game.render import prompt, render, summary
from wordle_game.session import GameError, OutOfGuesses, new_game
from wordle_game.words import ALLOWED_PATH, ANSWERS_PATH, load_words


def play(session, lines):
    """
    Run guesses from ``lines`` until the game ends or input runs out.

    Rejected guesses are reported and re-prompted; they never end the game.
    """
    print(render(session))
    print(prompt(session), end="", flush=True)

    for line in lines:
        try:
            session.guess(line)
        except OutOfGuesses as exc:
            print(exc)
            break
        except GameError as exc:
            print(exc)

        print(render(session))
        if session.is_over():
            break
        print(prompt(session), end="", flush=True)
    else:
        # input ended mid-game
        print()

    return session


def parse_args():
    parser = argparse.ArgumentParser(
        description="Guess the five-letter word in six tries."
    )
    parser.add_argument(
        "-seed",
        type=int,
        default=None,
        help="Seed for the target word choice (default: system entropy).",
    )
    parser.add_argument(
        "-answers",
        type=str,
        default=str(ANSWERS_PATH),
        help="Word list the target is drawn from.",
    )
    parser.add_argument(
        "-allowed",
        type=str,
        default=str(ALLOWED_PATH),
        help="Extra words accepted as guesses but never chosen as the target.",
    )
    return parser.parse_args()


def main():
    args = parse_args()

    try:
        answers, allowed = load_words(args.answers, args.allowed)
    except (OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    rng = random.Random(args.seed)
    session = new_game(answers, allowed, choose=rng.choice)

    # undecodable bytes become U+FFFD and are rejected as invalid words
    sys.stdin.reconfigure(errors="replace")
    play(session, sys.stdin)

    if session.is_over():
        print(summary(session))


if __name__ == "__main__":
    main()
