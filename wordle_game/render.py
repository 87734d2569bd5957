"""
render.py

Terminal drawing for a game session: the guess board, the keyboard
heatmap, the turn prompt and the end-of-game recap.

Everything here returns strings and only reads the session.
"""

from wordle_game.patterns import MAX_GUESSES, WORD_LENGTH, LetterOutcome


KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

EMOJI = {
    LetterOutcome.EXACT_MATCH: "🟩",
    LetterOutcome.PRESENT: "🟨",
    LetterOutcome.ABSENT: "⬛",
}


def green(s):
    return f"\x1b[1m\x1b[42m\x1b[30m{s}\x1b[0m"


def yellow(s):
    return f"\x1b[1m\x1b[43m\x1b[30m{s}\x1b[0m"


def grey(s):
    return f"\x1b[1m\x1b[90m\x1b[30m{s}\x1b[0m"


def _border(left, mid, right):
    return left + mid.join(["───"] * WORD_LENGTH) + right


def _tile(tile):
    cell = f" {tile.letter} "
    if tile.outcome == LetterOutcome.EXACT_MATCH:
        return green(cell)
    if tile.outcome == LetterOutcome.PRESENT:
        return yellow(cell)
    return cell


def render_board(session):
    lines = [_border("┌", "┬", "┐")]
    empty_row = "│" + "   │" * WORD_LENGTH

    for row in range(MAX_GUESSES):
        if row < len(session.history):
            lines.append("│" + "".join(_tile(t) + "│" for t in session.history[row]))
        else:
            lines.append(empty_row)
        if row < MAX_GUESSES - 1:
            lines.append(_border("├", "┼", "┤"))

    lines.append(_border("└", "┴", "┘"))
    return "\n".join(lines)


def _key(letter, outcome):
    if outcome == LetterOutcome.EXACT_MATCH:
        return green(letter)
    if outcome == LetterOutcome.PRESENT:
        return yellow(letter)
    if outcome == LetterOutcome.ABSENT:
        return grey(letter)
    return letter


def render_keyboard(keyboard):
    """Draw the QWERTY heatmap from a {letter: LetterOutcome} mapping."""
    lines = []
    for indent, row in enumerate(KEYBOARD_ROWS):
        keys = " ".join(_key(letter, keyboard[letter]) for letter in row)
        lines.append(" " * indent + keys)
    return "\n".join(lines)


def render(session):
    return render_board(session) + "\n" + render_keyboard(session.keyboard())


def prompt(session):
    return f"guess {session.turn}/{MAX_GUESSES}: "


def share_grid(history):
    return "\n".join("".join(EMOJI[o] for o in record.outcomes) for record in history)


def summary(session):
    """End-of-game recap; empty while the game is still running."""
    if session.has_won():
        return "you win!\n" + share_grid(session.history)
    if session.is_over():
        return (
            f"out of guesses, the word was {session.target}\n"
            + share_grid(session.history)
        )
    return ""
