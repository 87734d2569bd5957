from wordle_game.patterns import score
from wordle_game.render import (
    green,
    grey,
    prompt,
    render,
    render_board,
    render_keyboard,
    share_grid,
    summary,
    yellow,
)
from wordle_game.session import GameSession


WORDS = {"crane", "slate", "those", "sheep", "abide", "store", "pride", "cache"}
EMPTY_ROW = "│   │   │   │   │   │"


def test_empty_board():
    board = render_board(GameSession("crane", WORDS))
    lines = board.split("\n")
    assert lines[0] == "┌───┬───┬───┬───┬───┐"
    assert lines[-1] == "└───┴───┴───┴───┴───┘"
    assert lines.count(EMPTY_ROW) == 6
    assert lines.count("├───┼───┼───┼───┼───┤") == 5


def test_board_colors_tiles():
    session = GameSession("crane", WORDS)
    session.guess("cache")
    board = render_board(session)
    first_row = board.split("\n")[1]
    assert first_row.startswith("│" + green(" c ") + "│")
    assert yellow(" a ") in first_row
    assert "│ h │" in first_row
    assert board.count(EMPTY_ROW) == 5


def test_fresh_keyboard():
    session = GameSession("crane", WORDS)
    assert render_keyboard(session.keyboard()).split("\n") == [
        "q w e r t y u i o p",
        " a s d f g h j k l",
        "  z x c v b n m",
    ]


def test_keyboard_heatmap():
    session = GameSession("crane", WORDS)
    session.guess("slate")
    keyboard = render_keyboard(session.keyboard())
    assert grey("s") in keyboard
    assert yellow("a") not in keyboard
    assert green("a") in keyboard
    assert green("e") in keyboard
    assert "q w" in keyboard


def test_render_has_board_and_keyboard():
    session = GameSession("crane", WORDS)
    out = render(session)
    assert out.startswith("┌")
    assert out.endswith("  z x c v b n m")


def test_prompt_counts_turns():
    session = GameSession("crane", WORDS)
    assert prompt(session) == "guess 1/6: "
    session.guess("slate")
    assert prompt(session) == "guess 2/6: "


def test_share_grid():
    history = [score("abide", "daddy"), score("abide", "abide")]
    assert share_grid(history) == "⬛🟨⬛🟩⬛\n🟩🟩🟩🟩🟩"


def test_summary_win():
    session = GameSession("crane", WORDS)
    session.guess("slate")
    session.guess("crane")
    assert summary(session) == "you win!\n⬛⬛🟩⬛🟩\n🟩🟩🟩🟩🟩"


def test_summary_loss_reveals_target():
    session = GameSession("crane", WORDS)
    for word in ["slate", "those", "sheep", "abide", "store", "pride"]:
        session.guess(word)
    text = summary(session)
    assert text.startswith("out of guesses, the word was crane\n")
    assert len(text.split("\n")) == 7


def test_summary_empty_while_active():
    assert summary(GameSession("crane", WORDS)) == ""
