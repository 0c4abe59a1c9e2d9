# ==============================================
# Tests for ConsoleDialogs
# ==============================================

import io

import pytest

from hdr_manager.host import ConsoleDialogs, MessageBoxImage, MessageBoxOption


@pytest.fixture
def options():
    return [
        MessageBoxOption("OK", is_default=True, is_cancel=True),
        MessageBoxOption("Don't show again"),
    ]


def show(answers, options):
    replies = iter(answers)

    def fake_input(prompt):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError

    output = io.StringIO()
    dialogs = ConsoleDialogs(input_func=fake_input, output=output)
    choice = dialogs.show_message("Install it", "", MessageBoxImage.WARNING, options)
    return choice, output.getvalue()


def test_numbered_choice(options):
    choice, output = show(["2"], options)

    assert choice is options[1]
    assert "[WARNING] Install it" in output
    assert "1. OK (default)" in output
    assert "2. Don't show again" in output


def test_empty_answer_picks_default(options):
    choice, _ = show([""], options)

    assert choice is options[0]


def test_invalid_answer_asks_again(options):
    choice, output = show(["9", "abc", "2"], options)

    assert choice is options[1]
    assert output.count("Please enter a number between 1 and 2.") == 2


def test_end_of_input_picks_cancel(options):
    choice, _ = show([], options)

    assert choice is options[0]


def test_options_compare_by_identity():
    assert MessageBoxOption("OK") != MessageBoxOption("OK")


def test_no_options_rejected():
    with pytest.raises(ValueError):
        ConsoleDialogs(input_func=lambda prompt: "").show_message("text", "", MessageBoxImage.NONE, [])
