"""Tests for the console front end."""

import io
from random import Random

import pytest

from conftest import cards
from console_ui import main as main_module
from console_ui.ui import INVALID_INPUT_HINT, PROMPT, ConsoleUI
from core.cards import Deck
from core.game import BlackjackGame, EndState, PlayerAction
from core.participant import Participant


def _scripted_input(*lines: str):
    """input() replacement that returns the given lines and records prompts."""
    remaining = iter(lines)
    prompts = []

    def _input(prompt: str) -> str:
        prompts.append(prompt)
        return next(remaining)

    _input.prompts = prompts  # type: ignore[attr-defined]
    return _input


class TestAskAction:
    """Tests for the hit/stand prompt."""

    def test_valid_input(self):
        out = io.StringIO()
        ui = ConsoleUI(input_fn=_scripted_input("h"), out=out)
        assert ui.ask_action(Participant("Player")) is PlayerAction.HIT
        assert out.getvalue() == ""

    def test_reprompts_on_invalid_input(self):
        """Test bad input is retried until a valid command arrives."""
        out = io.StringIO()
        input_fn = _scripted_input("x", "", "maybe", "s")
        ui = ConsoleUI(input_fn=input_fn, out=out)

        assert ui.ask_action(Participant("Player")) is PlayerAction.STAND
        assert input_fn.prompts == [PROMPT] * 4
        assert out.getvalue().count(INVALID_INPUT_HINT) == 3

    def test_eof_propagates(self):
        """Test closed input is not swallowed."""

        def _closed(prompt):
            raise EOFError

        ui = ConsoleUI(input_fn=_closed, out=io.StringIO())
        with pytest.raises(EOFError):
            ui.ask_action(Participant("Player"))


class TestOutcome:
    """Tests for outcome messages."""

    @pytest.mark.parametrize(
        "outcome, message",
        [
            (EndState.WIN, "You won!!!"),
            (EndState.TIE, "A tie!"),
            (EndState.LOSS, "You lost :("),
        ],
    )
    def test_messages(self, outcome, message):
        out = io.StringIO()
        ConsoleUI(out=out).show_outcome(outcome)
        assert out.getvalue() == message + "\n"


class TestFullRound:
    """Tests rendering a whole round."""

    def _play(self, tokens, *inputs):
        out = io.StringIO()
        ui = ConsoleUI(input_fn=_scripted_input(*inputs), out=out)
        game = BlackjackGame(deck=Deck.stacked(cards(*tokens)))
        game.subscribe(ui.handle_event)
        outcome = game.play_round(ui.ask_action)
        ui.show_outcome(outcome)
        return outcome, out.getvalue()

    def test_stand_and_tie(self):
        outcome, text = self._play(["7C", "10D", "9H", "5S", "7H"], "s")

        assert outcome == EndState.TIE
        assert text.startswith("Welcome to Blackjack!\n")
        assert "Dealer draws a card: 7♣" in text
        assert "Player draws a card: 10♦" in text
        assert "Player draws a card: 9♥" in text
        assert "Player hand: 10♦ 9♥\nScore: 19" in text
        assert "Player's turn" in text
        assert "Dealer's turn" in text
        assert "Dealer Stands" in text
        assert "Dealer hand: 7♣ 5♠ 7♥\nScore: 19" in text
        assert text.endswith("A tie!\n")

    def test_hit_and_bust(self):
        outcome, text = self._play(["5C", "10S", "6H", "6D"], "?", "h")

        assert outcome == EndState.LOSS
        assert INVALID_INPUT_HINT in text
        assert "Player hand: 10♠ 6♥ 6♦\nScore: 22" in text
        assert "Bust!" in text
        assert "Dealer's turn" not in text
        assert text.endswith("You lost :(\n")

    def test_dealer_bust(self):
        outcome, text = self._play(["6C", "10S", "8H", "10D", "9H"], "s")

        assert outcome == EndState.WIN
        assert "Dealer Stands" not in text
        assert text.index("Dealer hand: 6♣ 10♦ 9♥") < text.index("Bust!")
        assert text.endswith("You won!!!\n")

    def test_two_aces(self):
        outcome, text = self._play(["5C", "AS", "AH"])

        assert outcome == EndState.LOSS
        assert "Bust!" in text
        assert "Player's turn" not in text


class TestMain:
    """Tests for the process entry point."""

    def test_plays_one_round(self, monkeypatch, capsys):
        """Test main plays a seeded round and prints an outcome."""
        monkeypatch.setenv("BLACKJACK_SEED", "42")
        monkeypatch.setattr("builtins.input", lambda prompt: "s")

        main_module.main()

        text = capsys.readouterr().out
        assert text.startswith("Welcome to Blackjack!")
        assert any(message in text for message in ("You won!!!", "A tie!", "You lost :("))

    def test_seed_reproducible(self, monkeypatch, capsys):
        """Test the same seed deals the same round."""
        monkeypatch.setenv("BLACKJACK_SEED", "7")
        monkeypatch.setattr("builtins.input", lambda prompt: "s")

        main_module.main()
        first = capsys.readouterr().out
        main_module.main()
        second = capsys.readouterr().out

        assert first == second

    def test_aborts_on_eof(self, monkeypatch, capsys):
        """Test closed stdin ends the program with a failure status."""

        def _closed(prompt):
            raise EOFError

        # Avoid the two-ace opening, which never prompts
        monkeypatch.setattr(main_module, "create_rng", lambda seed: Random(1))
        monkeypatch.setattr(
            main_module,
            "BlackjackGame",
            lambda rng: BlackjackGame(deck=Deck.stacked(cards("5C", "10S", "6H"))),
        )
        monkeypatch.setattr("builtins.input", _closed)

        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

        assert exc_info.value.code == 1
        assert "Game aborted." in capsys.readouterr().out
