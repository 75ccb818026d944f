"""Main entry point for console blackjack."""

import sys

from config import load_config
from console_ui.ui import ConsoleUI
from core.cards import create_rng
from core.game import BlackjackGame
from logging_utils import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Play one round and exit."""
    config = load_config()
    setup_logging(config.logging.level)

    rng = create_rng(config.game.seed)
    game = BlackjackGame(rng=rng)
    ui = ConsoleUI()
    game.subscribe(ui.handle_event)

    try:
        outcome = game.play_round(ui.ask_action)
    except (EOFError, KeyboardInterrupt):
        logger.info("Round aborted in state %s", game.state)
        print("\nGame aborted.")
        sys.exit(1)

    ui.show_outcome(outcome)


if __name__ == "__main__":
    main()
