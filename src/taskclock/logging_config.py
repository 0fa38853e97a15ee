"""
Logging Configuration
Routes the 'taskclock' loggers to the Textual devtools console.
"""
import logging

from textual.logging import TextualHandler


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configures the logger for the 'taskclock' namespace.

    The terminal is owned by the TUI while the app runs, so records are sent
    to Textual's log (``textual console``) rather than to stdout.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
    """
    logger = logging.getLogger("taskclock")
    logger.setLevel(level)

    # Avoid duplicate records when the app is launched more than once in a process
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = TextualHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')
    )
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging initialized.")
