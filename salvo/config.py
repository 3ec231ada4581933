"""Default settings for salvo games."""

import logging

# Grid size as (width, height).
DEFAULT_DIMENSIONS = (10, 10)

# (name, length) pairs for the standard five-craft fleet.
STANDARD_FLEET = [
    ("aircraft carrier", 5),
    ("battleship", 4),
    ("cruiser", 3),
    ("submarine", 3),
    ("destroyer", 2),
]

# Random placement tries per craft before giving up.
MAX_PLACEMENT_ATTEMPTS = 1000

# Games simulated by the CLI in batch mode.
NUM_GAMES = 100

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level=logging.INFO):
    """Route salvo's log records to stderr. Only the CLI calls this."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
