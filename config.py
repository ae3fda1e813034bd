"""
Game configuration and constants.
"""

import logging

# Piece kinds (one per tetromino shape)
PIECE_KINDS = ["I", "O", "T", "L", "J", "S", "Z"]

# Container sizes
QUEUE_CAPACITY = 5   # pieces visible in the "next" preview
STACK_CAPACITY = 3   # reserve slots
INVERT_BLOCK_SIZE = 3  # at most this many pieces exchanged by an inversion

# Ids handed out by a fresh generator start here
FIRST_PIECE_ID = 1

# Colors for plotting
COLOR_MAP = {
    "I": "#00bcd4",   # cyan
    "O": "#fdd835",   # yellow
    "T": "#8e24aa",   # purple
    "L": "#fb8c00",   # orange
    "J": "#1e88e5",   # blue
    "S": "#43a047",   # green
    "Z": "#e53935",   # red
}

# Most recent command results kept per session
EVENT_LOG_SIZE = 100

# Monte Carlo playouts shown in the dashboard
SIMULATION_GAMES = 200
SIMULATION_STEPS = 50

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s - %(name)-14s - %(levelname)-8s - %(message)s"
