# IN THIS FILE: ALL CONSTANTS

from pathcost.utils.enums import Heading

# -----------------------------------------------------------------------------
# 1. RUN LIMITS
# -----------------------------------------------------------------------------
# Standard crucible: turn whenever you like, at most 3 cells straight.
CRUCIBLE_MIN_RUN = 1
CRUCIBLE_MAX_RUN = 3

# Ultra crucible: at least 4 cells before a turn (or stopping), at most 10.
ULTRA_MIN_RUN = 4
ULTRA_MAX_RUN = 10

# -----------------------------------------------------------------------------
# 2. SEARCH
# -----------------------------------------------------------------------------
# Two symmetric pseudo-states at the start: first move may go either way.
DEFAULT_INITIAL_HEADINGS = (Heading.EAST, Heading.NORTH)

# Sentinel stored in the dense cost table for "not reached yet".
UNREACHED = -1

# -----------------------------------------------------------------------------
# 3. TEXT GRIDS
# -----------------------------------------------------------------------------
DIGITS = "0123456789"

# -----------------------------------------------------------------------------
# 4. SERVER
# -----------------------------------------------------------------------------
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 5000
