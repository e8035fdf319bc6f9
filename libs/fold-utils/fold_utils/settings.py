#
# Logging
#

LOGGER_NAME = "fold"
LOGGER_PREFIX = "fold"
DEFAULT_VERBOSITY = 1  # 0: ERROR, 1: INFO, 2: DEBUG

#
# Combiners
#

DEFAULT_JOIN_SEPARATOR = ","

#
# Trace rendering
#

TRACE_TEMPLATE = "trace.md.j2"
MAX_CELL_LEN = 60  # characters shown per table cell before cutting
