# Terminal symbol appended to every indexed text. Must sort before every
# alphabet symbol.
SENTINEL = "$"

# Legacy list form of "no match".
NO_MATCH = -1

# Index held by internal suffix tree nodes.
UNSET_INDEX = -1

DEFAULT_SAMPLE_RATE = 1
DEFAULT_MISMATCHES = 1
DEFAULT_PROCESSES = 4
