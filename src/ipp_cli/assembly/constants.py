"""Shared constants for source assembly.

Defaults mirror the layout of the original single-unit build: fragments and
the primary file live under ``src/`` and the flattened file is written next to
it at the base directory.
"""

# Literal token a fragment may carry on its first line so it compiles on its
# own; it is dropped when the fragment is inlined.
HEADER_TOKEN = '#include "ipp_inc.h"'

# Marker searched for in the primary file, formatted with the fragment name
MARKER_TEMPLATE = '#include "{name}"'

NEWLINE_BYTE = 10  # b"\n"

DEFAULT_BASE_DIR = "."
DEFAULT_SOURCE_DIR = "src"
DEFAULT_PRIMARY = "bttrack.cpp"
DEFAULT_OUTPUT = "bttrack.cpp"  # base-dir relative
DEFAULT_FRAGMENTS = ("ipp_inc.ipp", "output.ipp", "slice.ipp", "utils.ipp")

CONFIG_FILENAME = "ipp.yml"

ENCODING = "utf-8"
