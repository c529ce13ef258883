"""sortingtool constants."""

from __future__ import annotations

# Command-line flags, compared lowercased
SORTING_TYPE_FLAG = "-sortingtype"
DATA_TYPE_FLAG = "-datatype"
INPUT_FILE_FLAG = "-inputfile"
OUTPUT_FILE_FLAG = "-outputfile"
FLAG_PREFIX = "-"

# Human-readable flag value names, used in "No <name> defined!" errors
FLAG_VALUE_NAMES = {
    SORTING_TYPE_FLAG: "sorting type",
    DATA_TYPE_FLAG: "data type",
    INPUT_FILE_FLAG: "input file",
    OUTPUT_FILE_FLAG: "output file",
}

DEFAULT_SORTING_TYPE = "natural"
DEFAULT_DATA_TYPE = "word"
FILE_ENCODING = "utf-8"

# Accepted range of the "long" data type (signed 64-bit)
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

LINE_DELIMITER = "\n"
WORD_DELIMITER = " "
