import re

# Token separators: any whitespace, '.', ',', "'" and ';'.
# Each occurrence splits, so runs of delimiters yield empty tokens.
DELIMITERS = re.compile(r"[\s.,';]")

# Text unit for files read by the loader: "line" or "paragraph"
TEXT_UNIT: str = "line"
TEXT_UNITS = ("line", "paragraph")

# Only files with this suffix are read from a root folder
FILE_SUFFIX: str = ".txt"
ENCODING: str = "utf-8"

# Separator used by LinkedList.__str__
RENDER_SEPARATOR: str = "->"

# Progress logging in the loader (set CONCORDANCE_VERBOSE=1 to enable)
VERBOSE_ENV: str = "CONCORDANCE_VERBOSE"
PROGRESS_EVERY_FILES: int = 500
