"""
Shared constants for path-utils.

Holds the diagnostic messages, the path regular expressions and the
default options used across the package.
"""

import re

# Diagnostic messages, grouped by component
CREATE_PATH_MESSAGES = {
    "EMPTY_PATH": "Path is Empty",
    "EMPTY_DIR_IN_PATH": "Path contains an empty name | Like : 'path/to//path' or 'path/to/ /path'",
    "DIR_CREATION_ERROR": "Error To Create Directory",
    "FILE_CREATION_ERROR": "Error To Create File",
}

JSON_FILE_MESSAGES = {
    "ID": "JsonFile ERROR :",
    "EMPTY_PATH": "File Path must be not empty",
    "INVALID_TYPE": "File must be json type '.json'",
    "NULL_DATA": "Data must be not null",
    "READ_ERROR": "in Read data From",
    "WRITE_ERROR": "in Write data In",
}

TEXT_FILE_MESSAGES = {
    "ID": "TextFile ERROR :",
    "EMPTY_PATH": "File Path must be not empty",
    "INVALID_TYPE": "File must be txt type '.txt'",
    "READ_ERROR": "in Read data From",
    "WRITE_ERROR": "in Write data In",
}

READ_DIRECTORY_MESSAGES = {
    "ID": "READDIR ERROR:",
    "INVALID_PATH": "Invalid directory path",
}

# Path separator handled by the normalizer
SEPARATOR = "/"

# Interior separator runs, except one following a drive colon (D:/path)
SPLIT_DIRS = re.compile(r"(?<!:)/+")
PATH_START_END_SLASHES = re.compile(r"(^/+|/+$)")
JSON_EXTENSION = re.compile(r"\.json$", re.IGNORECASE)
TXT_EXTENSION = re.compile(r"\.txt$", re.IGNORECASE)

# Compact separators, matching JSON.stringify output
JSON_SEPARATORS = (",", ":")

FILE_ENCODING = "utf-8"

DEFAULT_DISPLAY_INFO = True
