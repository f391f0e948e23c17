"""Constants for linelimit - no magic strings/numbers allowed elsewhere."""

# Configuration
DEFAULT_MAX_LENGTH = 120
OPTION_MAX_LENGTH = "max_length"
MAX_LENGTH_ENV_VAR = "LINELIMIT_MAX_LENGTH"

# Line handling
LINE_BREAK = "\n"

# Marker appended after an over-length line
MARKER_SEPARATOR = " "
MARKER_TEXT = "# Line too long"

# Rule identity
RULE_NAME = "linelimit/line_length_limit"
RULE_SUMMARY_FMT = "Line must be no longer than {max_length} characters."
RULE_DESCRIPTION_FMT = (
    "Check that no line is longer than {max_length} characters. "
    "Doesn't fix anything. Only annotates lines for the check command "
    "or with the --dry-run flag."
)
# Lower than the single_line_comment_style rule
RULE_PRIORITY = -32

# Execution mode triggers found in process arguments
CHECK_COMMAND = "check"
DRY_RUN_FLAG = "--dry-run"

# File discovery
HIDDEN_PREFIX = "."
FILE_ENCODING = "utf-8"

# Report formats
VIOLATION_FMT = "{path}:{line}: {length} > {max_length}"
DIFF_ORIGINAL_FMT = "a/{path}"
DIFF_ANNOTATED_FMT = "b/{path}"

# Error messages
ERR_UNKNOWN_OPTION = "Unknown configuration option(s): {names}"
ERR_MAX_LENGTH_TYPE = "max_length must be an integer, got {value!r}"
ERR_MAX_LENGTH_RANGE = "max_length must be a positive integer, got {value}"

# Regex patterns for the generic tokenizer, tried in order
COMMENT_PATTERN = r"#[^\n]*|//[^\n]*|/\*[\s\S]*?\*/"
STRING_PATTERN = (
    r'"""[\s\S]*?"""'
    r"|'''[\s\S]*?'''"
    r'|"(?:\\.|[^"\\\n])*"'
    r"|'(?:\\.|[^'\\\n])*'"
)
WHITESPACE_PATTERN = r"\s+"
WORD_PATTERN = r"\w+"
PUNCTUATION_PATTERN = r"[\s\S]"
