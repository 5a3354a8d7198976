r"""Shell-like tokenization of axis value strings.

Values are split on runs of whitespace, which includes vertical tab, form
feed and Unicode spaces such as U+00A0. Double or single quotes group text
that contains whitespace and are stripped from the token, and a backslash
outside single quotes escapes the next character::

    1 2 3        -> ["1", "2", "3"]
    1 "2 3"      -> ["1", "2 3"]
    a"b c" d     -> ["ab c", "d"]

Malformed input never raises. A quote left open at the end of the value is
closed there, so everything after it becomes one token, and a trailing lone
backslash is kept as a literal backslash::

    1 "2 3       -> ["1", "2 3"]
    a b\         -> ["a", "b\\"]
"""

import logging
import shlex


logger = logging.getLogger(__name__)

# Every character str.isspace() accepts (the last one is U+3000), not only
# the ASCII set shlex separates on by default
WHITESPACE = "".join(ch for ch in map(chr, range(0x3001)) if ch.isspace())

# Each repair closes one open quote or escape; two are enough for any input
# ("abc\ needs the escape completed and then the quote closed).
MAX_REPAIRS = 3


def _split(value: str) -> tuple[list[str], str | None]:
    """Split ``value`` and return the tokens, or the lexer state on failure."""
    lexer = shlex.shlex(value, posix=True)
    lexer.whitespace = WHITESPACE
    lexer.whitespace_split = True
    lexer.commenters = ""
    try:
        return list(lexer), None
    except ValueError:
        # lexer.state is the open quote character or the escape character
        return [], lexer.state


def tokenize_axis_values(value: str | None) -> list[str]:
    """Split an axis value string into tokens in order of appearance.

    Args:
        value: Raw value of the source variable

    Returns:
        list[str]: Tokens with quotes removed; duplicates are kept
    """
    if not value:
        return []

    candidate = value
    for attempt in range(MAX_REPAIRS):
        tokens, open_state = _split(candidate)
        if open_state is None:
            if attempt:
                logger.warning(
                    "Unterminated quote or escape in axis value %r, closed at end of input",
                    value,
                )
            return tokens
        candidate += open_state

    # Not reachable for shlex's posix lexer; keep the whole value as one token
    logger.error("Could not tokenize axis value %r, using it verbatim", value)
    return [value]
