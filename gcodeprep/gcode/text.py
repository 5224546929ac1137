"""
Text-level GCODE preprocessing

Comment stripping, whitespace normalization, decimal truncation and feed
rate override. These work on the raw command text before (or after) the
tokenizer and never look at motion semantics.
"""

import re

from .utils import format_gcode_number

COMMENT_PAREN_PATTERN = re.compile(r"\(+[^(]*\)+")
COMMENT_SEMICOLON_PATTERN = re.compile(r";.*")
COMMENT_PATTERN = re.compile(r"(\([^()]*\)|;[^;].*)")
WHITESPACE_PATTERN = re.compile(r"\s+")
DECIMAL_PATTERN = re.compile(r"\d+\.\d*|\.\d+")
FEED_PATTERN = re.compile(r"(F)(\d+\.?\d*|\.\d+)", re.IGNORECASE)


def remove_comment(command: str) -> str:
    """Remove '( ... )' and '; ...' comments and trim the result"""
    command = COMMENT_PAREN_PATTERN.sub("", command)
    command = COMMENT_SEMICOLON_PATTERN.sub("", command)
    return command.strip()


def parse_comment(command: str) -> str:
    """First comment in the command including its markers, or ''"""
    match = COMMENT_PATTERN.search(command)
    return match.group(1) if match else ""


def remove_all_whitespace(command: str) -> str:
    return WHITESPACE_PATTERN.sub("", command)


def clean_command(command: str) -> str:
    """
    Produce the single-line, comment-free form the tokenizer expects

    Line breaks and runs of whitespace collapse to one space.
    """
    return WHITESPACE_PATTERN.sub(" ", remove_comment(command)).strip()


def truncate_decimals(length: int, command: str) -> str:
    """
    Rewrite every decimal literal with exactly ``length`` fraction digits

    Integers without a '.' are left alone.
    """
    return DECIMAL_PATTERN.sub(lambda m: f"{float(m.group(0)):.{length}f}", command)


def override_speed(command: str, percent: float) -> str:
    """
    Scale every feed rate word to ``percent`` of its value

    Args:
        command: Command text, e.g. 'G1 X10 F500'
        percent: Override in percent (100 leaves the value unchanged)

    Returns:
        Command with each F word rewritten, e.g. 'G1 X10 F250' at 50%
    """

    def _scale(match: re.Match) -> str:
        scaled = float(match.group(2)) / 100 * percent
        return f"{match.group(1)}{format_gcode_number(scaled, 6)}"

    return FEED_PATTERN.sub(_scale, command)
