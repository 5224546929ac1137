"""
GCODE word tokenizer

Splits a cleaned, single-line command into argument words and looks up
the numeric value behind an address letter. Comments must already be
removed (see gcodeprep.gcode.text).
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

# Accepted numeric literal: optional sign, digits with an optional fraction
NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")


@dataclass(frozen=True)
class ArgumentToken:
    """One address/number word as it appeared in the command, e.g. 'X10.5'"""

    word: str

    @property
    def address(self) -> str:
        """Upper-cased address letter, or '' for a leading fragment without one"""
        if self.word and self.word[0].isalpha():
            return self.word[0].upper()
        return ""

    @property
    def literal(self) -> str:
        return self.word[1:] if self.address else self.word

    @property
    def value(self) -> float | None:
        """Parsed number, or None when the literal is not a plain decimal"""
        return parse_number(self.literal)

    def __str__(self):
        return self.word


def parse_number(text: str) -> float | None:
    if not NUMBER_PATTERN.match(text):
        return None
    return float(text)


def _is_numeric_char(c: str) -> bool:
    return "0" <= c <= "9" or c == "."


def tokenize(command: str) -> list[ArgumentToken]:
    """
    Split a command into words in a single left-to-right pass

    Letters collect into the pending word, a digit, '.' or '-' opens a
    numeric run, and any other character ends the run. A letter that ends a
    run becomes the address of the next word; a '-' that ends a run opens a
    new letterless run. Whitespace and punctuation are dropped.

    Args:
        command: Cleaned single-line command such as 'G1X10.5Y-3.2F500'

    Returns:
        Words in source order
    """
    words: list[str] = []
    word = ""
    read_numeric = False

    for c in command:
        if read_numeric and not _is_numeric_char(c):
            words.append(word)
            word = ""
            read_numeric = False
            if c.isalpha():
                word = c
            elif c == "-":
                word = c
                read_numeric = True
        elif _is_numeric_char(c) or c == "-":
            word += c
            read_numeric = True
        elif c.isalpha():
            word += c

    if word:
        words.append(word)

    return [ArgumentToken(w) for w in words]


def as_tokens(args: str | Sequence[ArgumentToken]) -> Sequence[ArgumentToken]:
    """Accept either a raw command or words that were already split"""
    if isinstance(args, str):
        return tokenize(args)
    return args


def lookup(args: str | Sequence[ArgumentToken], address: str) -> float | None:
    """
    Value of the first word carrying ``address`` (case-insensitive)

    Returns None when no word has the address or when the first such word
    holds a malformed number; later duplicates are never consulted.
    """
    address = address.upper()
    for token in as_tokens(args):
        if token.address == address:
            return token.value
    return None


def parse_codes(args: str | Sequence[ArgumentToken], address: str) -> list[str]:
    """Raw literals of every word carrying ``address``, in order"""
    address = address.upper()
    return [token.literal for token in as_tokens(args) if token.address == address]


def extract_codes(command: str, letter: str) -> list[int]:
    """
    Every ``letter`` word (either case) followed by digits, as integers

    Leading zeros are dropped, so 'G01' yields 1. Combined words such as
    'G0G1' are returned as separate codes; deciding whether that is legal is
    left to the caller.
    """
    pattern = re.compile(rf"[{re.escape(letter.upper())}{re.escape(letter.lower())}]0*(\d+)")
    return [int(m.group(1)) for m in pattern.finditer(command)]


def parse_gcodes(command: str) -> list[int]:
    return extract_codes(command, "G")


def parse_mcodes(command: str) -> list[int]:
    return extract_codes(command, "M")
