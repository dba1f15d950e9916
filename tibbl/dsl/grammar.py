"""
Line grammar for TIBBL script text → tile tokens.

thread 1|2|3
loop <n>            # anything after <n> is ignored, so "loop 3 times" works
end loop
play <n> | play x
delay <n>
x = random
x = x + 1 | x = x - 1
x = <n>
if x < <n>
else
end if
function
end function
call function

<n> is 1..8 and becomes the tile rotation n-1. Matching is case-insensitive.
"""
import re
from dataclasses import dataclass
from typing import List, Optional

from .vocabulary import ROTATION_VALUES, Token


class ScriptError(ValueError):
    """Base for errors raised while turning script text into a grid."""


class GrammarError(ScriptError):
    def __init__(self, reason: str, line: Optional[int] = None):
        self.reason = reason
        self.line = line
        super().__init__(f"Line {line}: {reason}" if line is not None else reason)

    def at_line(self, line: int) -> "GrammarError":
        return GrammarError(self.reason, line)


@dataclass
class ParsedLine:
    token: Optional[Token]
    is_thread_marker: bool
    line_number: int


_INT_PREFIX = re.compile(r"[+-]?[0-9]+")
_MAX_VALUE = len(ROTATION_VALUES)


def _read_int(word: str) -> Optional[int]:
    # Leading integer only: "3times" reads as 3, "three" as nothing.
    m = _INT_PREFIX.match(word)
    return int(m.group(0)) if m else None


def _rotation(word: str, reason: str) -> int:
    value = _read_int(word)
    if value is None or not 1 <= value <= _MAX_VALUE:
        raise GrammarError(reason)
    return value - 1


def parse_line(line: str) -> Token:
    """Parse one command line into a Token, raising GrammarError if it is not one."""
    line = line.strip().lower()
    parts = line.split()
    head = parts[0] if parts else ""
    second = parts[1] if len(parts) > 1 else None

    if head == "thread":
        if second is None:
            raise GrammarError("Thread command requires a thread number (1, 2, or 3)")
        if second in ("1", "2", "3"):
            return Token(f"thread{second}")
        raise GrammarError("Thread number must be 1, 2, or 3")

    if head == "loop":
        if second is None:
            raise GrammarError("Loop command requires a number (1-8)")
        return Token("loop", _rotation(second, "Loop number must be between 1 and 8"))

    if head == "end" and second == "loop":
        return Token("endloop")

    if head == "play":
        if second is None:
            raise GrammarError("Play command requires a note number (1-8) or x")
        if second == "x":
            return Token("playx")
        return Token("play", _rotation(second, "Play note must be between 1 and 8, or x"))

    if head == "delay":
        if second is None:
            raise GrammarError("Delay command requires a duration (1-8)")
        return Token("delay", _rotation(second, "Delay duration must be between 1 and 8"))

    if head == "x":
        if second != "=":
            raise GrammarError('Variable command must be in format "x = ..."')
        if len(parts) >= 3 and parts[2] == "random":
            return Token("random")
        if len(parts) >= 5 and parts[2] == "x":
            if parts[3] == "+" and parts[4] == "1":
                return Token("add")
            if parts[3] == "-" and parts[4] == "1":
                return Token("subtract")
            raise GrammarError('Variable arithmetic must be "x = x + 1" or "x = x - 1"')
        if len(parts) >= 3:
            return Token("variable", _rotation(parts[2], "Variable value must be between 1 and 8"))
        raise GrammarError("Invalid variable command")

    if head == "if":
        if len(parts) < 4 or parts[1] != "x" or parts[2] != "<":
            raise GrammarError('If command must be in format "if x < number"')
        return Token("if", _rotation(parts[3], "If condition must be between 1 and 8"))

    if head == "else":
        return Token("else")
    if head == "end" and second == "if":
        return Token("endif")
    if head == "function":
        return Token("function")
    if head == "end" and second == "function":
        return Token("endfunction")
    if head == "call" and second == "function":
        return Token("functioncall")

    raise GrammarError(f'Unknown command: "{line}"')


def parse_script(text: str) -> List[ParsedLine]:
    """
    Parse every non-blank line of a script.

    Line numbers count non-blank lines only. Stops at the first bad line with a
    GrammarError that carries its line number.
    """
    lines = [raw.strip() for raw in text.lower().strip().splitlines()]
    parsed: List[ParsedLine] = []
    for num, line in enumerate((ln for ln in lines if ln), start=1):
        try:
            token = parse_line(line)
        except GrammarError as e:
            raise e.at_line(num) from None
        parsed.append(ParsedLine(token, token.is_thread_marker, num))
    return parsed
