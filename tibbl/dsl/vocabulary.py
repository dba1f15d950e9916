"""
Tile vocabulary shared by the grammar, the synthesizer and the label formatter.

Each tile kind maps to a display name, the command keyword(s) it stands for in
script text and, for rotatable tiles, the eight surface values a rotation
selects ("1".."8").
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

ROTATION_VALUES: Tuple[str, ...] = ("1", "2", "3", "4", "5", "6", "7", "8")

THREAD_MARKERS: Dict[str, int] = {"thread1": 0, "thread2": 1, "thread3": 2}


@dataclass(frozen=True)
class VocabEntry:
    name: str
    command: str
    rotation_values: Tuple[str, ...] = ()

    @property
    def rotatable(self) -> bool:
        return bool(self.rotation_values)

    @property
    def max_param(self) -> int:
        return max(len(self.rotation_values) - 1, 0)


VOCABULARY: Dict[str, VocabEntry] = {
    "add": VocabEntry("X = X + 1", "x = x + 1"),
    "subtract": VocabEntry("X = X - 1", "x = x - 1"),
    "delay": VocabEntry("Delay", "delay", ROTATION_VALUES),
    "else": VocabEntry("Else", "else"),
    "endfunction": VocabEntry("End Function", "end function"),
    "endif": VocabEntry("End If", "end if"),
    "endloop": VocabEntry("End Loop", "end loop"),
    "function": VocabEntry("Function", "function"),
    "functioncall": VocabEntry("Call Function", "call function"),
    "if": VocabEntry("If X <", "if x <", ROTATION_VALUES),
    "loop": VocabEntry("Loop", "loop", ROTATION_VALUES),
    "play": VocabEntry("Play", "play", ROTATION_VALUES),
    "playx": VocabEntry("Play X", "play x"),
    "random": VocabEntry("X = Random", "x = random"),
    "thread1": VocabEntry("Thread 1", "thread 1"),
    "thread2": VocabEntry("Thread 2", "thread 2"),
    "thread3": VocabEntry("Thread 3", "thread 3"),
    "variable": VocabEntry("X =", "x =", ROTATION_VALUES),
}

# Editor palette, one list per palette row.
PALETTE: List[List[str]] = [
    ["play", "playx", "loop", "endloop"],
    ["thread1", "thread2", "thread3", "delay"],
    ["variable", "random", "add", "subtract"],
    ["if", "else", "endif"],
    ["function", "endfunction", "functioncall"],
]


def vocab_entry(kind: str) -> VocabEntry:
    try:
        return VOCABULARY[kind]
    except KeyError:
        raise ValueError(f"Unknown tile kind: {kind}") from None


def max_param(kind: str) -> int:
    return vocab_entry(kind).max_param


@dataclass(frozen=True)
class Token:
    """One tile: a vocabulary kind plus its zero-based rotation."""
    kind: str
    param: int = 0

    def __post_init__(self):
        limit = max_param(self.kind)
        if not isinstance(self.param, int) or not 0 <= self.param <= limit:
            raise ValueError(f"Rotation for {self.kind} must be between 0 and {limit}, got {self.param!r}")

    @property
    def entry(self) -> VocabEntry:
        return VOCABULARY[self.kind]

    @property
    def is_thread_marker(self) -> bool:
        return self.kind in THREAD_MARKERS

    @property
    def thread_index(self) -> int | None:
        return THREAD_MARKERS.get(self.kind)

    @property
    def surface_value(self) -> str | None:
        """The literal argument a rotatable tile shows, e.g. "3" for rotation 2."""
        if not self.entry.rotatable:
            return None
        return self.entry.rotation_values[self.param]
