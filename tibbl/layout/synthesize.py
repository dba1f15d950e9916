"""Tile grid → per-thread script text."""
from typing import List

from ..dsl.vocabulary import Token
from .grid import Grid

THREAD_COUNT = 3

# Rotatable kinds render their surface value into these templates.
COMMAND_TEMPLATES = {
    "play": "play {}",
    "loop": "loop {} times",
    "delay": "delay {}",
    "variable": "x = {}",
    "if": "if x < {}",
}


def render_command(token: Token) -> str:
    value = token.surface_value
    if value is None:
        return token.entry.command
    return COMMAND_TEMPLATES[token.kind].format(value)


def grid_to_threads(grid: Grid) -> List[List[str]]:
    """
    Walk the grid row-major and split commands into the three threads.

    A thread marker switches the current thread before it is emitted, so the
    marker itself lands in the thread it opens.
    """
    threads: List[List[str]] = [[] for _ in range(THREAD_COUNT)]
    current = 0
    for _, _, token in grid.occupied():
        if token.is_thread_marker:
            current = token.thread_index
        threads[current].append(render_command(token))
    return threads


def threads_to_text(threads: List[List[str]]) -> List[str]:
    return ["\n".join(cmds) for cmds in threads]


def flatten_threads(threads: List[List[str]]) -> str:
    return "\n".join(cmd for cmds in threads for cmd in cmds)


def has_code(threads: List[List[str]]) -> bool:
    return any(threads)
