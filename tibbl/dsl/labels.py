from .vocabulary import Token

_EDITOR_LABELS = {
    "play": "Play {}",
    "loop": "Loop {} Times",
    "delay": "Delay {}",
    "variable": "X = {}",
    "if": "If X < {}",
}


def tile_label(token: Token) -> str:
    """Label shown under a tile on the editing board, e.g. "Loop 3 Times"."""
    value = token.surface_value
    if value is None:
        return token.entry.name
    return _EDITOR_LABELS[token.kind].format(value)


def compact_label(token: Token) -> str:
    """Shorter label for previews: display name plus value, e.g. "Loop 3"."""
    value = token.surface_value
    if value is None:
        return token.entry.name
    return f"{token.entry.name} {value}"
