"""Input-layer public API for key decoding and state transitions.

Exports are split between low-level terminal decoding (``read_key``) and the
pure reducer used by the runtime loop.
"""

from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key
from .reducer import (
    COMMAND_CHARS,
    QUIT_KEYS,
    initial_state,
    is_query_char,
    reduce_key,
    select_index,
    set_query,
    sync_viewport,
)

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "COMMAND_CHARS",
    "QUIT_KEYS",
    "initial_state",
    "is_query_char",
    "reduce_key",
    "select_index",
    "set_query",
    "sync_viewport",
]
