from __future__ import annotations

from typing import Callable

_YES = {"y", "yes"}


def ask_yes_no(question: str, *, input_fn: Callable[[str], str] = input) -> bool:
    """Ask a (y/N) question on stdin. Anything but an explicit yes means no."""
    try:
        reply = input_fn(f"{question} (y/N): ")
    except EOFError:
        return False
    return reply.strip().lower() in _YES
