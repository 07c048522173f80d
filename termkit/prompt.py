"""Interactive yes/no confirmation."""

from __future__ import annotations

from typing import Callable

_AFFIRMATIVE = {"y", "yes"}


def confirm(
    prompt: str,
    default: bool = False,
    input_fn: Callable[[str], str] = input,
) -> bool:
    """Ask ``prompt`` and read one line.

    An empty answer or closed stdin yields ``default``; ``y``/``yes`` in any
    case yields True and anything else False.
    """
    try:
        answer = input_fn(prompt)
    except EOFError:
        return default
    answer = answer.strip().lower()
    if not answer:
        return default
    return answer in _AFFIRMATIVE


__all__ = ["confirm"]
