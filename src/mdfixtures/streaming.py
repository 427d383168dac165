"""
Character-by-character replay schedules for streaming renderers.

A schedule pairs each Unicode code point of a document with the delay a
simulated token stream would wait after emitting it. Newlines pause longest,
spaces shortest, so replayed text reads like a model typing an answer.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# Delay per character at speed 1.0, in milliseconds.
BASE_DELAY_MS = 20

DEFAULT_SPEED = 2.0


@dataclass(frozen=True)
class StreamChunk:
    """One emitted chunk and the delay to wait after it."""

    text: str
    delay_ms: int


def base_delay_ms(speed: float = DEFAULT_SPEED) -> int:
    """Per-character delay for `speed`. Raises `ValueError` unless `speed > 0`."""
    if speed <= 0:
        raise ValueError(f"speed must be positive, got {speed}")
    # Halves round up.
    return int(BASE_DELAY_MS / speed + 0.5)


def chunk_delay_ms(char: str, delay: int) -> int:
    """Delay after emitting `char`, given the base per-character delay."""
    if char == "\n":
        return delay * 4
    elif char == " ":
        return delay // 2
    return delay


def stream_chunks(text: str, speed: float = DEFAULT_SPEED) -> Iterator[StreamChunk]:
    """
    Split `text` into one chunk per code point with a replay delay.

    Iterating a `str` yields code points, so emoji and other astral characters
    are never split. The speed is validated before the first chunk is yielded.
    """
    delay = base_delay_ms(speed)
    return (StreamChunk(char, chunk_delay_ms(char, delay)) for char in text)


def total_delay_ms(chunks: Iterable[StreamChunk]) -> int:
    """Total time a schedule takes to replay, in milliseconds."""
    return sum(chunk.delay_ms for chunk in chunks)
