"""
Markdown fixture documents for exercising renderers.

Usage::

    from mdfixtures import FEATURE_SHOWCASE, build_long_document, stream_chunks

    renderer.render(FEATURE_SHOWCASE)
    renderer.render(build_long_document(sections=200))
    for chunk in stream_chunks(STREAMING_RESPONSE):
        view.append(chunk.text)
"""

from mdfixtures.features import Feature
from mdfixtures.long_document import DEFAULT_SECTIONS, build_long_document
from mdfixtures.registry import (
    FIXTURES,
    Fixture,
    fixture_names,
    get_fixture,
    long_document_fixture,
    uncovered_features,
)
from mdfixtures.samples import FEATURE_SHOWCASE, STREAMING_RESPONSE, TOC_CONTENT
from mdfixtures.streaming import StreamChunk, stream_chunks, total_delay_ms

__all__ = [
    "DEFAULT_SECTIONS",
    "FEATURE_SHOWCASE",
    "FIXTURES",
    "STREAMING_RESPONSE",
    "TOC_CONTENT",
    "Feature",
    "Fixture",
    "StreamChunk",
    "build_long_document",
    "fixture_names",
    "get_fixture",
    "long_document_fixture",
    "stream_chunks",
    "total_delay_ms",
    "uncovered_features",
]
