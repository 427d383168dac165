"""
Named fixtures and their feature tags.

Fixtures are looked up by a stable name. The registry itself is a read-only
mapping built once at import time.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from mdfixtures.features import SHOWCASE_FEATURES, Feature
from mdfixtures.long_document import DEFAULT_SECTIONS, build_long_document
from mdfixtures.samples import FEATURE_SHOWCASE, STREAMING_RESPONSE, TOC_CONTENT

LONG_DOCUMENT_NAME = "long-document"


@dataclass(frozen=True)
class Fixture:
    """
    A named Markdown document and the features its content exercises.
    """

    name: str
    title: str
    description: str
    content: str
    features: frozenset[Feature]


_ALL_FIXTURES: tuple[Fixture, ...] = (
    Fixture(
        name="feature-showcase",
        title="Feature Showcase",
        description="GFM formatting, autolinks, tables, task lists, code, images, and math.",
        content=FEATURE_SHOWCASE,
        features=SHOWCASE_FEATURES,
    ),
    Fixture(
        name="streaming-response",
        title="Streaming Response",
        description="A long-form answer with sections and code, for character-by-character replay.",
        content=STREAMING_RESPONSE,
        features=frozenset(
            {
                Feature.streaming_narrative,
                Feature.bold,
                Feature.italic,
                Feature.code_block,
            }
        ),
    ),
    Fixture(
        name="toc-content",
        title="TOC Navigator",
        description="Four chapters with nested sections for table-of-contents navigation.",
        content=TOC_CONTENT,
        features=frozenset({Feature.heading_hierarchy, Feature.code_block}),
    ),
)

FIXTURES: Mapping[str, Fixture] = MappingProxyType({f.name: f for f in _ALL_FIXTURES})


def fixture_names() -> list[str]:
    """Names of the authored fixtures, in definition order."""
    return list(FIXTURES)


def get_fixture(name: str) -> Fixture:
    """
    Look up an authored fixture by name. Raises `ValueError` listing the valid
    names if `name` is unknown.
    """
    try:
        return FIXTURES[name]
    except KeyError:
        valid = ", ".join(fixture_names())
        raise ValueError(f"Unknown fixture {name!r} (expected one of: {valid})") from None


def long_document_fixture(sections: int = DEFAULT_SECTIONS) -> Fixture:
    """Wrap `build_long_document()` output as a `Fixture`."""
    return Fixture(
        name=LONG_DOCUMENT_NAME,
        title="Long Document",
        description=f"{sections} generated sections for virtual scrolling.",
        content=build_long_document(sections),
        features=frozenset({Feature.long_document, Feature.code_block}),
    )


def uncovered_features(fixtures: Iterable[Fixture] | None = None) -> set[Feature]:
    """
    Features not tagged on any of `fixtures`. Defaults to every authored fixture
    plus a default-sized long document.
    """
    if fixtures is None:
        fixtures = [*FIXTURES.values(), long_document_fixture()]
    covered: set[Feature] = set()
    for fixture in fixtures:
        covered |= fixture.features
    return set(Feature) - covered
