"""
Rendering features that fixtures are tagged with.

Each fixture declares, by authoring convention, which features its content
exercises. Taken together the fixtures must cover every member of `Feature`.
"""

from __future__ import annotations

from enum import Enum


class Feature(str, Enum):
    """A renderer feature exercised by fixture content."""

    bold = "bold"  # **text**
    italic = "italic"  # *text*
    strikethrough = "strikethrough"  # ~~text~~
    inline_code = "inline_code"  # `code`
    autolink = "autolink"  # bare https://... URL
    email_autolink = "email_autolink"  # bare name@host address
    blockquote = "blockquote"  # > quote
    task_list = "task_list"  # - [x] / - [ ]
    table = "table"  # GFM pipe table
    code_block = "code_block"  # ```lang fenced block
    image = "image"  # ![alt](url)
    inline_math = "inline_math"  # $...$
    block_math = "block_math"  # $$ ... $$
    streaming_narrative = "streaming_narrative"
    heading_hierarchy = "heading_hierarchy"
    long_document = "long_document"


# Features every GFM-capable renderer is expected to handle in a single document.
SHOWCASE_FEATURES: frozenset[Feature] = frozenset(
    {
        Feature.bold,
        Feature.italic,
        Feature.strikethrough,
        Feature.inline_code,
        Feature.autolink,
        Feature.email_autolink,
        Feature.blockquote,
        Feature.task_list,
        Feature.table,
        Feature.code_block,
        Feature.image,
        Feature.inline_math,
        Feature.block_math,
    }
)
