"""
Procedural generation of arbitrarily long Markdown documents.

The output is a pure function of the section count: every section is the same
template with its 1-based index substituted, so tests can assert on structure
while consumers get a document large enough to exercise virtual scrolling.
"""

from __future__ import annotations

DEFAULT_SECTIONS = 18

SECTION_PARAGRAPH = (
    "This is a long document section used to showcase virtual scrolling. "
    "It contains repeated paragraphs, lists, and code to build many blocks."
)

SECTION_LIST_LINE = "- Bullet A - Bullet B - Bullet C"

SECTION_CODE_LANG = "python"


def format_section(index: int) -> str:
    """
    Render one section of the long document, including its trailing blank line.
    """
    return (
        f"# Section {index}\n"
        f"{SECTION_PARAGRAPH}\n"
        "\n"
        f"{SECTION_LIST_LINE}\n"
        "\n"
        f"```{SECTION_CODE_LANG}\n"
        f"index = {index}\n"
        f'print("Rendering section {index}")\n'
        "```\n"
        "\n"
        "---\n"
        "\n"
    )


def build_long_document(sections: int = DEFAULT_SECTIONS) -> str:
    """
    Build a synthetic document of `sections` repeated sections, numbered from 1.

    `sections=0` yields an empty string. Raises `TypeError` if `sections` is not
    an `int` (booleans included) and `ValueError` if it is negative, before any
    output is produced.
    """
    # bool is a subclass of int, but True/False are never meant as a count
    if isinstance(sections, bool) or not isinstance(sections, int):
        raise TypeError(f"sections must be an int, got {type(sections).__name__}")
    if sections < 0:
        raise ValueError(f"sections must be non-negative, got {sections}")

    return "".join(format_section(i) for i in range(1, sections + 1))
