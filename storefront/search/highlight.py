"""
Search-term highlighting.

Splits display text into matched and unmatched segments. The query is matched
literally at every non-overlapping occurrence, folding case with str.lower()
the same way filter_products() does.
"""
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class HighlightSegment:
    """Contiguous span of display text."""
    text: str
    is_match: bool = False


def highlight(text: str, query: str) -> List[HighlightSegment]:
    """
    Annotate every occurrence of ``query`` in ``text``.

    Joining the segment texts in order gives back ``text`` unchanged.
    """
    if not query:
        return [HighlightSegment(text, False)]

    needle = query.lower()
    width = len(query)
    segments: List[HighlightSegment] = []
    start = 0
    i = 0

    # Windows are compared on the original text so spans stay aligned
    while i + width <= len(text):
        if text[i:i + width].lower() == needle:
            if i > start:
                segments.append(HighlightSegment(text[start:i], False))
            segments.append(HighlightSegment(text[i:i + width], True))
            i += width
            start = i
        else:
            i += 1

    if start < len(text):
        segments.append(HighlightSegment(text[start:], False))

    return segments


def render_segments(segments: List[HighlightSegment], open_mark: str = "[", close_mark: str = "]") -> str:
    """Join segments into plain text, wrapping matches in the given markers."""
    return "".join(
        f"{open_mark}{segment.text}{close_mark}" if segment.is_match else segment.text
        for segment in segments
    )
