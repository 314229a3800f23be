"""Headline highlight helpers"""

import re
from typing import List, Sequence, Tuple

MAX_SUGGESTIONS = 3

# Words that usually deserve the accent color
HIGHLIGHT_KEYWORDS = (
    "AI", "Smart", "Fast", "Easy", "Best", "Top", "Leading", "Innovative",
    "Revolutionary", "Breakthrough", "Advanced", "Modern", "Powerful",
    "Efficient", "Professional", "Expert", "Premium", "Elite", "Ultimate",
)

_NON_WORD_RE = re.compile(r"[^\w]")
_NON_WORD_OR_SPACE_RE = re.compile(r"[^\w\s]")


def _clean(word: str) -> str:
    return _NON_WORD_RE.sub("", word)


def _matches_keyword(word: str) -> bool:
    lowered = word.lower()
    return any(
        keyword.lower() in lowered or lowered in keyword.lower()
        for keyword in HIGHLIGHT_KEYWORDS
    )


def suggest_highlights(text: str) -> List[str]:
    """
    Propose up to 3 words of ``text`` worth highlighting.

    Tokens are cleaned of punctuation; a token qualifies when it is longer
    than 2 characters and overlaps one of HIGHLIGHT_KEYWORDS in either
    direction, ignoring case. First-seen order is kept.
    """
    suggestions: List[str] = []
    for token in (text or "").split():
        word = _clean(token)
        if len(word) > 2 and _matches_keyword(word) and word not in suggestions:
            suggestions.append(word)
    return suggestions[:MAX_SUGGESTIONS]


def toggle_highlight(word: str, current_highlights: Sequence[str]) -> List[str]:
    """Remove ``word`` from the highlights if present, otherwise append it."""
    word = word.strip()
    highlights = [h.strip() for h in current_highlights]
    if word in highlights:
        return [h for h in highlights if h != word]
    return highlights + [word]


def is_word_in_text(word: str, text: str) -> bool:
    clean_word = _clean(word).lower()
    clean_text = _NON_WORD_OR_SPACE_RE.sub("", text).lower()
    return clean_word in clean_text


def cleanup_highlights(highlights: Sequence[str], text: str) -> List[str]:
    """Keep only highlights that are an exact (punctuation-stripped) token of ``text``."""
    tokens = {_clean(token) for token in text.split()}
    return [h for h in highlights if h in tokens]


def split_highlighted(text: str, highlights: Sequence[str]) -> List[Tuple[str, bool]]:
    """
    Split text into (segment, is_highlight) pairs for rendering.

    Longer highlights win over shorter ones that overlap them. Matching is
    case-sensitive and on word boundaries.
    """
    terms = sorted({h.strip() for h in highlights if h and h.strip()}, key=len, reverse=True)
    if not text or not terms:
        return [(text, False)] if text else []

    pattern = re.compile(r"\b(" + "|".join(re.escape(term) for term in terms) + r")\b")
    segments: List[Tuple[str, bool]] = []
    position = 0
    for match in pattern.finditer(text):
        if match.start() > position:
            segments.append((text[position:match.start()], False))
        segments.append((match.group(0), True))
        position = match.end()
    if position < len(text):
        segments.append((text[position:], False))
    return segments
