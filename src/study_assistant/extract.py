"""Candidate concept extraction from lecture-note text.

Three cheap heuristics are combined: word frequency, capitalised terms and
definition phrases. None of them raise; degenerate text yields empty lists.
"""
import re
from collections import Counter

from study_assistant.banks import CONCEPT_LEADERS, STOP_WORDS
from study_assistant.models import ConceptPool

MAX_TOPICS = 8
MAX_KEYWORDS = 10
MAX_CONCEPTS = 5

_NON_LETTERS = re.compile(r"[^a-zA-Z]")
CONCEPT_PATTERNS = [
    re.compile(re.escape(leader) + r" ([^.!?]+)", re.IGNORECASE)
    for leader in CONCEPT_LEADERS
]


def _clean(word: str) -> str:
    return _NON_LETTERS.sub("", word)


def extract_topics(text: str, limit: int = MAX_TOPICS) -> list[str]:
    """Most frequent content words, capitalised."""
    counts = Counter()
    for word in text.lower().split():
        clean = _clean(word)
        if len(clean) > 4 and clean not in STOP_WORDS:
            counts[clean] += 1
    # most_common keeps first-seen order among equal counts
    return [word.capitalize() for word, _ in counts.most_common(limit)]


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """Capitalised terms in encounter order, deduplicated."""
    keywords = []
    for word in text.split():
        clean = _clean(word)
        if len(clean) > 3 and clean[0].isupper() and clean not in keywords:
            keywords.append(clean)
            if len(keywords) == limit:
                break
    return keywords


def extract_concepts(text: str, limit: int = MAX_CONCEPTS) -> list[str]:
    """Clauses following definition phrases such as "refers to" or "theory of"."""
    concepts = []
    for pattern in CONCEPT_PATTERNS:
        for match in pattern.finditer(text):
            concept = match.group(1).strip()
            if 3 < len(concept) < 50 and concept not in concepts:
                concepts.append(concept)
    return concepts[:limit]


def build_concept_pool(text: str) -> ConceptPool:
    return ConceptPool(
        topics=tuple(extract_topics(text)),
        keywords=tuple(extract_keywords(text)),
        concepts=tuple(extract_concepts(text)),
    )
