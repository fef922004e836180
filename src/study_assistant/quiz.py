"""Heuristic multiple-choice quiz generation from lecture notes."""
import logging
import random

from study_assistant.banks import (
    CONCEPT_DISTRACTOR, CORRECT_OPTIONS, FALLBACK_CONCEPT, GENERIC_DISTRACTORS,
    MAX_CONCEPT_DISTRACTORS, QUESTION_TEMPLATES,
)
from study_assistant.extract import build_concept_pool
from study_assistant.models import ConceptPool, Question

logger = logging.getLogger(__name__)

QUESTION_COUNT = 10
OPTION_COUNT = 4


def _rng_or_default(rng):
    return rng if rng is not None else random.Random()


def synthesize_questions(concepts: list[str], count: int = QUESTION_COUNT) -> list[tuple[str, str, str]]:
    """Pair each template with a concept, cycling through the concepts.

    Returns (template_type, concept, question_text) tuples.
    """
    shells = []
    for i in range(min(count, len(QUESTION_TEMPLATES))):
        template_type, template = QUESTION_TEMPLATES[i]
        concept = concepts[i % len(concepts)] if concepts else FALLBACK_CONCEPT
        shells.append((template_type, concept, template.format(concept=concept.lower())))
    return shells


def generate_correct_option(template_type: str, concept: str, rng=None) -> str:
    rng = _rng_or_default(rng)
    phrases = CORRECT_OPTIONS.get(template_type, CORRECT_OPTIONS["purpose"])
    return rng.choice(phrases).format(concept=concept)


def generate_distractors(concept: str, all_concepts: list[str], rng=None, count: int = OPTION_COUNT - 1) -> list[str]:
    """Generic wrong answers mixed with answers about other concepts."""
    rng = _rng_or_default(rng)
    concept_based = [
        CONCEPT_DISTRACTOR.format(concept=other.lower())
        for other in all_concepts
        if other != concept
    ]
    pool = list(dict.fromkeys(GENERIC_DISTRACTORS + concept_based[:MAX_CONCEPT_DISTRACTORS]))
    rng.shuffle(pool)
    return pool[:count]


def shuffle_options(options: list[str], correct: str, rng=None) -> tuple[list[str], int]:
    """Fisher-Yates shuffle of a copy, returning the new index of the correct answer."""
    rng = _rng_or_default(rng)
    shuffled = list(options)
    correct_index = shuffled.index(correct)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        if correct_index == i:
            correct_index = j
        elif correct_index == j:
            correct_index = i
    return shuffled, correct_index


def build_question(question_id: int, template_type: str, concept: str, question_text: str,
                   all_concepts: list[str], rng=None) -> Question:
    rng = _rng_or_default(rng)
    correct = generate_correct_option(template_type, concept, rng)
    distractors = generate_distractors(concept, all_concepts, rng)
    options, correct_index = shuffle_options([correct, *distractors], correct, rng)
    return Question(
        id=question_id,
        question=question_text,
        options=options,
        correct_index=correct_index,
        template_type=template_type,
        concept=concept,
    )


def generate_questions(pool: ConceptPool, rng=None, count: int = QUESTION_COUNT) -> list[Question]:
    rng = _rng_or_default(rng)
    concepts = pool.concepts_in_priority_order()
    if not concepts:
        logger.info("No usable concepts found; using fallback concept")
    return [
        build_question(i + 1, template_type, concept, text, concepts, rng)
        for i, (template_type, concept, text) in enumerate(synthesize_questions(concepts, count))
    ]


def generate_quiz(text: str, rng=None, count: int = QUESTION_COUNT) -> list[Question]:
    """Extract concepts from text and build the full question list."""
    pool = build_concept_pool(text)
    logger.debug(
        "Concept pool: %d topics, %d keywords, %d concepts",
        len(pool.topics), len(pool.keywords), len(pool.concepts),
    )
    return generate_questions(pool, rng, count)
