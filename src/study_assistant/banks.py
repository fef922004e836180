"""Static string tables for the quiz heuristics."""

FALLBACK_CONCEPT = "the main concept"

STOP_WORDS = frozenset([
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "this", "that", "will", "can", "have", "has", "been",
    "from", "they", "them", "their", "there", "where", "when", "what", "which", "who",
    "how", "why", "would", "could", "should", "may", "might", "must", "shall", "also",
    "very", "more", "most", "some", "many", "much", "such", "other", "than", "only",
    "just", "like", "into", "over", "after", "before", "through", "during", "above",
    "below", "between", "among",
])

# Leading phrases that usually introduce a definition; the clause after them
# up to the end of the sentence is taken as a concept.
CONCEPT_LEADERS = [
    "is defined as",
    "refers to",
    "means",
    "concept of",
    "principle of",
    "theory of",
]

# Ordered; question i always uses template i.
QUESTION_TEMPLATES = [
    ("purpose", "What is the primary purpose of {concept}?"),
    ("relationship", "How does {concept} relate to the overall topic?"),
    ("application", "What would be the best application of {concept}?"),
    ("description", "Which statement best describes {concept}?"),
    ("significance", "What is the significance of {concept} in this context?"),
    ("implementation", "How can {concept} be implemented effectively?"),
    ("benefits", "What are the key benefits of understanding {concept}?"),
    ("demonstration", "Which approach best demonstrates {concept}?"),
    ("importance", "What is the most important aspect of {concept}?"),
    ("problem-solving", "How does {concept} contribute to problem-solving?"),
]

CORRECT_OPTIONS = {
    "purpose": [
        "To provide a framework for understanding {concept}",
        "To establish the foundation of {concept}",
        "To enable effective use of {concept}",
    ],
    "relationship": [
        "{concept} serves as a core component",
        "{concept} connects to the main principles",
        "{concept} supports the overall framework",
    ],
    "application": [
        "Implementing {concept} in practical scenarios",
        "Using {concept} to solve real-world problems",
        "Applying {concept} principles effectively",
    ],
    "description": [
        "{concept} is a fundamental principle",
        "{concept} represents a key methodology",
        "{concept} embodies essential concepts",
    ],
    "significance": [
        "{concept} plays a crucial role",
        "{concept} provides essential insights",
        "{concept} offers valuable perspectives",
    ],
    "implementation": [
        "Through systematic application of {concept}",
        "By following {concept} guidelines",
        "Using structured {concept} approaches",
    ],
    "benefits": [
        "Enhanced understanding of core principles",
        "Improved problem-solving capabilities",
        "Better practical application skills",
    ],
    "demonstration": [
        "Practical examples of {concept}",
        "Real-world applications of {concept}",
        "Case studies involving {concept}",
    ],
    "importance": [
        "The foundational nature of {concept}",
        "The practical value of {concept}",
        "The comprehensive scope of {concept}",
    ],
    "problem-solving": [
        "By providing systematic approaches",
        "Through structured methodologies",
        "By offering practical frameworks",
    ],
}

GENERIC_DISTRACTORS = [
    "Through memorization techniques",
    "By avoiding complex analysis",
    "Using simplified approaches only",
    "Through theoretical study alone",
    "By focusing on basic definitions",
    "Using traditional methods exclusively",
    "Through repetitive practice only",
    "By avoiding practical applications",
    "Using outdated methodologies",
    "Through surface-level understanding",
]

CONCEPT_DISTRACTOR = "By focusing primarily on {concept}"
MAX_CONCEPT_DISTRACTORS = 5
