"""Content metrics: readability, jargon, key phrases and suggested questions.

Pure functions of the normalized text. Nothing here raises on odd input;
empty text produces a degenerate but valid ``ContentAnalysis``.
"""

from __future__ import annotations

import math
import re
from typing import Dict, List, Sequence

from .models import ContentAnalysis
from .normalizer import split_words

MAX_TECHNICAL_TERMS = 20
MAX_KEY_PHRASES = 10
MAX_QUESTIONS = 5
MIN_PHRASE_CHARS = 10

TECHNICAL_SUFFIX_RE = re.compile(r"(tion|sion|ment|ness|ity|ism|ology)$")
# Prefix match on the phrase: "there were" and "order of" are excluded too
STOP_WORD_PREFIX_RE = re.compile(r"(the|and|or|but|in|on|at|to|for|of|with|by)")

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_VOWEL_RUN_RE = re.compile(r"[aeiouy]+")

# (trigger substrings, questions); checked in this order
DOMAIN_QUESTIONS = (
    (("contract", "agreement"), (
        "What are my obligations under this contract?",
        "What are the key risks I should be aware of?",
    )),
    (("policy", "insurance"), (
        "What is covered by this policy?",
        "What are the exclusions I should know about?",
    )),
    (("medical", "diagnosis"), (
        "Can you explain this medical information in simple terms?",
        "What should I discuss with my doctor?",
    )),
)
GENERIC_QUESTIONS = (
    "Can you summarize the main points of this document?",
    "What are the most important things I need to understand?",
)


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def count_sentences(text: str) -> int:
    return sum(1 for part in _SENTENCE_SPLIT_RE.split(text) if part.strip())


def count_syllables(word: str) -> int:
    """Vowel clusters in the word, never less than one."""
    return len(_VOWEL_RUN_RE.findall(word)) or 1


def readability_score(text: str) -> float:
    """Flesch reading ease, unrounded. Higher means easier to read."""
    words = split_words(text.lower())
    word_count = max(len(words), 1)
    sentence_count = max(count_sentences(text), 1)
    syllables = sum(count_syllables(word) for word in words)
    return (
        206.835
        - 1.015 * (len(words) / sentence_count)
        - 84.6 * (syllables / word_count)
    )


def is_technical_term(word: str) -> bool:
    return len(word) > 8 or bool(TECHNICAL_SUFFIX_RE.search(word))


def extract_technical_terms(words: Sequence[str]) -> List[str]:
    seen: set[str] = set()
    terms: List[str] = []
    for word in words:
        if word not in seen and is_technical_term(word):
            seen.add(word)
            terms.append(word)
            if len(terms) == MAX_TECHNICAL_TERMS:
                break
    return terms


def jargon_ratio(terms: Sequence[str], words: Sequence[str]) -> float:
    """Unrounded terms-to-words ratio; complexity is classified on this."""
    return len(terms) / max(len(words), 1)


def jargon_density(terms: Sequence[str], words: Sequence[str]) -> float:
    """Reported density, rounded half-up to 3 decimals."""
    return _round_half_up(jargon_ratio(terms, words), 3)


def classify_complexity(density: float, readability: float) -> str:
    if density > 0.15 or readability < 30:
        return "high"
    if density > 0.08 or readability < 60:
        return "medium"
    return "low"


def extract_key_phrases(text: str) -> List[str]:
    """Repeated 2-4 word phrases, most frequent first."""
    words = split_words(text.lower())
    counts: Dict[str, int] = {}
    for i in range(len(words) - 1):
        for length in range(2, 5):
            if i + length > len(words):
                break
            phrase = " ".join(words[i:i + length])
            if len(phrase) > MIN_PHRASE_CHARS and not STOP_WORD_PREFIX_RE.match(phrase):
                counts[phrase] = counts.get(phrase, 0) + 1

    # sorted() is stable, so ties keep first-seen order
    repeated = [(phrase, count) for phrase, count in counts.items() if count > 1]
    repeated = sorted(repeated, key=lambda item: item[1], reverse=True)
    return [phrase for phrase, _ in repeated[:MAX_KEY_PHRASES]]


def suggest_questions(text: str, technical_terms: Sequence[str]) -> List[str]:
    questions: List[str] = []
    if technical_terms:
        questions.append(
            f"What do these technical terms mean: {', '.join(technical_terms[:3])}?"
        )
    for triggers, domain_questions in DOMAIN_QUESTIONS:
        if any(trigger in text for trigger in triggers):
            questions.extend(domain_questions)
    questions.extend(GENERIC_QUESTIONS)
    return questions[:MAX_QUESTIONS]


def analyze_content(text: str) -> ContentAnalysis:
    words = split_words(text.lower())
    readability = readability_score(text)
    terms = extract_technical_terms(words)

    return ContentAnalysis(
        complexity=classify_complexity(jargon_ratio(terms, words), readability),
        jargon_density=jargon_density(terms, words),
        technical_terms=tuple(terms),
        key_phrases=tuple(extract_key_phrases(text)),
        readability_score=int(_round_half_up(readability)),
        suggested_questions=tuple(suggest_questions(text, terms)) if words else (),
    )
