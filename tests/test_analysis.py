"""Test cases for content analysis metrics."""

import pytest

from docanalyzer.analysis import (
    GENERIC_QUESTIONS,
    analyze_content,
    classify_complexity,
    count_sentences,
    count_syllables,
    extract_key_phrases,
    extract_technical_terms,
    jargon_density,
    jargon_ratio,
    readability_score,
    suggest_questions,
)

COMPLEXITY_ORDER = {"low": 0, "medium": 1, "high": 2}

PLAIN_TEXT = "The cat sat on the mat. The dog ran to the park. We had fun in the sun."
JARGON_TEXT = (
    "The cat sat on the documentation. The dog ran to the administration. "
    "We had fun in the organization."
)


class TestReadability:

    @pytest.mark.parametrize("word,expected", [
        ("strategy", 3),
        ("rhythm", 1),
        ("bcd", 1),
        ("queue", 1),
        ("documentation", 5),
    ])
    def test_syllables(self, word, expected):
        assert count_syllables(word) == expected

    def test_sentences(self):
        assert count_sentences("One. Two! Three?") == 3
        assert count_sentences("Wait... what?!") == 2
        assert count_sentences("No punctuation") == 1
        assert count_sentences("") == 0

    def test_flesch_formula(self):
        # 3 words, 1 sentence, 3 syllables
        expected = 206.835 - 1.015 * 3 - 84.6 * 1
        assert readability_score("The cat sat.") == pytest.approx(expected)

    def test_empty_text_is_guarded(self):
        assert readability_score("") == pytest.approx(206.835)


class TestTechnicalTerms:

    def test_length_and_suffix_rules(self):
        words = ["mitigation", "cat", "documentation.", "mitigation", "goodness", "realism", "city"]

        assert extract_technical_terms(words) == ["mitigation", "documentation.", "goodness", "realism", "city"]

    def test_capped_at_twenty(self):
        words = [f"technical{i:02d}" for i in range(25)]

        terms = extract_technical_terms(words)
        assert len(terms) == 20
        assert terms[0] == "technical00"

    def test_density_rounding(self):
        assert jargon_density(["a"], ["a", "b", "c"]) == 0.333
        assert jargon_density(["a", "b"], ["a", "b", "c"]) == 0.667
        assert jargon_density([], []) == 0.0


class TestComplexity:

    @pytest.mark.parametrize("density,readability,expected", [
        (0.16, 80, "high"),
        (0.0, 29.9, "high"),
        (0.15, 80, "medium"),
        (0.09, 80, "medium"),
        (0.0, 59.9, "medium"),
        (0.08, 60, "low"),
        (0.0, 100, "low"),
    ])
    def test_thresholds(self, density, readability, expected):
        assert classify_complexity(density, readability) == expected

    def test_more_jargon_is_never_simpler(self):
        plain = analyze_content(PLAIN_TEXT)
        jargon = analyze_content(JARGON_TEXT)

        assert plain.complexity == "low"
        assert jargon.jargon_density > plain.jargon_density
        assert COMPLEXITY_ORDER[jargon.complexity] >= COMPLEXITY_ORDER[plain.complexity]

    def test_classified_on_unrounded_density(self):
        # 20 terms in 133 words: 0.15038 reports as 0.15 but is above the cutoff
        terms = [f"technical{i:02d}" for i in range(20)]
        analysis = analyze_content(" ".join(terms + ["cat."] * 113))

        assert analysis.jargon_density == 0.15
        assert analysis.complexity == "high"

    def test_medium_cutoff_uses_unrounded_density(self):
        # 7 terms in 87 words: 0.0805 reports as 0.08 but is above the cutoff
        terms = [f"technical{i:02d}" for i in range(7)]
        analysis = analyze_content(" ".join(terms + ["cat."] * 80))

        assert analysis.jargon_density == 0.08
        assert analysis.complexity == "medium"

    def test_jargon_ratio_is_not_rounded(self):
        words = ["x"] * 133
        terms = ["t"] * 20

        assert jargon_ratio(terms, words) == pytest.approx(20 / 133)
        assert jargon_density(terms, words) == 0.15


class TestKeyPhrases:

    def test_repeated_phrases_in_first_seen_order(self):
        text = "machine learning models are useful. machine learning models are fast."

        assert extract_key_phrases(text) == [
            "machine learning",
            "machine learning models",
            "machine learning models are",
            "learning models",
            "learning models are",
        ]

    def test_most_frequent_first(self):
        text = "data pipeline data pipeline data pipeline quick summary quick summary"

        phrases = extract_key_phrases(text)
        assert phrases[0] == "data pipeline"
        assert "quick summary" in phrases

    def test_stop_word_start_excluded(self):
        phrases = extract_key_phrases("the quick brown fox. the quick brown fox.")

        assert phrases
        assert not any(p.split()[0] == "the" for p in phrases)
        assert "quick brown" in phrases

    def test_phrase_starting_with_stop_word_prefix_excluded(self):
        phrases = extract_key_phrases("there were problems there were problems")

        assert "there were problems" not in phrases
        assert "there were" not in phrases
        assert "were problems" in phrases

    @pytest.mark.parametrize("text,excluded", [
        ("order of magnitude order of magnitude", "order of magnitude"),
        ("information about costs information about costs", "information about"),
        ("bythe numbers bythe numbers", "bythe numbers"),
    ])
    def test_prefix_rule_applies_to_longer_first_words(self, text, excluded):
        assert excluded not in extract_key_phrases(text)

    def test_short_phrases_excluded(self):
        assert extract_key_phrases("a b a b a b a b") == []

    def test_capped_at_ten(self):
        words = " ".join(f"alpha{i} beta{i}" for i in range(15))

        assert len(extract_key_phrases(words + " " + words)) == 10


class TestSuggestedQuestions:

    def test_terms_and_generic(self):
        questions = suggest_questions("plain text", ["alpha", "beta", "gamma", "delta"])

        assert questions == [
            "What do these technical terms mean: alpha, beta, gamma?",
            *GENERIC_QUESTIONS,
        ]

    def test_domain_questions_come_first_and_are_capped(self):
        text = "This contract covers the insurance policy and any medical diagnosis."
        questions = suggest_questions(text, ["insurance"])

        assert len(questions) == 5
        assert questions[1] == "What are my obligations under this contract?"
        assert questions[3] == "What is covered by this policy?"
        assert not any("medical" in q for q in questions)

    def test_domain_without_terms(self):
        questions = suggest_questions("the agreement", [])

        assert len(questions) == 4
        assert questions[0] == "What are my obligations under this contract?"
        assert questions[2:] == list(GENERIC_QUESTIONS)

    def test_triggers_are_case_sensitive(self):
        assert suggest_questions("Contract", []) == list(GENERIC_QUESTIONS)


class TestAnalyzeContent:

    def test_empty_text(self):
        analysis = analyze_content("")

        assert analysis.complexity == "low"
        assert analysis.jargon_density == 0
        assert analysis.technical_terms == ()
        assert analysis.key_phrases == ()
        assert analysis.suggested_questions == ()
        assert analysis.readability_score == 207

    def test_jargon_heavy_example(self, sample_text):
        analysis = analyze_content(sample_text)

        for term in ("mitigation", "methodology", "comprehensive"):
            assert term in analysis.technical_terms
        assert "documentation." in analysis.technical_terms
        assert analysis.jargon_density == 0.455  # 5 terms / 11 words
        assert analysis.complexity in ("medium", "high")
        assert analysis.suggested_questions[0] == (
            "What do these technical terms mean: mitigation, consideration., methodology?"
        )

    def test_readability_is_rounded(self):
        analysis = analyze_content(PLAIN_TEXT)

        assert isinstance(analysis.readability_score, int)
        assert analysis.readability_score == round(readability_score(PLAIN_TEXT))

    def test_never_raises_on_odd_input(self):
        for text in ["...", "!!!???", "\n\n", "a", "| | |"]:
            analysis = analyze_content(text)
            assert analysis.complexity in COMPLEXITY_ORDER
