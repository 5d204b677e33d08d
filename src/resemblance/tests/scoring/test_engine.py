from unittest.mock import patch

import pytest

from resemblance.config.settings import EvaluationMethod, ShingleOptions
from resemblance.domain.exceptions import ConfigurationError, InvalidArgumentError
from resemblance.domain.models import Evaluation, ScoredEntry
from resemblance.scoring.engine import (
    build_corpus,
    effective_n,
    evaluate,
    evaluate_shingle_sets,
)
from resemblance.shingles.shingle_set import ShingleSet


def _text_of_length(length: int, seed: str = "lorem ipsum dolor sit amet ") -> str:
    return (seed * (length // len(seed) + 1))[:length]


@pytest.fixture
def corpus():
    return {
        "ref1": "the quick brown fox",
        "ref2": "totally unrelated content here",
    }


class TestBuildCorpus:
    """Test corpus construction."""

    def test_builds_one_set_per_entry_in_order(self, corpus):
        built = build_corpus(corpus)
        assert list(built) == ["ref1", "ref2"]
        assert all(isinstance(s, ShingleSet) for s in built.values())
        assert built["ref1"].original_text == "the quick brown fox"

    def test_options_are_applied(self, corpus):
        built = build_corpus(corpus, {"evaluation_method": "ngram", "n": 2})
        assert built["ref1"].shingles_for(2)[0] == "the quick"
        assert built["ref1"].cached_lengths() == [2]

    def test_empty_corpus(self):
        assert build_corpus({}) == {}

    def test_bad_entry_names_itself(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            build_corpus({"good": "text", "bad": None})
        assert exc_info.value.context["corpus_entry"] == "bad"


class TestEffectiveN:
    """Test the per-pair shingle length heuristic."""

    def test_long_pair_is_lengthened(self):
        options = ShingleOptions(use_variable_n=True)
        text = ShingleSet(_text_of_length(1300), options)
        entry = ShingleSet(_text_of_length(1000), options)
        assert effective_n(text, entry, options) == 4

    def test_short_entry_keeps_n(self):
        options = ShingleOptions(use_variable_n=True)
        text = ShingleSet(_text_of_length(1300), options)
        entry = ShingleSet(_text_of_length(500), options)
        assert effective_n(text, entry, options) == 3

    def test_boundaries_are_exclusive(self):
        options = ShingleOptions(use_variable_n=True)
        text = ShingleSet(_text_of_length(1200), options)
        entry = ShingleSet(_text_of_length(901), options)
        assert effective_n(text, entry, options) == 3

    def test_disabled_by_default(self):
        options = ShingleOptions()
        text = ShingleSet(_text_of_length(1300), options)
        entry = ShingleSet(_text_of_length(1000), options)
        assert effective_n(text, entry, options) == 3

    def test_word_shingles_never_lengthened(self):
        options = ShingleOptions(use_variable_n=True, evaluation_method=EvaluationMethod.NGRAM)
        text = ShingleSet(_text_of_length(1300), options)
        entry = ShingleSet(_text_of_length(1000), options)
        assert effective_n(text, entry, options) == 3


class TestEvaluate:
    """Test scoring a candidate against a corpus."""

    def test_end_to_end_character_shingles(self, corpus):
        r_max, results = evaluate("the quick brown fox jumps", corpus)
        scores = dict(results)
        assert scores["ref1"] > 0.5
        assert scores["ref2"] < 0.1
        assert r_max == scores["ref1"]

    def test_results_keep_corpus_order(self, corpus):
        evaluation = evaluate("anything at all", corpus)
        assert isinstance(evaluation, Evaluation)
        assert [entry.name for entry in evaluation.results] == ["ref1", "ref2"]
        assert all(isinstance(entry, ScoredEntry) for entry in evaluation.results)

    def test_results_compare_equal_to_plain_tuples(self):
        _, results = evaluate("abc", {"same": "abc"})
        assert results == [("same", 1.0)]

    def test_empty_corpus(self):
        assert evaluate("some text", {}) == (0.0, [])

    def test_r_max_starts_at_zero(self):
        r_max, results = evaluate("aaaa", {"x": "bbbb", "y": "cccc"})
        assert r_max == 0.0
        assert [r for _, r in results] == [0.0, 0.0]

    def test_variable_n_applies_per_entry(self):
        candidate = _text_of_length(1300)
        corpus = {
            "long": _text_of_length(1000),
            "short": _text_of_length(500),
        }
        real = ShingleSet.resemblance
        with patch.object(ShingleSet, "resemblance", autospec=True, side_effect=real) as spy:
            evaluate(candidate, corpus, {"use_variable_n": True})
        assert [call.args[2] for call in spy.call_args_list] == [4, 3]

    def test_variable_n_does_not_leak_between_calls(self):
        options = {"use_variable_n": True}
        evaluate(_text_of_length(1300), {"long": _text_of_length(1000)}, options)
        assert options == {"use_variable_n": True}

        real = ShingleSet.resemblance
        with patch.object(ShingleSet, "resemblance", autospec=True, side_effect=real) as spy:
            evaluate("short text", {"short": "other text"}, options)
        assert spy.call_args_list[0].args[2] == 3

    def test_word_method(self):
        r_max, results = evaluate(
            "the cat sat on the mat",
            {"close": "the cat sat on a mat", "far": "dogs run fast"},
            {"evaluation_method": EvaluationMethod.NGRAM, "n": 2},
        )
        scores = dict(results)
        assert scores["close"] > scores["far"] == 0.0
        assert r_max == scores["close"]

    def test_invalid_options_rejected(self, corpus):
        with pytest.raises(ConfigurationError):
            evaluate("text", corpus, {"evaluation_method": "sentences"})


class TestEvaluateShingleSets:
    """Test scoring with prebuilt shingle sets."""

    def test_uses_candidate_options_by_default(self):
        options = ShingleOptions(n=2)
        candidate = ShingleSet("abcd", options)
        corpus = {"x": ShingleSet("abce", options)}
        _, results = evaluate_shingle_sets(candidate, corpus)
        # n=2: {a b, b c, c d, d pad} vs {a b, b c, c e, e pad}
        assert results == [("x", pytest.approx(2 / 6))]
