"""Score a candidate text against a named corpus of reference texts."""

import logging
from typing import Dict, Hashable, List, Mapping

from resemblance.config.settings import ShingleOptions, EvaluationMethod
from resemblance.domain.exceptions import ResemblanceError
from resemblance.domain.models import Evaluation, ScoredEntry
from resemblance.shingles.shingle_set import ShingleSet, OptionsLike, build_shingle_set

logger = logging.getLogger(__name__)


def _resolve_options(options: OptionsLike) -> ShingleOptions:
    resolved = ShingleOptions.from_mapping(options)
    resolved.validate()
    return resolved


def build_corpus(
    name_to_text: Mapping[Hashable, str], options: OptionsLike = None
) -> Dict[Hashable, ShingleSet]:
    """Build a shingle set for every (name, text) pair, keeping corpus order."""
    resolved = _resolve_options(options)
    corpus: Dict[Hashable, ShingleSet] = {}
    for name, text in name_to_text.items():
        try:
            corpus[name] = build_shingle_set(text, resolved)
        except ResemblanceError as e:
            logger.error("Could not build shingles for corpus entry %r", name)
            raise e.add_context('corpus_entry', name)
    return corpus


def effective_n(text_set: ShingleSet, entry_set: ShingleSet, options: ShingleOptions) -> int:
    """Shingle length for one comparison.

    With ``use_variable_n`` set, character shingles are lengthened to
    ``options.variable_n`` when both texts are long. Word shingles keep ``n``.
    """
    if (
        options.use_variable_n
        and options.evaluation_method is not EvaluationMethod.NGRAM
        and text_set.data_size > options.variable_n_text_size
        and entry_set.data_size > options.variable_n_entry_size
    ):
        return options.variable_n
    return options.n


def evaluate_shingle_sets(
    text_set: ShingleSet,
    corpus: Mapping[Hashable, ShingleSet],
    options: OptionsLike = None,
) -> Evaluation:
    """Score a prebuilt candidate shingle set against prebuilt corpus entries."""
    resolved = text_set.options if options is None else _resolve_options(options)
    r_max = 0.0
    results: List[ScoredEntry] = []
    for name, entry_set in corpus.items():
        n = effective_n(text_set, entry_set, resolved)
        r = text_set.resemblance(entry_set, n)
        logger.debug("R(%r) = %.4f at n=%d", name, r, n)
        if r > r_max:
            r_max = r
        results.append(ScoredEntry(name, r))
    return Evaluation(r_max, results)


def evaluate(
    text: str,
    corpus_texts: Mapping[Hashable, str],
    options: OptionsLike = None,
) -> Evaluation:
    """Score ``text`` against every entry of ``corpus_texts``.

    Returns ``(r_max, results)`` where ``results`` lists ``(name, r)`` in
    corpus iteration order and ``r_max`` is the largest ``r`` (0.0 for an
    empty corpus).
    """
    resolved = _resolve_options(options)
    text_set = build_shingle_set(text, resolved)
    corpus = build_corpus(corpus_texts, resolved)
    return evaluate_shingle_sets(text_set, corpus, resolved)
