"""Load a corpus of named texts from a YAML file."""

import logging
from pathlib import Path
from typing import Dict, Union

import yaml

from resemblance.domain.exceptions import CorpusLoadError

logger = logging.getLogger(__name__)


def parse_corpus(raw: object, source: str = "<corpus>") -> Dict[str, str]:
    """Validate a parsed YAML document as a mapping of name -> text.

    Names are stringified; ``None`` texts become empty strings and other
    scalar texts are stringified. Nested structures are rejected.
    """
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise CorpusLoadError(
            f"Corpus must be a mapping of name to text, got {type(raw).__name__}",
            corpus_path=source,
        ).add_suggestion("Write the corpus as top-level 'name: text' pairs")

    corpus: Dict[str, str] = {}
    for name, text in raw.items():
        if isinstance(text, (dict, list)):
            raise CorpusLoadError(
                f"Corpus entry {name!r} must be text, got {type(text).__name__}",
                corpus_path=source,
            ).add_context('corpus_entry', name)
        corpus[str(name)] = "" if text is None else str(text)
    return corpus


def load_corpus(path: Union[str, Path]) -> Dict[str, str]:
    """Read ``path`` and return its name -> text mapping in file order."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except OSError as e:
        raise CorpusLoadError(f"Cannot read corpus file: {e}", corpus_path=str(path)) from e
    except yaml.YAMLError as e:
        raise CorpusLoadError(f"Corpus file is not valid YAML: {e}", corpus_path=str(path)) from e

    corpus = parse_corpus(raw, str(path))
    logger.info("Loaded %d corpus entries from %s", len(corpus), path)
    return corpus
