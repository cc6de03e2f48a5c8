"""Shared test fixtures."""
import pytest

from patgen.config import PatternConfig
from patgen.corpus.token import BACKGROUND_SYMBOL, NER_BACKGROUND, Token

LABEL = "DRUG"


def tok(word, label=BACKGROUND_SYMBOL, tag="NN", lemma="", ner=NER_BACKGROUND, **extra):
    """Token annotated for LABEL; extra keyword args become more labels."""
    labels = {LABEL: label}
    labels.update(extra)
    return Token(word=word, lemma=lemma, tag=tag, ner=ner, labels=labels)


def sentence(text, drugs=(), tag="NN"):
    """Whitespace-split sentence; words listed in ``drugs`` are labeled."""
    return [tok(w, label=LABEL if w in drugs else BACKGROUND_SYMBOL, tag=tag) for w in text.split()]


@pytest.fixture
def config():
    return PatternConfig(
        answer_classes={LABEL: LABEL},
        stop_words=frozenset({"i", "am", "on", "now", "for", "and", "of", "in", "spite"}),
        use_lemma_context_tokens=False,
    )


@pytest.fixture
def spied_sentence():
    """The 'I am on X now' sentence with X as the only labeled token."""
    return [
        tok("I", tag="PRP"),
        tok("am", tag="VBP"),
        tok("on", tag="IN"),
        tok("X", label=LABEL, tag="NN"),
        tok("now", tag="RB"),
    ]
