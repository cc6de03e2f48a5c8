"""Annotated token value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

# Label assigned to tokens that carry no class.
BACKGROUND_SYMBOL = "O"

# NER tag of tokens outside any named entity. Independent of BACKGROUND_SYMBOL,
# which configs may override for class labels.
NER_BACKGROUND = "O"

# Returned by Token.label() when the token has no value for a key.
ABSENT: None = None


@dataclass(frozen=True)
class Token:
    """A single annotated token.

    Attributes:
        word: Surface form.
        lemma: Lemma, may be empty when the corpus was not lemmatized.
        tag: Part-of-speech tag.
        ner: Named-entity tag, ``NER_BACKGROUND`` when none.
        labels: Annotation key -> assigned value (``BACKGROUND_SYMBOL`` for
            an explicitly unlabeled token). Keys missing from the mapping
            are absent, which is not the same as background.
    """

    word: str
    lemma: str = ""
    tag: str = ""
    ner: str = NER_BACKGROUND
    labels: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def label(self, key: str) -> str | None:
        return self.labels.get(key, ABSENT)

    def has_label(self, key: str) -> bool:
        return key in self.labels

    def context_text(self, use_lemma: bool) -> str:
        """Word or lemma used when the token appears in a context."""
        if use_lemma and self.lemma:
            return self.lemma
        return self.word


Sentence = Sequence[Token]
Corpus = Mapping[str, Sentence]
