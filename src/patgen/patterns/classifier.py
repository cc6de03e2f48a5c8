"""Token classification: background tokens vs. tokens with a class placeholder."""

from __future__ import annotations

from dataclasses import dataclass

from patgen.config import PatternConfig
from patgen.corpus.token import NER_BACKGROUND, Sentence, Token
from patgen.errors import AnnotationError


@dataclass(frozen=True)
class TokenClass:
    """Classification of a context token.

    ``placeholder`` holds ``{name:value}`` entries joined with ``" | "``;
    ``original`` the matching class names (or NER tag) joined with ``"|"``.
    Both are empty for background tokens.
    """

    is_background: bool
    placeholder: str = ""
    original: str = ""


BACKGROUND = TokenClass(is_background=True)


class TokenClassifier:
    def __init__(self, config: PatternConfig) -> None:
        self.config = config

    def _assigned(self, value: str | None) -> bool:
        return value is not None and value != self.config.background_symbol

    def classify(self, token: Token) -> TokenClass:
        generic: list[str] = []
        original: list[str] = []

        for name, key in self.config.answer_classes.items():
            if self._assigned(token.label(key)):
                generic.append("{" + name + ":" + name + "}")
                original.append(name)

        for name, key in self.config.generalize_classes.items():
            value = token.label(key)
            if self._assigned(value):
                generic.append("{" + name + ":" + value + "}")
                original.append(name)

        if self.config.use_context_ner_restriction and token.ner not in ("", NER_BACKGROUND):
            generic.append("{ner:" + token.ner + "}")
            original.append(token.ner)

        if not generic:
            return BACKGROUND
        return TokenClass(
            is_background=False,
            placeholder=" | ".join(generic),
            original="|".join(original),
        )

    def require_answer_class(self, token: Token, label: str, sentence: Sentence | None = None) -> None:
        """Fail when ``token`` was never annotated for ``label``'s answer class."""
        key = self.config.answer_key(label)
        if not token.has_label(key):
            where = ""
            if sentence is not None:
                where = " in sentence " + repr(" ".join(t.word for t in sentence))
            raise AnnotationError(f"Class {key!r} for token {token.word!r}{where} is not set")
