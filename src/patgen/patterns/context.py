"""Window context building.

For a target index and a window size, walk away from the target in one
direction collecting up to ``window`` counted tokens. Filler words are
skipped without using up the window; a URL token discards everything
collected so far on that side and ends the scan.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

from patgen.config import PatternConfig
from patgen.corpus.token import Sentence, Token
from patgen.patterns.classifier import TokenClassifier


class Direction(enum.IntEnum):
    LEFT = -1
    RIGHT = 1


def context_str(token: Token, use_lemma: bool, lower_case: bool) -> str:
    """Literal template for a background context token."""
    key = "lemma" if use_lemma and token.lemma else "word"
    text = token.context_text(use_lemma)
    if lower_case:
        text = text.lower()
    return "[{" + key + ":/" + re.escape(text).replace("/", "\\/") + "/}]"


@dataclass
class SideContext:
    """Context collected on one side of the target for one window size.

    ``tokens`` and ``originals`` are in sentence order regardless of the
    scan direction.
    """

    direction: Direction
    tokens: list[str] = field(default_factory=list)
    originals: list[str] = field(default_factory=list)
    num_stop_words: int = 0
    num_non_stop_words: int = 0
    truncated: bool = False

    @property
    def size(self) -> int:
        return len(self.tokens)

    @property
    def original_text(self) -> str:
        return " ".join(self.originals)

    def is_accepted(self, config: PatternConfig) -> bool:
        """Long enough and not made only of a few stop words."""
        if self.size == 0 or self.size < config.min_window4pattern:
            return False
        return (
            self.num_non_stop_words > 0
            or self.num_stop_words > config.num_min_stop_words_to_add
        )


class ContextBuilder:
    def __init__(self, config: PatternConfig, classifier: TokenClassifier | None = None) -> None:
        self.config = config
        self.classifier = classifier or TokenClassifier(config)

    def build(
        self,
        label: str,
        sentence: Sentence,
        index: int,
        window: int,
        direction: Direction,
    ) -> SideContext:
        cfg = self.config
        side = SideContext(direction)
        counted = 0
        j = index + direction

        while counted < window and 0 <= j < len(sentence):
            token = sentence[j]
            j += direction

            if cfg.use_filler_words_in_pat and cfg.is_filler_word(token.word):
                continue
            self.classifier.require_answer_class(token, label, sentence)
            counted += 1

            if cfg.is_url(token.word):
                side = SideContext(direction, truncated=True)
                break

            cls = self.classifier.classify(token)
            if not cls.is_background:
                side.tokens.append("[" + cls.placeholder + "]")
                side.originals.append(cls.original)
                side.num_non_stop_words += 1
                continue

            text = token.context_text(cfg.use_lemma_context_tokens)
            side.tokens.append(
                context_str(token, cfg.use_lemma_context_tokens, cfg.match_lower_case_context)
            )
            side.originals.append(text)
            if cfg.is_stop_word(text):
                side.num_stop_words += 1
            else:
                side.num_non_stop_words += 1

        if direction is Direction.LEFT:
            side.tokens.reverse()
            side.originals.reverse()
        return side
