"""Per-token and per-sentence pattern generation."""

from __future__ import annotations

import logging

from patgen.config import PatternConfig
from patgen.corpus.token import Sentence, Token
from patgen.patterns.assembler import PatternAssembler
from patgen.patterns.classifier import TokenClassifier
from patgen.patterns.context import ContextBuilder, Direction
from patgen.patterns.types import PatternTriple

logger = logging.getLogger(__name__)


class PatternGenerator:
    """Generates left, right and combined patterns around tokens.

    Holds no state besides the config and its helpers, so one instance
    can be shared by every worker.
    """

    def __init__(self, config: PatternConfig) -> None:
        self.config = config
        self.classifier = TokenClassifier(config)
        self.builder = ContextBuilder(config, self.classifier)
        self.assembler = PatternAssembler(config)

    def is_eligible(self, token: Token) -> bool:
        """Targets must not be stop words and need an allowed POS tag."""
        if self.config.is_stop_word(token.word):
            return False
        return self.config.tag_allowed(token.tag)

    def get_context(self, label: str, sentence: Sentence, index: int) -> PatternTriple:
        """All patterns around ``sentence[index]`` for window sizes 1..max."""
        cfg = self.config
        target = sentence[index]
        result = PatternTriple.empty()

        for window in range(1, cfg.max_window4pattern + 1):
            left = right = None
            if cfg.use_previous_context:
                left = self.builder.build(label, sentence, index, window, Direction.LEFT)
            if cfg.use_next_context:
                right = self.builder.build(label, sentence, index, window, Direction.RIGHT)
            result.update(self.assembler.assemble(target, left, right))

        return result

    def patterns_for_sentence(self, label: str, sentence: Sentence) -> dict[int, PatternTriple]:
        """Patterns for every token; ineligible tokens get empty sets."""
        patterns: dict[int, PatternTriple] = {}
        for i, token in enumerate(sentence):
            if self.is_eligible(token):
                patterns[i] = self.get_context(label, sentence, i)
            else:
                patterns[i] = PatternTriple.empty()
        logger.debug(
            "%d of %d tokens produced patterns",
            sum(1 for t in patterns.values() if not t.is_empty()),
            len(sentence),
        )
        return patterns
