"""Turn accepted side contexts into surface patterns."""

from __future__ import annotations

from patgen.config import PatternConfig
from patgen.corpus.token import Token
from patgen.patterns.context import SideContext
from patgen.patterns.types import PatternToken, PatternTriple, SurfacePattern

FILLER_GAP = " $FILLER{0,2} "
STOP_WORD_GAP = " $STOPWORD{0,2} "


def is_ascii(text: str) -> bool:
    return text.isascii()


class PatternAssembler:
    def __init__(self, config: PatternConfig) -> None:
        self.config = config
        self.filler_gap = FILLER_GAP if config.use_filler_words_in_pat else " "
        self.stop_word_gap = STOP_WORD_GAP if config.use_stop_words_before_term else ""

    def target_tokens(self, target: Token) -> list[PatternToken]:
        """Target specs: without POS restriction first, then with it."""
        cfg = self.config
        specs = []
        for use_tag, enabled in ((False, cfg.add_pat_without_pos), (True, cfg.use_pos4pattern)):
            if enabled:
                specs.append(
                    PatternToken(
                        tag=target.tag[:2],
                        use_tag=use_tag,
                        get_compound_phrases=cfg.num_words_compound > 1,
                        num_words_compound=cfg.num_words_compound,
                        ner_tag=target.ner,
                        use_ner_tag=cfg.use_target_ner_restriction,
                    )
                )
        return specs

    def assemble(
        self,
        target: Token,
        left: SideContext | None,
        right: SideContext | None,
    ) -> PatternTriple:
        """Patterns for one window iteration.

        Only the left template goes through the ASCII filter; right
        templates are kept as they are. A combined pattern needs both
        sides accepted in this window, which already puts their joint
        size at or above ``min_window4pattern``.
        """
        cfg = self.config
        fw, sw = self.filler_gap, self.stop_word_gap
        result = PatternTriple.empty()
        specs = self.target_tokens(target)

        use_prev = False
        prev_template = ""
        if left is not None and left.is_accepted(cfg):
            prev_context = fw.join(left.tokens)
            if is_ascii(prev_context):
                prev_template = prev_context + fw + sw
                for spec in specs:
                    result.left.add(SurfacePattern(prev_template, spec, "", left.original_text, ""))
                use_prev = True

        use_next = False
        next_template = ""
        if right is not None and right.is_accepted(cfg):
            next_template = sw + fw + fw.join(right.tokens)
            for spec in specs:
                result.right.add(SurfacePattern("", spec, next_template, "", right.original_text))
            use_next = True

        if use_prev and use_next:
            for spec in specs:
                result.combined.add(
                    SurfacePattern(
                        prev_template, spec, next_template, left.original_text, right.original_text
                    )
                )
        return result
