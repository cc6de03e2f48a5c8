"""Tests for window context building."""
import dataclasses

import pytest

from conftest import LABEL, sentence, tok
from patgen.corpus.token import Token
from patgen.errors import AnnotationError
from patgen.patterns.context import ContextBuilder, Direction, SideContext, context_str


class TestContextStr:
    def test_word_lower_cased(self):
        assert context_str(Token(word="Took"), use_lemma=False, lower_case=True) == "[{word:/took/}]"

    def test_case_kept_without_lower_casing(self):
        assert context_str(Token(word="Took"), use_lemma=False, lower_case=False) == "[{word:/Took/}]"

    def test_lemma_used_when_requested(self):
        token = Token(word="took", lemma="take")
        assert context_str(token, use_lemma=True, lower_case=True) == "[{lemma:/take/}]"

    def test_missing_lemma_falls_back_to_word(self):
        assert context_str(Token(word="took"), use_lemma=True, lower_case=True) == "[{word:/took/}]"

    def test_slash_and_regex_characters_escaped(self):
        assert context_str(Token(word="a/b"), use_lemma=False, lower_case=True) == "[{word:/a\\/b/}]"
        assert context_str(Token(word="."), use_lemma=False, lower_case=True) == "[{word:/\\./}]"


class TestLeftScan:
    def test_tokens_in_sentence_order(self, config, spied_sentence):
        side = ContextBuilder(config).build(LABEL, spied_sentence, 3, 2, Direction.LEFT)
        assert side.tokens == ["[{word:/am/}]", "[{word:/on/}]"]
        assert side.original_text == "am on"
        assert side.num_stop_words == 2
        assert side.num_non_stop_words == 0

    def test_window_limits_counted_tokens(self, config, spied_sentence):
        side = ContextBuilder(config).build(LABEL, spied_sentence, 3, 1, Direction.LEFT)
        assert side.tokens == ["[{word:/on/}]"]

    def test_stops_at_sentence_start(self, config, spied_sentence):
        side = ContextBuilder(config).build(LABEL, spied_sentence, 3, 10, Direction.LEFT)
        assert side.size == 3

    def test_filler_words_skipped_without_using_window(self, config):
        sent = sentence("patients took the aspirin", drugs={"aspirin"})
        side = ContextBuilder(config).build(LABEL, sent, 3, 1, Direction.LEFT)
        assert side.tokens == ["[{word:/took/}]"]

    def test_filler_words_kept_when_disabled(self, config):
        config = dataclasses.replace(config, use_filler_words_in_pat=False)
        sent = sentence("patients took the aspirin", drugs={"aspirin"})
        side = ContextBuilder(config).build(LABEL, sent, 3, 1, Direction.LEFT)
        assert side.tokens == ["[{word:/the/}]"]

    def test_labeled_context_token_becomes_placeholder(self, config):
        sent = sentence("aspirin and ibuprofen", drugs={"aspirin", "ibuprofen"})
        side = ContextBuilder(config).build(LABEL, sent, 2, 2, Direction.LEFT)
        assert side.tokens == ["[{DRUG:DRUG}]", "[{word:/and/}]"]
        assert side.original_text == "DRUG and"
        assert side.num_non_stop_words == 1
        assert side.num_stop_words == 1

    def test_lemma_context_tokens(self, config):
        config = dataclasses.replace(config, use_lemma_context_tokens=True)
        sent = [tok("patients", lemma="patient"), tok("Took", lemma="take"), tok("aspirin", label=LABEL)]
        side = ContextBuilder(config).build(LABEL, sent, 2, 2, Direction.LEFT)
        assert side.tokens == ["[{lemma:/patient/}]", "[{lemma:/take/}]"]
        assert side.original_text == "patient take"

    def test_ignore_word_regex_counts_as_stop_word(self, config):
        config = dataclasses.replace(config, ignore_word_regex="[^a-zA-Z]+")
        sent = sentence("patients , aspirin", drugs={"aspirin"})
        side = ContextBuilder(config).build(LABEL, sent, 2, 2, Direction.LEFT)
        assert side.num_stop_words == 1
        assert side.num_non_stop_words == 1


class TestRightScan:
    def test_tokens_appended_in_order(self, config):
        sent = sentence("aspirin cures headaches fast", drugs={"aspirin"})
        side = ContextBuilder(config).build(LABEL, sent, 0, 2, Direction.RIGHT)
        assert side.tokens == ["[{word:/cures/}]", "[{word:/headaches/}]"]
        assert side.original_text == "cures headaches"

    def test_stops_at_sentence_end(self, config):
        sent = sentence("aspirin cures", drugs={"aspirin"})
        side = ContextBuilder(config).build(LABEL, sent, 0, 4, Direction.RIGHT)
        assert side.size == 1


class TestUrlTruncation:
    def test_url_discards_collected_context(self, config):
        sent = sentence("see http://example.org now aspirin", drugs={"aspirin"})
        side = ContextBuilder(config).build(LABEL, sent, 3, 3, Direction.LEFT)
        assert side.truncated is True
        assert side.tokens == []
        assert side.original_text == ""
        assert side.num_stop_words == 0
        assert side.num_non_stop_words == 0

    def test_window_before_url_unaffected(self, config):
        sent = sentence("see http://example.org now aspirin", drugs={"aspirin"})
        side = ContextBuilder(config).build(LABEL, sent, 3, 1, Direction.LEFT)
        assert side.truncated is False
        assert side.tokens == ["[{word:/now/}]"]

    def test_url_truncates_right_side(self, config):
        sent = sentence("aspirin works https://example.org", drugs={"aspirin"})
        side = ContextBuilder(config).build(LABEL, sent, 0, 2, Direction.RIGHT)
        assert side.truncated is True
        assert side.size == 0


class TestAnnotationCheck:
    def test_missing_answer_annotation_raises(self, config):
        sent = [Token(word="patients"), tok("took"), tok("aspirin", label=LABEL)]
        with pytest.raises(AnnotationError):
            ContextBuilder(config).build(LABEL, sent, 2, 2, Direction.LEFT)

    def test_skipped_filler_word_is_not_checked(self, config):
        sent = [tok("took"), Token(word="the"), tok("aspirin", label=LABEL)]
        side = ContextBuilder(config).build(LABEL, sent, 2, 1, Direction.LEFT)
        assert side.tokens == ["[{word:/took/}]"]


class TestAcceptance:
    def test_few_stop_words_rejected(self, config):
        side = SideContext(Direction.LEFT, tokens=["a", "b"], num_stop_words=2)
        assert side.is_accepted(config) is False

    def test_many_stop_words_accepted(self, config):
        side = SideContext(Direction.LEFT, tokens=["a", "b", "c", "d"], num_stop_words=4)
        assert side.is_accepted(config) is True

    def test_non_stop_word_accepted(self, config):
        side = SideContext(Direction.LEFT, tokens=["a", "b"], num_stop_words=1, num_non_stop_words=1)
        assert side.is_accepted(config) is True

    def test_shorter_than_min_window_rejected(self, config):
        side = SideContext(Direction.LEFT, tokens=["a"], num_non_stop_words=1)
        assert side.is_accepted(config) is False

    def test_empty_rejected(self, config):
        config = dataclasses.replace(config, min_window4pattern=0)
        assert SideContext(Direction.RIGHT).is_accepted(config) is False
