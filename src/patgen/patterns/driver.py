"""Corpus-wide pattern generation over a fixed worker pool.

Sentence ids are split into contiguous slices, one per worker. The slice
size is ``len(ids) // (num_threads - 1)`` (all ids for a single worker),
which leaves the last worker with a short or empty slice; whatever the
formula does not cover is appended to the last slice so every sentence is
processed. Workers share only the read-only config and corpus and return
their own result maps, which are merged by sentence id.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Sequence

from patgen.config import PatternConfig
from patgen.corpus.token import Corpus
from patgen.patterns.generator import PatternGenerator
from patgen.patterns.types import PatternTriple

logger = logging.getLogger(__name__)

SentencePatterns = dict[int, PatternTriple]
CorpusPatterns = dict[str, SentencePatterns]


def partition_ids(ids: Sequence[str], num_threads: int) -> list[list[str]]:
    """Split ``ids`` into ``num_threads`` contiguous slices."""
    total = len(ids)
    chunk = total if num_threads == 1 else total // (num_threads - 1)
    slices = []
    for i in range(num_threads):
        start = min(total, i * chunk)
        end = min(total, (i + 1) * chunk)
        if i == num_threads - 1:
            end = total
        slices.append(list(ids[start:end]))
    return slices


def _run_worker(
    generator: PatternGenerator,
    label: str,
    sentences: Corpus,
    sentence_ids: list[str],
) -> CorpusPatterns:
    patterns: CorpusPatterns = {}
    for sid in sentence_ids:
        patterns[sid] = generator.patterns_for_sentence(label, sentences[sid])
    return patterns


def get_all_patterns(
    generator: PatternGenerator,
    label: str,
    sentences: Corpus,
) -> CorpusPatterns:
    """Run ``generator`` over every sentence, blocking until all workers finish.

    Any worker exception propagates and no partial result is returned.
    """
    num_threads = generator.config.num_threads
    ids = list(sentences.keys())
    logger.info("keyset size is %d", len(ids))

    slices = partition_ids(ids, num_threads)
    offset = 0
    for i, part in enumerate(slices):
        logger.debug("worker %d assigned ids [%d:%d]", i, offset, offset + len(part))
        offset += len(part)

    merged: CorpusPatterns = {}
    worker = partial(_run_worker, generator, label, sentences)
    with ThreadPoolExecutor(max_workers=num_threads) as executor:
        for patterns in executor.map(worker, slices):
            merged.update(patterns)
    return merged


def create_patterns(
    label: str,
    sentences: Corpus,
    config: PatternConfig | None = None,
) -> CorpusPatterns:
    """Generate patterns for every token of every sentence.

    Args:
        label: Label whose answer class every context token must carry.
        sentences: Sentence id -> tokens.
        config: Pattern options; defaults map ``label`` to itself.

    Returns:
        Sentence id -> token index -> (left, right, combined) patterns.

    Raises:
        ConfigurationError: ``label`` has no answer class.
        AnnotationError: A context token lacks the answer class annotation.
    """
    config = config or PatternConfig(answer_classes={label: label})
    config.answer_key(label)
    return get_all_patterns(PatternGenerator(config), label, sentences)
