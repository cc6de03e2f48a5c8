"""JSONL corpus loading.

One sentence per line::

    {"id": "s1", "tokens": [{"word": "Aspirin", "lemma": "aspirin",
      "tag": "NN", "ner": "O", "labels": {"DRUG": "DRUG"}}, ...]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from patgen.corpus.token import NER_BACKGROUND, Token
from patgen.errors import CorpusError

logger = logging.getLogger(__name__)


class TokenRecord(BaseModel):
    word: str = Field(..., description="Surface form")
    lemma: str = Field(default="", description="Lemma, empty if unknown")
    tag: str = Field(default="", description="Part-of-speech tag")
    ner: str = Field(default=NER_BACKGROUND, description="Named-entity tag")
    labels: dict[str, str] = Field(default_factory=dict, description="Annotation key -> value")

    def to_token(self) -> Token:
        return Token(
            word=self.word,
            lemma=self.lemma,
            tag=self.tag,
            ner=self.ner,
            labels=dict(self.labels),
        )


class SentenceRecord(BaseModel):
    id: str = Field(..., description="Unique sentence id")
    tokens: list[TokenRecord]


def load_corpus(path: str | Path) -> dict[str, list[Token]]:
    """Load sentences from a JSONL file, preserving file order.

    Raises:
        CorpusError: The file is missing, a line is not a valid sentence
            record, or a sentence id repeats.
    """
    path = Path(path)
    if not path.exists():
        raise CorpusError(f"Corpus file not found: {path}")

    sentences: dict[str, list[Token]] = {}
    with open(path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                record = SentenceRecord.model_validate(json.loads(line))
            except (json.JSONDecodeError, ValidationError) as e:
                raise CorpusError(f"{path}:{lineno}: invalid sentence record: {e}") from e
            if record.id in sentences:
                raise CorpusError(f"{path}:{lineno}: duplicate sentence id {record.id!r}")
            sentences[record.id] = [t.to_token() for t in record.tokens]

    logger.info("Loaded %d sentences from %s", len(sentences), path)
    return sentences
