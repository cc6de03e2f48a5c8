from .token import ABSENT, BACKGROUND_SYMBOL, NER_BACKGROUND, Corpus, Sentence, Token
from .loader import SentenceRecord, TokenRecord, load_corpus

__all__ = [
    "ABSENT",
    "BACKGROUND_SYMBOL",
    "NER_BACKGROUND",
    "Corpus",
    "Sentence",
    "Token",
    "SentenceRecord",
    "TokenRecord",
    "load_corpus",
]
