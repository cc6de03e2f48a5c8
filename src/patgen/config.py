"""Pattern generation options.

The options are resolved once into an immutable ``PatternConfig`` that is
passed by reference to every component. Option names accepted by
``PatternConfig.from_properties`` follow the camelCase property names used
by existing bootstrapping setups (``usePOS4Pattern``, ``maxWindow4Pattern``
and so on), so old property files keep working.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from patgen.corpus.token import BACKGROUND_SYMBOL
from patgen.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_FILLER_WORDS: frozenset[str] = frozenset({"a", "an", "the", "`", "``", "'", "''"})

# Matches nothing; fullmatch semantics.
DEFAULT_IGNORE_WORD_REGEX = "a^"

WILDCARD_TAG = "*"


@dataclass(frozen=True)
class PatternConfig:
    answer_classes: Mapping[str, str] = field(default_factory=dict)
    generalize_classes: Mapping[str, str] = field(default_factory=dict)
    stop_words: frozenset[str] = frozenset()
    filler_words: frozenset[str] = DEFAULT_FILLER_WORDS
    ignore_word_regex: re.Pattern[str] = re.compile(DEFAULT_IGNORE_WORD_REGEX)
    background_symbol: str = BACKGROUND_SYMBOL

    # Target token restrictions
    use_pos4pattern: bool = True
    add_pat_without_pos: bool = True
    allowed_tags_initials: tuple[str, ...] = ("N", "J")
    use_target_ner_restriction: bool = False
    num_words_compound: int = 2

    # Context windows
    min_window4pattern: int = 2
    max_window4pattern: int = 4
    use_previous_context: bool = True
    use_next_context: bool = False
    num_min_stop_words_to_add: int = 3
    use_filler_words_in_pat: bool = True
    use_stop_words_before_term: bool = False
    use_lemma_context_tokens: bool = True
    match_lower_case_context: bool = True
    use_context_ner_restriction: bool = False
    url_prefixes: tuple[str, ...] = ("http",)

    num_threads: int = 1

    def __post_init__(self) -> None:
        if not self.add_pat_without_pos and not self.use_pos4pattern:
            raise ConfigurationError(
                "add_pat_without_pos and use_pos4pattern cannot both be false"
            )
        if self.max_window4pattern < 1:
            raise ConfigurationError(
                f"max_window4pattern must be positive, got {self.max_window4pattern}"
            )
        if self.num_threads < 1:
            raise ConfigurationError(f"num_threads must be positive, got {self.num_threads}")
        # Normalize loosely typed inputs without breaking immutability.
        if isinstance(self.ignore_word_regex, str):
            object.__setattr__(self, "ignore_word_regex", re.compile(self.ignore_word_regex))
        object.__setattr__(self, "answer_classes", MappingProxyType(dict(self.answer_classes)))
        object.__setattr__(self, "generalize_classes", MappingProxyType(dict(self.generalize_classes)))
        object.__setattr__(self, "stop_words", frozenset(w.lower() for w in self.stop_words))
        object.__setattr__(self, "filler_words", frozenset(w.lower() for w in self.filler_words))
        object.__setattr__(self, "allowed_tags_initials", tuple(self.allowed_tags_initials))
        object.__setattr__(self, "url_prefixes", tuple(self.url_prefixes))

    def is_stop_word(self, word: str) -> bool:
        """True for stop words and for words the ignore regex fully matches."""
        return word.lower() in self.stop_words or self.ignore_word_regex.fullmatch(word) is not None

    def is_filler_word(self, word: str) -> bool:
        return word.lower() in self.filler_words

    def is_url(self, word: str) -> bool:
        return word.startswith(self.url_prefixes)

    def tag_allowed(self, tag: str) -> bool:
        """Check a POS tag against the allowed initials (``*`` allows all)."""
        initials = self.allowed_tags_initials
        if not initials or initials[0] == WILDCARD_TAG:
            return True
        return any(tag.startswith(initial) for initial in initials)

    def answer_key(self, label: str) -> str:
        """Annotation key holding the answer for ``label``."""
        try:
            return self.answer_classes[label]
        except KeyError:
            raise ConfigurationError(
                f"Unknown label: {label!r}. Available: {list(self.answer_classes)}"
            ) from None

    @classmethod
    def from_properties(
        cls,
        props: Mapping[str, Any],
        base_dir: Path | None = None,
    ) -> PatternConfig:
        """Build a config from camelCase option names.

        Values may be native JSON types or strings as found in a
        ``.properties`` file. Word-list files are resolved relative to
        ``base_dir`` when given.
        """
        kwargs: dict[str, Any] = {}
        stop_words: set[str] = set()
        valid = {f.name for f in fields(cls)}

        for key, raw in props.items():
            if key == "stopWordsFile":
                for path in _parse_list(raw):
                    stop_words.update(load_word_list(_resolve(path, base_dir)))
                continue
            if key == "stopWords":
                stop_words.update(_parse_list(raw))
                continue
            name = PROPERTY_NAMES.get(key)
            if name is None or name not in valid:
                logger.warning("Ignoring unknown option %s", key)
                continue
            parser = _PARSERS[name]
            try:
                kwargs[name] = parser(raw)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid value for {key}: {raw!r} ({e})") from e

        if stop_words:
            kwargs["stop_words"] = frozenset(stop_words)
        return cls(**kwargs)


def load_word_list(path: str | Path) -> set[str]:
    """Read one word per line, skipping blank lines and ``#`` comments."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Word list not found: {path}")
    words: set[str] = set()
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                words.add(line.lower())
    return words


def load_config(path: str | Path) -> PatternConfig:
    """Load a config from a ``.json`` object or a ``key=value`` properties file."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    if path.suffix == ".json":
        try:
            props = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(props, dict):
            raise ConfigurationError(f"{path} must contain a JSON object")
    else:
        props = _read_properties(path)

    return PatternConfig.from_properties(props, base_dir=path.parent)


def _read_properties(path: Path) -> dict[str, str]:
    props: dict[str, str] = {}
    with open(path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith(("#", "!")):
                continue
            key, sep, value = line.partition("=")
            if not sep:
                raise ConfigurationError(f"{path}:{lineno}: expected key=value, got {line!r}")
            props[key.strip()] = value.strip()
    return props


def _resolve(path: str, base_dir: Path | None) -> Path:
    p = Path(path)
    if base_dir is not None and not p.is_absolute():
        return base_dir / p
    return p


def _parse_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    value = str(raw).strip().lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    raise ValueError("expected a boolean")


def _parse_int(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError("expected an integer")
    return int(raw)


def _parse_list(raw: Any) -> list[str]:
    if isinstance(raw, str):
        return [item.strip() for item in raw.split(",") if item.strip()]
    if isinstance(raw, (list, tuple, set, frozenset)):
        return [str(item).strip() for item in raw]
    raise TypeError("expected a list or comma separated string")


def _parse_mapping(raw: Any) -> dict[str, str]:
    """Accept a dict or ``name:key,name2:key2``."""
    if isinstance(raw, Mapping):
        return {str(k): str(v) for k, v in raw.items()}
    mapping: dict[str, str] = {}
    for item in _parse_list(raw):
        name, sep, key = item.partition(":")
        if not sep or not name or not key:
            raise ValueError(f"expected name:key, got {item!r}")
        mapping[name.strip()] = key.strip()
    return mapping


def _parse_regex(raw: Any) -> re.Pattern[str]:
    return re.compile(str(raw))


def _parse_words(raw: Any) -> frozenset[str]:
    return frozenset(_parse_list(raw))


def _parse_tuple(raw: Any) -> tuple[str, ...]:
    return tuple(_parse_list(raw))


PROPERTY_NAMES: dict[str, str] = {
    "answerClasses": "answer_classes",
    "generalizeClasses": "generalize_classes",
    "fillerWords": "filler_words",
    "ignoreWordRegex": "ignore_word_regex",
    "backgroundSymbol": "background_symbol",
    "usePOS4Pattern": "use_pos4pattern",
    "addPatWithoutPOS": "add_pat_without_pos",
    "allowedTagsInitials": "allowed_tags_initials",
    "useTargetNERRestriction": "use_target_ner_restriction",
    "numWordsCompound": "num_words_compound",
    "minWindow4Pattern": "min_window4pattern",
    "maxWindow4Pattern": "max_window4pattern",
    "usePreviousContext": "use_previous_context",
    "useNextContext": "use_next_context",
    "numMinStopWordsToAdd": "num_min_stop_words_to_add",
    "useFillerWordsInPat": "use_filler_words_in_pat",
    "useStopWordsBeforeTerm": "use_stop_words_before_term",
    "useLemmaContextTokens": "use_lemma_context_tokens",
    "matchLowerCaseContext": "match_lower_case_context",
    "useContextNERRestriction": "use_context_ner_restriction",
    "urlPrefixes": "url_prefixes",
    "numThreads": "num_threads",
}

_PARSERS: dict[str, Any] = {
    "answer_classes": _parse_mapping,
    "generalize_classes": _parse_mapping,
    "filler_words": _parse_words,
    "ignore_word_regex": _parse_regex,
    "background_symbol": str,
    "use_pos4pattern": _parse_bool,
    "add_pat_without_pos": _parse_bool,
    "allowed_tags_initials": _parse_tuple,
    "use_target_ner_restriction": _parse_bool,
    "num_words_compound": _parse_int,
    "min_window4pattern": _parse_int,
    "max_window4pattern": _parse_int,
    "use_previous_context": _parse_bool,
    "use_next_context": _parse_bool,
    "num_min_stop_words_to_add": _parse_int,
    "use_filler_words_in_pat": _parse_bool,
    "use_stop_words_before_term": _parse_bool,
    "use_lemma_context_tokens": _parse_bool,
    "match_lower_case_context": _parse_bool,
    "use_context_ner_restriction": _parse_bool,
    "url_prefixes": _parse_tuple,
    "num_threads": _parse_int,
}
