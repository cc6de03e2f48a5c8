"""Pattern value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass(frozen=True)
class PatternToken:
    """Restrictions on the target position of a surface pattern.

    Attributes:
        tag: First two characters of the target's POS tag.
        use_tag: Whether matches must carry a tag starting with ``tag``.
        get_compound_phrases: Whether multi-word targets may match.
        num_words_compound: Max length of a multi-word target.
        ner_tag: Target's named-entity tag.
        use_ner_tag: Whether matches must carry ``ner_tag``.
    """

    tag: str
    use_tag: bool
    get_compound_phrases: bool
    num_words_compound: int
    ner_tag: str
    use_ner_tag: bool

    def to_token_regex(self) -> str:
        restrictions = []
        if self.use_tag:
            restrictions.append("{tag:/" + self.tag + ".*/}")
        if self.use_ner_tag:
            restrictions.append("{ner:" + self.ner_tag + "}")
        s = "(?$term [" + " & ".join(restrictions) + "]"
        if self.get_compound_phrases:
            s += "{1," + str(self.num_words_compound) + "}"
        return s + ")"


@dataclass(frozen=True, eq=False)
class SurfacePattern:
    """A context template around a target placeholder.

    Two patterns are equal when their rendered templates are equal; the
    literal text only documents where the pattern came from.
    """

    prev_context: str
    token: PatternToken
    next_context: str
    original_prev: str = field(default="")
    original_next: str = field(default="")

    def to_string(self) -> str:
        parts = (self.prev_context.strip(), self.token.to_token_regex(), self.next_context.strip())
        return " ".join(p for p in parts if p)

    def to_readable(self) -> str:
        parts = (self.original_prev, "<TERM>", self.original_next)
        return " ".join(p for p in parts if p)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SurfacePattern):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __hash__(self) -> int:
        return hash(self.to_string())

    def __str__(self) -> str:
        return self.to_string()


class PatternTriple(NamedTuple):
    """Left-only, right-only and combined patterns found for one token."""

    left: set[SurfacePattern]
    right: set[SurfacePattern]
    combined: set[SurfacePattern]

    @classmethod
    def empty(cls) -> PatternTriple:
        return cls(set(), set(), set())

    def update(self, other: PatternTriple) -> None:
        self.left.update(other.left)
        self.right.update(other.right)
        self.combined.update(other.combined)

    def is_empty(self) -> bool:
        return not (self.left or self.right or self.combined)
