"""Surface pattern generation around annotated tokens."""

from patgen.patterns.assembler import PatternAssembler, is_ascii
from patgen.patterns.classifier import TokenClass, TokenClassifier
from patgen.patterns.context import ContextBuilder, Direction, SideContext, context_str
from patgen.patterns.driver import create_patterns, get_all_patterns, partition_ids
from patgen.patterns.generator import PatternGenerator
from patgen.patterns.types import PatternToken, PatternTriple, SurfacePattern

__all__ = [
    # Value objects
    "PatternToken",
    "SurfacePattern",
    "PatternTriple",
    # Pipeline stages
    "TokenClass",
    "TokenClassifier",
    "ContextBuilder",
    "Direction",
    "SideContext",
    "context_str",
    "PatternAssembler",
    "is_ascii",
    "PatternGenerator",
    # Batch driver
    "create_patterns",
    "get_all_patterns",
    "partition_ids",
]
