"""patgen: surface pattern generation for bootstrapped entity learning."""
from .config import PatternConfig, load_config
from .errors import AnnotationError, ConfigurationError, CorpusError, PatternGenerationError
from .patterns import PatternTriple, SurfacePattern, create_patterns

__all__ = [
    "create_patterns",
    "PatternConfig",
    "load_config",
    "PatternTriple",
    "SurfacePattern",
    "PatternGenerationError",
    "ConfigurationError",
    "AnnotationError",
    "CorpusError",
]
