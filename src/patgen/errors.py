"""Error taxonomy for pattern generation.

Every failure is coarse-grained: nothing below is caught and retried inside
the library, the run simply stops.
"""


class PatternGenerationError(Exception):
    """Base class for all pattern generation failures."""


class ConfigurationError(PatternGenerationError, ValueError):
    """Raised when options are missing, invalid or contradictory."""


class AnnotationError(PatternGenerationError):
    """Raised when a token lacks the annotation required by the requested label."""


class CorpusError(PatternGenerationError):
    """Raised when a corpus file cannot be read into sentences."""
