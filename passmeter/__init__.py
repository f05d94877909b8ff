"""PassMeter: heuristic password strength analyzer."""

from .config import DEFAULT_CONFIG, AnalyzerConfig, CharSetSizes
from .errors import ConfigError, PassmeterError
from .evaluator import CharacterClassPresence, StrengthResult, detect_classes, evaluate
from .levels import DEFAULT_LEVELS, StrengthLevel, classify_score
from .suggestions import suggest
from .timefmt import format_combinations, format_duration
from .validator import validate

__version__ = "1.0.0"
