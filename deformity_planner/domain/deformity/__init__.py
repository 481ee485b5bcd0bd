# re-exports: 다른 모듈에서 짧게 import 하도록

from .analyzer import DeformityAnalyzer, analyze, DECISION_RULES
from .errors import DeformityInputError, InvalidInput, NegativeJLCA
from .constants import NEUTRAL_ANGLE, DEMO_PRESET
