"""Prompt builders for the three reading coach capabilities."""

from .base import BasePromptBuilder
from .evaluation import EvaluationPromptBuilder
from .speech import SpeechPromptBuilder
from .suggestion import SuggestionPromptBuilder

__all__ = [
    "BasePromptBuilder",
    "EvaluationPromptBuilder",
    "SpeechPromptBuilder",
    "SuggestionPromptBuilder",
]
