"""Language modules.

Provides factory/registry pattern for language-specific functionality.
"""
from .registry import get_module, register, list_languages
from .base import LanguageModule, GrammarConfig
from .types import (
    DeterminerType,
    FormStatus,
    Gender,
    GrammaticalCase,
    GrammaticalNumber,
    Person,
    Tense,
)

__all__ = [
    "get_module",
    "register",
    "list_languages",
    "LanguageModule",
    "GrammarConfig",
    "DeterminerType",
    "FormStatus",
    "Gender",
    "GrammaticalCase",
    "GrammaticalNumber",
    "Person",
    "Tense",
]
