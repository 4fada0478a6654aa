"""German language module implementation."""
from typing import Any, Mapping

from core.errors import AppError, Result, unsupported_part_of_speech
from languages.base import LanguageModule, GrammarConfig
from languages.types import DeterminerType, GrammaticalCase, GrammaticalNumber, Person, Tense
from .conjugation import VerbForm, VerbFormResolver
from .declension import NounDeclensionResolver, NounForm
from .entries import NounEntry, VerbEntry
from .grammar import GERMAN_GRAMMAR_CONFIG
from .record import entry_from_record

ORIGIN = "language.de"


class GermanModule(LanguageModule):
    """German noun declension and verb surface forms."""

    __slots__ = ("_nouns", "_verbs")

    def __init__(self):
        self._nouns: NounDeclensionResolver | None = None
        self._verbs: VerbFormResolver | None = None

    @property
    def code(self) -> str:
        return "de"

    @property
    def name(self) -> str:
        return "German"

    @property
    def native_name(self) -> str:
        return "Deutsch"

    def get_grammar_config(self) -> GrammarConfig:
        return GERMAN_GRAMMAR_CONFIG

    def parse_entry(self, record: Mapping[str, Any]) -> Result[NounEntry | VerbEntry, AppError]:
        return entry_from_record(record)

    def get_noun_resolver(self) -> NounDeclensionResolver:
        """Get the noun resolver (lazy-loaded)."""
        if self._nouns is None:
            self._nouns = NounDeclensionResolver()
        return self._nouns

    def get_verb_resolver(self) -> VerbFormResolver:
        """Get the verb resolver (lazy-loaded)."""
        if self._verbs is None:
            self._verbs = VerbFormResolver()
        return self._verbs

    def decline(
        self,
        entry: NounEntry,
        case: GrammaticalCase | str,
        number: GrammaticalNumber | str,
        determiner_type: DeterminerType | str,
        person: Person | str | None = None,
    ) -> Result[NounForm, AppError]:
        if not isinstance(entry, NounEntry):
            return unsupported_part_of_speech(type(entry).__name__, "noun", ORIGIN)
        return self.get_noun_resolver().resolve(entry, case, number, determiner_type, person)

    def conjugate(
        self,
        entry: VerbEntry,
        tense: Tense | str,
        person: Person | str,
    ) -> Result[VerbForm, AppError]:
        if not isinstance(entry, VerbEntry):
            return unsupported_part_of_speech(type(entry).__name__, "verb", ORIGIN)
        return self.get_verb_resolver().resolve(entry, tense, person)
