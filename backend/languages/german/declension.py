"""German noun declension: determiner + noun surface forms.

Noun endings follow two rules only: the genitive singular -(e)s of masculine
and neuter nouns and the dative plural -n. Plurals are never derived; they
come from the dictionary entry.
"""
from dataclasses import dataclass

from core.config import settings
from core.errors import AppError, Err, Ok, Result, sequence_results
from core.logging import engine_logger
from languages.types import (
    DeclensionSlot,
    DeterminerType,
    FormStatus,
    Gender,
    GrammaticalCase,
    GrammaticalNumber,
    Person,
)
from .determiners import DEFAULT_POSSESSIVE_PERSON, DETERMINER_TABLES, DeterminerRuleTables
from .entries import NounEntry
from .maps import (
    CASE_MAP,
    DETERMINER_MAP,
    GENDER_MAP,
    GENDER_MAP_REV,
    NUMBER_MAP,
    PERSON_MAP,
    coerce,
)

log = engine_logger()

ORIGIN = "german.declension"
VOWELS = frozenset("aeiouyäöü")


@dataclass(frozen=True, slots=True)
class NounForm:
    """One resolved cell of the noun case table."""
    determiner: str | None  # None: no determiner exists for this combination
    noun: str
    status: FormStatus
    case: GrammaticalCase
    number: GrammaticalNumber
    determiner_type: DeterminerType
    person: Person | None = None

    @property
    def selectable(self) -> bool:
        return self.status.selectable

    @property
    def partial(self) -> bool:
        """True when only the noun could be produced."""
        return self.determiner is None

    @property
    def spoken_form(self) -> str:
        # The placeholder is never pronounced
        if self.status is FormStatus.MISSING_DATA:
            return ""
        if self.determiner is None:
            return self.noun
        return f"{self.determiner} {self.noun}"


def genitive_singular(lemma: str) -> str:
    """Masculine/neuter genitive singular: +s after a vowel, +es otherwise."""
    if not lemma:
        return lemma
    if lemma[-1].lower() in VOWELS:
        return lemma + "s"
    return lemma + "es"


def dative_plural(plural_lemma: str) -> str:
    """Dative plural: +n unless the plural already ends in -n or -s."""
    if not plural_lemma:
        return plural_lemma
    if plural_lemma.lower().endswith(("n", "s")):
        return plural_lemma
    return plural_lemma + "n"


def citation_form(entry: NounEntry) -> str:
    """Dictionary headword with its article, e.g. 'der Hund'."""
    article = GENDER_MAP_REV.get(entry.gender)
    return f"{article} {entry.lemma}" if article else entry.lemma


class NounDeclensionResolver:
    """Resolves determiner + noun surface forms for a noun entry."""

    __slots__ = ("_tables", "_placeholder")

    def __init__(
        self,
        tables: DeterminerRuleTables = DETERMINER_TABLES,
        placeholder: str | None = None,
    ):
        self._tables = tables
        self._placeholder = settings.MISSING_FORM_PLACEHOLDER if placeholder is None else placeholder

    def resolve(
        self,
        entry: NounEntry,
        case: GrammaticalCase | str,
        number: GrammaticalNumber | str,
        determiner_type: DeterminerType | str,
        person: Person | str | None = None,
    ) -> Result[NounForm, AppError]:
        """Resolve one cell. Unknown enum values yield Err; grammatical gaps yield Ok with a status."""
        parsed = sequence_results([
            coerce(Gender, entry.gender, "gender", GENDER_MAP, ORIGIN),
            coerce(GrammaticalCase, case, "case", CASE_MAP, ORIGIN),
            coerce(GrammaticalNumber, number, "number", NUMBER_MAP, ORIGIN),
            coerce(DeterminerType, determiner_type, "determiner_type", DETERMINER_MAP, ORIGIN),
        ])
        match parsed:
            case Err(error):
                log.warning("noun_parameter_invalid", lemma=entry.lemma, error=error.message)
                return Err(error)
            case Ok([gender, case_, number_, det_type]):
                pass

        person_: Person | None = None
        if det_type is DeterminerType.POSSESSIVE:
            person_ = DEFAULT_POSSESSIVE_PERSON
            if person is not None:
                match coerce(Person, person, "person", PERSON_MAP, ORIGIN):
                    case Err(error):
                        log.warning("noun_parameter_invalid", lemma=entry.lemma, error=error.message)
                        return Err(error)
                    case Ok(value):
                        person_ = value

        return Ok(self._resolve(entry, gender, case_, number_, det_type, person_))

    def _resolve(
        self,
        entry: NounEntry,
        gender: Gender,
        case: GrammaticalCase,
        number: GrammaticalNumber,
        determiner_type: DeterminerType,
        person: Person | None,
    ) -> NounForm:
        noun, noun_status = self._noun_surface(entry, gender, case, number)

        determiner = None
        if self._tables.is_available(determiner_type, number):
            slot = DeclensionSlot.of(gender, number)
            determiner = self._tables.lookup(determiner_type, slot, case, person)

        status = FormStatus.UNAVAILABLE_COMBINATION if determiner is None else noun_status
        form = NounForm(
            determiner=determiner,
            noun=noun,
            status=status,
            case=case,
            number=number,
            determiner_type=determiner_type,
            person=person,
        )
        log.debug(
            "noun_resolved",
            lemma=entry.lemma,
            case=case.value,
            number=number.value,
            determiner_type=determiner_type.value,
            status=status.value,
        )
        return form

    def _noun_surface(
        self,
        entry: NounEntry,
        gender: Gender,
        case: GrammaticalCase,
        number: GrammaticalNumber,
    ) -> tuple[str, FormStatus]:
        lemma = entry.lemma.strip()
        if number is GrammaticalNumber.SINGULAR:
            if case is GrammaticalCase.GENITIVE and gender is not Gender.FEMININE:
                return genitive_singular(lemma), FormStatus.AVAILABLE
            return lemma, FormStatus.AVAILABLE

        plural = (entry.plural_lemma or "").strip()
        if not plural:
            return self._placeholder, FormStatus.MISSING_DATA
        if case is GrammaticalCase.DATIVE:
            return dative_plural(plural), FormStatus.AVAILABLE
        return plural, FormStatus.AVAILABLE

    def decline_table(
        self,
        entry: NounEntry,
        determiner_type: DeterminerType | str,
        number: GrammaticalNumber | str,
        person: Person | str | None = None,
    ) -> Result[list[NounForm], AppError]:
        """All four cases for one determiner type, in table order."""
        return sequence_results([
            self.resolve(entry, case, number, determiner_type, person)
            for case in GrammaticalCase
        ])
