"""Shared type definitions for language modules.

Grammatical categories are closed enumerations; rule tables keyed by them
are checked for totality when they are built.
"""
from enum import Enum


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class GrammaticalNumber(str, Enum):
    SINGULAR = "singular"
    PLURAL = "plural"


class GrammaticalCase(str, Enum):
    # Declaration order is the display order of the case table
    NOMINATIVE = "nominative"
    ACCUSATIVE = "accusative"
    DATIVE = "dative"
    GENITIVE = "genitive"


class DeterminerType(str, Enum):
    DEFINITE = "definite"
    INDEFINITE = "indefinite"
    NEGATION = "negation"
    POSSESSIVE = "possessive"
    DEMONSTRATIVE = "demonstrative"
    INTERROGATIVE = "interrogative"


class Person(str, Enum):
    FIRST_SINGULAR = "1sg"
    SECOND_SINGULAR = "2sg"
    THIRD_SINGULAR_MASCULINE = "3sg_masc"
    THIRD_SINGULAR_FEMININE = "3sg_fem"
    THIRD_SINGULAR_NEUTER = "3sg_neut"
    FIRST_PLURAL = "1pl"
    SECOND_PLURAL = "2pl"
    THIRD_PLURAL = "3pl"
    FORMAL = "formal"


class ConjugationSlot(str, Enum):
    """Cells of the six-slot conjugation grid.

    Two slots are shared by several persons; the card picks one of them as
    the subject variant before resolving.
    """
    FIRST_SINGULAR = "ich"
    SECOND_SINGULAR = "du"
    THIRD_SINGULAR = "er_sie_es"
    FIRST_PLURAL = "wir"
    SECOND_PLURAL = "ihr"
    THIRD_PLURAL_FORMAL = "sie_Sie"

    @property
    def persons(self) -> tuple[Person, ...]:
        return _SLOT_PERSONS[self]

    @classmethod
    def of(cls, person: Person) -> "ConjugationSlot":
        for slot, persons in _SLOT_PERSONS.items():
            if person in persons:
                return slot
        raise ValueError(f"No conjugation slot for {person!r}")


_SLOT_PERSONS: dict[ConjugationSlot, tuple[Person, ...]] = {
    ConjugationSlot.FIRST_SINGULAR: (Person.FIRST_SINGULAR,),
    ConjugationSlot.SECOND_SINGULAR: (Person.SECOND_SINGULAR,),
    ConjugationSlot.THIRD_SINGULAR: (
        Person.THIRD_SINGULAR_MASCULINE,
        Person.THIRD_SINGULAR_FEMININE,
        Person.THIRD_SINGULAR_NEUTER,
    ),
    ConjugationSlot.FIRST_PLURAL: (Person.FIRST_PLURAL,),
    ConjugationSlot.SECOND_PLURAL: (Person.SECOND_PLURAL,),
    ConjugationSlot.THIRD_PLURAL_FORMAL: (Person.THIRD_PLURAL, Person.FORMAL),
}


class Tense(str, Enum):
    PRESENT = "present"
    PRETERITE = "preterite"
    PERFECT = "perfect"


class VerbSubtype(str, Enum):
    FULL = "full"
    MODAL = "modal"
    AUXILIARY = "auxiliary"


class Auxiliary(str, Enum):
    HABEN = "haben"
    SEIN = "sein"


class IrregularType(str, Enum):
    STRONG = "strong"
    MIXED = "mixed"
    SUPPLETIVE = "suppletive"
    UNSPECIFIED = "irregular"  # flagged irregular without a subtype


class PartOfSpeech(str, Enum):
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    CONJUNCTION = "conjunction"
    ARTICLE = "article"
    UNKNOWN = "unknown"


class DeclensionSlot(str, Enum):
    """Column of a determiner table: one of the three genders, or plural."""
    MASCULINE = "m"
    FEMININE = "f"
    NEUTER = "n"
    PLURAL = "pl"

    @classmethod
    def of(cls, gender: Gender, number: GrammaticalNumber) -> "DeclensionSlot":
        if number is GrammaticalNumber.PLURAL:
            return cls.PLURAL
        return {
            Gender.MASCULINE: cls.MASCULINE,
            Gender.FEMININE: cls.FEMININE,
            Gender.NEUTER: cls.NEUTER,
        }[gender]


class FormStatus(str, Enum):
    """Outcome attached to every resolved surface form."""
    AVAILABLE = "available"
    UNAVAILABLE_COMBINATION = "unavailable_combination"  # e.g. indefinite + plural
    MISSING_DATA = "missing_data"  # plural or raw conjugated form not supplied

    @property
    def selectable(self) -> bool:
        return self is FormStatus.AVAILABLE

