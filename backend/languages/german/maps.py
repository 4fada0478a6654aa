"""Mappings from dictionary-record and UI keys to the closed grammar enums."""
from enum import Enum
from typing import Mapping, TypeVar

from core.errors import AppError, Ok, Result, invalid_grammar_parameter
from languages.types import (
    Auxiliary,
    DeterminerType,
    Gender,
    GrammaticalCase,
    GrammaticalNumber,
    IrregularType,
    PartOfSpeech,
    Person,
    Tense,
    VerbSubtype,
)

E = TypeVar("E", bound=Enum)

# Gender as delivered by the dictionary record (definite article of the lemma)
GENDER_MAP: Mapping[str, Gender] = {
    "der": Gender.MASCULINE,
    "die": Gender.FEMININE,
    "das": Gender.NEUTER,
    "m": Gender.MASCULINE,
    "f": Gender.FEMININE,
    "n": Gender.NEUTER,
}
GENDER_MAP_REV = {Gender.MASCULINE: "der", Gender.FEMININE: "die", Gender.NEUTER: "das"}

CASE_MAP: Mapping[str, GrammaticalCase] = {
    "nom": GrammaticalCase.NOMINATIVE,
    "akk": GrammaticalCase.ACCUSATIVE,
    "acc": GrammaticalCase.ACCUSATIVE,
    "dat": GrammaticalCase.DATIVE,
    "gen": GrammaticalCase.GENITIVE,
    "nominativ": GrammaticalCase.NOMINATIVE,
    "akkusativ": GrammaticalCase.ACCUSATIVE,
    "dativ": GrammaticalCase.DATIVE,
    "genitiv": GrammaticalCase.GENITIVE,
}

NUMBER_MAP: Mapping[str, GrammaticalNumber] = {
    "sg": GrammaticalNumber.SINGULAR,
    "pl": GrammaticalNumber.PLURAL,
}

DETERMINER_MAP: Mapping[str, DeterminerType] = {
    "def": DeterminerType.DEFINITE,
    "ein": DeterminerType.INDEFINITE,
    "kein": DeterminerType.NEGATION,
    "poss": DeterminerType.POSSESSIVE,
    "dies": DeterminerType.DEMONSTRATIVE,
    "welch": DeterminerType.INTERROGATIVE,
}

# Exact-case keys first: "Sie" is the formal address, "sie" the 3rd person feminine
PERSON_MAP: Mapping[str, Person] = {
    "ich": Person.FIRST_SINGULAR,
    "du": Person.SECOND_SINGULAR,
    "er": Person.THIRD_SINGULAR_MASCULINE,
    "sie": Person.THIRD_SINGULAR_FEMININE,
    "es": Person.THIRD_SINGULAR_NEUTER,
    "wir": Person.FIRST_PLURAL,
    "ihr": Person.SECOND_PLURAL,
    "sie_pl": Person.THIRD_PLURAL,
    "Sie": Person.FORMAL,
}

TENSE_MAP: Mapping[str, Tense] = {
    "praesens": Tense.PRESENT,
    "präsens": Tense.PRESENT,
    "praeteritum": Tense.PRETERITE,
    "präteritum": Tense.PRETERITE,
    "perfekt": Tense.PERFECT,
}

VERB_SUBTYPE_MAP: Mapping[str, VerbSubtype] = {
    "vollverb": VerbSubtype.FULL,
    "modal": VerbSubtype.MODAL,
    "modalverb": VerbSubtype.MODAL,
    "hilfsverb": VerbSubtype.AUXILIARY,
}

AUXILIARY_MAP: Mapping[str, Auxiliary] = {
    "haben": Auxiliary.HABEN,
    "sein": Auxiliary.SEIN,
}

POS_MAP: Mapping[str, PartOfSpeech] = {
    "noun": PartOfSpeech.NOUN,
    "substantiv": PartOfSpeech.NOUN,
    "nomen": PartOfSpeech.NOUN,
    "verb": PartOfSpeech.VERB,
    "verben": PartOfSpeech.VERB,
    "adjective": PartOfSpeech.ADJECTIVE,
    "adjektiv": PartOfSpeech.ADJECTIVE,
    "adverb": PartOfSpeech.ADVERB,
    "pronoun": PartOfSpeech.PRONOUN,
    "pronomen": PartOfSpeech.PRONOUN,
    "preposition": PartOfSpeech.PREPOSITION,
    "präposition": PartOfSpeech.PREPOSITION,
    "conjunction": PartOfSpeech.CONJUNCTION,
    "konjunktion": PartOfSpeech.CONJUNCTION,
    "article": PartOfSpeech.ARTICLE,
    "artikel": PartOfSpeech.ARTICLE,
}

# Irregular classification: English ids and the German labels some sources use
IRREGULAR_MAP: Mapping[str, IrregularType] = {
    "strong": IrregularType.STRONG,
    "stark": IrregularType.STRONG,
    "mixed": IrregularType.MIXED,
    "gemischt": IrregularType.MIXED,
    "suppletive": IrregularType.SUPPLETIVE,
    "suppletiv": IrregularType.SUPPLETIVE,
    "irregular": IrregularType.UNSPECIFIED,
    "unregelmäßig": IrregularType.UNSPECIFIED,
}


def coerce(
    enum_cls: type[E],
    value: object,
    parameter: str,
    aliases: Mapping[str, E] | None = None,
    origin: str = "",
) -> Result[E, AppError]:
    """Turn an enum member, enum value or known alias into the enum member.

    Anything else is an InvalidGrammarParameter error.
    """
    if isinstance(value, enum_cls):
        return Ok(value)

    if isinstance(value, str):
        key = value.strip()
        aliases = aliases or {}
        if key in aliases:
            return Ok(aliases[key])
        lowered = key.lower()
        if lowered in aliases:
            return Ok(aliases[lowered])
        for member in enum_cls:
            if member.value == key or member.value == lowered:
                return Ok(member)

    return invalid_grammar_parameter(
        parameter,
        value,
        allowed=[m.value for m in enum_cls],
        origin=origin,
    )