"""Dictionary entries the German resolvers work on."""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from languages.types import (
    Auxiliary,
    Gender,
    IrregularType,
    Person,
    Tense,
    VerbSubtype,
)

REFLEXIVE_MARKER = "sich "


@dataclass(frozen=True, slots=True)
class NounEntry:
    """A noun lemma with its gender and (optional) plural."""
    lemma: str
    gender: Gender
    plural_lemma: str | None = None


@dataclass(frozen=True, slots=True)
class VerbEntry:
    """A verb lemma with its metadata and externally supplied raw forms.

    ``raw_forms`` maps (tense, person) to the form as delivered upstream,
    e.g. ``(Tense.PRESENT, Person.FIRST_SINGULAR) -> "stehe auf"``.
    """
    lemma: str
    verb_subtype: VerbSubtype = VerbSubtype.FULL
    separable: bool = False
    reflexive: bool = False
    auxiliary: Auxiliary | None = None
    irregular: IrregularType | None = None
    raw_forms: Mapping[tuple[Tense, Person], str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "raw_forms", MappingProxyType(dict(self.raw_forms)))

    @property
    def infinitive(self) -> str:
        """Lemma without a leading reflexive marker."""
        lemma = self.lemma.strip()
        if lemma.lower().startswith(REFLEXIVE_MARKER):
            return lemma[len(REFLEXIVE_MARKER):].strip()
        return lemma

    def raw_form(self, tense: Tense, person: Person) -> str:
        return (self.raw_forms.get((tense, person)) or "").strip()
