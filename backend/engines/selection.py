"""Word-card selection sessions.

A card session owns the view state of one noun or verb card (active tab,
number, person variant) and a SelectionState value. Selecting a cell
re-resolves the form and forwards the surface text to two collaborators:
a pronunciation sink and a headword-override sink.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Protocol
from uuid import uuid4

from core.config import settings
from core.errors import AppError, EngineErrorMapper, Err, Ok, Result
from core.logging import bind_context, selection_logger, unbind_context
from languages.german.conjugation import VerbForm, VerbFormResolver, VerbSummary
from languages.german.declension import NounDeclensionResolver, NounForm
from languages.german.determiners import (
    DEFAULT_POSSESSIVE_PERSON,
    DEFAULT_REFERENCE_PAIRING,
    ReferencePairing,
)
from languages.german.entries import NounEntry, VerbEntry
from languages.german.maps import CASE_MAP, DETERMINER_MAP, NUMBER_MAP, PERSON_MAP, TENSE_MAP, coerce
from languages.types import (
    ConjugationSlot,
    DeterminerType,
    GrammaticalCase,
    GrammaticalNumber,
    Person,
    Tense,
)

log = selection_logger()

ORIGIN = "selection"


class SelectionKind(str, Enum):
    NOUN = "noun"
    VERB = "verb"


@dataclass(frozen=True, slots=True)
class NounSelection:
    case: GrammaticalCase
    number: GrammaticalNumber
    determiner_type: DeterminerType
    person: Person | None = None  # only for possessives


@dataclass(frozen=True, slots=True)
class VerbSelection:
    tense: Tense
    person: Person


@dataclass(frozen=True, slots=True)
class SelectionState:
    """The chosen combination of one card; ``params`` is None while unselected."""
    kind: SelectionKind
    params: NounSelection | VerbSelection | None = None

    @classmethod
    def unselected(cls, kind: SelectionKind) -> "SelectionState":
        return cls(kind=kind)

    @property
    def is_selected(self) -> bool:
        return self.params is not None

    def select(self, params: NounSelection | VerbSelection) -> "SelectionState":
        return SelectionState(kind=self.kind, params=params)

    def clear(self) -> "SelectionState":
        return SelectionState(kind=self.kind)


class PronunciationSink(Protocol):
    def __call__(self, text: str, language_tag: str) -> None: ...


class HeadwordOverrideSink(Protocol):
    """Receives the selected surface, or None to restore the dictionary headword."""
    def __call__(self, surface: str | None, meta: Mapping[str, str] | None = None) -> None: ...


@dataclass(frozen=True, slots=True)
class NounRow:
    """One case row of the noun card: the active form and its comparison form."""
    case: GrammaticalCase
    form: NounForm
    reference: NounForm


@dataclass(frozen=True, slots=True)
class VerbRow:
    """One slot of the conjugation grid with the person it currently resolves to."""
    slot: ConjugationSlot
    form: VerbForm


class _CardSession:
    """Shared state handling and sink delivery for card sessions."""

    __slots__ = ("card_id", "state", "_speak", "_override", "_language_tag", "_mapper")

    def __init__(
        self,
        kind: SelectionKind,
        speak: PronunciationSink,
        override: HeadwordOverrideSink,
        card_id: str | None = None,
        language_tag: str | None = None,
    ):
        self.card_id = card_id or uuid4().hex[:12]
        self.state = SelectionState.unselected(kind)
        self._speak = speak
        self._override = override
        self._language_tag = language_tag or settings.TTS_LANGUAGE_TAG
        self._mapper: EngineErrorMapper = EngineErrorMapper(ORIGIN)

    def clear(self) -> None:
        """Return to unselected and restore the headword."""
        if not self.state.is_selected:
            return
        self.state = self.state.clear()
        log.debug("selection_cleared", card_id=self.card_id, kind=self.state.kind.value)
        self._override(None)

    def _emit(self, display: str, spoken: str, meta: Mapping[str, str] | None) -> None:
        self._override(display, meta)
        if not spoken:
            return
        try:
            self._speak(spoken, self._language_tag)
        except Exception as exc:
            # The selection stands even when audio cannot be played
            log.warning("pronunciation_failed", card_id=self.card_id, text=spoken, error=str(exc))


class NounCardSession(_CardSession):
    """Case table of one noun: number toggle, determiner tab, possessive person."""

    __slots__ = ("entry", "number", "determiner_type", "person", "_resolver", "_pairing")

    def __init__(
        self,
        entry: NounEntry,
        speak: PronunciationSink,
        override: HeadwordOverrideSink,
        resolver: NounDeclensionResolver | None = None,
        pairing: ReferencePairing = DEFAULT_REFERENCE_PAIRING,
        card_id: str | None = None,
        language_tag: str | None = None,
    ):
        super().__init__(SelectionKind.NOUN, speak, override, card_id, language_tag)
        self.entry = entry
        self.number = GrammaticalNumber.SINGULAR
        self.determiner_type = DeterminerType.DEFINITE
        self.person = DEFAULT_POSSESSIVE_PERSON
        self._resolver = resolver or NounDeclensionResolver()
        self._pairing = pairing

    @property
    def reference_determiner(self) -> DeterminerType:
        return self._pairing.reference_for(self.determiner_type, self.number)

    def set_number(self, number: GrammaticalNumber | str) -> Result[GrammaticalNumber, AppError]:
        """Switch singular/plural. Indefinite has no plural, so it falls back to definite."""
        match coerce(GrammaticalNumber, number, "number", NUMBER_MAP, ORIGIN):
            case Err(error):
                return Err(error)
            case Ok(value):
                self.number = value
        if value is GrammaticalNumber.PLURAL and self.determiner_type is DeterminerType.INDEFINITE:
            self.determiner_type = DeterminerType.DEFINITE
            log.debug("determiner_fallback", card_id=self.card_id, determiner_type=self.determiner_type.value)
        self.clear()
        return Ok(value)

    def set_determiner(self, determiner_type: DeterminerType | str) -> Result[DeterminerType, AppError]:
        match coerce(DeterminerType, determiner_type, "determiner_type", DETERMINER_MAP, ORIGIN):
            case Err(error):
                return Err(error)
            case Ok(value):
                self.determiner_type = value
        self.clear()
        return Ok(value)

    def set_person(self, person: Person | str) -> Result[Person, AppError]:
        """Possessor of the possessive tab (mein, dein, ...)."""
        match coerce(Person, person, "person", PERSON_MAP, ORIGIN):
            case Err(error):
                return Err(error)
            case Ok(value):
                self.person = value
        self.clear()
        return Ok(value)

    def _person_for(self, determiner_type: DeterminerType) -> Person | None:
        return self.person if determiner_type is DeterminerType.POSSESSIVE else None

    def _resolve(self, case: GrammaticalCase | str, determiner_type: DeterminerType) -> Result[NounForm, AppError]:
        return self._mapper.map_result(self._resolver.resolve(
            self.entry, case, self.number, determiner_type, self._person_for(determiner_type),
        ))

    def rows(self) -> Result[list[NounRow], AppError]:
        """The four case rows for the current view, with the reference column."""
        rows = []
        for case in GrammaticalCase:
            match (self._resolve(case, self.determiner_type), self._resolve(case, self.reference_determiner)):
                case (Err(error), _) | (_, Err(error)):
                    return Err(error)
                case (Ok(form), Ok(reference)):
                    rows.append(NounRow(case=case, form=form, reference=reference))
        return Ok(rows)

    def select(self, case: GrammaticalCase | str) -> Result[NounForm, AppError]:
        """Select a case cell. Cells without a complete form leave the state unchanged."""
        bind_context(card_id=self.card_id)
        try:
            match coerce(GrammaticalCase, case, "case", CASE_MAP, ORIGIN):
                case Err(error):
                    log.warning("selection_invalid", error=error.message)
                    return Err(error)
                case Ok(case_):
                    pass

            match self._resolve(case_, self.determiner_type):
                case Err(error):
                    log.warning("selection_invalid", error=error.message)
                    return Err(error)
                case Ok(form):
                    pass

            if not form.selectable:
                log.debug("selection_rejected", case=case_.value, status=form.status.value)
                return Ok(form)

            self.state = self.state.select(NounSelection(
                case=case_,
                number=self.number,
                determiner_type=self.determiner_type,
                person=form.person,
            ))
            log.info(
                "noun_selected",
                lemma=self.entry.lemma,
                case=case_.value,
                number=self.number.value,
                determiner_type=self.determiner_type.value,
            )
            self._emit(form.spoken_form, form.spoken_form, {"case": case_.value, "number": self.number.value})
            return Ok(form)
        finally:
            unbind_context("card_id")


class VerbCardSession(_CardSession):
    """Conjugation grid of one verb: tense tab and per-slot subject variants."""

    __slots__ = ("entry", "tense", "variants", "_resolver")

    def __init__(
        self,
        entry: VerbEntry,
        speak: PronunciationSink,
        override: HeadwordOverrideSink,
        resolver: VerbFormResolver | None = None,
        card_id: str | None = None,
        language_tag: str | None = None,
    ):
        super().__init__(SelectionKind.VERB, speak, override, card_id, language_tag)
        self.entry = entry
        self.tense = Tense.PRESENT
        self.variants: dict[ConjugationSlot, Person] = {slot: slot.persons[0] for slot in ConjugationSlot}
        self._resolver = resolver or VerbFormResolver()

    @property
    def summary(self) -> VerbSummary:
        return self._resolver.summarize(self.entry)

    def set_tense(self, tense: Tense | str) -> Result[Tense, AppError]:
        match coerce(Tense, tense, "tense", TENSE_MAP, ORIGIN):
            case Err(error):
                return Err(error)
            case Ok(value):
                self.tense = value
        self.clear()
        return Ok(value)

    def set_variant(self, person: Person | str) -> Result[Person, AppError]:
        """Pick the subject shown in a shared slot (er/sie/es, sie/Sie)."""
        match coerce(Person, person, "person", PERSON_MAP, ORIGIN):
            case Err(error):
                return Err(error)
            case Ok(value):
                pass
        self.variants[ConjugationSlot.of(value)] = value
        self.clear()
        return Ok(value)

    def rows(self) -> Result[list[VerbRow], AppError]:
        """The six grid cells for the current tense and variants."""
        return self._mapper.map_result(
            self._resolver.conjugation_table(self.entry, self.tense, self.variants)
        ).map(lambda forms: [
            VerbRow(slot=ConjugationSlot.of(form.person), form=form) for form in forms
        ])

    def select(self, slot: ConjugationSlot | str) -> Result[VerbForm, AppError]:
        """Select a grid cell. Cells without a raw form leave the state unchanged."""
        bind_context(card_id=self.card_id)
        try:
            match coerce(ConjugationSlot, slot, "slot", origin=ORIGIN):
                case Err(error):
                    log.warning("selection_invalid", error=error.message)
                    return Err(error)
                case Ok(slot_):
                    person = self.variants[slot_]

            match self._mapper.map_result(self._resolver.resolve(self.entry, self.tense, person)):
                case Err(error):
                    log.warning("selection_invalid", error=error.message)
                    return Err(error)
                case Ok(form):
                    pass

            if not form.selectable:
                log.debug("selection_rejected", slot=slot_.value, status=form.status.value)
                return Ok(form)

            self.state = self.state.select(VerbSelection(tense=self.tense, person=person))
            spoken = self._resolver.spoken_form(self.entry, self.tense, person).unwrap_or("")
            log.info("verb_selected", lemma=self.entry.lemma, tense=self.tense.value, person=person.value)
            self._emit(form.display, spoken, {"tense": self.tense.value})
            return Ok(form)
        finally:
            unbind_context("card_id")

