"""German language module: determiner tables, noun declension, verb surface forms."""
from .conjugation import (
    SEPARABLE_PREFIXES,
    VerbForm,
    VerbFormResolver,
    VerbSummary,
    detect_separable_prefix,
)
from .declension import NounDeclensionResolver, NounForm, citation_form
from .determiners import (
    DEFAULT_REFERENCE_PAIRING,
    DETERMINER_TABLES,
    DeterminerRuleTables,
    ReferencePairing,
)
from .entries import NounEntry, VerbEntry
from .module import GermanModule
from .record import DictionaryRecord, entry_from_record, parse_record

__all__ = [
    "SEPARABLE_PREFIXES",
    "VerbForm",
    "VerbFormResolver",
    "VerbSummary",
    "detect_separable_prefix",
    "NounDeclensionResolver",
    "NounForm",
    "citation_form",
    "DEFAULT_REFERENCE_PAIRING",
    "DETERMINER_TABLES",
    "DeterminerRuleTables",
    "ReferencePairing",
    "NounEntry",
    "VerbEntry",
    "GermanModule",
    "DictionaryRecord",
    "entry_from_record",
    "parse_record",
]
