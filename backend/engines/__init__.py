from engines.selection import (
    HeadwordOverrideSink,
    NounCardSession,
    NounRow,
    NounSelection,
    PronunciationSink,
    SelectionKind,
    SelectionState,
    VerbCardSession,
    VerbRow,
    VerbSelection,
)

__all__ = [
    "HeadwordOverrideSink",
    "NounCardSession",
    "NounRow",
    "NounSelection",
    "PronunciationSink",
    "SelectionKind",
    "SelectionState",
    "VerbCardSession",
    "VerbRow",
    "VerbSelection",
]
