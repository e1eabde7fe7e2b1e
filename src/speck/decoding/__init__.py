"""Codec engine exports."""

from .codec_models import (
    ABSENT,
    Codec,
    ContextEntry,
    DecodeFailure,
    DecodeResult,
    SpeckEncodeError,
)
from .compound_codecs import (
    ArrayCodec,
    ExactCodec,
    InterfaceCodec,
    IntersectionCodec,
    PartialCodec,
    RecordCodec,
    UnionCodec,
    nilable,
    non_empty_array,
)
from .primitive_codecs import (
    BIG_INT,
    BOOLEAN,
    DATE_TIME,
    INT,
    ISO_DATE_TIME_STRING,
    ISO_DATETIME_STRING_PATTERN,
    NULL,
    NUMBER,
    STRING,
    UNKNOWN,
    UNKNOWN_RECORD,
    LiteralCodec,
    PredicateCodec,
    RefinementCodec,
    strictly_equal,
)

__all__ = [
    "ABSENT",
    "Codec",
    "ContextEntry",
    "DecodeFailure",
    "DecodeResult",
    "SpeckEncodeError",
    "ArrayCodec",
    "ExactCodec",
    "InterfaceCodec",
    "IntersectionCodec",
    "PartialCodec",
    "RecordCodec",
    "UnionCodec",
    "nilable",
    "non_empty_array",
    "BIG_INT",
    "BOOLEAN",
    "DATE_TIME",
    "INT",
    "ISO_DATE_TIME_STRING",
    "ISO_DATETIME_STRING_PATTERN",
    "NULL",
    "NUMBER",
    "STRING",
    "UNKNOWN",
    "UNKNOWN_RECORD",
    "LiteralCodec",
    "PredicateCodec",
    "RefinementCodec",
    "strictly_equal",
]
