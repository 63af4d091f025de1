"""Validator classes.
"""

from .any import AnyValidator
from .array import ArrayValidator, RecordValidator, TupleValidator
from .base import BaseValidator
from .boolean import BooleanValidator
from .computed import ComputedValidator, ManagedValidator
from .date import DateValidator
from .number import FloatValidator, IntValidator, NumberValidator, NumericValidator
from .object import ObjectValidator
from .scalar import ScalarCapable, ScalarValidator
from .string import StringValidator
from .union import UnionValidator

__all__ = [
    "AnyValidator",
    "ArrayValidator",
    "BaseValidator",
    "BooleanValidator",
    "ComputedValidator",
    "DateValidator",
    "FloatValidator",
    "IntValidator",
    "ManagedValidator",
    "NumberValidator",
    "NumericValidator",
    "ObjectValidator",
    "RecordValidator",
    "ScalarCapable",
    "ScalarValidator",
    "StringValidator",
    "TupleValidator",
    "UnionValidator",
]
