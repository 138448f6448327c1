"""siloft-data: persist the public fields of a record to a flat text file.

Quick start::

    from siloft_data import Data, Int64

    class Counters(Data):
        launches: Int64 = 0
        last_user: str = ""

        def __init__(self) -> None:
            super().__init__("~/.counters")

    counters = Counters()
    counters.load()
    counters.launches += 1
    counters.save()
"""

from siloft_data.config.models import DataScope, StoreLocation
from siloft_data.data import Data, ProgramData, UserData
from siloft_data.domain.codec import decode, encode
from siloft_data.domain.defaults import DefaultsStore
from siloft_data.domain.errors import (
    DecodeError,
    FieldValueError,
    SchemaError,
    SiloftDataError,
)
from siloft_data.domain.models.field_kind import (
    FieldKind,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Transient,
    Volatile,
)
from siloft_data.domain.models.field_value import FieldValue
from siloft_data.domain.schema import FieldDescriptor, FieldSchema
from siloft_data.infrastructure.persistence.persistence_controller import (
    PersistenceController,
)

__version__ = "1.0.0"

__all__ = [
    "Data",
    "DataScope",
    "DecodeError",
    "DefaultsStore",
    "FieldDescriptor",
    "FieldKind",
    "FieldSchema",
    "FieldValue",
    "FieldValueError",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "PersistenceController",
    "ProgramData",
    "SchemaError",
    "SiloftDataError",
    "StoreLocation",
    "Transient",
    "UserData",
    "Volatile",
    "decode",
    "encode",
]
