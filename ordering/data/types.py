"""Column types shared by every store backend."""

import uuid
from decimal import Decimal
from typing import Optional

from sqlalchemy import LargeBinary, Numeric, String
from sqlalchemy.types import TypeDecorator


class GuidBytes(TypeDecorator):
    """
    UUID stored as a fixed 16-byte binary value.

    Bound parameters and result values are converted here, so an identifier
    comparison is a plain ``column == uuid`` on SQLite, PostgreSQL or any other
    backend and always compares the same 16 bytes.
    """

    impl = LargeBinary
    cache_ok = True

    def __init__(self) -> None:
        super().__init__(length=16)

    def process_bind_param(self, value, dialect) -> Optional[bytes]:
        if value is None:
            return None
        if isinstance(value, uuid.UUID):
            return value.bytes
        if isinstance(value, (bytes, bytearray)):
            if len(value) != 16:
                raise ValueError(f"Identifier must be 16 bytes, got {len(value)}")
            return bytes(value)
        return uuid.UUID(str(value)).bytes

    def process_result_value(self, value, dialect) -> Optional[uuid.UUID]:
        if value is None:
            return None
        return uuid.UUID(bytes=bytes(value))


class MoneyDecimal(TypeDecorator):
    """
    Fixed-point amount rounded to ``scale`` decimal places.

    SQLite keeps ``NUMERIC`` values as floating point, so there the amount is
    stored as its decimal text. Every other backend gets a real ``NUMERIC``
    column. Result values are always ``Decimal``.
    """

    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int = 18, scale: int = 4) -> None:
        super().__init__(precision=precision, scale=scale, asdecimal=True)
        self.precision = precision
        self.scale = scale

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            # Digits plus sign and decimal point
            return dialect.type_descriptor(String(self.precision + 2))
        return super().load_dialect_impl(dialect)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        amount = value.quantize(Decimal(1).scaleb(-self.scale))
        if dialect.name == "sqlite":
            return str(amount)
        return amount

    def process_result_value(self, value, dialect) -> Optional[Decimal]:
        if value is None:
            return None
        if isinstance(value, Decimal):
            return value
        return Decimal(str(value))
