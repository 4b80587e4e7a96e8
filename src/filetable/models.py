from enum import Enum

from pydantic import BaseModel, ConfigDict


class RawRow(BaseModel):
    """One decoded CSV record, positionally mapped onto the fixed schema."""

    line_number: int
    source_file: str | None = None
    text: str | None = None
    number_text: str | None = None
    hex_text: str | None = None


class ValidatedRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    number: int
    hex: str


class DiscardReason(str, Enum):
    MISSING_FIELD = "missing_field"
    INVALID_NUMBER = "invalid_number"
    INVALID_HEX = "invalid_hex"


class RowOutcome(BaseModel):
    """Result of validating a single row: either a kept record or a discard reason."""

    model_config = ConfigDict(frozen=True)

    line_number: int
    record: ValidatedRecord | None = None
    reason: DiscardReason | None = None
    detail: str = ""

    @property
    def kept(self) -> bool:
        return self.record is not None


class FileResult(BaseModel):
    file: str
    lines: list[ValidatedRecord]
