"""Decode CSV text and validate each row against the fixed four-column schema."""

from __future__ import annotations

import csv
import io
import logging
import re

from filetable.models import DiscardReason, RawRow, RowOutcome, ValidatedRecord

logger = logging.getLogger(__name__)

FIELD_NAMES: tuple[str, ...] = ("source_file", "text", "number_text", "hex_text")

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{32}")
_LEADING_INT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


class StructuralParseError(Exception):
    """The CSV decoder could not tokenize the input at all."""

    def __init__(self, source: str, line_number: int, message: str) -> None:
        super().__init__(f"{source}: line {line_number}: {message}")
        self.source = source
        self.line_number = line_number


def parse_leading_int(value: str) -> int | None:
    """Parse the leading base-10 integer of ``value``.

    Leading whitespace and a sign are allowed; trailing content is ignored,
    so ``"123abc"`` gives ``123``. Returns ``None`` when no digit is found.
    """
    match = _LEADING_INT_PATTERN.match(value)
    if match is None:
        return None
    return int(match.group(1))


def decode_rows(content: str, source: str = "<memory>") -> list[RawRow]:
    """Tokenize ``content`` into raw rows, skipping the header and blank lines.

    Each field is stripped of surrounding whitespace. Rows with too many
    fields are truncated; missing fields become ``None``.
    """
    reader = csv.reader(io.StringIO(content), strict=True)
    rows: list[RawRow] = []
    try:
        for index, fields in enumerate(reader):
            if index == 0 or not fields:
                continue
            padded: list[str | None] = [field.strip() for field in fields[: len(FIELD_NAMES)]]
            padded.extend([None] * (len(FIELD_NAMES) - len(padded)))
            rows.append(RawRow(line_number=reader.line_num, **dict(zip(FIELD_NAMES, padded))))
    except csv.Error as exc:
        raise StructuralParseError(source, reader.line_num, str(exc)) from exc
    return rows


def _is_present(value: object) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_row(row: RawRow, source: str = "<memory>") -> RowOutcome:
    for name in FIELD_NAMES:
        value = getattr(row, name)
        if not _is_present(value):
            logger.debug("[%s] Data line %d: FAIL - invalid or empty %r field: %r", source, row.line_number, name, value)
            return RowOutcome(
                line_number=row.line_number,
                reason=DiscardReason.MISSING_FIELD,
                detail=f"field {name!r} is missing or empty",
            )

    assert row.text is not None and row.number_text is not None and row.hex_text is not None

    number = parse_leading_int(row.number_text)
    if number is None:
        logger.debug("[%s] Data line %d: FAIL - %r is not a valid number", source, row.line_number, row.number_text)
        return RowOutcome(
            line_number=row.line_number,
            reason=DiscardReason.INVALID_NUMBER,
            detail=f"{row.number_text!r} is not a valid number",
        )

    if _HEX_PATTERN.fullmatch(row.hex_text) is None:
        logger.debug("[%s] Data line %d: FAIL - %r is not a 32-char hex", source, row.line_number, row.hex_text)
        return RowOutcome(
            line_number=row.line_number,
            reason=DiscardReason.INVALID_HEX,
            detail=f"{row.hex_text!r} is not a 32-char hex string",
        )

    logger.debug("[%s] Data line %d: record is valid", source, row.line_number)
    return RowOutcome(
        line_number=row.line_number,
        record=ValidatedRecord(text=row.text.strip(), number=number, hex=row.hex_text.strip()),
    )


def parse_csv_outcomes(content: object, source: str) -> list[RowOutcome]:
    """Run every data row through validation, keeping the discarded ones too."""
    if not isinstance(content, str) or content.strip() == "":
        logger.debug("[%s] File is empty or content is invalid", source)
        return []
    try:
        rows = decode_rows(content, source)
    except StructuralParseError as exc:
        logger.error("[%s] Critical error parsing CSV: %s", source, exc)
        raise
    return [validate_row(row, source) for row in rows]


def parse_csv_content(content: object, source: str) -> list[ValidatedRecord]:
    """Return the validated records of ``content`` in input order.

    Malformed rows are dropped. Only a structural decoding fault raises
    :class:`StructuralParseError`; empty or absent content yields ``[]``.
    """
    records = [outcome.record for outcome in parse_csv_outcomes(content, source) if outcome.record is not None]
    logger.debug("[%s] Found %d valid line(s)", source, len(records))
    return records
