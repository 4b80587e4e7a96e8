"""Unit tests for CSV decoding and row validation."""

from __future__ import annotations

import pytest

from filetable.core.parser import (
    StructuralParseError,
    decode_rows,
    parse_csv_content,
    parse_csv_outcomes,
    parse_leading_int,
    validate_row,
)
from filetable.models import DiscardReason, RawRow, ValidatedRecord

HEX = "aabbccddeeff00112233445566778899"
HEADER = "file,text,number,hex\n"


class TestParseLeadingInt:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("12", 12),
            ("0", 0),
            ("-7", -7),
            ("+8", 8),
            ("  42", 42),
            ("123abc", 123),
            ("12.9", 12),
            ("007", 7),
        ],
    )
    def test_parses_leading_digits(self, value: str, expected: int) -> None:
        assert parse_leading_int(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "notanumber", "-", "+x", "x12", "."])
    def test_rejects_values_without_leading_integer(self, value: str) -> None:
        assert parse_leading_int(value) is None


class TestDecodeRows:
    def test_header_is_skipped_and_line_numbers_start_at_two(self) -> None:
        rows = decode_rows(HEADER + f"f1,a,1,{HEX}\nf1,b,2,{HEX}")
        assert [r.line_number for r in rows] == [2, 3]
        assert rows[0].text == "a"

    def test_blank_lines_are_skipped(self) -> None:
        rows = decode_rows(HEADER + f"\nf1,a,1,{HEX}\n\n")
        assert len(rows) == 1
        assert rows[0].line_number == 3

    def test_missing_fields_become_none(self) -> None:
        rows = decode_rows(HEADER + "f1,onlytext")
        assert rows[0].source_file == "f1"
        assert rows[0].text == "onlytext"
        assert rows[0].number_text is None
        assert rows[0].hex_text is None

    def test_extra_fields_are_ignored(self) -> None:
        rows = decode_rows(HEADER + f"f1,a,1,{HEX},extra,more")
        assert rows[0].hex_text == HEX

    def test_quoted_field_may_contain_comma(self) -> None:
        rows = decode_rows(HEADER + f'f1,"hello, world",1,{HEX}')
        assert rows[0].text == "hello, world"

    def test_unterminated_quote_is_structural_error(self) -> None:
        with pytest.raises(StructuralParseError) as exc_info:
            decode_rows(HEADER + f'f1,"unterminated,1,{HEX}', "broken.csv")
        assert exc_info.value.source == "broken.csv"
        assert "broken.csv" in str(exc_info.value)

    def test_header_only_gives_no_rows(self) -> None:
        assert decode_rows("file,text,number,hex") == []

    def test_fields_are_stripped(self) -> None:
        rows = decode_rows(HEADER + f"f1 , hello ,  12 , {HEX} ")
        assert rows[0].source_file == "f1"
        assert rows[0].text == "hello"
        assert rows[0].number_text == "12"
        assert rows[0].hex_text == HEX


class TestValidateRow:
    def _row(self, **fields: str | None) -> RawRow:
        values: dict[str, str | None] = {
            "source_file": "f1",
            "text": "hello",
            "number_text": "12",
            "hex_text": HEX,
        }
        values.update(fields)
        return RawRow(line_number=2, **values)

    def test_valid_row_is_kept(self) -> None:
        outcome = validate_row(self._row())
        assert outcome.kept
        assert outcome.record == ValidatedRecord(text="hello", number=12, hex=HEX)
        assert outcome.reason is None

    @pytest.mark.parametrize("field", ["source_file", "text", "number_text", "hex_text"])
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_or_blank_field_discards(self, field: str, value: str | None) -> None:
        outcome = validate_row(self._row(**{field: value}))
        assert not outcome.kept
        assert outcome.reason is DiscardReason.MISSING_FIELD
        assert field in outcome.detail

    def test_non_numeric_number_discards(self) -> None:
        outcome = validate_row(self._row(number_text="notanumber"))
        assert outcome.reason is DiscardReason.INVALID_NUMBER

    def test_number_with_trailing_text_is_accepted(self) -> None:
        outcome = validate_row(self._row(number_text="123abc"))
        assert outcome.record is not None
        assert outcome.record.number == 123

    @pytest.mark.parametrize(
        "hex_value",
        [
            HEX[:-1],
            HEX + "0",
            "g" + HEX[1:],
            "aabbccdd-eeff-0011-2233-445566778899",
            "badhex",
        ],
        ids=["short", "long", "non-hex-char", "separators", "word"],
    )
    def test_invalid_hex_discards(self, hex_value: str) -> None:
        outcome = validate_row(self._row(hex_text=hex_value))
        assert outcome.reason is DiscardReason.INVALID_HEX

    def test_upper_and_mixed_case_hex_is_valid(self) -> None:
        mixed = "AABBccddEEFF00112233445566778899"
        outcome = validate_row(self._row(hex_text=mixed))
        assert outcome.record is not None
        assert outcome.record.hex == mixed

    def test_number_checked_before_hex(self) -> None:
        outcome = validate_row(self._row(number_text="x", hex_text="bad"))
        assert outcome.reason is DiscardReason.INVALID_NUMBER

    def test_text_is_trimmed(self) -> None:
        outcome = validate_row(self._row(text="  padded  "))
        assert outcome.record is not None
        assert outcome.record.text == "padded"


class TestParseCsvContent:
    def test_scenario_single_valid_line(self) -> None:
        records = parse_csv_content(f"h\nf1,hello,12,{HEX}", "f1")
        assert records == [ValidatedRecord(text="hello", number=12, hex=HEX)]
        assert isinstance(records[0].number, int)

    def test_scenario_invalid_number_gives_empty(self) -> None:
        assert parse_csv_content(f"h\nf1,x,notanumber,{HEX}", "f1") == []

    @pytest.mark.parametrize("content", [None, "", "   \n  ", 42, b"h\nf1,a,1,x"])
    def test_absent_or_blank_content_gives_empty(self, content: object) -> None:
        assert parse_csv_content(content, "f1") == []

    def test_bad_rows_do_not_affect_others_and_order_is_kept(self) -> None:
        content = (
            HEADER
            + f"f1,first,1,{HEX}\n"
            + f"f1,,2,{HEX}\n"
            + f"f1,second,abc,{HEX}\n"
            + "f1,third,3,short\n"
            + f"f1,fourth,4,{HEX.upper()}\n"
            + "f1,onlytext\n"
            + f"f1,fifth,5,{HEX}"
        )
        records = parse_csv_content(content, "f1")
        assert [r.text for r in records] == ["first", "fourth", "fifth"]
        assert [r.number for r in records] == [1, 4, 5]

    def test_duplicates_are_kept(self) -> None:
        line = f"f1,same,1,{HEX}\n"
        assert len(parse_csv_content(HEADER + line + line, "f1")) == 2

    def test_parsing_is_idempotent(self) -> None:
        content = HEADER + f"f1,a,1,{HEX}\nf1,b,x,{HEX}\nf1,c,3,{HEX}"
        assert parse_csv_content(content, "f1") == parse_csv_content(content, "f1")

    def test_structural_fault_raises(self) -> None:
        with pytest.raises(StructuralParseError):
            parse_csv_content(HEADER + '"never closed', "f1")

    def test_crlf_line_endings(self) -> None:
        records = parse_csv_content(f"h\r\nf1,a,1,{HEX}\r\nf1,b,2,{HEX}\r\n", "f1")
        assert [r.text for r in records] == ["a", "b"]

    def test_space_padded_row_is_kept(self) -> None:
        records = parse_csv_content(f"file,text,number,hex\nf1, hello, 12, {HEX}\n", "f1")
        assert records == [ValidatedRecord(text="hello", number=12, hex=HEX)]

    def test_hex_with_trailing_space_is_kept(self) -> None:
        records = parse_csv_content(HEADER + f"f1,a,1,{HEX} \n", "f1")
        assert [r.hex for r in records] == [HEX]


class TestParseCsvOutcomes:
    def test_reports_discarded_rows_with_line_numbers(self) -> None:
        content = HEADER + f"f1,a,1,{HEX}\nf1,b,x,{HEX}\nf1,c,3,nothex"
        outcomes = parse_csv_outcomes(content, "f1")
        assert [o.line_number for o in outcomes] == [2, 3, 4]
        assert [o.reason for o in outcomes] == [None, DiscardReason.INVALID_NUMBER, DiscardReason.INVALID_HEX]

    def test_records_are_immutable(self) -> None:
        outcomes = parse_csv_outcomes(HEADER + f"f1,a,1,{HEX}", "f1")
        record = outcomes[0].record
        assert record is not None
        with pytest.raises(ValueError):
            record.text = "changed"  # type: ignore[misc]
