"""
Delimited Training-Record Parser

Reads newline-delimited dataset text:

    Patient_ID,Age,Gender,Symptoms,Blood_Pressure,Heart_Rate,Temperature,Pre_Existing_Conditions,Risk_Level
    P001,45,Male,"chest pain, sweating",150/95,110,37.2,Hypertension,High

- The separator is a tab when the header contains one, otherwise a comma.
- A double quote toggles an "inside quotes" state in which the separator is
  literal text; the quote characters themselves are dropped.
- Rows with fewer than MIN_FIELDS fields, or whose numeric fields cannot be
  represented, are skipped. Unparseable numeric text defaults to 0.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from triage_ai.utils import DatasetParseError, get_logger
from .base import TrainingRecord

logger = get_logger(__name__)

MIN_FIELDS = 9
QUOTE = '"'


def detect_separator(header: str) -> str:
    return "\t" if "\t" in header else ","


def split_line(line: str, separator: str = ",") -> List[str]:
    """Quote-aware split; each field is whitespace-trimmed."""
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for ch in line:
        if ch == QUOTE:
            in_quotes = not in_quotes
        elif ch == separator and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)

    fields.append("".join(current).strip())
    return fields


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _to_int(text: str) -> int:
    # int(float("inf")) raises OverflowError, which drops the row
    return int(_to_float(text))


def parse_fields(fields: List[str]) -> TrainingRecord:
    """
    Build a TrainingRecord from one split row.

    Raises:
        ValueError: fewer than MIN_FIELDS fields.
        OverflowError: a numeric field is not representable.
    """
    if len(fields) < MIN_FIELDS:
        raise ValueError(f"expected at least {MIN_FIELDS} fields, got {len(fields)}")

    return TrainingRecord(
        patient_id=fields[0],
        age=_to_int(fields[1]),
        gender=fields[2],
        symptoms=fields[3],
        blood_pressure=fields[4],
        heart_rate=_to_int(fields[5]),
        temperature=_to_float(fields[6]),
        conditions=fields[7],
        risk_label=fields[8],
    )


class DelimitedRecordParser:
    """Parses dataset text into TrainingRecords, dropping malformed rows."""

    def __init__(self, min_fields: int = MIN_FIELDS):
        self.min_fields = min_fields
        self.skipped_rows = 0

    def parse_lines(self, lines: Iterable[str]) -> List[TrainingRecord]:
        iterator = iter(lines)
        header: Optional[str] = None
        for line in iterator:
            if line.strip():
                header = line.rstrip("\r\n")
                break
        if header is None:
            raise DatasetParseError("Dataset has no header line")

        separator = detect_separator(header)
        records: List[TrainingRecord] = []
        self.skipped_rows = 0

        for line_no, line in enumerate(iterator, start=2):
            if not line.strip():
                continue
            fields = split_line(line.rstrip("\r\n"), separator)
            if len(fields) < self.min_fields:
                self.skipped_rows += 1
                logger.debug(f"DelimitedRecordParser: line {line_no} has {len(fields)} fields, skipped")
                continue
            try:
                records.append(parse_fields(fields))
            except (ValueError, OverflowError) as exc:
                self.skipped_rows += 1
                logger.debug(f"DelimitedRecordParser: line {line_no} skipped ({exc})")

        logger.info(
            f"DelimitedRecordParser: {len(records)} record(s) parsed, "
            f"{self.skipped_rows} skipped (separator={separator!r})"
        )
        return records

    def parse(self, text: str) -> List[TrainingRecord]:
        return self.parse_lines(text.splitlines())
