from __future__ import annotations

import re
from dataclasses import dataclass, field

# Order matters: on equal field counts the earlier delimiter wins.
DELIMITERS: tuple[str, ...] = (",", ";", "\t", "|")

_line_split_re = re.compile(r"\r?\n")


@dataclass(frozen=True)
class CsvTable:
    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)


def split_lines(text: str) -> list[str]:
    return [ln for ln in _line_split_re.split(text or "") if ln.strip()]


def detect_delimiter(first_line: str) -> str:
    best = DELIMITERS[0]
    best_count = 0
    for d in DELIMITERS:
        count = len(first_line.split(d))
        if count > best_count:
            best_count = count
            best = d
    return best


def parse_csv_line(line: str, delimiter: str) -> list[str]:
    """
    Splits one line honouring double quotes. A doubled quote inside a
    quoted section is a literal quote. Fields come back stripped.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < n and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1

    fields.append("".join(current).strip())
    return fields


def parse_csv(text: str) -> CsvTable:
    """
    Header line plus at least one data line, otherwise an empty table.
    Data rows with fewer than 2 fields are dropped (footers, notes).
    """
    lines = split_lines(text)
    if len(lines) < 2:
        return CsvTable()

    delimiter = detect_delimiter(lines[0])
    headers = parse_csv_line(lines[0], delimiter)

    rows: list[list[str]] = []
    for line in lines[1:]:
        fields = parse_csv_line(line, delimiter)
        if len(fields) < 2:
            continue
        rows.append(fields)

    return CsvTable(headers=headers, rows=rows)
