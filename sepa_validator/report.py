"""
Plain-text rendering of validation results for the command line.
"""

from typing import List, Optional, Sequence

from sepa_validator.validators.base_validator import ValidationResult

HEADER_LABELS = {
    "msgId": "Batch reference",
    "creationDate": "Creation date",
    "nbOfTxs": "Number of transactions",
    "ctrlSum": "Total amount",
}

NO_MANDATE_MESSAGE = "No mandate found in this file."


def _cell(value: Optional[str]) -> str:
    return "-" if value is None else value


def _table(headers: Sequence[str], rows: List[Sequence[Optional[str]]]) -> List[str]:
    cells = [[_cell(v) for v in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in cells:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))

    def line(values: Sequence[str]) -> str:
        return "  ".join(v.ljust(widths[i]) for i, v in enumerate(values)).rstrip()

    lines = [line(headers), line(["-" * w for w in widths])]
    lines.extend(line(row) for row in cells)
    return lines


def render_result(result: ValidationResult) -> str:
    """Render a result as human-readable text."""
    if not result.is_valid:
        return f"INVALID: {result.message}"

    details = result.details
    lines = [f"VALID: {result.message}", "", "Header"]
    for key, value in details.header.to_dict().items():
        lines.append(f"  {HEADER_LABELS.get(key, key)}: {_cell(value)}")

    lines += ["", "Payments"]
    lines += _table(
        ["ID", "Method", "Service level", "Local instrument", "Sequence type", "Collection date"],
        [
            [p.id, p.method, p.service_level, p.local_instrument, p.sequence_type, p.collection_date]
            for p in details.payments
        ],
    )

    lines += ["", "Transactions"]
    lines += _table(
        ["Name", "IBAN", "Reference", "Amount"],
        [[t.name, t.iban, t.reference, t.amount] for t in details.transactions],
    )

    lines += ["", "Mandates"]
    if details.mandates:
        lines += _table(
            ["Mandate ID", "Signature date", "Sequence type"],
            [[m.mandate_id, m.signature_date, m.sequence_type] for m in details.mandates],
        )
    else:
        lines.append(NO_MANDATE_MESSAGE)

    return "\n".join(lines)
