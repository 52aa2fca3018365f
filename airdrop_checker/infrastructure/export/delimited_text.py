"""Renders the result table as comma-delimited text.

This is deliberately not full CSV quoting: each field is stringified with
`format_value`, CRLF pairs become ", ", and the field is wrapped in double
quotes. Quotes and commas inside a field are left untouched. Files produced
by earlier runs depend on this exact output.
"""

from airdrop_checker.domain.models.common import DelimitedText, TableRows, format_value

CRLF = "\r\n"
CRLF_REPLACEMENT = ", "


def _render_field(value) -> str:
    return '"' + format_value(value).replace(CRLF, CRLF_REPLACEMENT) + '"'


def to_delimited_text(rows: TableRows) -> DelimitedText:
    """Joins fields with commas and terminates every row with a newline."""
    return DelimitedText("".join(",".join(_render_field(field) for field in row) + "\n" for row in rows))
