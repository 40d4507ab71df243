"""Plain-text table rendering."""

from collections.abc import Sequence

from src.domain.constants import COLUMN_SEPARATOR


def _cell_text(value: object) -> str:
    return "" if value is None else str(value)


def render_table(
    row_headers: Sequence[object],
    column_headers: Sequence[object],
    cell_values: Sequence[Sequence[object]],
) -> str:
    """Render a matrix as aligned text.

    Row headers are left-aligned to the widest row header. Column headers
    and data cells are right-aligned to the widest data cell of their
    column; a header wider than its data is left unpadded. Missing or None
    cells render as empty strings.

    Args:
        row_headers: Label of each data row.
        column_headers: Label of each data column.
        cell_values: Data rows, aligned with ``row_headers``.

    Returns:
        str: Header line followed by one line per row, joined by newlines.
    """
    column_count = len(column_headers)
    labels = [_cell_text(header) for header in row_headers]
    rows = []
    for index in range(len(labels)):
        values = cell_values[index] if index < len(cell_values) else ()
        cells = [_cell_text(value) for value in values[:column_count]]
        cells.extend([""] * (column_count - len(cells)))
        rows.append(cells)

    label_width = max((len(label) for label in labels), default=0)
    widths = [
        max((len(row[column]) for row in rows), default=0)
        for column in range(column_count)
    ]

    header_line = COLUMN_SEPARATOR.join(
        [
            "".ljust(label_width),
            *(
                _cell_text(header).rjust(width)
                for header, width in zip(column_headers, widths)
            ),
        ]
    )
    lines = [header_line]
    for label, cells in zip(labels, rows):
        lines.append(
            COLUMN_SEPARATOR.join(
                [
                    label.ljust(label_width),
                    *(
                        cell.rjust(width)
                        for cell, width in zip(cells, widths)
                    ),
                ]
            )
        )
    return "\n".join(lines)


__all__ = ["render_table"]
