from typing import List

import pandas as pd


class CSVData:
    """
    Representa la tabla en memoria:
      - columns: lista de strings (nombres, no necesariamente únicos)
      - rows: lista de listas de strings, en orden de inserción
    Las filas leídas de disco pueden tener un largo distinto al de columns.
    """
    def __init__(self, columns=None, rows=None):
        self.columns: List[str] = columns or []
        self.rows: List[List[str]] = rows or []

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def cell(self, row_index: int, col_index: int) -> str:
        row = self.rows[row_index]
        return row[col_index] if col_index < len(row) else ""

    def to_dataframe(self) -> pd.DataFrame:
        # Filas cortas se rellenan solo para el DataFrame; el modelo no cambia
        width = self.column_count
        safe_rows = [[self.cell(r, i) for i in range(width)] for r in range(self.row_count)]
        frame = pd.DataFrame(safe_rows, columns=range(width), dtype=str)
        frame.columns = list(self.columns)
        return frame

    def __eq__(self, other):
        if not isinstance(other, CSVData):
            return NotImplemented
        return self.columns == other.columns and self.rows == other.rows

    def __repr__(self):
        return f"CSVData(columns={self.columns!r}, rows={len(self.rows)})"
