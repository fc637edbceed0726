from typing import List, Optional
from models.csv_model import CSVData

EMPTY_MESSAGE = "La tabla está vacía."


class TableView:
    """
    Dibuja la tabla como texto de ancho fijo:

        +------+-----+
        | name | age |
        +------+-----+
        | Ann  | 30  |
        +------+-----+

    Alineación siempre a la izquierda, sin truncar.
    """

    @staticmethod
    def column_widths(data: CSVData) -> List[int]:
        widths = []
        for i, name in enumerate(data.columns):
            longest = len(name)
            for row in data.rows:
                cell = row[i] if i < len(row) else ""
                if len(cell) > longest: longest = len(cell)
            widths.append(longest + 2)
        return widths

    @staticmethod
    def render(data: CSVData, rows: Optional[List[List[str]]] = None) -> str:
        """
        rows permite dibujar solo un subconjunto (ej. resultados de búsqueda);
        los anchos se calculan siempre sobre la tabla completa.
        """
        if data.column_count == 0:
            return EMPTY_MESSAGE
        widths = TableView.column_widths(data)
        border = TableView._border(widths)
        lines = [border, TableView._line(data.columns, widths), border]
        for row in (data.rows if rows is None else rows):
            lines.append(TableView._line(row, widths))
        lines.append(border)
        return "\n".join(lines)

    @staticmethod
    def _border(widths: List[int]) -> str:
        return "+" + "+".join("-" * w for w in widths) + "+"

    @staticmethod
    def _line(values: List[str], widths: List[int]) -> str:
        safe = []
        for i, w in enumerate(widths):
            value = values[i] if i < len(values) else ""
            safe.append(" " + value.ljust(w - 1))
        return "|" + "|".join(safe) + "|"
