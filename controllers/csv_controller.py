from services.csv_service import CSVService, CSVServiceError
from models.csv_model import CSVData
from ui.table_view import TableView
from config.settings import AppSettings
from typing import List, Tuple, Optional


class CSVController:
    """
    Dueño de la tabla en memoria. Toda mutación exitosa reescribe el archivo
    completo antes de retornar. Las operaciones rechazadas no cambian nada,
    retornan False y dejan el motivo en last_warning.
    """

    def __init__(self, path: str, settings: Optional[AppSettings] = None):
        self.path = path
        self.settings = settings or AppSettings(table_path=path)
        self.last_warning: str | None = None
        self.data: CSVData = CSVService.read_csv(path)

    # =========================================================================
    #  CONSULTAS
    # =========================================================================
    def column_count(self) -> int:
        return self.data.column_count

    def row_count(self) -> int:
        return self.data.row_count

    def get_columns(self) -> List[str]:
        return list(self.data.columns)

    def get_rows(self) -> List[List[str]]:
        return [list(r) for r in self.data.rows]

    def find_records(self, term: str) -> List[Tuple[int, List[str]]]:
        search_term = term.lower()
        found = []
        for idx, row in enumerate(self.data.rows):
            if any(search_term in cell.lower() for cell in row):
                found.append((idx, list(row)))
        return found

    def render(self, rows: Optional[List[List[str]]] = None) -> str:
        return TableView.render(self.data, rows)

    # =========================================================================
    #  MUTACIONES
    # =========================================================================
    def add_column(self, name: str) -> bool:
        self.last_warning = None
        self.data.columns.append(name)
        for row in self.data.rows:
            row.append("")
        return self._save()

    def remove_column(self, index: int) -> bool:
        self.last_warning = None
        if not 0 <= index < self.column_count():
            self.last_warning = f"Índice de columna fuera de rango: {index} (hay {self.column_count()} columnas)."
            return False
        del self.data.columns[index]
        # Filas más cortas que el índice quedan intactas (datos cargados irregulares)
        for row in self.data.rows:
            if len(row) > index:
                del row[index]
        return self._save()

    def add_record(self, values: List[str]) -> bool:
        self.last_warning = None
        if len(values) != self.column_count():
            self.last_warning = (f"El registro tiene {len(values)} valores pero la tabla "
                                 f"tiene {self.column_count()} columnas.")
            return False
        self.data.rows.append(list(values))
        return self._save()

    def remove_record(self, index: int) -> bool:
        self.last_warning = None
        if not 0 <= index < self.row_count():
            self.last_warning = f"Índice de registro fuera de rango: {index} (hay {self.row_count()} registros)."
            return False
        del self.data.rows[index]
        return self._save()

    def clear(self) -> bool:
        self.last_warning = None
        self.data.rows.clear()
        return self._save()

    def _save(self) -> bool:
        # La mutación ya ocurrió en memoria; si falla el disco queda desincronizado
        try:
            CSVService.write_csv(self.path, self.data, encoding=self.settings.encoding)
        except CSVServiceError as e:
            self.last_warning = str(e)
            return False
        return True

    # ========================================================
    #  EXPORTACIÓN A EXCEL
    # ========================================================
    def export_report(self, filename: str) -> bool:
        self.last_warning = None
        try:
            CSVService.write_excel(filename, self.data)
        except CSVServiceError as e:
            self.last_warning = str(e)
            return False
        return True
