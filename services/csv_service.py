from typing import List
from models.csv_model import CSVData
import pandas as pd
from openpyxl.utils.exceptions import IllegalCharacterError

DELIMITER = ","
SHEET_NAME = "Tabla"


class CSVServiceError(Exception):
    pass


class CSVService:
    """
    Lectura y escritura de la tabla en disco.
    - Formato simple: primera línea = columnas, resto = filas.
    - Sin comillas ni escapes: una coma dentro de una celda rompe la siguiente lectura.
    - Soporta múltiples codificaciones al leer (UTF-8, Latin-1).
    - Al guardar se usa siempre la codificación configurada (UTF-8 por defecto):
      un archivo leído como Latin-1/cp1252 queda convertido en la primera mutación.
    """

    ENCODINGS = ['utf-8-sig', 'utf-8', 'latin-1', 'cp1252']

    @staticmethod
    def read_csv(path: str) -> CSVData:
        # 1. Intentar leer con diferentes codificaciones
        text = None
        for enc in CSVService.ENCODINGS:
            try:
                with open(path, "r", encoding=enc, newline="") as f:
                    text = f.read()
                break
            except UnicodeDecodeError:
                continue
            except OSError:
                # Archivo inexistente o ilegible: se arranca con tabla vacía
                return CSVData()

        if not text:
            return CSVData()

        # 2. Separar líneas sin inventar un registro vacío al final
        lines = CSVService._split_lines(text)

        # 3. Encabezado y filas, sin validar el largo de cada fila
        columns = CSVService.split_line(lines[0])
        rows = [CSVService.split_line(line) for line in lines[1:]]
        return CSVData(columns=columns, rows=rows)

    @staticmethod
    def write_csv(path: str, data: CSVData, encoding: str = "utf-8") -> None:
        """
        Reescribe el archivo completo; nunca agrega ni parchea.
        El contenido se codifica antes de abrir el archivo: si la codificación
        no existe o no representa alguna celda, el archivo anterior queda intacto.
        """
        lines = [CSVService.join_line(data.columns)]
        lines.extend(CSVService.join_line(row) for row in data.rows)
        try:
            payload = "".join(line + "\n" for line in lines).encode(encoding)
        except (LookupError, UnicodeEncodeError) as e:
            raise CSVServiceError(f"No se pudo guardar '{path}' con codificación '{encoding}': {e}")
        try:
            with open(path, "wb") as f:
                f.write(payload)
        except OSError as e:
            raise CSVServiceError(f"No se pudo guardar '{path}': {e}")

    @staticmethod
    def write_excel(path: str, data: CSVData, sheet_name: str = SHEET_NAME) -> None:
        """Exporta la tabla a .xlsx con columnas ajustadas al contenido."""
        df = data.to_dataframe()
        try:
            with pd.ExcelWriter(path, engine='openpyxl') as writer:
                df.to_excel(writer, sheet_name=sheet_name, index=False)
                sheet = writer.sheets[sheet_name]
                for column in sheet.columns:
                    max_length = max((len(str(c.value)) for c in column if c.value is not None), default=0)
                    sheet.column_dimensions[column[0].column_letter].width = max_length + 2
        except (OSError, ValueError, IllegalCharacterError) as e:
            raise CSVServiceError(f"No se pudo exportar '{path}': {e}")

    @staticmethod
    def split_line(line: str) -> List[str]:
        # Siempre produce al menos un token, aunque la línea esté vacía
        return line.split(DELIMITER)

    @staticmethod
    def join_line(cells: List[str]) -> str:
        return DELIMITER.join(cells)

    @staticmethod
    def _split_lines(text: str) -> List[str]:
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line[:-1] if line.endswith("\r") else line for line in lines]
