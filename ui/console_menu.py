from controllers.csv_controller import CSVController
from services.csv_service import CSVServiceError

MENU_TEXT = """
===== MENÚ =====
1. Mostrar tabla
2. Agregar columna
3. Eliminar columna
4. Agregar registro
5. Eliminar registro
6. Vaciar registros
7. Buscar
8. Exportar a Excel
0. Salir"""


class ConsoleMenu:
    """
    Menú numerado de consola. Lee opciones y argumentos, llama una sola
    operación del controlador por opción y muestra el aviso si lo hubo.
    """

    def __init__(self, controller: CSVController, input_func=None, output_func=None):
        self.controller = controller
        self.input = input_func or input
        self.output = output_func or print
        self.running = True
        self.actions = {
            '1': self.show_table,
            '2': self.add_column,
            '3': self.remove_column,
            '4': self.add_record,
            '5': self.remove_record,
            '6': self.clear_records,
            '7': self.search,
            '8': self.export_excel,
            '0': self.stop,
        }

    def run(self):
        while self.running:
            self.output(MENU_TEXT)
            try:
                choice = self.input("Opción: ").strip()
                action = self.actions.get(choice)
                if action is None:
                    self.output(f"Opción no válida: '{choice}'")
                    continue
                action()
            except (EOFError, KeyboardInterrupt):
                self.output("\nSaliendo.")
                self.running = False
            except CSVServiceError as e:
                self.output(f"Error: {e}")
            except Exception as e:
                self.output(f"Error inesperado: {e}")

    def stop(self):
        self.running = False
        self.output("Hasta luego.")

    # --- ACCIONES ---
    def show_table(self):
        self.output(self.controller.render())

    def add_column(self):
        name = self.input("Nombre de la columna: ")
        self._report(self.controller.add_column(name), f"Columna '{name}' agregada.")

    def remove_column(self):
        index = self._ask_index("Índice de la columna (desde 0): ")
        if index is None: return
        self._report(self.controller.remove_column(index), "Columna eliminada.")

    def add_record(self):
        columns = self.controller.get_columns()
        if not columns:
            self.output("No hay columnas; agregue una columna primero.")
            return
        values = [self.input(f"{name}: ") for name in columns]
        self._report(self.controller.add_record(values), "Registro agregado.")

    def remove_record(self):
        index = self._ask_index("Índice del registro (desde 0): ")
        if index is None: return
        self._report(self.controller.remove_record(index), "Registro eliminado.")

    def clear_records(self):
        self._report(self.controller.clear(), "Registros eliminados.")

    def search(self):
        term = self.input("Buscar: ")
        found = self.controller.find_records(term)
        if not found:
            self.output("Sin coincidencias.")
            return
        self.output(self.controller.render([row for _, row in found]))
        self.output(f"Mostrando {len(found)} de {self.controller.row_count()} registros "
                    f"(índices: {', '.join(str(i) for i, _ in found)})")

    def export_excel(self):
        path = self.input("Archivo de destino (.xlsx): ").strip()
        if not path: return
        if not path.lower().endswith(".xlsx"): path += ".xlsx"
        self._report(self.controller.export_report(path), f"Exportado a {path}.")

    # --- HELPERS ---
    def _ask_index(self, prompt):
        raw = self.input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            self.output(f"Se esperaba un número entero, se recibió '{raw}'.")
            return None

    def _report(self, ok, message):
        if ok:
            self.output(message)
        elif self.controller.last_warning:
            self.output(f"Aviso: {self.controller.last_warning}")
