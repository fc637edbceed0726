import tkinter as tk
from tkinter import ttk, filedialog, messagebox, simpledialog
import sys
from controllers.csv_controller import CSVController


class MainWindow:
    def __init__(self, controller: CSVController):
        self.controller = controller

        self.window = tk.Tk()
        self.window.title(f"Tabla CSV - {controller.path}")
        self.window.geometry("1000x700")
        self.window.protocol("WM_DELETE_WINDOW", self.on_closing)

        self.toolbar = ttk.Frame(self.window, relief=tk.RAISED, borderwidth=1)
        self.toolbar.pack(side="top", fill="x")
        ttk.Button(self.toolbar, text="➕ Columna", command=lambda: self.run_task("Agregando columna", self.add_column_action)).pack(side="left", padx=5, pady=5)
        ttk.Button(self.toolbar, text="➖ Columna", command=lambda: self.run_task("Eliminando columna", self.remove_column_action)).pack(side="left", padx=5, pady=5)
        ttk.Separator(self.toolbar, orient="vertical").pack(side="left", fill="y", padx=10, pady=5)
        ttk.Button(self.toolbar, text="➕ Registro", command=lambda: self.run_task("Agregando registro", self.add_record_action)).pack(side="left", padx=5, pady=5)
        ttk.Button(self.toolbar, text="➖ Registro", command=lambda: self.run_task("Eliminando registro", self.remove_record_action)).pack(side="left", padx=5, pady=5)
        ttk.Button(self.toolbar, text="🗑️ Vaciar", command=lambda: self.run_task("Vaciando registros", self.clear_action)).pack(side="left", padx=5, pady=5)
        ttk.Separator(self.toolbar, orient="vertical").pack(side="left", fill="y", padx=10, pady=5)
        ttk.Button(self.toolbar, text="💾 Exportar Excel", command=self.export_excel).pack(side="left", padx=5, pady=5)

        search_frame = ttk.Frame(self.window)
        search_frame.pack(fill="x", padx=10, pady=(5, 0))
        ttk.Label(search_frame, text="Buscar:").pack(side="left", padx=(0, 5))
        self.search_var = tk.StringVar()
        self.search_entry = ttk.Entry(search_frame, textvariable=self.search_var, width=30)
        self.search_entry.pack(side="left", padx=(0, 10))
        self.search_entry.bind("<KeyRelease>", lambda e: self.refresh())
        ttk.Button(search_frame, text="Limpiar", command=self._clear_search).pack(side="left")

        text_frame = ttk.Frame(self.window)
        text_frame.pack(fill="both", expand=True, padx=10, pady=10)
        self.text = tk.Text(text_frame, wrap="none", font=("Courier", 11), state="disabled")
        self.text.pack(side="left", fill="both", expand=True)
        scroll_y = ttk.Scrollbar(text_frame, orient="vertical", command=self.text.yview)
        scroll_y.pack(side="right", fill="y")
        self.text.configure(yscrollcommand=scroll_y.set)
        scroll_x = ttk.Scrollbar(self.window, orient="horizontal", command=self.text.xview)
        scroll_x.pack(fill="x", padx=10)
        self.text.configure(xscrollcommand=scroll_x.set)

        self.status_frame = ttk.Frame(self.window, relief=tk.SUNKEN, padding=(5, 2))
        self.status_frame.pack(side="bottom", fill="x")
        self.lbl_status = ttk.Label(self.status_frame, text="Listo", anchor="w")
        self.lbl_status.pack(side="left", fill="x")
        self.lbl_count = ttk.Label(self.status_frame, text="")
        self.lbl_count.pack(side="right")

        self.refresh()

    def mainloop(self):
        self.window.mainloop()

    def run_task(self, description, func):
        self.window.config(cursor="watch")
        self.lbl_status.config(text=f"⏳ {description}...")
        self.window.update()
        try:
            ok = func()
            if ok is False and self.controller.last_warning:
                self.lbl_status.config(text="⚠️ Aviso")
                messagebox.showwarning("Aviso", self.controller.last_warning)
            else:
                self.lbl_status.config(text="✅ Listo")
        except Exception as e:
            self.lbl_status.config(text="❌ Error")
            messagebox.showerror("Error", str(e))
        finally:
            self.window.config(cursor="")
            self.refresh()

    def refresh(self):
        term = self.search_var.get()
        if term:
            found = self.controller.find_records(term)
            content = self.controller.render([row for _, row in found])
            self.lbl_count.config(text=f"Mostrando {len(found)} de {self.controller.row_count()} registros")
        else:
            content = self.controller.render()
            self.lbl_count.config(text=f"Total: {self.controller.row_count()} registros")
        self.text.config(state="normal")
        self.text.delete("1.0", "end")
        self.text.insert("1.0", content)
        self.text.config(state="disabled")

    def _clear_search(self):
        self.search_var.set("")
        self.refresh()

    # --- ACCIONES ---
    def add_column_action(self):
        name = simpledialog.askstring("Agregar columna", "Nombre de la columna:")
        if name is None: return None
        return self.controller.add_column(name)

    def remove_column_action(self):
        index = simpledialog.askinteger("Eliminar columna", "Índice de la columna (desde 0):")
        if index is None: return None
        return self.controller.remove_column(index)

    def add_record_action(self):
        columns = self.controller.get_columns()
        if not columns:
            messagebox.showinfo("Agregar registro", "No hay columnas; agregue una columna primero.")
            return None
        values = []
        for name in columns:
            v = simpledialog.askstring("Agregar registro", f"{name}:")
            if v is None: return None
            values.append(v)
        return self.controller.add_record(values)

    def remove_record_action(self):
        index = simpledialog.askinteger("Eliminar registro", "Índice del registro (desde 0):")
        if index is None: return None
        return self.controller.remove_record(index)

    def clear_action(self):
        if not messagebox.askokcancel("Vaciar", "¿Eliminar todos los registros?"): return None
        return self.controller.clear()

    def export_excel(self):
        path = filedialog.asksaveasfilename(defaultextension=".xlsx", filetypes=[("Excel", "*.xlsx")])
        if not path: return
        self.run_task("Exportando", lambda: self.controller.export_report(path))

    def on_closing(self):
        if messagebox.askokcancel("Salir", "¿Seguro que quieres salir?"):
            self.window.destroy()
            sys.exit(0)
