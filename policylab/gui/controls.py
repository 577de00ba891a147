# policylab/gui/controls.py
from CTkMessagebox import CTkMessagebox
import customtkinter as ctk
import string
import random
import os
from ..core.scheduler_factory import SchedulerFactory
from ..exportacion.exportador_excel import ExportadorExcel

class ControlsFrame(ctk.CTkFrame):
    def __init__(self, master, algorithms, on_calculate, on_reset, app, quantum=10):
        super().__init__(master)
        self.on_calculate = on_calculate
        self.on_reset = on_reset
        self.app = app

        self.grid_columnconfigure(6, weight=1)

        # Política
        ctk.CTkLabel(self, text="Política:").grid(row=0, column=0, padx=5, pady=5, sticky="w")
        self.algobox = ctk.CTkComboBox(
            self, values=algorithms, state="readonly", width=200, command=self._on_algorithm_change
        )
        self.algobox.set(algorithms[0])
        self.algobox.grid(row=0, column=1, padx=5, pady=5, sticky="w")

        # Quantum
        ctk.CTkLabel(self, text="Quantum:").grid(row=0, column=2, padx=5, pady=5, sticky="w")
        self.quantum_entry = ctk.CTkEntry(self, width=80)
        self.quantum_entry.insert(0, str(quantum))
        self.quantum_entry.grid(row=0, column=3, padx=5, pady=5, sticky="w")

        # Cantidad de tareas
        ctk.CTkLabel(self, text="Cantidad de tareas:").grid(row=0, column=4, padx=5, pady=5, sticky="w")
        self.count_box = ctk.CTkComboBox(
            self, values=[str(i) for i in range(1, 21)], state="readonly", width=70, command=self._on_count_change
        )
        self.count_box.set("6")
        self.count_box.grid(row=0, column=5, padx=5, pady=5, sticky="w")

        # Botones
        ctk.CTkButton(self, text="Calcular", command=self.on_calculate).grid(row=0, column=7, padx=5, pady=5)
        ctk.CTkButton(self, text="Reiniciar tabla", fg_color="gray",
                      command=self.on_reset).grid(row=0, column=8, padx=5, pady=5)
        ctk.CTkButton(self, text="Acciones rápidas",
                      command=self._show_actions_menu).grid(row=0, column=9, padx=5, pady=5)

        self._on_algorithm_change(self.algobox.get())

    def set_count(self, count: int):
        self.count_box.set(str(count))

    def _show_actions_menu(self):
        popup = ctk.CTkToplevel(self)
        popup.title("Acciones")
        popup.geometry("260x165")
        popup.resizable(False, False)
        popup.transient(self)
        popup.grab_set()

        ctk.CTkLabel(popup, text="Selecciona una acción:",
                     font=ctk.CTkFont(size=14, weight="bold")).pack(pady=(10, 5))

        def _action_then_close(fn):
            def wrapper():
                popup.grab_release()
                popup.destroy()
                fn()
            return wrapper

        ctk.CTkButton(popup, text="Nombrar tareas alfabéticamente",
                      command=_action_then_close(self._rename_tasks)).pack(pady=5)
        ctk.CTkButton(popup, text="Randomizar prioridades y ráfagas",
                      command=_action_then_close(self._randomize_tasks)).pack(pady=5)
        ctk.CTkButton(popup, text="Exportar a Excel",
                      command=_action_then_close(self._export_excel)).pack(pady=5)

    def _rename_tasks(self):
        for i, (name_entry, *_rest) in enumerate(self.app.table.rows):
            name_entry.delete(0, "end")
            name_entry.insert(0, string.ascii_uppercase[i % 26])

    def _randomize_tasks(self):
        for (_name, prio, burst, _color) in self.app.table.rows:
            prio.entry.delete(0, "end")
            prio.entry.insert(0, str(random.randint(1, 5)))
            burst.entry.delete(0, "end")
            burst.entry.insert(0, str(random.randint(1, 30)))

    def _on_algorithm_change(self, value):
        if value in SchedulerFactory.QUANTUM_POLICIES:
            self.quantum_entry.configure(state="normal", fg_color="#FFFFFF", text_color="#000000")
        else:
            self.quantum_entry.configure(state="disabled", fg_color="#A9A9A9", text_color="#555555")

    def _on_count_change(self, value):
        self.app.table.set_rows(int(value))

    def get_algorithm(self):
        return self.algobox.get()

    def get_quantum(self):
        try:
            quantum = int(self.quantum_entry.get().strip())
        except ValueError:
            quantum = 0
        if quantum > 0:
            return quantum
        CTkMessagebox(
            title="Error de Quantum",
            message="Por favor, ingresa un número entero positivo para el Quantum.",
            icon="cancel"
        )
        return None

    def _export_excel(self):
        tasks = self.app.read_tasks()
        if tasks is None:
            return
        quantum = self.get_quantum()
        if quantum is None:
            return

        from tkinter import filedialog
        ruta = filedialog.asksaveasfilename(
            defaultextension=".xlsx",
            filetypes=[("Archivos Excel", "*.xlsx")],
            title="Guardar como..."
        )
        if not ruta:
            return

        try:
            resultados = self.app.compare_all(tasks, quantum)
            ExportadorExcel().exportar_resultados(
                ruta, tasks, resultados, quantum=quantum, colores=self.app.table.get_colors()
            )
        except (OSError, ValueError) as e:
            CTkMessagebox(title="Error", message=f"No se pudo exportar: {e}", icon="cancel")
            return

        CTkMessagebox(
            title="Éxito",
            message=f"Exportación completada.\nArchivo guardado en:\n{os.path.abspath(ruta)}",
            icon="check"
        )
