# policylab/gui/results_table.py

import customtkinter as ctk
from typing import Sequence
from ..core.models import ScheduleResult, Task

class ResultsTable(ctk.CTkFrame):
    def __init__(self, master):
        super().__init__(master)

        # 0: orden de despacho, 1: body scrollable, 2: footer con promedios
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self.order_label = ctk.CTkLabel(self, text="", anchor="w")
        self.order_label.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        self.body = ctk.CTkScrollableFrame(self, height=200)
        self.body.grid(row=1, column=0, sticky="nsew", padx=8, pady=(8, 0))
        for col in range(6):
            self.body.grid_columnconfigure(col, weight=1)

        self.footer = ctk.CTkFrame(self, fg_color="#af53ab", corner_radius=4, height=32)
        self.footer.grid(row=2, column=0, sticky="ew", padx=8, pady=(0, 8))
        self.footer.grid_propagate(False)

    def clear(self):
        self.order_label.configure(text="")
        for w in self.body.winfo_children():
            w.destroy()
        for w in self.footer.winfo_children():
            w.destroy()

    def _cell(self, parent, row, col, text, color, bold=False):
        cell = ctk.CTkFrame(parent, fg_color=color, corner_radius=4)
        cell.grid(row=row, column=col, padx=1, pady=1, sticky="nsew")
        font = ctk.CTkFont(weight="bold") if bold else None
        ctk.CTkLabel(cell, text=str(text), font=font).pack(padx=4, pady=2)

    def show(self, policy: str, tasks: Sequence[Task], result: ScheduleResult):
        self.clear()
        self.order_label.configure(text=f"{policy}: " + " > ".join(result.order))

        headers = ["Turno", "Tarea", "Prioridad", "Ráfaga", "Fin", "Espera"]
        for j, h in enumerate(headers):
            self._cell(self.body, 0, j, h, "#200a0a", bold=True)

        for i, d in enumerate(result.dispatches, start=1):
            task = tasks[d.position]
            for j, val in enumerate([i, d.name, task.priority, task.burst, d.finish, d.waiting]):
                self._cell(self.body, i, j, val, "#2e2e2e")

        footer_vals = ["Promedio", "—", "—", "—",
                       f"{result.avg_turnaround:.2f}", f"{result.avg_waiting:.2f}"]
        for j, val in enumerate(footer_vals):
            self._cell(self.footer, 0, j, val, "#af53ab", bold=(j == 0))
            self.footer.grid_columnconfigure(j, weight=1)
