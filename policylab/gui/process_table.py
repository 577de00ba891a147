# policylab/gui/process_table.py

import customtkinter as ctk
import tkinter.colorchooser
from typing import Dict, List, Sequence
from ..core.models import Task
from ..exportacion.grafico_gantt import PALETA

class ProcessTable(ctk.CTkFrame):
    """Tabla editable de tareas: nombre, prioridad, ráfaga y color."""

    def __init__(self, master, initial_rows=6):
        super().__init__(master)
        self.rows = []
        self._color_by_index: Dict[int, str] = {}  # índice → color hex

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.content_frame = ctk.CTkScrollableFrame(self, height=270)
        self.content_frame.grid(row=0, column=0, sticky="nsew", padx=5, pady=5)
        for col in range(3):
            self.content_frame.grid_columnconfigure(col, weight=1)

        headers = ["Tarea", "Prioridad", "Ráfaga"]
        for i, text in enumerate(headers):
            ctk.CTkLabel(
                self.content_frame,
                text=text,
                font=ctk.CTkFont(weight="bold")
            ).grid(row=0, column=i, padx=(10 if i == 0 else 20), pady=(5, 0), sticky="ew")

        self.set_rows(initial_rows)

    def set_rows(self, count: int):
        """Ajusta la cantidad de filas conservando lo ya cargado."""
        current = [self._row_values(row) for row in self.rows]

        for row in self.rows[count:]:
            for w in row:
                w.destroy()
        self.rows = self.rows[:count]

        for i in range(len(self.rows), count):
            self.rows.append(self._create_row(i))

        for i, row in enumerate(self.rows):
            if i < len(current):
                self._fill_row(row, *current[i])
            else:
                self._fill_row(row, f"P{i+1}", "0", "")

    def _create_row(self, i: int):
        container = self.content_frame
        name = ctk.CTkEntry(container, width=160)
        name.grid(row=i+1, column=0, padx=(12, 12), pady=4, sticky="nsew")

        prio = self._create_spinbox_field(container, i+1, 1, default_val=0, min_val=-99)
        burst = self._create_spinbox_field(container, i+1, 2, default_val=1, min_val=1)

        def choose_color(index, btn):
            color = tkinter.colorchooser.askcolor(title=f"Color para tarea {index+1}")[1]
            if color:
                self._color_by_index[index] = color
                btn.configure(fg_color=color)

        color_btn = ctk.CTkButton(container, text="🎨", width=36)
        color_btn.configure(command=lambda idx=i, btn=color_btn: choose_color(idx, btn))
        color_btn.grid(row=i+1, column=3, padx=(4, 12), pady=4)

        default_color = PALETA[i % len(PALETA)]
        self._color_by_index[i] = default_color
        color_btn.configure(fg_color=default_color)
        return (name, prio, burst, color_btn)

    def _create_spinbox_field(self, container, row, col, default_val, min_val=0, max_val=999):
        """Spinbox con botones + y – para valores enteros."""
        outer_frame = ctk.CTkFrame(container)
        outer_frame.grid(row=row, column=col, padx=10, pady=4, sticky="nsew")

        def adjust(delta):
            try:
                val = int(entry.get())
            except ValueError:
                val = default_val
            entry.delete(0, "end")
            entry.insert(0, str(max(min_val, min(max_val, val + delta))))

        ctk.CTkButton(outer_frame, text="–", width=28, height=28,
                      command=lambda: adjust(-1)).grid(row=0, column=0, padx=(0, 4))
        entry = ctk.CTkEntry(outer_frame, width=70)
        entry.grid(row=0, column=1, sticky="ew")
        entry.insert(0, str(default_val))
        ctk.CTkButton(outer_frame, text="+", width=28, height=28,
                      command=lambda: adjust(1)).grid(row=0, column=2, padx=(4, 0))

        outer_frame.entry = entry
        return outer_frame

    @staticmethod
    def _row_values(row):
        name, prio, burst, _ = row
        return name.get(), prio.entry.get(), burst.entry.get()

    @staticmethod
    def _fill_row(row, name_val: str, prio_val: str, burst_val: str):
        name, prio, burst, _ = row
        for entry, val in ((name, name_val), (prio.entry, prio_val), (burst.entry, burst_val)):
            entry.delete(0, "end")
            entry.insert(0, val)

    def load_tasks(self, tasks: Sequence[Task]):
        self.set_rows(max(1, len(tasks)))
        for row, task in zip(self.rows, tasks):
            self._fill_row(row, task.name, str(task.priority), str(task.burst))

    def get_data(self) -> List[dict]:
        """Lista de dicts con name, priority, burst (texto crudo) y color."""
        data = []
        for i, row in enumerate(self.rows):
            name_val, prio_val, burst_val = self._row_values(row)
            data.append({
                "name": name_val.strip(),
                "priority": prio_val.strip(),
                "burst": burst_val.strip(),
                "color": self._color_by_index.get(i, "#1f1f1f"),
            })
        return data

    def get_colors(self) -> Dict[int, str]:
        return dict(self._color_by_index)

    def reset(self):
        """Restablece nombres P1, P2..., prioridad 0 y ráfaga vacía."""
        for i, row in enumerate(self.rows):
            self._fill_row(row, f"P{i+1}", "0", "")
