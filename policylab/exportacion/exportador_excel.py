from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, Tuple
from openpyxl import Workbook
from openpyxl.styles import PatternFill, Alignment, Font, Border, Side
from openpyxl.utils import get_column_letter
from ..core.models import ScheduleResult, Task

# Excel admite 16384 columnas; la A lleva los nombres
MAX_UNIDADES_GANTT = 16383

class ExportadorExcel:
    # =============== Utilidades internas para tablas =================
    def _escribir_tabla(self, ws, filas: List[Any]):
        if not filas:
            return
        primera = filas[0]
        if isinstance(primera, dict):
            headers = list(primera.keys())
            ws.append(headers)
            for fila in filas:
                ws.append([fila.get(h, "") for h in headers])
        else:
            for fila in filas:
                ws.append(list(fila))

    def _auto_ajustar_ancho(self, ws):
        for col in ws.columns:
            letter = get_column_letter(col[0].column)
            maxlen = max((len(str(c.value)) for c in col if c.value is not None), default=0)
            ws.column_dimensions[letter].width = min(maxlen + 2, 60)

    def _agregar_hojas(self, wb: Workbook, hojas: List[tuple[str, List[Any]]]):
        for nombre, datos in hojas:
            ws = wb.create_sheet(title=str(nombre)[:31])
            self._escribir_tabla(ws, datos)
            self._auto_ajustar_ancho(ws)

    # ================== Modo clásico: sólo tablas ==================
    def exportar(self, nombre_archivo: str, hojas: List[tuple[str, List[Any]]]):
        wb = Workbook()
        wb.remove(wb.active)
        self._agregar_hojas(wb, hojas)
        wb.save(nombre_archivo)

    # ================== Comparación de políticas ==================
    def exportar_resultados(
        self,
        nombre_archivo: str,
        tareas: Sequence[Task],
        resultados: List[Tuple[str, ScheduleResult]],
        quantum: Optional[int] = None,
        colores: Optional[Dict[int, str]] = None,
    ):
        """
        Hojas: Tareas, Orden de despacho, Métricas y una grilla Gantt por política.
        """
        wb = Workbook()
        wb.remove(wb.active)
        self._agregar_hojas(wb, [
            ("Tareas", self._filas_tareas(tareas)),
            ("Orden de despacho", self._filas_orden(resultados)),
            ("Métricas", self._filas_metricas(resultados, quantum)),
        ])
        for nombre, resultado in resultados:
            self._crear_hoja_gantt_grilla(wb, f"Gantt {nombre}", tareas, resultado, colores or {})
        wb.save(nombre_archivo)

    def _filas_tareas(self, tareas: Sequence[Task]) -> List[Any]:
        filas: List[Any] = [["Tarea", "Prioridad", "Ráfaga"]]
        filas.extend([t.name, t.priority, t.burst] for t in tareas)
        filas.append(["TOTAL", "", sum(t.burst for t in tareas)])
        return filas

    def _filas_orden(self, resultados: List[Tuple[str, ScheduleResult]]) -> List[Any]:
        filas: List[Any] = [["Turno"] + [nombre for nombre, _ in resultados]]
        n = max((len(r.dispatches) for _, r in resultados), default=0)
        for i in range(n):
            filas.append([i + 1] + [r.order[i] if i < len(r.order) else "" for _, r in resultados])
        return filas

    def _filas_metricas(self, resultados: List[Tuple[str, ScheduleResult]], quantum: Optional[int]) -> List[Any]:
        filas: List[Any] = [["Política", "Tarea", "Fin", "Espera"]]
        for nombre, r in resultados:
            for d in r.dispatches:
                filas.append([nombre, d.name, d.finish, d.waiting])
            filas.append([nombre, "PROMEDIO", round(r.avg_turnaround, 2), round(r.avg_waiting, 2)])
        if quantum is not None:
            filas.append(["Quantum", quantum, "", ""])
        return filas

    # ------------------- Helpers de Gantt -------------------
    def _paleta(self):
        # hex sin '#'
        return [
            "4472C4", "ED7D31", "70AD47", "FFC000", "5B9BD5",
            "A5A5A5", "264478", "9E480E", "636363", "997300",
            "255E91", "43682B",
        ]

    def _crear_hoja_gantt_grilla(
        self, wb: Workbook, titulo: str, tareas: Sequence[Task], resultado: ScheduleResult, colores: Dict[int, str]
    ):
        """
        Una fila por tarea (en el orden del lote) y una columna por unidad de trabajo.
        """
        ws = wb.create_sheet(title=titulo[:31])
        tiempo_total = int(max((sl.end for sl in resultado.timeline), default=0))
        if tiempo_total > MAX_UNIDADES_GANTT:
            ws["A1"] = (
                f"Grilla omitida: {tiempo_total} unidades de trabajo superan "
                f"el máximo de {MAX_UNIDADES_GANTT} columnas."
            )
            return ws
        paleta = self._paleta()
        fuente = Font(bold=True, color="FFFFFF")
        centro = Alignment(horizontal="center", vertical="center")
        thin = Side(style="thin", color="000000")
        border_thin = Border(top=thin, bottom=thin, left=thin, right=thin)

        ws["A1"] = "Tarea"
        ws["A1"].alignment = centro
        ws["A1"].font = Font(bold=True)
        ws.column_dimensions["A"].width = 12
        col_width = max(3, len(str(tiempo_total)) + 1)
        for t in range(tiempo_total):
            ws.column_dimensions[get_column_letter(2 + t)].width = col_width

        primera_fila = 2
        fila_tiempo = primera_fila + len(tareas)

        # Grilla vacía
        for r in range(primera_fila, fila_tiempo + 1):
            ws.cell(row=r, column=1).border = Border(right=thin)
            for c in range(2, 2 + tiempo_total):
                cell = ws.cell(row=r, column=c)
                cell.border = border_thin
                cell.alignment = centro

        # Eje de tiempo: la columna c cubre el intervalo [c-2, c-1)
        for t in range(1, tiempo_total + 1):
            cell = ws.cell(row=fila_tiempo, column=1 + t, value=t)
            cell.alignment = Alignment(horizontal="right", vertical="center")

        for pos, tarea in enumerate(tareas):
            ws.cell(row=primera_fila + pos, column=1, value=tarea.name).alignment = centro

        for sl in resultado.timeline:
            if sl.end <= sl.start:
                continue
            fila = primera_fila + sl.position
            color = colores.get(sl.position, "").lstrip("#") or paleta[sl.position % len(paleta)]
            c1 = 2 + sl.start
            c2 = 2 + sl.end - 1
            if c2 > c1:
                ws.merge_cells(start_row=fila, start_column=c1, end_row=fila, end_column=c2)
            cell = ws.cell(row=fila, column=c1, value=sl.process)
            cell.alignment = centro
            cell.font = fuente
            cell.fill = PatternFill(start_color=color, end_color=color, fill_type="solid")

        for r in range(1, fila_tiempo + 1):
            ws.row_dimensions[r].height = 18

        return ws
