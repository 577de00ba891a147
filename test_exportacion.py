from matplotlib.figure import Figure
from openpyxl import load_workbook

from policylab.core.models import Task
from policylab.core.runner import PolicyRunner
from policylab.exportacion.exportador_excel import ExportadorExcel
from policylab.exportacion.grafico_gantt import dibujar_gantt, exportar_png


def _batch():
    return [Task("A", 1, 5), Task("B", 2, 25), Task("C", 3, 8)]


def test_excel_export_sheets(tmp_path):
    tasks = _batch()
    results = PolicyRunner(tasks).run()
    path = tmp_path / "resultados.xlsx"

    ExportadorExcel().exportar_resultados(str(path), tasks, results, quantum=10)

    wb = load_workbook(path)
    assert wb.sheetnames[:3] == ["Tareas", "Orden de despacho", "Métricas"]
    assert "Gantt Round-Robin" in wb.sheetnames
    assert len(wb.sheetnames) == 3 + len(results)

    orden = list(wb["Orden de despacho"].iter_rows(values_only=True))
    assert orden[0] == ("Turno", "FCFS", "SJF", "Priority", "Round-Robin", "Priority with Round-Robin")
    assert orden[1] == (1, "A", "A", "C", "A", "A")
    assert orden[3] == (3, "C", "B", "A", "B", "B")

    tareas = list(wb["Tareas"].iter_rows(values_only=True))
    assert tareas[-1][0] == "TOTAL"
    assert tareas[-1][2] == 38

    gantt = wb["Gantt FCFS"]
    assert gantt.cell(row=2, column=1).value == "A"
    assert gantt.cell(row=2, column=2).value == "A"
    assert gantt.cell(row=3, column=7).value == "B"


def test_excel_export_empty_batch(tmp_path):
    path = tmp_path / "vacio.xlsx"
    ExportadorExcel().exportar_resultados(str(path), [], PolicyRunner([]).run())
    wb = load_workbook(path)
    assert list(wb["Orden de despacho"].iter_rows(values_only=True)) == [
        ("Turno", "FCFS", "SJF", "Priority", "Round-Robin", "Priority with Round-Robin"),
    ]


def test_generic_export(tmp_path):
    path = tmp_path / "tablas.xlsx"
    ExportadorExcel().exportar(str(path), [("Datos", [{"Tarea": "A", "Ráfaga": 5}])])
    rows = list(load_workbook(path)["Datos"].iter_rows(values_only=True))
    assert rows == [("Tarea", "Ráfaga"), ("A", 5)]


def test_gantt_merges_consecutive_slices():
    tasks = [Task("L", 0, 25)]
    result = dict(PolicyRunner(tasks).run())["Round-Robin"]
    ax = Figure().add_subplot(111)

    xlim = dibujar_gantt(ax, tasks, result.timeline)

    assert xlim == (0.0, 25.0)
    assert len(ax.patches) == 1


def test_png_export(tmp_path):
    tasks = _batch()
    path = tmp_path / "gantt.png"
    exportar_png(str(path), tasks, PolicyRunner(tasks).run())
    assert path.stat().st_size > 0


def test_excel_export_skips_grid_wider_than_sheet(tmp_path):
    """
    A single task of 20000 work units does not fit in a sheet's columns:
    the Gantt grids carry a note and the tabular sheets are still written.
    """
    tasks = [Task("A", 1, 20000)]
    path = tmp_path / "largo.xlsx"

    ExportadorExcel().exportar_resultados(str(path), tasks, PolicyRunner(tasks).run())

    wb = load_workbook(path)
    assert list(wb["Orden de despacho"].iter_rows(values_only=True))[1] == (1, "A", "A", "A", "A", "A")
    assert wb["Tareas"].cell(row=2, column=3).value == 20000
    gantt = wb["Gantt FCFS"]
    assert gantt.max_column == 1
    assert "20000" in gantt["A1"].value
