from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator
from ..core.models import ExecSlice, ScheduleResult, Task

PALETA = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
]

def _unir_tramos(timeline: List[ExecSlice]) -> List[ExecSlice]:
    """Une tramos consecutivos de la misma tarea."""
    if not timeline:
        return []
    merged = [timeline[0]]
    for sl in timeline[1:]:
        last = merged[-1]
        if sl.position == last.position and sl.start == last.end:
            merged[-1] = ExecSlice(sl.process, sl.position, last.start, sl.end)
        else:
            merged.append(sl)
    return merged

def dibujar_gantt(
    ax,
    tareas: Sequence[Task],
    timeline: List[ExecSlice],
    colores: Optional[Dict[int, str]] = None,
) -> Tuple[float, float]:
    """
    Dibuja el timeline en `ax`, una fila por posición del lote.
    Devuelve los límites completos del eje X.
    """
    colores = colores or {}
    ax.clear()
    ax.set_yticks(list(range(len(tareas))))
    ax.set_yticklabels([t.name for t in tareas])

    for sl in _unir_tramos(timeline):
        dur = sl.end - sl.start
        if dur <= 0:
            continue
        color = colores.get(sl.position, PALETA[sl.position % len(PALETA)])
        ax.barh(sl.position, dur, left=sl.start, height=0.6,
                color=color, edgecolor="#333333", linewidth=1.0)
        ax.text(sl.start + dur / 2, sl.position, sl.process,
                ha="center", va="center", color="white", fontsize=9)

    max_t = max((sl.end for sl in timeline), default=1)
    xlim = (0.0, float(max(max_t, 1)))
    ax.set_xlim(*xlim)
    ax.set_ylim(max(len(tareas), 1) - 0.5, -0.5)
    ax.set_xlabel("Unidades de trabajo")
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.grid(True, axis="x", linestyle="--", alpha=0.3)
    return xlim

def exportar_png(
    nombre_archivo: str,
    tareas: Sequence[Task],
    resultados: List[Tuple[str, ScheduleResult]],
) -> None:
    """Un subgráfico por política, guardado como imagen."""
    filas = max(1, len(resultados))
    fig = Figure(figsize=(10, 2 + 0.4 * max(1, len(tareas)) * filas), dpi=100)
    for i, (nombre, resultado) in enumerate(resultados):
        ax = fig.add_subplot(filas, 1, i + 1)
        dibujar_gantt(ax, tareas, resultado.timeline)
        ax.set_title(f"{nombre} Scheduling")
    fig.tight_layout()
    fig.savefig(nombre_archivo)
