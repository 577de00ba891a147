from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .core.models import DEFAULT_QUANTUM
from .core.runner import PolicyRunner
from .core.task_loader import InputUnavailableError, InvalidTaskError, load_tasks


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="policylab",
        description="Compara el orden de despacho de cinco políticas de planificación.",
    )
    parser.add_argument(
        "archivo",
        nargs="?",
        default="schedule.txt",
        help="Archivo con ternas 'nombre prioridad ráfaga' (por defecto schedule.txt).",
    )
    parser.add_argument(
        "--quantum",
        type=int,
        default=DEFAULT_QUANTUM,
        help=f"Quantum de las políticas Round-Robin (por defecto {DEFAULT_QUANTUM}).",
    )
    parser.add_argument("--excel", metavar="RUTA", help="Exportar los resultados a un libro .xlsx.")
    parser.add_argument("--png", metavar="RUTA", help="Exportar los diagramas de Gantt a una imagen.")
    parser.add_argument("--gui", action="store_true", help="Abrir la ventana con el lote cargado.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Mostrar mensajes de depuración.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        tasks = load_tasks(args.archivo)
        runner = PolicyRunner(tasks, quantum=args.quantum)
    except InputUnavailableError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (InvalidTaskError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if args.gui:
        # customtkinter sólo se importa si se pide la ventana
        from .gui.app import SchedulerApp

        app = SchedulerApp(tasks=tasks, quantum=runner.quantum)
        app.mainloop()
        return 0

    results = runner.report(sys.stdout)

    try:
        if args.excel:
            from .exportacion.exportador_excel import ExportadorExcel

            ExportadorExcel().exportar_resultados(args.excel, runner.tasks, results, quantum=runner.quantum)
        if args.png:
            from .exportacion.grafico_gantt import exportar_png

            exportar_png(args.png, runner.tasks, results)
    except (OSError, ValueError) as exc:
        print(f"Error: no se pudo exportar: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
