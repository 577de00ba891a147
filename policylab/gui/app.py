import logging
from typing import List, Optional, Sequence, Tuple
import customtkinter as ctk
from CTkMessagebox import CTkMessagebox
from .controls import ControlsFrame
from .process_table import ProcessTable
from .gantt_chart import GanttChart
from .results_table import ResultsTable
from ..core.models import DEFAULT_QUANTUM, ScheduleResult, Task
from ..core.runner import PolicyRunner
from ..core.scheduler_factory import SchedulerFactory
from ..core.task_loader import InvalidTaskError, task_from_fields

logger = logging.getLogger(__name__)

class SchedulerApp(ctk.CTk):
    def __init__(self, tasks: Optional[Sequence[Task]] = None, quantum: int = DEFAULT_QUANTUM):
        super().__init__()
        self.title("Comparación de políticas de planificación")

        window_width = 1250
        window_height = 620
        x = (self.winfo_screenwidth() // 2) - (window_width // 2)
        y = (self.winfo_screenheight() // 2) - (window_height // 2)
        self.geometry(f"{window_width}x{window_height}+{x}+{y}")

        ctk.set_appearance_mode("System")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        tables_frame = ctk.CTkFrame(self)
        tables_frame.grid(row=1, column=0, sticky="nsew", padx=10, pady=5)
        tables_frame.grid_columnconfigure(0, weight=1)
        tables_frame.grid_columnconfigure(1, weight=1)

        self.table = ProcessTable(tables_frame, initial_rows=len(tasks) if tasks else 6)
        self.table.grid(row=0, column=0, sticky="nsew", padx=(0, 5), pady=5)

        self.results = ResultsTable(tables_frame)
        self.results.grid(row=0, column=1, sticky="nsew", padx=(5, 0), pady=5)

        self.controls = ControlsFrame(
            self,
            algorithms=SchedulerFactory.list_algorithms(),
            on_calculate=self.on_calculate,
            on_reset=self.on_reset,
            app=self,
            quantum=quantum,
        )
        self.controls.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 5))

        self.gantt = GanttChart(self)
        self.gantt.grid(row=2, column=0, sticky="nsew", padx=10, pady=(5, 10))

        if tasks:
            self.table.load_tasks(tasks)
            self.controls.set_count(len(tasks))

    def on_reset(self):
        self.table.reset()
        self.gantt.clear()
        self.results.clear()

    def read_tasks(self) -> Optional[List[Task]]:
        """Valida la tabla; ante el primer error muestra un aviso y devuelve None."""
        tasks = []
        for row in self.table.get_data():
            try:
                tasks.append(task_from_fields(row["name"], row["priority"], row["burst"]))
            except InvalidTaskError as exc:
                CTkMessagebox(title="Error", message=str(exc), icon="cancel")
                return None
        return tasks

    def compare_all(self, tasks: Sequence[Task], quantum: int) -> List[Tuple[str, ScheduleResult]]:
        return PolicyRunner(tasks, quantum=quantum).run()

    def on_calculate(self):
        tasks = self.read_tasks()
        if tasks is None:
            return

        algo = self.controls.get_algorithm()
        quantum = None
        if algo in SchedulerFactory.QUANTUM_POLICIES:
            quantum = self.controls.get_quantum()
            if quantum is None:
                return

        strategy = SchedulerFactory.create(algo)
        try:
            result = strategy.schedule(tasks, quantum=quantum)
        except ValueError as ex:
            CTkMessagebox(title="Error", message=str(ex), icon="cancel")
            return

        logger.info("%s: %s", algo, " > ".join(result.order))
        self.gantt.set_colors(self.table.get_colors())
        self.gantt.draw(tasks, result.timeline, title=f"{algo} Scheduling")
        self.results.show(algo, tasks, result)
