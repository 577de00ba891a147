import logging
import sys
from typing import List, Sequence, TextIO, Tuple
from .models import DEFAULT_QUANTUM, ScheduleResult, Task
from .scheduler_base import check_quantum
from .scheduler_factory import SchedulerFactory

logger = logging.getLogger(__name__)

class PolicyRunner:
    """Aplica todas las políticas registradas al mismo lote de tareas."""

    def __init__(self, tasks: Sequence[Task], quantum: int = DEFAULT_QUANTUM):
        # El lote queda inmutable: cada política recibe la misma tupla
        self.tasks: Tuple[Task, ...] = tuple(tasks)
        self.quantum = check_quantum(quantum)

    def run(self) -> List[Tuple[str, ScheduleResult]]:
        results = []
        for strategy in SchedulerFactory.create_all():
            result = strategy.schedule(self.tasks, quantum=self.quantum)
            logger.debug("%s: %s", strategy.name, " > ".join(result.order))
            results.append((strategy.name, result))
        return results

    @staticmethod
    def render(results: List[Tuple[str, ScheduleResult]]) -> str:
        lines = []
        for name, result in results:
            lines.append(f"{name} Scheduling:")
            lines.extend(f"Executing task: {task_name}" for task_name in result.order)
            lines.append("")
        return "".join(line + "\n" for line in lines)

    def report(self, stream: TextIO = None) -> List[Tuple[str, ScheduleResult]]:
        results = self.run()
        (stream or sys.stdout).write(self.render(results))
        return results
