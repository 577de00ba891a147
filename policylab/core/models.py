from dataclasses import dataclass, field
from typing import List

# Quantum por defecto de las políticas rotativas (unidades de trabajo)
DEFAULT_QUANTUM = 10

@dataclass(frozen=True)
class Task:
    name: str
    priority: int
    burst: int

@dataclass
class ExecSlice:
    process: str
    position: int  # índice de la tarea en el lote original
    start: int
    end: int

@dataclass
class Dispatch:
    name: str
    position: int
    finish: int   # todas llegan en 0: finish == turnaround
    waiting: int

@dataclass
class ScheduleResult:
    # Despachos en el orden en que se completan
    dispatches: List[Dispatch] = field(default_factory=list)
    # Tramos de servicio simulados (para el Gantt)
    timeline: List[ExecSlice] = field(default_factory=list)

    @property
    def order(self) -> List[str]:
        return [d.name for d in self.dispatches]

    @property
    def avg_turnaround(self) -> float:
        if not self.dispatches:
            return 0.0
        return sum(d.finish for d in self.dispatches) / len(self.dispatches)

    @property
    def avg_waiting(self) -> float:
        if not self.dispatches:
            return 0.0
        return sum(d.waiting for d in self.dispatches) / len(self.dispatches)
