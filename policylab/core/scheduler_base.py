from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple
from .models import DEFAULT_QUANTUM, Dispatch, ExecSlice, ScheduleResult, Task

def check_quantum(quantum: Optional[int]) -> int:
    if quantum is None:
        return DEFAULT_QUANTUM
    if isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
        raise ValueError(f"Quantum inválido: {quantum!r}. Debe ser un entero positivo.")
    return quantum

class SchedulerStrategy(ABC):
    name: str = ""

    @abstractmethod
    def schedule(self, tasks: Sequence[Task], quantum: Optional[int] = None) -> ScheduleResult:
        ...

class NonPreemptiveStrategy(SchedulerStrategy):
    """
    Base de las políticas no expropiativas: cada tarea corre su ráfaga
    completa en el orden que devuelve _order. El quantum se ignora.
    """

    @abstractmethod
    def _order(self, indexed: List[Tuple[int, Task]]) -> List[Tuple[int, Task]]:
        ...

    def schedule(self, tasks: Sequence[Task], quantum: Optional[int] = None) -> ScheduleResult:
        result = ScheduleResult()
        time = 0
        for pos, task in self._order(list(enumerate(tasks))):
            end = time + max(task.burst, 0)
            result.timeline.append(ExecSlice(task.name, pos, time, end))
            result.dispatches.append(Dispatch(task.name, pos, end, end - task.burst))
            time = end
        return result
