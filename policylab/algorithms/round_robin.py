from typing import Callable, Deque, List, Optional, Sequence, Tuple
from collections import deque
from ..core.scheduler_base import SchedulerStrategy, check_quantum
from ..core.models import Task, ScheduleResult, ExecSlice, Dispatch

def rotate(
    tasks: Sequence[Task],
    quantum: int,
    order_key: Optional[Callable[[Task], object]] = None,
) -> ScheduleResult:
    """
    Rotación por quantum sobre una cola de trabajo privada.

    Cada turno saca el frente de la cola: si le quedan más de `quantum`
    unidades se le descuenta el quantum y vuelve al final; si no, se
    completa en ese turno y se despacha. Cada tarea se despacha una sola vez.

    `order_key` permite ordenar la cola inicial (orden estable). Ninguna
    política registrada lo usa hoy.
    """
    indexed = list(enumerate(tasks))
    if order_key is not None:
        indexed.sort(key=lambda item: order_key(item[1]))

    # La ráfaga restante vive en la cola, nunca en la Task compartida
    queue: Deque[Tuple[int, Task, int]] = deque((pos, t, t.burst) for pos, t in indexed)
    result = ScheduleResult()
    time = 0

    while queue:
        pos, task, remaining = queue.popleft()
        if remaining > quantum:
            result.timeline.append(ExecSlice(task.name, pos, time, time + quantum))
            time += quantum
            queue.append((pos, task, remaining - quantum))
        else:
            end = time + max(remaining, 0)
            result.timeline.append(ExecSlice(task.name, pos, time, end))
            result.dispatches.append(Dispatch(task.name, pos, end, end - task.burst))
            time = end

    return result

class RoundRobin(SchedulerStrategy):
    name = "Round-Robin"

    def schedule(self, tasks: Sequence[Task], quantum: Optional[int] = None) -> ScheduleResult:
        return rotate(tasks, check_quantum(quantum))

class PriorityWithRR(SchedulerStrategy):
    """
    Prioridad con Round-Robin. Se comporta exactamente igual que RoundRobin:
    la prioridad no se consulta ni para la cola inicial ni para el quantum.
    """
    name = "Priority with Round-Robin"

    def schedule(self, tasks: Sequence[Task], quantum: Optional[int] = None) -> ScheduleResult:
        return rotate(tasks, check_quantum(quantum))
