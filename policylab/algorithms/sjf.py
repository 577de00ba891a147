from typing import List, Tuple
from ..core.scheduler_base import NonPreemptiveStrategy
from ..core.models import Task

class SJF(NonPreemptiveStrategy):
    """Shortest-Job-First no expropiativo sobre un lote estático.

    sorted() es estable: a igual ráfaga se respeta el orden de entrada.
    """
    name = "SJF"

    def _order(self, indexed: List[Tuple[int, Task]]) -> List[Tuple[int, Task]]:
        return sorted(indexed, key=lambda item: item[1].burst)
