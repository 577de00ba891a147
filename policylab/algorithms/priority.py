from typing import List, Tuple
from ..core.scheduler_base import NonPreemptiveStrategy
from ..core.models import Task

class PriorityScheduling(NonPreemptiveStrategy):
    name = "Priority"

    def _order(self, indexed: List[Tuple[int, Task]]) -> List[Tuple[int, Task]]:
        # Mayor valor numérico primero; reverse=True mantiene la estabilidad
        return sorted(indexed, key=lambda item: item[1].priority, reverse=True)
