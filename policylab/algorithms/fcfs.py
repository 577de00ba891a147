from typing import List, Tuple
from ..core.scheduler_base import NonPreemptiveStrategy
from ..core.models import Task

class FCFS(NonPreemptiveStrategy):
    name = "FCFS"

    def _order(self, indexed: List[Tuple[int, Task]]) -> List[Tuple[int, Task]]:
        # mantener orden original
        return indexed
