from typing import Dict, List, Type, Optional
from .scheduler_base import SchedulerStrategy
from ..algorithms.fcfs import FCFS
from ..algorithms.sjf import SJF
from ..algorithms.priority import PriorityScheduling
from ..algorithms.round_robin import RoundRobin, PriorityWithRR

class SchedulerFactory:
    # Orden de registro = orden de ejecución y de reporte
    _strategies: Dict[str, Type[SchedulerStrategy]] = {
        FCFS.name: FCFS,
        SJF.name: SJF,
        PriorityScheduling.name: PriorityScheduling,
        RoundRobin.name: RoundRobin,
        PriorityWithRR.name: PriorityWithRR,
    }

    # Políticas que usan el quantum
    QUANTUM_POLICIES = (RoundRobin.name, PriorityWithRR.name)

    @classmethod
    def create(cls, name: str) -> Optional[SchedulerStrategy]:
        strategy_cls = cls._strategies.get(name)
        return strategy_cls() if strategy_cls else None

    @classmethod
    def list_algorithms(cls) -> List[str]:
        return list(cls._strategies.keys())

    @classmethod
    def create_all(cls) -> List[SchedulerStrategy]:
        return [strategy_cls() for strategy_cls in cls._strategies.values()]
