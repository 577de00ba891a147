import logging
from typing import List
from .models import Task

logger = logging.getLogger(__name__)

class InputUnavailableError(OSError):
    """No se pudo leer la fuente de tareas."""

class InvalidTaskError(ValueError):
    """Registro con ráfaga nula o negativa."""

def parse_tasks(text: str) -> List[Task]:
    """
    Lee ternas "nombre prioridad ráfaga" separadas por espacios en blanco.

    La lectura se corta en la primera terna que no se pueda interpretar
    (prioridad o ráfaga no enteras, o terna incompleta al final); lo leído
    hasta ahí sigue siendo válido. Una ráfaga <= 0 lanza InvalidTaskError.
    """
    tokens = text.split()
    tasks: List[Task] = []
    for i in range(0, len(tokens), 3):
        record = tokens[i:i + 3]
        if len(record) < 3:
            logger.debug("Terna incompleta al final de la entrada: %r", record)
            break
        name, raw_priority, raw_burst = record
        try:
            priority = int(raw_priority)
            burst = int(raw_burst)
        except ValueError:
            logger.debug("Fin de lectura en el registro %d: %r", len(tasks) + 1, record)
            break
        if burst <= 0:
            raise InvalidTaskError(
                f"La tarea '{name}' (registro {len(tasks) + 1}) tiene ráfaga {burst}; debe ser positiva."
            )
        tasks.append(Task(name, priority, burst))
    return tasks

def load_tasks(path: str) -> List[Task]:
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailableError(
            f"Error al abrir '{path}'. Verificá que el archivo exista y sea legible."
        ) from exc
    tasks = parse_tasks(text)
    logger.debug("%d tareas leídas de %s", len(tasks), path)
    return tasks

def task_from_fields(name: str, raw_priority: str, raw_burst: str) -> Task:
    """Valida los campos de una fila editada a mano (ventana)."""
    name = name.strip()
    if not name or any(ch.isspace() for ch in name):
        raise InvalidTaskError("Hay tareas sin nombre o con espacios.")
    try:
        priority = int(raw_priority)
    except ValueError:
        raise InvalidTaskError(f"Prioridad inválida en {name}.") from None
    try:
        burst = int(raw_burst)
    except ValueError:
        burst = 0
    if burst <= 0:
        raise InvalidTaskError(f"Ráfaga inválida en {name}: debe ser positiva.")
    return Task(name, priority, burst)
