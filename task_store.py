'''
Almacén de documentos de tareas sobre un archivo JSON.
'''

import json
import logging
import os
import secrets
import tempfile
from datetime import datetime, timezone

from errors import DuplicateNumeroError, StoreError

logger = logging.getLogger("taskflow")


def now_iso():
    return datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'


def new_id():
    return secrets.token_hex(12)


class TaskStore:
    def __init__(self, path):
        self.path = path

    def load_tasks(self):
        """
        Carga las tareas desde el archivo JSON. Si el archivo no existe o está vacío retorna una lista vacía.
        """
        if not os.path.exists(self.path):
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as file:
                content = file.read()
            if not content.strip():
                return []
            tasks = json.loads(content)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Error al leer el almacén de tareas {self.path}: {e}")
            raise StoreError(f"No se pudo leer el almacén de tareas: {e}")

        if not isinstance(tasks, list):
            logger.error(f"Formato inválido en el almacén de tareas {self.path}")
            raise StoreError("El almacén de tareas tiene un formato inválido")
        return [task for task in tasks if isinstance(task, dict) and '_id' in task]

    def save_tasks(self, tasks):
        """
        Guarda las tareas en el archivo JSON. Se escribe en un temporal y se renombra.
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix='.tmp')
            with os.fdopen(fd, "w", encoding="utf-8") as file:
                json.dump(tasks, file, indent=4, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            logger.error(f"Error al guardar el almacén de tareas {self.path}: {e}")
            raise StoreError(f"No se pudo guardar el almacén de tareas: {e}")

    @staticmethod
    def _index_of(tasks, task_id):
        for i, task in enumerate(tasks):
            if task['_id'] == task_id:
                return i
        return None

    @staticmethod
    def _check_numero(tasks, numero, exclude_id=None):
        for task in tasks:
            if task.get('numero') == numero and task['_id'] != exclude_id:
                raise DuplicateNumeroError()

    def insert(self, task):
        tasks = self.load_tasks()
        document = dict(task)

        # Sin bloqueo: dos altas simultáneas pueden calcular el mismo número
        if not document.get('numero'):
            last = max((t.get('numero', 0) for t in tasks), default=0)
            document['numero'] = last + 1
        self._check_numero(tasks, document['numero'])

        timestamp = now_iso()
        document['_id'] = new_id()
        document['createdAt'] = timestamp
        document['updatedAt'] = timestamp
        tasks.append(document)
        self.save_tasks(tasks)
        return document

    def find_all(self):
        return sorted(self.load_tasks(), key=lambda t: t.get('numero', 0))

    def find_by_id(self, task_id):
        tasks = self.load_tasks()
        index = self._index_of(tasks, task_id)
        return tasks[index] if index is not None else None

    def replace(self, task_id, fields):
        tasks = self.load_tasks()
        index = self._index_of(tasks, task_id)
        if index is None:
            return None

        self._check_numero(tasks, fields['numero'], exclude_id=task_id)
        task = tasks[index]
        task.update(fields)
        task['updatedAt'] = now_iso()
        self.save_tasks(tasks)
        return task

    def toggle(self, task_id):
        tasks = self.load_tasks()
        index = self._index_of(tasks, task_id)
        if index is None:
            return None

        task = tasks[index]
        task['completed'] = not task.get('completed', False)
        task['updatedAt'] = now_iso()
        self.save_tasks(tasks)
        return task

    def delete(self, task_id):
        tasks = self.load_tasks()
        index = self._index_of(tasks, task_id)
        if index is None:
            return None

        deleted = tasks.pop(index)
        self.save_tasks(tasks)
        return deleted

    def delete_completed(self):
        tasks = self.load_tasks()
        remaining = [t for t in tasks if not t.get('completed', False)]
        deleted_count = len(tasks) - len(remaining)
        if deleted_count:
            self.save_tasks(remaining)
        return deleted_count

    def count(self):
        return len(self.load_tasks())
