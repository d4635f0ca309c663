'''
Cliente Python para la API REST de TaskFlow.
'''

import requests

DEFAULT_TIMEOUT = 5


class TaskApiError(Exception):
    def __init__(self, status_code, message):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class TaskApiClient:
    def __init__(self, base_url="http://localhost:5000", timeout=DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def _request(self, method, path, **kwargs):
        response = requests.request(
            method,
            f"{self.base_url}/api/tasks{path}",
            timeout=self.timeout,
            **kwargs
        )
        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.status_code >= 400:
            message = data.get('message') if isinstance(data, dict) else None
            raise TaskApiError(response.status_code, message or response.reason)
        return data

    def list_tasks(self):
        return self._request('GET', '')

    def get_task(self, task_id):
        return self._request('GET', f'/{task_id}')

    def create_task(self, nombre, descripcion, tipo=None, numero=None):
        payload = {'nombre': nombre, 'descripcion': descripcion}
        if tipo is not None:
            payload['tipo'] = tipo
        if numero is not None:
            payload['numero'] = numero
        return self._request('POST', '', json=payload)

    def update_task(self, task_id, **fields):
        return self._request('PUT', f'/{task_id}', json=fields)

    def toggle_task(self, task_id):
        return self._request('PATCH', f'/{task_id}/toggle')

    def delete_task(self, task_id):
        return self._request('DELETE', f'/{task_id}')['task']

    def delete_completed(self):
        """Elimina las tareas completadas y devuelve cuántas se borraron."""
        return self._request('DELETE', '/completed/all')['deletedCount']
