import unittest
from unittest.mock import patch

from client import TaskApiClient, TaskApiError


class TaskApiClientTestCase(unittest.TestCase):
    def setUp(self):
        self.client = TaskApiClient("http://localhost:5000/")

    @patch("client.requests.request")
    def test_list_tasks(self, mock_request):
        mock_request.return_value.status_code = 200
        mock_request.return_value.json.return_value = [{"_id": "a1", "numero": 1}]

        tasks = self.client.list_tasks()
        self.assertEqual(tasks[0]["numero"], 1)
        mock_request.assert_called_once_with('GET', "http://localhost:5000/api/tasks", timeout=5)

    @patch("client.requests.request")
    def test_create_task(self, mock_request):
        mock_request.return_value.status_code = 201
        mock_request.return_value.json.return_value = {"_id": "a1", "nombre": "Nueva"}

        task = self.client.create_task("Nueva", "Descripción", tipo="Hogar")
        self.assertEqual(task["nombre"], "Nueva")
        self.assertEqual(mock_request.call_args.kwargs["json"], {
            "nombre": "Nueva", "descripcion": "Descripción", "tipo": "Hogar"
        })

    @patch("client.requests.request")
    def test_delete_completed_returns_count(self, mock_request):
        mock_request.return_value.status_code = 200
        mock_request.return_value.json.return_value = {"message": "2 tareas completadas eliminadas", "deletedCount": 2}

        self.assertEqual(self.client.delete_completed(), 2)
        self.assertEqual(mock_request.call_args.args[1], "http://localhost:5000/api/tasks/completed/all")

    @patch("client.requests.request")
    def test_error_raises(self, mock_request):
        mock_request.return_value.status_code = 404
        mock_request.return_value.json.return_value = {"message": "Tarea no encontrada"}

        with self.assertRaises(TaskApiError) as ctx:
            self.client.toggle_task("a1")
        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.message, "Tarea no encontrada")


if __name__ == '__main__':
    unittest.main()
