import json
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from errors import DuplicateNumeroError, StoreError
from task_store import TaskStore


class TaskStoreTestCase(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmp_dir, 'datos', 'tasks.json')
        self.store = TaskStore(self.path)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def task(self, **fields):
        task = {'nombre': 'Tarea', 'tipo': 'Personal', 'descripcion': 'Algo', 'completed': False}
        task.update(fields)
        return task

    def test_missing_file_is_empty(self):
        self.assertEqual(self.store.find_all(), [])
        self.assertEqual(self.store.count(), 0)

    def test_insert_persists_document(self):
        saved = self.store.insert(self.task())
        with open(self.path, encoding='utf-8') as file:
            stored = json.load(file)
        self.assertEqual(stored, [saved])
        self.assertEqual(saved['numero'], 1)

    def test_insert_numbers_after_highest(self):
        self.store.insert(self.task(numero=10))
        self.store.insert(self.task(numero=3))
        self.assertEqual(self.store.insert(self.task())['numero'], 11)

    def test_insert_duplicate_numero(self):
        self.store.insert(self.task(numero=2))
        with self.assertRaises(DuplicateNumeroError):
            self.store.insert(self.task(numero=2))
        self.assertEqual(self.store.count(), 1)

    @patch("task_store.now_iso")
    def test_replace_refreshes_updated_at(self, mock_now):
        mock_now.return_value = '2026-01-01T10:00:00.000Z'
        saved = self.store.insert(self.task())

        mock_now.return_value = '2026-01-02T12:30:00.000Z'
        replaced = self.store.replace(saved['_id'], self.task(numero=1, nombre='Nuevo'))
        self.assertEqual(replaced['nombre'], 'Nuevo')
        self.assertEqual(replaced['createdAt'], '2026-01-01T10:00:00.000Z')
        self.assertEqual(replaced['updatedAt'], '2026-01-02T12:30:00.000Z')
        self.assertEqual(self.store.find_by_id(saved['_id'])['updatedAt'], '2026-01-02T12:30:00.000Z')

    @patch("task_store.now_iso")
    def test_toggle_refreshes_updated_at(self, mock_now):
        mock_now.return_value = '2026-01-01T10:00:00.000Z'
        saved = self.store.insert(self.task())

        mock_now.return_value = '2026-01-03T08:15:00.000Z'
        toggled = self.store.toggle(saved['_id'])
        self.assertTrue(toggled['completed'])
        self.assertEqual(toggled['createdAt'], '2026-01-01T10:00:00.000Z')
        self.assertEqual(toggled['updatedAt'], '2026-01-03T08:15:00.000Z')

    def test_empty_file_is_empty_collection(self):
        os.makedirs(os.path.dirname(self.path))
        open(self.path, 'w').close()
        self.assertEqual(self.store.find_all(), [])
        self.assertEqual(self.store.insert(self.task())['numero'], 1)

    def test_failed_save_leaves_no_temp_file(self):
        with self.assertRaises(StoreError):
            self.store.save_tasks([{'_id': 'a1', 'etiquetas': {'no', 'serializable'}}])
        directory = os.path.dirname(self.path)
        self.assertEqual([f for f in os.listdir(directory) if f.endswith('.tmp')], [])
        self.assertFalse(os.path.exists(self.path))

    def test_replace_and_toggle_missing(self):
        self.assertIsNone(self.store.replace('nada', self.task(numero=1)))
        self.assertIsNone(self.store.toggle('nada'))
        self.assertIsNone(self.store.delete('nada'))

    def test_delete_completed_counts(self):
        first = self.store.insert(self.task())
        second = self.store.insert(self.task())
        self.store.insert(self.task())
        self.store.toggle(first['_id'])
        self.store.toggle(second['_id'])

        self.assertEqual(self.store.delete_completed(), 2)
        self.assertEqual(self.store.count(), 1)
        self.assertEqual(self.store.delete_completed(), 0)

    def test_malformed_file_raises(self):
        os.makedirs(os.path.dirname(self.path))
        with open(self.path, 'w', encoding='utf-8') as file:
            json.dump({'no': 'es una lista'}, file)
        with self.assertRaises(StoreError):
            self.store.find_all()


if __name__ == '__main__':
    unittest.main()
