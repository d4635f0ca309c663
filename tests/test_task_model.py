import unittest

from errors import ValidationError
from task_model import build_replacement, build_task, parse_numero


class ParseNumeroTestCase(unittest.TestCase):
    def test_empty_values_mean_auto(self):
        for value in (None, '', 0, '0'):
            self.assertIsNone(parse_numero(value))

    def test_numeric_strings_and_floats(self):
        self.assertEqual(parse_numero('12'), 12)
        self.assertEqual(parse_numero(3.0), 3)

    def test_invalid_values(self):
        for value in ('abc', -1, 2.5, True, [1]):
            with self.assertRaises(ValidationError):
                parse_numero(value)


class BuildTaskTestCase(unittest.TestCase):
    def test_build_without_numero(self):
        task = build_task({'nombre': 'Estudiar', 'tipo': 'Estudio', 'descripcion': 'Álgebra'})
        self.assertNotIn('numero', task)
        self.assertEqual(task['tipo'], 'Estudio')
        self.assertFalse(task['completed'])

    def test_completed_ignored_on_create(self):
        task = build_task({'nombre': 'a', 'descripcion': 'b', 'completed': True})
        self.assertFalse(task['completed'])

    def test_non_text_nombre(self):
        with self.assertRaises(ValidationError):
            build_task({'nombre': 42, 'descripcion': 'b'})

    def test_body_must_be_object(self):
        with self.assertRaises(ValidationError):
            build_task(['nombre'])

    def test_replacement_defaults(self):
        current = {'numero': 5}
        task = build_replacement({'nombre': 'a', 'descripcion': 'b'}, current)
        self.assertEqual(task['numero'], 5)
        self.assertEqual(task['tipo'], 'Personal')
        self.assertFalse(task['completed'])

    def test_replacement_completed_must_be_bool(self):
        with self.assertRaises(ValidationError):
            build_replacement({'nombre': 'a', 'descripcion': 'b', 'completed': 'si'}, {'numero': 1})


if __name__ == '__main__':
    unittest.main()
