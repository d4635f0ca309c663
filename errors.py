'''
Errores de TaskFlow. Cada error sabe con qué código HTTP se responde.
'''


class TaskError(Exception):
    status_code = 500
    message = 'Error interno del servidor'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {'message': self.message}


class ValidationError(TaskError):
    status_code = 400
    message = 'Datos de tarea inválidos'


class DuplicateNumeroError(ValidationError):
    message = 'El número de tarea ya existe'


class TaskNotFoundError(TaskError):
    status_code = 404
    message = 'Tarea no encontrada'


class StoreError(TaskError):
    """Fallo inesperado al leer o escribir el almacén de tareas"""
    status_code = 500
