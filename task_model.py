'''
Modelo de tarea: reglas de validación y normalización de los datos que llegan a la API.
'''

from errors import ValidationError

TIPOS = ('Personal', 'Trabajo', 'Estudio', 'Hogar', 'Salud', 'Otro')
TIPO_POR_DEFECTO = 'Personal'
NOMBRE_MAX_LENGTH = 100


def parse_numero(value):
    """
    Convierte el número de tarea recibido. None, '' y 0 significan que no se
    proporcionó y se devuelve None para que el almacén lo asigne.
    """
    if value is None or value == '' or value == 0:
        return None
    if isinstance(value, bool):
        raise ValidationError('El número de tarea debe ser un entero positivo')

    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValidationError('El número de tarea debe ser un entero positivo')
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValidationError('El número de tarea debe ser un entero positivo')
        value = int(value)
    elif not isinstance(value, int):
        raise ValidationError('El número de tarea debe ser un entero positivo')

    if value == 0:
        return None
    if value < 0:
        raise ValidationError('El número de tarea debe ser un entero positivo')
    return value


def _required_text(data, field, message):
    value = data.get(field)
    if value is None:
        raise ValidationError(message)
    if not isinstance(value, str):
        raise ValidationError(f'El campo {field} debe ser texto')
    value = value.strip()
    if value == '':
        raise ValidationError(message)
    return value


def _nombre(data):
    nombre = _required_text(data, 'nombre', 'El nombre es requerido')
    if len(nombre) > NOMBRE_MAX_LENGTH:
        raise ValidationError(f'El nombre no puede superar los {NOMBRE_MAX_LENGTH} caracteres')
    return nombre


def _descripcion(data):
    # El cliente web envía 'description'; se acepta como alias
    if data.get('descripcion') is None and 'description' in data:
        data = {'descripcion': data['description']}
    return _required_text(data, 'descripcion', 'La descripción es requerida')


def _tipo(data):
    tipo = data.get('tipo') or TIPO_POR_DEFECTO
    if tipo not in TIPOS:
        raise ValidationError(f'El tipo debe ser uno de: {", ".join(TIPOS)}')
    return tipo


def _completed(data):
    completed = data.get('completed')
    if completed is None:
        return False
    if not isinstance(completed, bool):
        raise ValidationError('El campo completed debe ser booleano')
    return completed


def _ensure_dict(data):
    if not isinstance(data, dict):
        raise ValidationError('El cuerpo de la petición debe ser un objeto JSON')


def build_task(data):
    """Valida los datos de creación y devuelve la nueva tarea (sin _id)."""
    _ensure_dict(data)
    task = {
        'nombre': _nombre(data),
        'tipo': _tipo(data),
        'descripcion': _descripcion(data),
        'completed': False,
    }

    numero = parse_numero(data.get('numero'))
    if numero is not None:
        task['numero'] = numero
    return task


def build_replacement(data, current):
    """
    Valida un reemplazo completo. Los campos omitidos vuelven a su valor por
    defecto, salvo el número, que conserva el de la tarea actual.
    """
    _ensure_dict(data)
    numero = parse_numero(data.get('numero'))
    return {
        'numero': numero if numero is not None else current['numero'],
        'nombre': _nombre(data),
        'tipo': _tipo(data),
        'descripcion': _descripcion(data),
        'completed': _completed(data),
    }
