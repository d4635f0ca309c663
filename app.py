'''
TaskFlow - API REST de tareas con interfaz web de página única
'''

import logging
import os
import sys
from datetime import datetime

import requests
from flask import Blueprint, Flask, current_app, jsonify, render_template_string, request, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from errors import TaskError, TaskNotFoundError
from settings import VERSION, load_settings
from task_model import NOMBRE_MAX_LENGTH, TIPOS, build_replacement, build_task
from task_store import TaskStore
from templates import get_unified_template

logger = logging.getLogger("taskflow")

api = Blueprint('api', __name__, url_prefix='/api')
web = Blueprint('web', __name__)


def configure_logging(settings):
    logger.setLevel(settings['LOG_LEVEL'])
    # basicConfig solo aplica si el logger raíz no tiene handlers
    if logging.getLogger().handlers:
        return

    handlers = [logging.StreamHandler()]
    if settings['LOG_FILE']:
        handlers.append(logging.FileHandler(settings['LOG_FILE']))

    logging.basicConfig(
        level=settings['LOG_LEVEL'],
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


# Registra un evento y lo reenvía al servicio de logs si está configurado
def log_event(message):
    logger.info(message)
    url = current_app.config['TASKFLOW']['LOG_SERVICE_URL']
    if not url:
        return

    try:
        requests.post(url, json={"message": message}, timeout=1)
    except requests.RequestException as e:
        logger.warning(f"No se pudo enviar el evento al servicio de logs: {e}")


def get_store():
    return current_app.extensions['task_store']


def request_data():
    return request.get_json(silent=True)


# API - Crear una nueva tarea
@api.route('/tasks', methods=['POST'])
def create_task():
    task = get_store().insert(build_task(request_data()))
    log_event(f"API: Nueva tarea añadida: #{task['numero']} {task['nombre']}")
    return jsonify(task), 201


# API - Obtener todas las tareas, ordenadas por número
@api.route('/tasks', methods=['GET'])
def get_tasks():
    return jsonify(get_store().find_all())


# API - Obtener una tarea por id
@api.route('/tasks/<task_id>', methods=['GET'])
def get_task(task_id):
    task = get_store().find_by_id(task_id)
    if task is None:
        raise TaskNotFoundError()
    return jsonify(task)


# API - Reemplazar completamente una tarea
@api.route('/tasks/<task_id>', methods=['PUT'])
def update_task(task_id):
    store = get_store()
    current = store.find_by_id(task_id)
    if current is None:
        raise TaskNotFoundError()

    task = store.replace(task_id, build_replacement(request_data(), current))
    if task is None:
        raise TaskNotFoundError()
    log_event(f"API: Tarea actualizada: #{task['numero']} {task['nombre']}")
    return jsonify(task)


# API - Marcar una tarea como completada/pendiente
@api.route('/tasks/<task_id>/toggle', methods=['PATCH'])
def toggle_task(task_id):
    task = get_store().toggle(task_id)
    if task is None:
        raise TaskNotFoundError()
    estado = "completada" if task['completed'] else "pendiente"
    log_event(f"API: Tarea #{task['numero']} marcada como {estado}")
    return jsonify(task)


# API - Eliminar una tarea
@api.route('/tasks/<task_id>', methods=['DELETE'])
def delete_task(task_id):
    deleted_task = get_store().delete(task_id)
    if deleted_task is None:
        raise TaskNotFoundError()
    log_event(f"API: Tarea eliminada: #{deleted_task['numero']} {deleted_task['nombre']}")
    return jsonify({'message': 'Tarea eliminada exitosamente', 'task': deleted_task})


# API - Eliminar todas las tareas completadas
@api.route('/tasks/completed/all', methods=['DELETE'])
def delete_completed_tasks():
    deleted_count = get_store().delete_completed()
    log_event(f"API: {deleted_count} tareas completadas eliminadas")
    return jsonify({
        'message': f'{deleted_count} tareas completadas eliminadas',
        'deletedCount': deleted_count
    })


@api.route('', defaults={'path': ''}, methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE'])
@api.route('/', defaults={'path': ''}, methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE'])
@api.route('/<path:path>', methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE'])
def api_not_found(path):
    return jsonify({'message': 'Ruta no encontrada'}), 404


# Endpoint para health check
@web.route("/health", methods=["GET"])
def health_check():
    """Endpoint para verificar si el servidor está activo"""
    return jsonify({
        "status": "ok",
        "version": VERSION,
        "timestamp": datetime.now().isoformat(),
        "tasks_count": get_store().count()
    }), 200


# Interfaz web: el cliente compilado si existe, si no la página incluida
@web.route('/', defaults={'path': ''})
@web.route('/<path:path>')
def index(path):
    build_dir = current_app.config['TASKFLOW']['CLIENT_BUILD_DIR']
    if build_dir:
        if path and os.path.isfile(os.path.join(build_dir, path)):
            return send_from_directory(build_dir, path)
        return send_from_directory(build_dir, 'index.html')

    return render_template_string(get_unified_template(), tipos=TIPOS, nombre_max=NOMBRE_MAX_LENGTH)


def handle_task_error(error):
    if error.status_code >= 500:
        logger.error(f"❌ {request.method} {request.path}: {error.message}")
    else:
        logger.info(f"{request.method} {request.path} -> {error.status_code}: {error.message}")
    return jsonify(error.to_dict()), error.status_code


def handle_http_error(error):
    if not request.path.startswith('/api'):
        return error
    return jsonify({'message': error.description}), error.code


def handle_unexpected_error(error):
    logger.exception(f"❌ Error inesperado en {request.method} {request.path}")
    return jsonify({'message': str(error)}), 500


def create_app(overrides=None):
    settings = load_settings(overrides)
    configure_logging(settings)

    app = Flask(__name__, static_folder=None)
    app.config['TASKFLOW'] = settings
    app.extensions['task_store'] = TaskStore(settings['TASKS_FILE'])

    CORS(app, resources={r"/api/*": {
        "origins": settings['CORS_ORIGINS'],
        "send_wildcard": settings['CORS_ORIGINS'] == '*',
    }})

    app.register_blueprint(api)
    app.register_blueprint(web)

    app.register_error_handler(TaskError, handle_task_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)
    return app


if __name__ == "__main__":
    app = create_app()
    port = int(sys.argv[1]) if len(sys.argv) > 1 else app.config['TASKFLOW']['PORT']
    print(f"🚀 TaskFlow Server v{VERSION} iniciado en puerto: {port}")
    print(f"📝 Interfaz principal: http://localhost:{port}")
    print(f"📡 API de tareas: http://localhost:{port}/api/tasks")
    print(f"💚 Health check: http://localhost:{port}/health")
    app.run(host='0.0.0.0', port=port, debug=True)
