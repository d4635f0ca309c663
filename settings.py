'''
Configuración de TaskFlow a partir de variables de entorno (y de un archivo .env si existe).
'''

import os

from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

load_dotenv(os.path.join(BASE_DIR, '.env'))

VERSION = '2.1.0'
DEFAULT_PORT = 5000


def load_settings(overrides=None):
    settings = {
        'PORT': int(os.getenv('PORT', DEFAULT_PORT)),
        'TASKS_FILE': os.getenv('TASKS_FILE', os.path.join(BASE_DIR, 'tasks.json')),
        'LOG_FILE': os.getenv('LOG_FILE', 'taskflow.log'),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO').upper(),
        'LOG_SERVICE_URL': os.getenv('LOG_SERVICE_URL') or None,
        'CLIENT_BUILD_DIR': os.getenv('CLIENT_BUILD_DIR') or None,
        'CORS_ORIGINS': os.getenv('CORS_ORIGINS', '*'),
    }
    if overrides:
        settings.update(overrides)
    return settings
