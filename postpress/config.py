import copy
import json
import os

from postpress.errors import BuildError

DEFAULT_CONFIG_FILE = 'config.json'

DEFAULT_CONFIG = {
    'blog': {
        'title': 'Blog',
        'description': '',
        'author': '',
    },
    'posts': {'dir': 'posts'},
    'output': {'dir': 'web'},
}


def load_config(config_file=None):
    """
    Carga la configuración JSON sobre los valores por defecto.
    El fichero es opcional: si no existe se usan los defaults.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not config_file or not os.path.exists(config_file):
        return config

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise BuildError(f"loading config: {e}", stage="config", source=config_file) from e

    if not isinstance(data, dict):
        raise BuildError("config must be a JSON object", stage="config", source=config_file)

    # Mezcla por secciones
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values

    # Secciones conocidas: siempre objetos, y los dirs siempre cadenas
    for section in DEFAULT_CONFIG:
        if not isinstance(config[section], dict):
            raise BuildError(f"'{section}' must be a JSON object", stage="config", source=config_file)
    for section in ('posts', 'output'):
        if not isinstance(config[section].get('dir'), str):
            raise BuildError(f"'{section}.dir' must be a string", stage="config", source=config_file)
    return config
