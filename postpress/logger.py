import logging
import sys

LOGGER_NAME = "PostPress"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logger(level=logging.INFO):
    # Configurar el logger
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Evitar handlers duplicados si se llama más de una vez
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        # Salida a stderr (stdout queda libre para el resumen del build)
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    return logger

# Inicializar logger global
logger = setup_logger()
