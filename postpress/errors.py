"""Errores fatales del build."""


class BuildError(Exception):
    """Fallo que aborta el build completo.

    ``stage`` indica la fase (config, discover, parse, read, convert,
    render, write) y ``source`` el fichero o plantilla implicado.
    """

    def __init__(self, message, stage="build", source=""):
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.source = source

    def __str__(self):
        if self.source:
            return f"{self.stage} {self.source}: {self.message}"
        return f"{self.stage}: {self.message}"
