# fxcli/core/errors.py
"""
Errores del conversor.

Una clase por tipo de fallo para que la CLI pueda mostrar mensajes
distintos. Todos son terminales: no hay reintentos.
"""


class CurrencyError(Exception):
    """Base de todos los errores del conversor."""

    exit_code = 1


class UsageError(CurrencyError):
    """Argumentos de línea de comandos ausentes o inválidos."""

    exit_code = 2


class NetworkError(CurrencyError):
    """Fallo de transporte: DNS, conexión, TLS o timeout."""


class DataSourceError(CurrencyError):
    """Respuesta no exitosa o payload ilegible del feed de tasas."""


class UnknownCurrencyError(CurrencyError):
    """El código pedido no aparece en la tabla de tasas."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"'{code}' is not recognized as a currency.")
