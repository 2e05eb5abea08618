# fxcli/domain/entities/conversion.py
from dataclasses import dataclass

from fxcli.core.errors import UsageError


def normalize_currency(code: str | None) -> str:
    """Normaliza un código de moneda ("usd " -> "USD")."""
    clean = (code or "").strip().upper()
    if not clean:
        raise UsageError("currency code must not be empty")
    return clean


@dataclass(frozen=True)
class ConversionRequest:
    from_code: str
    to_code: str
    amount: float


@dataclass(frozen=True)
class ConversionResult:
    request: ConversionRequest
    rate_from: float
    rate_to: float
    converted_amount: float

    @property
    def cross_rate(self) -> float:
        return self.rate_to / self.rate_from
