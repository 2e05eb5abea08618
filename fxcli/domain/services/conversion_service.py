# fxcli/domain/services/conversion_service.py
import math
from typing import Optional

from fxcli.core.config import Settings
from fxcli.core.errors import UsageError
from fxcli.domain.entities.conversion import (
    ConversionRequest,
    ConversionResult,
    normalize_currency,
)
from fxcli.infra.feeds.rates_feed import lookup_rates, resolve
from fxcli.schemas.rate_schemas import RateTable


def build_request(from_code: str, to_code: str, amount: float) -> ConversionRequest:
    amount = float(amount)
    if not math.isfinite(amount) or amount < 0:
        raise UsageError(f"amount must be a non-negative number, got {amount}")

    return ConversionRequest(
        from_code=normalize_currency(from_code),
        to_code=normalize_currency(to_code),
        amount=amount,
    )


def _aplicar_tasas(request: ConversionRequest, rate_from: float, rate_to: float) -> ConversionResult:
    # la base del feed se cancela en el cociente
    return ConversionResult(
        request=request,
        rate_from=rate_from,
        rate_to=rate_to,
        converted_amount=request.amount * (rate_to / rate_from),
    )


def convert(request: ConversionRequest, tabla: RateTable) -> ConversionResult:
    """Convierte con una tabla ya descargada (sin red)."""
    rate_from, rate_to = lookup_rates(tabla, request.from_code, request.to_code)
    return _aplicar_tasas(request, rate_from, rate_to)


def convert_amount(
    from_code: str,
    to_code: str,
    amount: float,
    settings: Optional[Settings] = None,
) -> ConversionResult:
    """Flujo completo: valida la petición, consulta el feed y calcula el monto."""
    request = build_request(from_code, to_code, amount)
    rate_from, rate_to = resolve(request.from_code, request.to_code, settings)
    return _aplicar_tasas(request, rate_from, rate_to)


def format_result(result: ConversionResult) -> str:
    req = result.request
    return f"{req.from_code} {req.amount:.4f} = {req.to_code} {result.converted_amount:.4f}"
