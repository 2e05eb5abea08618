# fxcli/infra/feeds/rates_feed.py
import logging
import math
from typing import Optional, Tuple

import requests
from pydantic import ValidationError

from fxcli.core.config import Settings, settings as default_settings
from fxcli.core.errors import DataSourceError, NetworkError, UnknownCurrencyError
from fxcli.domain.entities.conversion import normalize_currency
from fxcli.schemas.rate_schemas import FeedError, RateTable

logger = logging.getLogger(__name__)


def _redact(texto: str, secreto: str) -> str:
    # requests incluye la URL completa (con app_id) en sus mensajes
    if secreto:
        return texto.replace(secreto, "***")
    return texto


def _describe_http_error(r: requests.Response) -> str:
    mensaje = f"rate feed responded with HTTP {r.status_code}"
    try:
        err = FeedError.model_validate(r.json())
    except ValueError:
        # cuerpo no JSON o sin forma de error: basta con el status
        return mensaje

    detalle = err.description or err.message
    if detalle:
        mensaje += f": {detalle}"
    return mensaje


def fetch_rate_table(settings: Optional[Settings] = None) -> RateTable:
    """
    Descarga la tabla de tasas actual del feed.

    Una sola petición, sin cache y sin reintentos. Los fallos de transporte
    se convierten en NetworkError; status no 2xx o payload inválido, en
    DataSourceError.
    """
    settings = settings or default_settings

    if not settings.OXR_APP_ID:
        logger.warning("⚠️ OXR_APP_ID vacío, el feed probablemente rechazará la petición")

    # -----------------------------
    # 1. Petición HTTP
    # -----------------------------
    logger.info("🔄 Consultando tasas de cambio en %s", settings.OXR_API_URL)
    try:
        r = requests.get(
            settings.OXR_API_URL,
            params={"app_id": settings.OXR_APP_ID},
            timeout=settings.REQUEST_TIMEOUT,
        )
    except requests.Timeout as e:
        logger.error("Timeout consultando tasas de cambio")
        raise NetworkError(
            f"rate feed did not answer within {settings.REQUEST_TIMEOUT:g} seconds"
        ) from e
    except requests.RequestException as e:
        detalle = _redact(str(e), settings.OXR_APP_ID)
        logger.error(f"Error de red consultando tasas de cambio: {detalle}")
        raise NetworkError(f"unable to reach rate feed: {detalle}") from e

    if not 200 <= r.status_code < 300:
        mensaje = _describe_http_error(r)
        logger.error(mensaje)
        raise DataSourceError(mensaje)

    # -----------------------------
    # 2. Parseo del payload
    # -----------------------------
    try:
        data = r.json()
    except ValueError as e:
        logger.error("Respuesta del feed no es JSON válido")
        raise DataSourceError("rate feed returned a body that is not valid JSON") from e

    try:
        tabla = RateTable.model_validate(data)
    except ValidationError as e:
        logger.error(f"Payload de tasas inesperado: {e}")
        raise DataSourceError(
            f"rate feed returned an unexpected payload ({e.error_count()} invalid field(s))"
        ) from e

    logger.info("📈 %d tasas recibidas (base %s)", len(tabla.rates), tabla.base)
    return tabla


def lookup_rates(tabla: RateTable, from_code: str, to_code: str) -> Tuple[float, float]:
    """Busca las dos tasas en la tabla; ambas están expresadas contra la misma base."""
    for code in (from_code, to_code):
        if code not in tabla.rates:
            raise UnknownCurrencyError(code)

    rate_from = tabla.rates[from_code]
    rate_to = tabla.rates[to_code]

    for code, rate in ((from_code, rate_from), (to_code, rate_to)):
        if not math.isfinite(rate) or rate <= 0:
            raise DataSourceError(f"rate feed returned an unusable rate for {code}: {rate}")

    return rate_from, rate_to


def resolve(
    from_code: str,
    to_code: str,
    settings: Optional[Settings] = None,
) -> Tuple[float, float]:
    """Devuelve (rate_from, rate_to) con una sola consulta al feed."""
    from_code = normalize_currency(from_code)
    to_code = normalize_currency(to_code)

    tabla = fetch_rate_table(settings)
    return lookup_rates(tabla, from_code, to_code)
