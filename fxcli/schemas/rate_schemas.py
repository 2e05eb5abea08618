# fxcli/schemas/rate_schemas.py
from pydantic import AllowInfNan, BaseModel, ConfigDict, Strict
from typing import Annotated, Dict, Optional

# solo números JSON finitos: sin "0.92", true, NaN ni Infinity
Rate = Annotated[float, Strict(), AllowInfNan(False)]


class RateTable(BaseModel):
    """Payload de latest.json: tasas de cada moneda respecto a `base`."""

    model_config = ConfigDict(extra="ignore")

    base: str = "USD"
    rates: Dict[str, Rate]
    timestamp: Optional[float] = None


class FeedError(BaseModel):
    """Documento de error que devuelve el feed con status no 2xx."""

    model_config = ConfigDict(extra="ignore")

    status: Optional[int] = None
    message: Optional[str] = None
    description: Optional[str] = None
