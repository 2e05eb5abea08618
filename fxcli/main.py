# fxcli/main.py
import argparse
import logging
import sys
from typing import List, Optional

from fxcli.core.config import settings
from fxcli.core.errors import CurrencyError, UsageError
from fxcli.core.logging import setup_logging
from fxcli.domain.services.conversion_service import convert_amount, format_result

logger = logging.getLogger("fxcli")

USAGE = (
    f"{settings.PROJECT_NAME} -- Currency converter.\n"
    f"Usage:   {settings.PROJECT_NAME} FROM TO amount\n"
    f"Example: {settings.PROJECT_NAME} USD EUR 123.45"
)


class _ArgumentParser(argparse.ArgumentParser):
    """argparse que levanta UsageError en vez de hacer sys.exit(2)."""

    def error(self, message: str):
        raise UsageError(message)


def _amount(valor: str) -> float:
    # el rango (>= 0, finito) lo valida build_request
    try:
        return float(valor)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid amount: {valor!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=settings.PROJECT_NAME,
        description="Convert an amount between currencies using live exchange rates.",
    )
    parser.add_argument("from_code", metavar="FROM", help="source currency code, e.g. USD")
    parser.add_argument("to_code", metavar="TO", help="destination currency code, e.g. EUR")
    parser.add_argument("amount", metavar="AMOUNT", type=_amount, help="non-negative amount")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.PROJECT_VERSION}",
    )
    return parser


def _reportar(error: CurrencyError) -> int:
    print(f"Error: {error}", file=sys.stderr)
    if isinstance(error, UsageError):
        print(USAGE, file=sys.stderr)
    return error.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        return _reportar(e)

    setup_logging("DEBUG" if args.verbose else None)

    try:
        result = convert_amount(args.from_code, args.to_code, args.amount)
    except CurrencyError as e:
        logger.debug("Conversión fallida", exc_info=True)
        return _reportar(e)

    logger.debug(f"Tasa cruzada {result.request.from_code}/{result.request.to_code}: {result.cross_rate}")
    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
