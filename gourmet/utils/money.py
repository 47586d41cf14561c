from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    """Convierte a Decimal con 2 decimales (redondeo HALF_UP)."""
    if not isinstance(value, Decimal):
        # str() evita arrastrar el error binario de los float
        value = Decimal(str(value))
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(value) -> str:
    return f"${to_money(value)}"
