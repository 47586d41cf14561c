"""
Lectura validada de datos del usuario.

Las funciones reciben un ``Prompter`` (cualquier objeto con ask/info/confirm/choose)
y repiten la pregunta hasta obtener un valor válido. Retornan None si el usuario
cancela. No dependen de ninguna interfaz gráfica en particular.
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Protocol, Sequence

from gourmet.utils.money import to_money

EMAIL_REGEX = r'^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$'

# Mayor entero que aceptan las columnas INTEGER (IDs y cantidades)
MAX_INT = 2**31 - 1


class OperationCancelled(Exception):
    """El usuario canceló una operación de varios pasos."""

    def __init__(self, message: str = "Operación cancelada por el usuario."):
        super().__init__(message)


class Prompter(Protocol):
    def ask(self, message: str) -> Optional[str]: ...

    def info(self, message: str) -> None: ...

    def confirm(self, message: str) -> bool: ...

    def choose(self, title: str, message: str, options: Sequence[str]) -> Optional[int]: ...


def is_valid_email(email: str) -> bool:
    return bool(email) and re.match(EMAIL_REGEX, email) is not None


def read_non_empty(prompter: Prompter, message: str) -> Optional[str]:
    while True:
        value = prompter.ask(message)
        if value is None:
            return None
        value = value.strip()
        if value:
            return value
        prompter.info("El valor no puede estar vacío.")


def read_email(prompter: Prompter, message: str) -> Optional[str]:
    while True:
        value = prompter.ask(message)
        if value is None:
            return None
        value = value.strip()
        if is_valid_email(value):
            return value.lower()
        prompter.info("Correo electrónico inválido.")


def read_int(prompter: Prompter, message: str, minimum: int, maximum: int = MAX_INT) -> Optional[int]:
    while True:
        value = prompter.ask(message)
        if value is None:
            return None
        try:
            number = int(value.strip())
        except ValueError:
            prompter.info("Ingrese un número entero válido.")
            continue
        if number < minimum:
            prompter.info(f"Debe ser un entero >= {minimum}.")
        elif number > maximum:
            prompter.info(f"Debe ser un entero <= {maximum}.")
        else:
            return number


def read_money(prompter: Prompter, message: str) -> Optional[Decimal]:
    """Importe > 0 con 2 decimales, redondeado HALF_UP."""
    while True:
        value = prompter.ask(message)
        if value is None:
            return None
        try:
            amount = Decimal(value.strip())
            if not amount.is_finite():
                raise InvalidOperation
            amount = to_money(amount)
        except InvalidOperation:
            prompter.info("Ingrese un número válido (por ejemplo 129.90).")
            continue
        if amount > 0:
            return amount
        prompter.info("El precio debe ser mayor que 0.")
