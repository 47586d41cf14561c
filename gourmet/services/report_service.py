import logging
from decimal import Decimal
import pandas as pd
from sqlalchemy import text
from gourmet.config.database import DatabaseManager
from gourmet.utils.money import to_money, format_money

logger = logging.getLogger(__name__)

MONEY_COLUMNS = ("total", "unit_price", "subtotal")
DATE_COLUMNS = ("date",)


class ReportService:
    """
    Consultas de solo lectura para los reportes.
    Cada método retorna (True, DataFrame) o (False, mensaje) si no hay datos.
    """

    def __init__(self, db: DatabaseManager):
        self._db = db

    def _read(self, query: str, params: dict = None) -> pd.DataFrame:
        with self._db.acquire().connect() as conn:
            return pd.read_sql(text(query), conn, params=params or {})

    def _result(self, query: str, empty_msg: str, params: dict = None):
        df = self._read(query, params)
        if df.empty:
            return False, empty_msg
        return True, df

    def orders_by_total(self):
        query = """
        SELECT o.id, o.date, c.name AS customer, o.total
        FROM orders o
        JOIN customers c ON o.customer_id = c.id
        ORDER BY o.total DESC, o.id
        """
        return self._result(query, "No hay pedidos registrados.")

    def order_lines(self, order_id: int):
        """Líneas del pedido con su subtotal."""
        query = """
        SELECT d.name AS dish, l.quantity, l.unit_price,
               (l.quantity * l.unit_price) AS subtotal
        FROM order_lines l
        JOIN dishes d ON l.dish_id = d.id
        WHERE l.order_id = :order_id
        ORDER BY l.id
        """
        return self._result(query, "El pedido no tiene platillos.", {"order_id": order_id})

    def orders_per_customer(self):
        query = """
        SELECT c.name AS customer, COUNT(o.id) AS order_count
        FROM customers c
        JOIN orders o ON c.id = o.customer_id
        GROUP BY c.id, c.name
        ORDER BY order_count DESC, c.name
        """
        return self._result(query, "No hay pedidos registrados.")

    def dishes_sold(self):
        """Platillos más vendidos."""
        query = """
        SELECT d.name AS dish, SUM(l.quantity) AS quantity_sold
        FROM dishes d
        JOIN order_lines l ON d.id = l.dish_id
        GROUP BY d.id, d.name
        ORDER BY quantity_sold DESC, d.name
        """
        return self._result(query, "No hay platillos vendidos.")

    def customer_history(self, customer_id: int):
        query = """
        SELECT o.id, o.date, COUNT(l.id) AS dish_count, o.total
        FROM orders o
        JOIN order_lines l ON o.id = l.order_id
        WHERE o.customer_id = :customer_id
        GROUP BY o.id, o.date, o.total
        ORDER BY o.date DESC, o.id DESC
        """
        return self._result(query, "Este cliente no tiene pedidos registrados.", {"customer_id": customer_id})

    def sales_total(self) -> Decimal:
        df = self._read("SELECT SUM(total) AS total_sales FROM orders")
        value = df["total_sales"].iloc[0]
        if pd.isna(value):
            return to_money(0)
        return to_money(value)


def format_report(title: str, df: pd.DataFrame) -> str:
    """Bloque de texto preformateado: fechas dd/mm/YYYY HH:MM y montos $0.00."""
    table = df.copy()
    for col in DATE_COLUMNS:
        if col in table.columns:
            table[col] = pd.to_datetime(table[col]).dt.strftime("%d/%m/%Y %H:%M")
    for col in MONEY_COLUMNS:
        if col in table.columns:
            table[col] = table[col].map(format_money)
    return f"===== {title} =====\n\n{table.to_string(index=False)}"
