import logging
from functools import reduce
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from gourmet.config.database import DatabaseManager
from gourmet.crud.order_crud import OrderCRUD
from gourmet.crud.customer_crud import CustomerCRUD
from gourmet.crud.dish_crud import DishCRUD
from gourmet.utils.money import to_money, format_money
from gourmet.utils.prompts import Prompter, OperationCancelled, read_int
from gourmet.utils.receipt import Receipt

logger = logging.getLogger(__name__)

EMPTY_ORDER_MSG = "El pedido debe tener al menos un platillo. Pedido cancelado."


class OrderService:
    """
    Gestiona el proceso de compra completo.
    La creación de un pedido es una única transacción: cabecera, líneas y total.
    """

    def __init__(self, db: DatabaseManager):
        self._db = db

    @staticmethod
    def _dish_catalogue(session, added: list) -> str:
        lines = ["Platillos disponibles:"]
        lines += [f"{d.id}. {d.name} - {format_money(d.price)}" for d in DishCRUD.get_all(session)]
        lines.append("")
        lines.append(f"Agregados: {added}")
        lines.append("Ingrese ID del platillo (0 para terminar):")
        return "\n".join(lines)

    def create_order(self, customer_id: int, prompter: Prompter) -> tuple[bool, str, Optional[int]]:
        """
        Crea un pedido preguntando platillo y cantidad hasta que el usuario ingrese 0.
        Retorna: (Success, Message, Order_id)

        Si no se agrega ningún platillo, la cabecera se elimina y se confirma
        la limpieza. Cualquier excepción (incluida OperationCancelled) deshace
        toda la transacción y se propaga.
        """
        with self._db.get_session() as session:
            # 1. Validar cliente
            if not CustomerCRUD.get_by_id(session, customer_id):
                return False, "El cliente no existe.", None

            # 2. Crear la cabecera del pedido
            order = OrderCRUD.create_order(session, customer_id)
            session.flush()  # Para obtener el ID del pedido antes de commit

            lines = []
            added_ids = []

            # 3. Agregar líneas hasta que el usuario termine
            while True:
                dish_id = read_int(prompter, self._dish_catalogue(session, added_ids), 0)
                if dish_id is None:
                    raise OperationCancelled()
                if dish_id == 0:
                    break

                dish = DishCRUD.get_by_id(session, dish_id)
                if not dish:
                    prompter.info("El platillo no existe.")
                    continue

                quantity = read_int(prompter, "Cantidad:", 1)
                if quantity is None:
                    raise OperationCancelled()

                # Se guarda el precio vigente: cambios futuros del platillo no lo afectan
                unit_price = to_money(dish.price)
                lines.append(OrderCRUD.add_line(session, order.id, dish.id, quantity, unit_price))
                added_ids.append(dish.id)

            # 4. Pedido vacío: se elimina la cabecera y se confirma la limpieza
            if not lines:
                OrderCRUD.delete(session, order)
                session.commit()
                logger.info("Pedido sin platillos descartado (cliente %s)", customer_id)
                return False, EMPTY_ORDER_MSG, None

            # 5. REDUCE: total = suma de cantidad * precio unitario
            total = to_money(reduce(lambda acc, line: acc + line.unit_price * line.quantity, lines, 0))
            OrderCRUD.set_total(session, order, total)

            session.commit()
            logger.info("Pedido #%s creado para cliente %s. Total %s", order.id, customer_id, total)
            return True, f"Pedido #{order.id} creado correctamente.\nTotal: {format_money(total)}", order.id

    def list_orders(self, customer_id: Optional[int] = None) -> list:
        """
        Recupera pedidos (más recientes primero) y los formatea para mostrar.
        Genera la descripción resumen "2x Tacos, 1x Agua" y el conteo de ítems.
        """
        with self._db.get_session() as session:
            # Filtrar por cliente si se especifica ID, si no traer todos
            if customer_id and customer_id > 0:
                orders = OrderCRUD.get_orders_by_customer(session, customer_id)
            else:
                orders = OrderCRUD.get_all(session)

            formatted_list = []
            for order in orders:
                # Usamos MAP para crear la lista de strings y JOIN para unirla
                description = ", ".join(map(lambda line: f"{line.quantity}x {line.dish.name}", order.lines))

                formatted_list.append({
                    "id": order.id,
                    "date": order.date.strftime("%d/%m/%Y %H:%M"),
                    "customer": order.customer.name,
                    "description": description,
                    "item_count": sum(line.quantity for line in order.lines),
                    "total": format_money(order.total),
                })
            return formatted_list

    def get_order(self, order_id: int):
        """Pedido con cliente y líneas cargadas, o None."""
        with self._db.get_session() as session:
            return OrderCRUD.get_by_id(session, order_id)

    def order_exists(self, order_id: int) -> bool:
        return self.get_order(order_id) is not None

    def delete_order(self, order_id: int) -> tuple[bool, str]:
        """Elimina un pedido por su ID (sus líneas se eliminan en cascada)."""
        with self._db.get_session() as session:
            try:
                order = OrderCRUD.get_by_id(session, order_id)
                if not order:
                    return False, "El pedido no existe o ya fue eliminado."

                OrderCRUD.delete(session, order)
                session.commit()
                logger.info("Pedido #%s eliminado", order_id)
                return True, "Pedido eliminado correctamente."
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Error eliminando pedido %s: %s", order_id, e)
                return False, f"Error al eliminar: {e}"

    def generate_receipt_pdf(self, order_id: int, output_dir: str = ".") -> tuple[bool, str]:
        """
        Busca un pedido histórico por ID y genera su boleta en PDF.
        """
        order = self.get_order(order_id)
        if not order:
            return False, "El pedido solicitado no existe."

        return Receipt(order).generate_pdf(output_dir)
