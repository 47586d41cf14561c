import logging
from decimal import Decimal, InvalidOperation
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from gourmet.config.database import DatabaseManager
from gourmet.crud.dish_crud import DishCRUD
from gourmet.utils.money import to_money

logger = logging.getLogger(__name__)


class DishService:
    """
    Lógica de negocio para Platillos: nombre único (sin distinguir
    mayúsculas) y precio positivo con 2 decimales.
    """

    def __init__(self, db: DatabaseManager):
        self._db = db

    def get_all_dishes(self):
        """Retorna todos los platillos ordenados por id."""
        with self._db.get_session() as session:
            return DishCRUD.get_all(session)

    def get_dish(self, dish_id: int):
        with self._db.get_session() as session:
            return DishCRUD.get_by_id(session, dish_id)

    def dish_exists(self, dish_id: int) -> bool:
        return self.get_dish(dish_id) is not None

    def count_order_lines(self, dish_id: int) -> int:
        with self._db.get_session() as session:
            return DishCRUD.count_order_lines(session, dish_id)

    @staticmethod
    def _validate(name: str, price):
        if not name or not name.strip():
            return None, "El nombre no puede estar vacío."
        try:
            price = to_money(price)
            if price.is_nan():
                raise InvalidOperation
        except (InvalidOperation, ValueError, TypeError):
            return None, "Precio inválido."
        if price <= 0:
            return None, "El precio debe ser mayor que 0."
        return price, None

    def register_dish(self, name: str, price: Decimal) -> tuple[bool, str]:
        price, error = self._validate(name, price)
        if error:
            return False, error

        name = name.strip()
        with self._db.get_session() as session:
            try:
                if DishCRUD.get_by_name(session, name):
                    return False, "Ya existe un platillo con ese nombre."

                DishCRUD.create(session, name, price)
                session.commit()
                logger.info("Platillo registrado: %s (%s)", name, price)
                return True, "Platillo registrado correctamente."
            except IntegrityError:
                session.rollback()
                return False, "Ya existe un platillo con ese nombre."
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Error registrando platillo: %s", e)
                return False, f"Error de base de datos: {e}"

    def update_dish(self, dish_id: int, name: str, price: Decimal) -> tuple[bool, str]:
        """
        Cambia nombre y precio. Las líneas de pedidos ya creadas conservan
        el precio unitario con el que se vendieron.
        """
        price, error = self._validate(name, price)
        if error:
            return False, error

        name = name.strip()
        with self._db.get_session() as session:
            try:
                dish = DishCRUD.get_by_id(session, dish_id)
                if not dish:
                    return False, "Platillo no encontrado."

                if DishCRUD.get_by_name(session, name, exclude_id=dish_id):
                    return False, "Ya existe otro platillo con ese nombre."

                DishCRUD.update(session, dish, name, price)
                session.commit()
                logger.info("Platillo %s actualizado", dish_id)
                return True, "Platillo actualizado correctamente."
            except IntegrityError:
                session.rollback()
                return False, "Ya existe otro platillo con ese nombre."
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Error actualizando platillo %s: %s", dish_id, e)
                return False, f"Error de base de datos: {e}"

    def delete_dish(self, dish_id: int) -> tuple[bool, str]:
        with self._db.get_session() as session:
            try:
                dish = DishCRUD.get_by_id(session, dish_id)
                if not dish:
                    return False, "Platillo no encontrado."

                # Las líneas de pedido que lo usan se eliminan en cascada
                DishCRUD.delete(session, dish)
                session.commit()
                logger.info("Platillo %s eliminado", dish_id)
                return True, "Platillo eliminado correctamente."
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Error eliminando platillo %s: %s", dish_id, e)
                return False, f"Error al eliminar: {e}"
