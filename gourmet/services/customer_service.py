import logging
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from gourmet.config.database import DatabaseManager
from gourmet.crud.customer_crud import CustomerCRUD
from gourmet.utils.prompts import is_valid_email

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MSG = "Ya existe un cliente con ese correo."


class CustomerService:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def get_all_customers(self):
        with self._db.get_session() as session:
            return CustomerCRUD.get_all(session)

    def get_customer(self, customer_id: int):
        with self._db.get_session() as session:
            return CustomerCRUD.get_by_id(session, customer_id)

    def customer_exists(self, customer_id: int) -> bool:
        return self.get_customer(customer_id) is not None

    def count_orders(self, customer_id: int) -> int:
        with self._db.get_session() as session:
            return CustomerCRUD.count_orders(session, customer_id)

    @staticmethod
    def _validate(name: str, email: str):
        # strip elimina espacios en blanco
        if not name or not name.strip():
            return "El nombre no puede estar vacío."
        if not email or not email.strip():
            return "El correo no puede estar vacío."
        if not is_valid_email(email.strip()):
            return "El formato del correo electrónico no es válido."
        return None

    def register_customer(self, name: str, email: str) -> tuple[bool, str]:
        error = self._validate(name, email)
        if error:
            return False, error

        name, email = name.strip(), email.strip().lower()
        with self._db.get_session() as session:
            try:
                if CustomerCRUD.get_by_email(session, email):
                    return False, DUPLICATE_EMAIL_MSG

                CustomerCRUD.create(session, name, email)
                session.commit()
                logger.info("Cliente registrado: %s <%s>", name, email)
                return True, f"Cliente {name} registrado correctamente."
            except IntegrityError:
                session.rollback()
                return False, DUPLICATE_EMAIL_MSG
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Error registrando cliente: %s", e)
                return False, f"Error de base de datos: {e}"

    def update_customer(self, customer_id: int, name: str, email: str) -> tuple[bool, str]:
        error = self._validate(name, email)
        if error:
            return False, error

        name, email = name.strip(), email.strip().lower()
        with self._db.get_session() as session:
            try:
                customer = CustomerCRUD.get_by_id(session, customer_id)
                if not customer:
                    return False, "Cliente no encontrado."

                # El correo puede repetirse solo si es del mismo cliente
                if CustomerCRUD.get_by_email(session, email, exclude_id=customer_id):
                    return False, DUPLICATE_EMAIL_MSG

                CustomerCRUD.update(session, customer, name, email)
                session.commit()
                logger.info("Cliente %s actualizado", customer_id)
                return True, "Cliente actualizado correctamente."
            except IntegrityError:
                session.rollback()
                return False, DUPLICATE_EMAIL_MSG
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Error actualizando cliente %s: %s", customer_id, e)
                return False, f"Error de base de datos: {e}"

    def delete_customer(self, customer_id: int) -> tuple[bool, str]:
        """
        Elimina un cliente junto con sus pedidos (cascada).
        La confirmación al usuario la pide el menú antes de llamar aquí.
        """
        with self._db.get_session() as session:
            try:
                customer = CustomerCRUD.get_by_id(session, customer_id)
                if not customer:
                    return False, "Cliente no encontrado."

                name = customer.name
                CustomerCRUD.delete(session, customer)
                session.commit()
                logger.info("Cliente %s eliminado", customer_id)
                return True, f"Cliente '{name}' eliminado correctamente."
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Error eliminando cliente %s: %s", customer_id, e)
                return False, f"Error al eliminar: {e}"
