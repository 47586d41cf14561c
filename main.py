import logging

from gourmet.config.settings import get_settings
from gourmet.config.database import DatabaseManager, DatabaseConnectionError
from gourmet.restaurant import RestaurantApp
from gourmet.services.customer_service import CustomerService
from gourmet.services.dish_service import DishService
from gourmet.services.order_service import OrderService
from gourmet.services.report_service import ReportService

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("--- Sistema de Gestión de Restaurante (customtkinter + SQLAlchemy) ---")

    # Importación local: la interfaz solo se carga al ejecutar la aplicación
    from gourmet.utils.tools import DialogPrompter

    db = DatabaseManager(settings.database_url, echo=settings.database_echo)
    prompter = DialogPrompter(settings.app_title)
    try:
        db.create_tables()
        logger.info("Infraestructura de base de datos lista.")

        app = RestaurantApp(
            prompter,
            CustomerService(db),
            DishService(db),
            OrderService(db),
            ReportService(db),
            settings,
        )
        app.run()
    except DatabaseConnectionError as e:
        logger.error("%s", e)
        prompter.info(str(e))
    finally:
        db.release()
        prompter.close()


if __name__ == '__main__':
    main()
