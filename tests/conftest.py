"""
Fixtures compartidos: base de datos SQLite temporal, servicios y un
Prompter con respuestas predefinidas (no necesita interfaz gráfica).
"""
from decimal import Decimal

import pytest

from gourmet.config.database import DatabaseManager
from gourmet.config.settings import Settings
from gourmet.services.customer_service import CustomerService
from gourmet.services.dish_service import DishService
from gourmet.services.order_service import OrderService
from gourmet.services.report_service import ReportService


class ScriptedPrompter:
    """Responde con la lista de respuestas en orden; None simula 'Cancelar'."""

    def __init__(self, answers=None, confirmations=None, choices=None):
        self.answers = list(answers or [])
        self.confirmations = list(confirmations or [])
        self.choices = list(choices or [])
        self.questions = []
        self.messages = []

    def ask(self, message):
        self.questions.append(message)
        if not self.answers:
            raise AssertionError(f"Pregunta sin respuesta preparada: {message}")
        return self.answers.pop(0)

    def info(self, message):
        self.messages.append(message)

    def confirm(self, message):
        self.messages.append(message)
        return self.confirmations.pop(0)

    def choose(self, title, message, options):
        # Sin más elecciones preparadas se cierra el diálogo
        return self.choices.pop(0) if self.choices else None


@pytest.fixture
def db(tmp_path):
    manager = DatabaseManager(f"sqlite:///{tmp_path / 'test.db'}")
    manager.create_tables()
    yield manager
    manager.release()


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'test.db'}", output_dir=str(tmp_path))


@pytest.fixture
def customer_service(db):
    return CustomerService(db)


@pytest.fixture
def dish_service(db):
    return DishService(db)


@pytest.fixture
def order_service(db):
    return OrderService(db)


@pytest.fixture
def report_service(db):
    return ReportService(db)


@pytest.fixture
def sample_data(customer_service, dish_service):
    """Cliente Ana y dos platillos: Tacos ($50.00) y Agua ($20.00)."""
    customer_service.register_customer("Ana", "ana@x.com")
    dish_service.register_dish("Tacos", Decimal("50.00"))
    dish_service.register_dish("Agua", Decimal("20.00"))
    ana = customer_service.get_all_customers()[0]
    tacos, agua = dish_service.get_all_dishes()
    return {"customer_id": ana.id, "tacos_id": tacos.id, "agua_id": agua.id}


@pytest.fixture
def ana_order(order_service, sample_data):
    """Pedido de Ana: 2x Tacos + 1x Agua."""
    prompter = ScriptedPrompter([str(sample_data["tacos_id"]), "2", str(sample_data["agua_id"]), "1", "0"])
    success, msg, order_id = order_service.create_order(sample_data["customer_id"], prompter)
    assert success, msg
    return order_id
