from decimal import Decimal

import pytest

from gourmet.restaurant import RestaurantApp
from tests.conftest import ScriptedPrompter

# Índices de las opciones en los menús
CUSTOMERS, DISHES, ORDERS, REPORTS, EXIT = range(5)


@pytest.fixture
def make_app(settings, customer_service, dish_service, order_service, report_service):
    def factory(prompter):
        return RestaurantApp(prompter, customer_service, dish_service, order_service, report_service, settings)
    return factory


class TestRestaurantApp:
    def test_exit_from_main_menu(self, make_app):
        prompter = ScriptedPrompter(choices=[EXIT])
        make_app(prompter).run()
        assert prompter.messages == ["¡Gracias por usar el sistema de Delicias Gourmet!"]

    def test_register_customer_through_menu(self, make_app, customer_service):
        prompter = ScriptedPrompter(["Ana", "ana@x.com"], choices=[CUSTOMERS, 0])
        make_app(prompter).run()

        assert "Cliente Ana registrado correctamente." in prompter.messages
        assert [c.email for c in customer_service.get_all_customers()] == ["ana@x.com"]

    def test_duplicate_email_is_reported_not_fatal(self, make_app, customer_service):
        customer_service.register_customer("Ana", "ana@x.com")
        prompter = ScriptedPrompter(["Ana 2", "ANA@x.com"], choices=[CUSTOMERS, 0])
        make_app(prompter).run()

        assert "Ya existe un cliente con ese correo." in prompter.messages

    def test_cancel_register_dish_writes_nothing(self, make_app, dish_service):
        prompter = ScriptedPrompter(["Tacos", None], choices=[DISHES, 0])
        make_app(prompter).run()
        assert dish_service.get_all_dishes() == []

    def test_delete_customer_declined_keeps_data(self, make_app, customer_service, sample_data, ana_order):
        prompter = ScriptedPrompter([str(sample_data["customer_id"])], confirmations=[False],
                                    choices=[CUSTOMERS, 3])
        make_app(prompter).run()

        assert customer_service.customer_exists(sample_data["customer_id"])
        assert customer_service.count_orders(sample_data["customer_id"]) == 1

    def test_delete_dish_confirmed_removes_lines(self, make_app, dish_service, order_service,
                                                  sample_data, ana_order):
        prompter = ScriptedPrompter([str(sample_data["tacos_id"])], confirmations=[True],
                                    choices=[DISHES, 3])
        make_app(prompter).run()

        assert not dish_service.dish_exists(sample_data["tacos_id"])
        assert len(order_service.get_order(ana_order).lines) == 1

    def test_create_order_through_menu(self, make_app, order_service, sample_data):
        answers = [str(sample_data["customer_id"]), str(sample_data["tacos_id"]), "2",
                   str(sample_data["agua_id"]), "1", "0"]
        prompter = ScriptedPrompter(answers, choices=[ORDERS, 0])
        make_app(prompter).run()

        assert any("Total: $120.00" in m for m in prompter.messages)
        assert order_service.list_orders()[0]["total"] == "$120.00"

    def test_create_order_without_dishes(self, make_app, customer_service):
        customer_service.register_customer("Ana", "ana@x.com")
        prompter = ScriptedPrompter(choices=[ORDERS, 0])
        make_app(prompter).run()
        assert "No hay platillos. Registra alguno primero." in prompter.messages

    def test_cancelled_order_returns_to_menu(self, make_app, order_service, sample_data):
        prompter = ScriptedPrompter([str(sample_data["customer_id"]), None], choices=[ORDERS, 0])
        make_app(prompter).run()

        assert "Operación cancelada por el usuario." in prompter.messages
        assert order_service.list_orders() == []
        assert prompter.messages[-1] == "¡Gracias por usar el sistema de Delicias Gourmet!"

    def test_order_detail_shows_lines(self, make_app, ana_order):
        prompter = ScriptedPrompter([str(ana_order)], choices=[ORDERS, 2])
        make_app(prompter).run()

        detail = prompter.messages[0]
        assert f"DETALLE DE PEDIDO #{ana_order}" in detail
        assert "Tacos" in detail and "$100.00" in detail
        assert "TOTAL: $120.00" in detail

    def test_reports_menu(self, make_app, ana_order):
        prompter = ScriptedPrompter(choices=[REPORTS, 0, 3, 4])
        make_app(prompter).run()

        assert "TOTAL POR PEDIDO" in prompter.messages[0]
        assert "PLATILLOS MÁS VENDIDOS" in prompter.messages[1]
        assert prompter.messages[2] == "Total de ventas: $120.00"

    def test_unexpected_error_does_not_crash(self, make_app, customer_service, monkeypatch):
        def boom():
            raise RuntimeError("falla inesperada")

        monkeypatch.setattr(customer_service, "get_all_customers", boom)
        prompter = ScriptedPrompter(choices=[CUSTOMERS, 1])
        make_app(prompter).run()

        assert "Error inesperado: falla inesperada" in prompter.messages
        assert prompter.messages[-1] == "¡Gracias por usar el sistema de Delicias Gourmet!"

    def test_export_menu_pdf(self, make_app, settings, sample_data, tmp_path):
        prompter = ScriptedPrompter(choices=[DISHES, 4])
        make_app(prompter).run()

        assert prompter.messages[0].startswith("Carta guardada exitosamente en:")
        assert (tmp_path / "carta.pdf").exists()

    def test_oversized_id_is_asked_again_on_delete(self, make_app, customer_service, sample_data):
        prompter = ScriptedPrompter(["99999999999999999999", "999"], choices=[CUSTOMERS, 3])
        make_app(prompter).run()

        assert "El cliente no existe." in prompter.messages
        assert not any(m.startswith("Error inesperado") for m in prompter.messages)
        assert customer_service.customer_exists(sample_data["customer_id"])
