from decimal import Decimal

from gourmet.services.report_service import format_report
from tests.conftest import ScriptedPrompter


def place_order(order_service, customer_id, *items):
    answers = []
    for dish_id, quantity in items:
        answers += [str(dish_id), str(quantity)]
    answers.append("0")
    success, msg, order_id = order_service.create_order(customer_id, ScriptedPrompter(answers))
    assert success, msg
    return order_id


class TestReportService:
    def test_empty_database_reports(self, report_service):
        assert report_service.orders_by_total() == (False, "No hay pedidos registrados.")
        assert report_service.dishes_sold() == (False, "No hay platillos vendidos.")
        assert report_service.orders_per_customer()[0] is False
        assert report_service.sales_total() == Decimal("0.00")

    def test_orders_by_total_descending(self, report_service, order_service, sample_data):
        small = place_order(order_service, sample_data["customer_id"], (sample_data["agua_id"], 1))
        big = place_order(order_service, sample_data["customer_id"], (sample_data["tacos_id"], 3))

        ok, df = report_service.orders_by_total()

        assert ok
        assert list(df["id"]) == [big, small]
        assert list(df["customer"]) == ["Ana", "Ana"]

    def test_order_lines_with_subtotal(self, report_service, ana_order):
        ok, df = report_service.order_lines(ana_order)

        assert ok
        assert list(df["dish"]) == ["Tacos", "Agua"]
        assert [float(v) for v in df["subtotal"]] == [100.0, 20.0]

    def test_orders_per_customer_and_dishes_sold(self, report_service, order_service, customer_service,
                                                 sample_data, ana_order):
        customer_service.register_customer("Luis", "luis@x.com")
        luis = customer_service.get_all_customers()[1]
        place_order(order_service, luis.id, (sample_data["agua_id"], 4))
        place_order(order_service, luis.id, (sample_data["tacos_id"], 1))

        ok, per_customer = report_service.orders_per_customer()
        assert ok
        assert list(zip(per_customer["customer"], per_customer["order_count"])) == [("Luis", 2), ("Ana", 1)]

        ok, sold = report_service.dishes_sold()
        assert ok
        assert list(zip(sold["dish"], sold["quantity_sold"])) == [("Agua", 5), ("Tacos", 3)]

    def test_customer_history(self, report_service, sample_data, ana_order):
        ok, df = report_service.customer_history(sample_data["customer_id"])

        assert ok
        assert list(df["id"]) == [ana_order]
        assert list(df["dish_count"]) == [2]

    def test_customer_history_without_orders(self, report_service, sample_data):
        assert report_service.customer_history(sample_data["customer_id"]) == (
            False, "Este cliente no tiene pedidos registrados.")

    def test_sales_total(self, report_service, order_service, sample_data, ana_order):
        place_order(order_service, sample_data["customer_id"], (sample_data["agua_id"], 2))
        assert report_service.sales_total() == Decimal("160.00")

    def test_format_report_renders_money_and_dates(self, report_service, ana_order):
        ok, df = report_service.orders_by_total()

        text = format_report("REPORTE", df)

        assert text.startswith("===== REPORTE =====")
        assert "$120.00" in text
        assert "Ana" in text
