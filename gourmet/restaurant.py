import logging

from sqlalchemy.exc import SQLAlchemyError

from gourmet.config.consts import *
from gourmet.config.settings import Settings
from gourmet.services.customer_service import CustomerService
from gourmet.services.dish_service import DishService
from gourmet.services.order_service import OrderService
from gourmet.services.report_service import ReportService, format_report
from gourmet.utils.menupdf import generate_menu_pdf
from gourmet.utils.money import format_money
from gourmet.utils.prompts import (
    Prompter, OperationCancelled, read_non_empty, read_email, read_int, read_money,
)

logger = logging.getLogger(__name__)


class RestaurantApp:
    """
    Menú principal de la aplicación. Enruta cada opción a los servicios y
    muestra los resultados con el Prompter recibido.
    """

    def __init__(self, prompter: Prompter, customer_service: CustomerService, dish_service: DishService,
                 order_service: OrderService, report_service: ReportService, settings: Settings):
        self.prompter = prompter
        self.customer_service = customer_service
        self.dish_service = dish_service
        self.order_service = order_service
        self.report_service = report_service
        self.settings = settings

    def _show_msg(self, msg):
        self.prompter.info(msg)

    def _run_action(self, action):
        """Ejecuta una acción del menú sin dejar que un error cierre la aplicación."""
        try:
            action()
        except OperationCancelled as e:
            self._show_msg(str(e))
        except SQLAlchemyError as e:
            logger.error("Error de base de datos en %s: %s", action.__name__, e)
            self._show_msg(f"Error de base de datos: {e}")
        except Exception as e:
            logger.exception("Error inesperado en %s", action.__name__)
            self._show_msg(f"Error inesperado: {e}")

    def _submenu(self, title, options, actions):
        # La última opción (o cerrar el diálogo) vuelve al menú anterior
        while True:
            choice = self.prompter.choose(title, "Seleccione una opción:", options)
            if choice is None or choice >= len(actions):
                return
            self._run_action(actions[choice])

    def run(self):
        actions = [self._customers_menu, self._dishes_menu, self._orders_menu, self._reports_menu]
        while True:
            choice = self.prompter.choose(self.settings.app_title, "Seleccione una opción:", MAIN_MENU_OPTIONS)
            if choice is None or choice >= len(actions):
                self._show_msg("¡Gracias por usar el sistema de Delicias Gourmet!")
                return
            self._run_action(actions[choice])

    # ========= Menús secundarios =========

    def _customers_menu(self):
        self._submenu("Gestión de Clientes", CUSTOMER_MENU_OPTIONS, [
            self._register_customer_action,
            self._list_customers_action,
            self._edit_customer_action,
            self._delete_customer_action,
        ])

    def _dishes_menu(self):
        self._submenu("Gestión de Platillos", DISH_MENU_OPTIONS, [
            self._register_dish_action,
            self._list_dishes_action,
            self._edit_dish_action,
            self._delete_dish_action,
            self._export_menu_pdf_action,
        ])

    def _orders_menu(self):
        self._submenu("Gestión de Pedidos", ORDER_MENU_OPTIONS, [
            self._create_order_action,
            self._list_orders_action,
            self._order_detail_action,
            self._delete_order_action,
            self._receipt_action,
        ])

    def _reports_menu(self):
        self._submenu("Reportes", REPORT_MENU_OPTIONS, [
            self._report_orders_by_total_action,
            self._report_customer_history_action,
            self._report_orders_per_customer_action,
            self._report_dishes_sold_action,
            self._report_sales_total_action,
        ])

    # ========= Clientes =========

    def _customer_listing(self):
        customers = self.customer_service.get_all_customers()
        return customers, "\n".join(f"{c.id}. {c.name}" for c in customers)

    def _register_customer_action(self):
        name = read_non_empty(self.prompter, "Nombre del cliente:")
        if name is None:
            return
        email = read_email(self.prompter, "Correo electrónico:")
        if email is None:
            return

        success, msg = self.customer_service.register_customer(name, email)
        self._show_msg(msg)

    def _list_customers_action(self):
        customers = self.customer_service.get_all_customers()
        if not customers:
            self._show_msg("No hay clientes registrados.")
            return
        rows = [f"ID: {c.id} | Nombre: {c.name} | Correo: {c.email}" for c in customers]
        self._show_msg("===== CLIENTES =====\n" + "\n".join(rows))

    def _edit_customer_action(self):
        customer_id = read_int(self.prompter, "ID del cliente a editar:", 1)
        if customer_id is None:
            return
        if not self.customer_service.customer_exists(customer_id):
            self._show_msg("El cliente no existe.")
            return

        name = read_non_empty(self.prompter, "Nuevo nombre:")
        if name is None:
            return
        email = read_email(self.prompter, "Nuevo correo electrónico:")
        if email is None:
            return

        success, msg = self.customer_service.update_customer(customer_id, name, email)
        self._show_msg(msg)

    def _delete_customer_action(self):
        customer_id = read_int(self.prompter, "ID del cliente a eliminar:", 1)
        if customer_id is None:
            return
        if not self.customer_service.customer_exists(customer_id):
            self._show_msg("El cliente no existe.")
            return

        # Solo aviso: la base de datos elimina los pedidos en cascada
        if self.customer_service.count_orders(customer_id) > 0:
            if not self.prompter.confirm("Este cliente tiene pedidos. Se eliminarán también. ¿Continuar?"):
                return

        success, msg = self.customer_service.delete_customer(customer_id)
        self._show_msg(msg)

    # ========= Platillos =========

    def _register_dish_action(self):
        name = read_non_empty(self.prompter, "Nombre del platillo:")
        if name is None:
            return
        price = read_money(self.prompter, "Precio del platillo:")
        if price is None:
            return

        success, msg = self.dish_service.register_dish(name, price)
        self._show_msg(msg)

    def _list_dishes_action(self):
        dishes = self.dish_service.get_all_dishes()
        if not dishes:
            self._show_msg("No hay platillos registrados.")
            return
        rows = [f"ID: {d.id} | {d.name} | {format_money(d.price)}" for d in dishes]
        self._show_msg("===== PLATILLOS =====\n" + "\n".join(rows))

    def _edit_dish_action(self):
        dish_id = read_int(self.prompter, "ID del platillo a editar:", 1)
        if dish_id is None:
            return
        if not self.dish_service.dish_exists(dish_id):
            self._show_msg("El platillo no existe.")
            return

        name = read_non_empty(self.prompter, "Nuevo nombre:")
        if name is None:
            return
        price = read_money(self.prompter, "Nuevo precio:")
        if price is None:
            return

        success, msg = self.dish_service.update_dish(dish_id, name, price)
        self._show_msg(msg)

    def _delete_dish_action(self):
        dish_id = read_int(self.prompter, "ID del platillo a eliminar:", 1)
        if dish_id is None:
            return
        if not self.dish_service.dish_exists(dish_id):
            self._show_msg("El platillo no existe.")
            return

        if self.dish_service.count_order_lines(dish_id) > 0:
            if not self.prompter.confirm("Este platillo está en pedidos. Se eliminará de ellos. ¿Continuar?"):
                return

        success, msg = self.dish_service.delete_dish(dish_id)
        self._show_msg(msg)

    def _export_menu_pdf_action(self):
        success, result = generate_menu_pdf(self.dish_service.get_all_dishes(), self.settings.output_dir)
        if success:
            self._show_msg(f"Carta guardada exitosamente en:\n{result}")
        else:
            self._show_msg(result)

    # ========= Pedidos =========

    def _create_order_action(self):
        customers, listing = self._customer_listing()
        if not customers:
            self._show_msg("No hay clientes. Registra uno primero.")
            return
        if not self.dish_service.get_all_dishes():
            self._show_msg("No hay platillos. Registra alguno primero.")
            return

        customer_id = read_int(self.prompter, f"Clientes disponibles:\n{listing}\n\nIngrese el ID del cliente:", 1)
        if customer_id is None:
            return

        success, msg, order_id = self.order_service.create_order(customer_id, self.prompter)
        self._show_msg(msg)

    def _list_orders_action(self):
        orders = self.order_service.list_orders()
        if not orders:
            self._show_msg("No hay pedidos registrados.")
            return
        rows = [f"Pedido #{o['id']} | Fecha: {o['date']} | Cliente: {o['customer']} | "
                f"{o['description']} ({o['item_count']} ítems) | Total: {o['total']}" for o in orders]
        self._show_msg("===== PEDIDOS =====\n" + "\n".join(rows))

    def _order_detail_action(self):
        order_id = read_int(self.prompter, "Ingrese el ID del pedido:", 1)
        if order_id is None:
            return
        order = self.order_service.get_order(order_id)
        if not order:
            self._show_msg("El pedido no existe.")
            return

        header = (f"Fecha: {order.date.strftime('%d/%m/%Y %H:%M')}\n"
                  f"Cliente: {order.customer.name}\n\n")
        ok, lines = self.report_service.order_lines(order_id)
        body = format_report("PLATILLOS", lines) if ok else lines
        self._show_msg(f"===== DETALLE DE PEDIDO #{order.id} =====\n{header}{body}\n\n"
                       f"TOTAL: {format_money(order.total)}")

    def _delete_order_action(self):
        order_id = read_int(self.prompter, "Ingrese el ID del pedido a eliminar:", 1)
        if order_id is None:
            return
        if not self.order_service.order_exists(order_id):
            self._show_msg("El pedido no existe.")
            return
        if not self.prompter.confirm(f"¿Está seguro de eliminar el pedido #{order_id}?"):
            return

        success, msg = self.order_service.delete_order(order_id)
        self._show_msg(msg)

    def _receipt_action(self):
        order_id = read_int(self.prompter, "Ingrese el ID del pedido:", 1)
        if order_id is None:
            return
        success, result = self.order_service.generate_receipt_pdf(order_id, self.settings.output_dir)
        self._show_msg(f"Boleta generada: {result}" if success else result)

    # ========= Reportes =========

    def _report_orders_by_total_action(self):
        ok, data = self.report_service.orders_by_total()
        self._show_msg(format_report("REPORTE: TOTAL POR PEDIDO", data) if ok else data)

    def _report_customer_history_action(self):
        customers, listing = self._customer_listing()
        if not customers:
            self._show_msg("No hay clientes registrados.")
            return

        customer_id = read_int(self.prompter, f"Clientes disponibles:\n{listing}\n\nIngrese el ID del cliente:", 1)
        if customer_id is None:
            return
        customer = self.customer_service.get_customer(customer_id)
        if not customer:
            self._show_msg("El cliente no existe.")
            return

        ok, data = self.report_service.customer_history(customer_id)
        self._show_msg(format_report(f"PEDIDOS DEL CLIENTE: {customer.name}", data) if ok else data)

    def _report_orders_per_customer_action(self):
        ok, data = self.report_service.orders_per_customer()
        self._show_msg(format_report("CLIENTES CON MÁS PEDIDOS", data) if ok else data)

    def _report_dishes_sold_action(self):
        ok, data = self.report_service.dishes_sold()
        self._show_msg(format_report("PLATILLOS MÁS VENDIDOS", data) if ok else data)

    def _report_sales_total_action(self):
        self._show_msg(f"Total de ventas: {format_money(self.report_service.sales_total())}")
