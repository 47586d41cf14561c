GLOBAL_FONTS = {
    "h2": {"size": 14, "weight": "bold"},
    "btn_primary": {"size": 14, "weight": "bold"},
    "label_normal": {"size": 14},
    "label_important": {"size": 14, "weight": "bold"},
    "mono": {"family": "Courier", "size": 12},
}

DIALOG_SIZES = {
    "msg": "400x200",
    "text": "760x480",
    "options": "360x420",
}

MAIN_MENU_OPTIONS = [
    "Gestionar Clientes",
    "Gestionar Platillos",
    "Gestionar Pedidos",
    "Reportes",
    "Salir",
]

CUSTOMER_MENU_OPTIONS = [
    "Registrar Cliente",
    "Ver Clientes",
    "Editar Cliente",
    "Eliminar Cliente",
    "Volver al Menú Principal",
]

DISH_MENU_OPTIONS = [
    "Registrar Platillo",
    "Ver Platillos",
    "Editar Platillo",
    "Eliminar Platillo",
    "Exportar Carta (PDF)",
    "Volver al Menú Principal",
]

ORDER_MENU_OPTIONS = [
    "Crear Pedido",
    "Ver Pedidos",
    "Ver Detalle de Pedido",
    "Eliminar Pedido",
    "Generar Boleta (PDF)",
    "Volver al Menú Principal",
]

REPORT_MENU_OPTIONS = [
    "Total a Pagar por Pedido",
    "Pedidos por Cliente",
    "Clientes con más Pedidos",
    "Platillos más Vendidos",
    "Total de Ventas",
    "Volver al Menú Principal",
]
