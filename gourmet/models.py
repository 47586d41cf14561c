from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, DateTime, CheckConstraint, func
from sqlalchemy.orm import relationship
from datetime import datetime
from gourmet.config.database import Base

# Importes monetarios con 2 decimales; en Python se manejan como Decimal
MONEY = Numeric(10, 2)


# --- Entidad: Cliente ---
class CustomerModel(Base):
    __tablename__ = "customers"
    __table_args__ = (
        CheckConstraint("length(trim(name)) > 0", name="ck_customers_name_not_empty"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Se guarda siempre en minúsculas
    email = Column(String(255), unique=True, index=True, nullable=False)

    orders = relationship(
        "OrderModel",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<CustomerModel(name='{self.name}', email='{self.email}')>"


# --- Entidad: Platillo ---
class DishModel(Base):
    __tablename__ = "dishes"
    __table_args__ = (
        CheckConstraint("length(trim(name)) > 0", name="ck_dishes_name_not_empty"),
        CheckConstraint("price > 0", name="ck_dishes_price_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), index=True, nullable=False)
    # Nombre normalizado (casefold); SQLite solo pasa a minúsculas caracteres ASCII
    name_key = Column(String(255), unique=True, nullable=False)
    price = Column(MONEY, nullable=False)

    order_lines = relationship(
        "OrderLineModel",
        back_populates="dish",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @staticmethod
    def normalize_name(name: str) -> str:
        return name.strip().casefold()

    def __repr__(self):
        return f"<DishModel(name='{self.name}', price={self.price})>"


# --- Entidad: Pedido (Cabecera) ---
class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False)
    date = Column(DateTime, default=datetime.now, server_default=func.current_timestamp(), nullable=False)
    total = Column(MONEY, default=0, nullable=False)

    customer = relationship("CustomerModel", back_populates="orders")
    lines = relationship(
        "OrderLineModel",
        back_populates="order",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="OrderLineModel.id",
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, total={self.total})>"


# --- Entidad: Línea de Pedido ---
class OrderLineModel(Base):
    __tablename__ = "order_lines"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_lines_quantity_positive"),
        CheckConstraint("unit_price > 0", name="ck_order_lines_unit_price_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    dish_id = Column(Integer, ForeignKey("dishes.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False)
    # Precio del platillo al momento de crear el pedido; no se reescribe
    unit_price = Column(MONEY, nullable=False)

    order = relationship("OrderModel", back_populates="lines")
    dish = relationship("DishModel", back_populates="order_lines")

    @property
    def subtotal(self):
        return self.unit_price * self.quantity

    def __repr__(self):
        return f"<OrderLineModel(order={self.order_id}, dish={self.dish_id}, qty={self.quantity})>"
