from decimal import Decimal
from sqlalchemy.orm import Session, joinedload
from gourmet.models import OrderModel, OrderLineModel
from typing import List, Optional


class OrderCRUD:
    @staticmethod
    def create_order(session: Session, customer_id: int) -> OrderModel:
        order = OrderModel(customer_id=customer_id, total=Decimal("0.00"))
        session.add(order)
        return order

    @staticmethod
    def add_line(session: Session, order_id: int, dish_id: int, quantity: int, unit_price: Decimal) -> OrderLineModel:
        line = OrderLineModel(
            order_id=order_id,
            dish_id=dish_id,
            quantity=quantity,
            unit_price=unit_price
        )
        session.add(line)
        return line

    @staticmethod
    def set_total(session: Session, order: OrderModel, total: Decimal):
        order.total = total
        session.add(order)

    @staticmethod
    def get_all(session: Session) -> List[OrderModel]:
        # joinedload trae los datos relacionados en una sola consulta (Eager Loading)
        return session.query(OrderModel).options(
            joinedload(OrderModel.customer),
            joinedload(OrderModel.lines).joinedload(OrderLineModel.dish)
        ).order_by(OrderModel.date.desc(), OrderModel.id.desc()).all()

    @staticmethod
    def get_orders_by_customer(session: Session, customer_id: int) -> List[OrderModel]:
        return session.query(OrderModel).options(
            joinedload(OrderModel.customer),
            joinedload(OrderModel.lines).joinedload(OrderLineModel.dish)
        ).filter(OrderModel.customer_id == customer_id).order_by(OrderModel.date.desc(), OrderModel.id.desc()).all()

    @staticmethod
    def get_by_id(session: Session, order_id: int) -> Optional[OrderModel]:
        return session.query(OrderModel).options(
            joinedload(OrderModel.customer),
            joinedload(OrderModel.lines).joinedload(OrderLineModel.dish)
        ).filter(OrderModel.id == order_id).first()

    @staticmethod
    def delete(session: Session, order: OrderModel):
        session.delete(order)
