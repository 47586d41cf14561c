from sqlalchemy import func
from sqlalchemy.orm import Session
from gourmet.models import CustomerModel, OrderModel
from typing import List, Optional


class CustomerCRUD:
    @staticmethod
    def get_all(session: Session) -> List[CustomerModel]:
        return session.query(CustomerModel).order_by(CustomerModel.id).all()

    @staticmethod
    def get_by_id(session: Session, customer_id: int) -> Optional[CustomerModel]:
        return session.query(CustomerModel).filter(CustomerModel.id == customer_id).first()

    @staticmethod
    def get_by_email(session: Session, email: str, exclude_id: Optional[int] = None) -> Optional[CustomerModel]:
        # 'Ana@X.com' y 'ana@x.com' son el mismo correo
        query = session.query(CustomerModel).filter(func.lower(CustomerModel.email) == email.strip().lower())
        if exclude_id is not None:
            query = query.filter(CustomerModel.id != exclude_id)
        return query.first()

    @staticmethod
    def count_orders(session: Session, customer_id: int) -> int:
        return session.query(OrderModel).filter(OrderModel.customer_id == customer_id).count()

    @staticmethod
    def create(session: Session, name: str, email: str) -> CustomerModel:
        new_customer = CustomerModel(name=name, email=email)
        session.add(new_customer)
        return new_customer

    @staticmethod
    def update(session: Session, customer: CustomerModel, name: str, email: str):
        customer.name = name
        customer.email = email
        session.add(customer)

    @staticmethod
    def delete(session: Session, customer: CustomerModel):
        session.delete(customer)
