from decimal import Decimal
from sqlalchemy.orm import Session
from gourmet.models import DishModel, OrderLineModel
from typing import List, Optional


class DishCRUD:
    """
    Operaciones de Base de Datos para Platillos.
    """

    @staticmethod
    def get_all(session: Session) -> List[DishModel]:
        return session.query(DishModel).order_by(DishModel.id).all()

    @staticmethod
    def get_by_id(session: Session, dish_id: int) -> Optional[DishModel]:
        return session.query(DishModel).filter(DishModel.id == dish_id).first()

    @staticmethod
    def get_by_name(session: Session, name: str, exclude_id: Optional[int] = None) -> Optional[DishModel]:
        # Se compara la clave normalizada: "PIÑA COLADA" es igual a "piña colada"
        query = session.query(DishModel).filter(DishModel.name_key == DishModel.normalize_name(name))
        if exclude_id is not None:
            query = query.filter(DishModel.id != exclude_id)
        return query.first()

    @staticmethod
    def count_order_lines(session: Session, dish_id: int) -> int:
        return session.query(OrderLineModel).filter(OrderLineModel.dish_id == dish_id).count()

    @staticmethod
    def create(session: Session, name: str, price: Decimal) -> DishModel:
        new_dish = DishModel(name=name, name_key=DishModel.normalize_name(name), price=price)
        session.add(new_dish)
        return new_dish

    @staticmethod
    def update(session: Session, dish: DishModel, name: str, price: Decimal):
        dish.name = name
        dish.name_key = DishModel.normalize_name(name)
        dish.price = price
        session.add(dish)

    @staticmethod
    def delete(session: Session, dish: DishModel):
        session.delete(dish)
