"""Handlers de mutação e leitura de pedidos.

Supõem que o pipeline de validação já rodou para a operação.
"""

import logging
from typing import List

from .ids import IdGenerator
from .models import Dish, Order, OrderDraft
from .store import OrderStore

logger = logging.getLogger("uvicorn.error")


def _dishes(draft: OrderDraft) -> List[Dish]:
    return [Dish.model_validate(d) for d in draft.dishes]


def create_order(store: OrderStore, ids: IdGenerator, draft: OrderDraft) -> Order:
    """Cria o pedido com id novo e status sempre `pending`."""
    order = Order(
        id=ids.next(),
        deliverTo=draft.deliverTo,
        mobileNumber=draft.mobileNumber,
        status="pending",
        dishes=_dishes(draft),
    )
    store.insert(order)
    logger.info("Pedido criado: id=%s pratos=%s", order.id, len(order.dishes))
    return order


def read_order(order: Order) -> Order:
    return order


def update_order(order: Order, draft: OrderDraft) -> Order:
    """Substitui os campos no próprio registro do Store, preservando o id."""
    order.deliverTo = draft.deliverTo
    order.mobileNumber = draft.mobileNumber
    order.status = draft.status
    order.dishes = _dishes(draft)
    logger.info("Pedido atualizado: id=%s status=%s", order.id, order.status)
    return order


def delete_order(store: OrderStore, order_id: str) -> None:
    # KeyError aqui indica violação do check de existência, não erro de cliente
    store.remove_by_id(order_id)
    logger.info("Pedido removido: id=%s", order_id)


def list_orders(store: OrderStore) -> List[Order]:
    return store.all()
