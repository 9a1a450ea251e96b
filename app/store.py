"""Store em memória dos pedidos vivos, com carga opcional de um JSON de seed."""

import json
from pathlib import Path
from typing import Dict, Iterable, List

from .models import Order


class OrderStore:
    """Coleção ordenada de pedidos indexada por id.

    O dict preserva a ordem de inserção, então `all()` devolve os pedidos na
    ordem em que foram criados. Não há travas: todas as operações rodam no
    mesmo domínio de execução do request.
    """

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self._orders: Dict[str, Order] = {}
        for order in orders:
            self.insert(order)

    def insert(self, order: Order) -> None:
        self._orders[order.id] = order

    def find_by_id(self, order_id: str) -> Order | None:
        return self._orders.get(order_id)

    def remove_by_id(self, order_id: str) -> Order:
        """Remove e devolve o pedido; `KeyError` se o id não existir."""
        return self._orders.pop(order_id)

    def all(self) -> List[Order]:
        return list(self._orders.values())

    def __len__(self) -> int:
        return len(self._orders)

    def __contains__(self, order_id: object) -> bool:
        return order_id in self._orders


def load_orders(path: str | Path) -> OrderStore:
    """Cria um Store com os pedidos do arquivo JSON (lista de pedidos)."""
    with Path(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    return OrderStore(Order.model_validate(o) for o in raw)
