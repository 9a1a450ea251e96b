"""Erros classificados do pipeline de pedidos.

Cada erro carrega um `kind` verificável por máquina, o status HTTP e uma
mensagem legível com o contexto da falha.
"""

from typing import Any

from .models import VALID_STATUSES


class OrderError(Exception):
    kind = "order_error"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(OrderError):
    kind = "not_found"
    status_code = 404

    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order does not exist: {order_id}.")
        self.order_id = order_id


class InvalidField(OrderError):
    kind = "invalid_field"

    def __init__(self, name: str, reason: str | None = None) -> None:
        if reason:
            message = f"Order must include {reason}"
        else:
            message = f"Order must include a {name}"
        super().__init__(message)
        self.name = name
        self.reason = reason


class InvalidDish(OrderError):
    kind = "invalid_dish"

    def __init__(self, index: int) -> None:
        super().__init__(
            f"Dish {index} must have a quantity that is an integer greater than 0"
        )
        self.index = index


class IdMismatch(OrderError):
    kind = "id_mismatch"

    def __init__(self, payload_id: Any, route_id: str) -> None:
        super().__init__(
            f"Order id does not match route id. Order: {payload_id}, Route: {route_id}."
        )
        self.payload_id = payload_id
        self.route_id = route_id


class InvalidStatus(OrderError):
    kind = "invalid_status"

    def __init__(self, status: Any = None) -> None:
        super().__init__(f"Order must have a status of {', '.join(VALID_STATUSES)}")
        self.status = status
