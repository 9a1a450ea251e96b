"""Pipeline de validação das requisições de pedido.

Cada check recebe o contexto e levanta um `OrderError` quando falha. O
runner avalia os checks na ordem da lista e para no primeiro erro, antes de
qualquer handler tocar o Store.
"""

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from .errors import IdMismatch, InvalidDish, InvalidField, InvalidStatus, NotFound
from .models import VALID_STATUSES, Order, OrderDraft
from .store import OrderStore


@dataclass
class ValidationContext:
    store: OrderStore
    order_id: str | None = None
    draft: OrderDraft | None = None
    # preenchido por OrderExists
    order: Order | None = None


class Check(Protocol):
    def check(self, ctx: ValidationContext) -> None: ...


def run_checks(checks: Sequence[Check], ctx: ValidationContext) -> ValidationContext:
    """Executa os checks em ordem; o primeiro erro interrompe a cadeia."""
    for item in checks:
        item.check(ctx)
    return ctx


def _is_positive_int(value: Any) -> bool:
    # bool é subclasse de int e não conta como quantidade
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class OrderExists:
    """O pedido da rota precisa existir; guarda a referência no contexto."""

    def check(self, ctx: ValidationContext) -> None:
        order = ctx.store.find_by_id(ctx.order_id)
        if order is None:
            raise NotFound(ctx.order_id)
        ctx.order = order


class IdMatchesRoute:
    """Um `id` no payload, se informado, deve ser igual ao id da rota."""

    def check(self, ctx: ValidationContext) -> None:
        payload_id = ctx.draft.id
        if not payload_id or payload_id == ctx.order_id:
            return
        raise IdMismatch(payload_id, ctx.order_id)


class RequiredText:
    """Campo de texto obrigatório e não vazio."""

    def __init__(self, name: str) -> None:
        self.name = name

    def check(self, ctx: ValidationContext) -> None:
        value = getattr(ctx.draft, self.name)
        if not isinstance(value, str) or not value:
            raise InvalidField(self.name)


class DishesPresent:
    def check(self, ctx: ValidationContext) -> None:
        if ctx.draft.dishes is None:
            raise InvalidField("dishes")


class DishesNotEmpty:
    def check(self, ctx: ValidationContext) -> None:
        dishes = ctx.draft.dishes
        if not isinstance(dishes, list) or len(dishes) < 1:
            raise InvalidField("dishes", "at least one dish")


class DishQuantities:
    """Toda quantidade deve ser inteira e > 0; reporta o índice do primeiro inválido."""

    def check(self, ctx: ValidationContext) -> None:
        for index, dish in enumerate(ctx.draft.dishes):
            quantity = dish.get("quantity") if isinstance(dish, dict) else None
            if not _is_positive_int(quantity):
                raise InvalidDish(index)


class StatusIsValid:
    def check(self, ctx: ValidationContext) -> None:
        status = ctx.draft.status
        if status not in VALID_STATUSES:
            raise InvalidStatus(status)


FIELD_CHECKS: tuple[Check, ...] = (
    RequiredText("deliverTo"),
    RequiredText("mobileNumber"),
    DishesPresent(),
    DishesNotEmpty(),
    DishQuantities(),
)

CREATE_CHECKS: tuple[Check, ...] = FIELD_CHECKS
READ_CHECKS: tuple[Check, ...] = (OrderExists(),)
UPDATE_CHECKS: tuple[Check, ...] = (
    OrderExists(),
    IdMatchesRoute(),
    *FIELD_CHECKS,
    StatusIsValid(),
)
DELETE_CHECKS: tuple[Check, ...] = (OrderExists(),)
