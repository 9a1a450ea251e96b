"""Despacho das operações de pedido: cadeia de checks seguida do handler."""

import logging
from typing import List

from . import handlers
from .errors import OrderError
from .ids import IdGenerator, UuidIdGenerator
from .models import Order, OrderDraft
from .store import OrderStore
from .validation import (
    CREATE_CHECKS,
    DELETE_CHECKS,
    READ_CHECKS,
    UPDATE_CHECKS,
    Check,
    ValidationContext,
    run_checks,
)

logger = logging.getLogger("uvicorn.error")


class OrderService:
    """Operações de pedido sobre um Store e um gerador de ids injetados."""

    def __init__(
        self,
        store: OrderStore | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self.store = store if store is not None else OrderStore()
        self.ids = id_generator or UuidIdGenerator()

    def _validate(
        self,
        operation: str,
        checks: tuple[Check, ...],
        order_id: str | None = None,
        draft: OrderDraft | None = None,
    ) -> ValidationContext:
        ctx = ValidationContext(store=self.store, order_id=order_id, draft=draft)
        try:
            return run_checks(checks, ctx)
        except OrderError as exc:
            logger.warning("Pedido rejeitado (%s, %s): %s", operation, exc.kind, exc.message)
            raise

    def create(self, draft: OrderDraft) -> Order:
        self._validate("create", CREATE_CHECKS, draft=draft)
        return handlers.create_order(self.store, self.ids, draft)

    def read(self, order_id: str) -> Order:
        ctx = self._validate("read", READ_CHECKS, order_id=order_id)
        return handlers.read_order(ctx.order)

    def update(self, order_id: str, draft: OrderDraft) -> Order:
        ctx = self._validate("update", UPDATE_CHECKS, order_id=order_id, draft=draft)
        return handlers.update_order(ctx.order, draft)

    def delete(self, order_id: str) -> None:
        self._validate("delete", DELETE_CHECKS, order_id=order_id)
        handlers.delete_order(self.store, order_id)

    def list(self) -> List[Order]:
        return handlers.list_orders(self.store)
