"""Geradores de ID de pedido (únicos durante a vida do processo)."""

import itertools
import uuid
from typing import Protocol


class IdGenerator(Protocol):
    def next(self) -> str: ...


class UuidIdGenerator:
    """IDs aleatórios de 32 caracteres hex (16 bytes)."""

    def next(self) -> str:
        return uuid.uuid4().hex


class CounterIdGenerator:
    """Sequência determinística (`prefix1`, `prefix2`, ...) para testes e demos."""

    def __init__(self, prefix: str = "", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)

    def next(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
