"""Modelos de pedido (Order), item de prato (Dish) e payloads de entrada."""

from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

OrderStatus = Literal["pending", "preparing", "out-for-delivery", "delivered"]

VALID_STATUSES: tuple[str, ...] = ("pending", "preparing", "out-for-delivery", "delivered")


class Dish(BaseModel):
    """Item do pedido: referência ao prato do catálogo e quantidade.

    Campos extras do catálogo (name, price, image_url...) são mantidos como vieram.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    quantity: int


class Order(BaseModel):
    """Pedido de entrega armazenado no Store."""

    id: str
    deliverTo: str
    mobileNumber: str
    status: OrderStatus = "pending"
    dishes: List[Dish]

    @field_serializer("dishes")
    def _dump_dishes(self, dishes: List[Dish]) -> List[dict]:
        # só as chaves enviadas pelo cliente; `id` ausente não vira null
        return [d.model_dump(exclude_unset=True) for d in dishes]


class OrderDraft(BaseModel):
    """Corpo bruto de criação/atualização; a validação fica com o pipeline."""

    id: Any = None
    deliverTo: Any = None
    mobileNumber: Any = None
    status: Any = None
    dishes: Any = None


class OrderEnvelope(BaseModel):
    """Envelope `{"data": {...}}` usado nas requisições de escrita."""

    data: OrderDraft = Field(default_factory=OrderDraft)
