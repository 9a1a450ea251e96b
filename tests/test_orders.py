"""Testes do OrderService e dos handlers (sem HTTP)."""
import pytest

from app import handlers
from app.errors import IdMismatch, InvalidDish, InvalidField, InvalidStatus, NotFound
from app.ids import CounterIdGenerator, UuidIdGenerator
from app.models import OrderDraft
from app.orders import OrderService
from conftest import order_body


def draft(**overrides) -> OrderDraft:
    return OrderDraft(**order_body(**overrides))


def test_create_assigns_unique_ids_and_pending(service):
    first = service.create(draft(status="delivered"))
    second = service.create(draft())
    assert first.id and second.id
    assert first.id != second.id
    assert first.status == "pending"
    assert service.list() == [first, second]


def test_create_copies_fields(service):
    order = service.create(draft(dishes=[{"id": "d9", "quantity": 4, "price": 12}]))
    assert order.deliverTo == "123 Main"
    assert order.mobileNumber == "555-0100"
    assert [d.model_dump() for d in order.dishes] == [{"id": "d9", "quantity": 4, "price": 12}]


@pytest.mark.parametrize(
    "overrides",
    [{"deliverTo": None}, {"mobileNumber": ""}, {"dishes": None}, {"dishes": []}],
)
def test_create_rejects_without_touching_store(service, store, overrides):
    with pytest.raises(InvalidField):
        service.create(draft(**overrides))
    assert len(store) == 0


def test_create_rejects_bad_dish(service, store):
    with pytest.raises(InvalidDish) as info:
        service.create(draft(dishes=[{"id": "d1", "quantity": 1}, {"id": "d2"}]))
    assert info.value.index == 1
    assert len(store) == 0


def test_read_returns_stored_record(service):
    created = service.create(draft())
    assert service.read(created.id) is created


def test_update_in_place(service, store):
    created = service.create(draft())
    updated = service.update(
        created.id,
        draft(deliverTo="9 Elm", status="out-for-delivery", dishes=[{"id": "d2", "quantity": 5}]),
    )
    assert updated is created
    assert store.find_by_id(created.id) is created
    assert updated.id == "ord-1"
    assert updated.deliverTo == "9 Elm"
    assert updated.status == "out-for-delivery"
    assert updated.dishes[0].quantity == 5
    assert len(store) == 1


def test_update_mismatch_leaves_record(service):
    created = service.create(draft())
    before = created.model_dump()
    with pytest.raises(IdMismatch):
        service.update(created.id, draft(id="ord-99", deliverTo="x", status="delivered"))
    assert service.read(created.id).model_dump() == before


def test_update_invalid_status_leaves_record(service):
    created = service.create(draft())
    before = created.model_dump()
    with pytest.raises(InvalidStatus):
        service.update(created.id, draft(deliverTo="x", status="cancelled"))
    assert service.read(created.id).model_dump() == before


def test_delete_then_read(service, store):
    keep = service.create(draft())
    gone = service.create(draft())
    service.delete(gone.id)
    assert store.all() == [keep]
    with pytest.raises(NotFound):
        service.read(gone.id)
    with pytest.raises(NotFound):
        service.delete(gone.id)


def test_delete_handler_on_missing_id_is_a_defect(store):
    with pytest.raises(KeyError):
        handlers.delete_order(store, "missing")


def test_default_service_uses_uuid_ids():
    service = OrderService()
    assert isinstance(service.ids, UuidIdGenerator)
    order = service.create(draft())
    assert len(order.id) == 32


def test_counter_id_generator():
    ids = CounterIdGenerator("x-", start=5)
    assert [ids.next(), ids.next()] == ["x-5", "x-6"]
