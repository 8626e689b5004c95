# tests/test_cassandra_store.py
from app import cassandra_store as cs
from app.models import Product

COLUMNS = ("id", "name", "description", "price", "image", "category")


class FakeResult(list):
    def one(self):
        return self[0] if self else None


class FakeSession:
    """Answers the store's fixed CQL statements from a dict, like a dict_factory session."""

    def __init__(self):
        self.rows = {}
        self.executed = []

    def execute(self, query, params=None):
        self.executed.append((query, params))
        if query == cs.INSERT:
            self.rows[params[0]] = dict(zip(COLUMNS, params))
            return FakeResult()
        if query == cs.DELETE:
            self.rows.pop(params[0], None)
            return FakeResult()
        if query == cs.SELECT_ID:
            return FakeResult([{"id": params[0]}] if params[0] in self.rows else [])
        if query == cs.SELECT_ONE:
            row = self.rows.get(params[0])
            return FakeResult([dict(row)] if row else [])
        if query == cs.SELECT_ALL:
            return FakeResult(dict(r) for r in self.rows.values())
        raise AssertionError(f"unexpected query: {query}")


WIDGET = Product(id="p1", name="Widget", description="A widget", price=9.99, image="img.png", category="tools")


def test_put_then_get():
    session = FakeSession()
    store = cs.CassandraProductStore(session)
    assert store.put(WIDGET) == WIDGET
    assert session.executed[-1] == (cs.INSERT, ("p1", "Widget", "A widget", 9.99, "img.png", "tools"))
    assert store.exists("p1")
    assert store.get("p1") == WIDGET


def test_missing_product():
    store = cs.CassandraProductStore(FakeSession())
    assert not store.exists("nope")
    assert store.get("nope") is None
    assert store.get_all() == []


def test_get_all_and_delete():
    store = cs.CassandraProductStore(FakeSession())
    store.put(WIDGET)
    store.put(WIDGET.model_copy(update={"id": "p2"}))
    assert [p.id for p in store.get_all()] == ["p1", "p2"]
    store.delete(WIDGET)
    assert [p.id for p in store.get_all()] == ["p2"]


def test_service_on_cassandra_store():
    from app.core import ProductService
    from app.models import ProductIn, ProductUpdate

    service = ProductService(cs.CassandraProductStore(FakeSession()))
    service.create(ProductIn(**WIDGET.model_dump()))
    assert service.update("p1", ProductUpdate(price=19.99)).price == 19.99
    assert service.get_by_id("p1").price == 19.99
