import pytest

from mycpayment.errors import NotFoundError
from mycpayment.store import Item, Map, Sequence


@pytest.fixture
def store():
    return {}


def test_integer_key_is_big_endian(store):
    payments = Map(store, b"payment/value/", int)
    assert payments.encode_key(1) == b"\x00\x00\x00\x00\x00\x00\x00\x01"


@pytest.mark.parametrize("key", [0, 7, 255, 256, 2**64 - 1])
def test_integer_key_round_trip(store, key):
    payments = Map(store, b"p/", int)
    assert payments.decode_key(payments.encode_key(key)) == key


def test_string_key_round_trip(store):
    merchants = Map(store, b"m/", str)
    assert merchants.decode_key(merchants.encode_key("shop-1")) == "shop-1"


def test_negative_integer_key_rejected(store):
    with pytest.raises(ValueError):
        Map(store, b"p/", int).encode_key(-1)


def test_get_missing_raises(store):
    with pytest.raises(NotFoundError):
        Map(store, b"p/", int).get(3)


def test_set_get_has_remove(store):
    merchants = Map(store, b"m/", str)
    merchants.set("a", {"name": "shop"})
    assert merchants.has("a")
    assert merchants.get("a") == {"name": "shop"}
    merchants.remove("a")
    assert not merchants.has("a")
    merchants.remove("a")
    assert not merchants.has("a")


def test_values_are_copied(store):
    merchants = Map(store, b"m/", str)
    value = {"name": "shop"}
    merchants.set("a", value)
    value["name"] = "changed"
    fetched = merchants.get("a")
    fetched["name"] = "again"
    assert merchants.get("a") == {"name": "shop"}


def test_walk_orders_integers_numerically(store):
    payments = Map(store, b"p/", int)
    for key in (256, 2, 10, 0):
        payments.set(key, str(key))
    assert [key for key, _ in payments.walk()] == [0, 2, 10, 256]


def test_walk_orders_strings_by_bytes(store):
    merchants = Map(store, b"m/", str)
    for key in ("2", "10", "1"):
        merchants.set(key, key)
    assert [key for key, _ in merchants.walk()] == ["1", "10", "2"]


def test_maps_with_different_prefixes_are_separate(store):
    payments = Map(store, b"payment/value/", int)
    settlements = Map(store, b"settlement/value/", int)
    payments.set(0, "payment")
    settlements.set(0, "settlement")
    assert list(payments.walk()) == [(0, "payment")]
    assert list(settlements.walk()) == [(0, "settlement")]


def test_items_from_starts_at_key(store):
    payments = Map(store, b"p/", int)
    for key in range(5):
        payments.set(key, key * 10)
    start = payments.encode_key(2)
    got = [(payments.decode_key(raw), value) for raw, value in payments.items_from(start)]
    assert got == [(2, 20), (3, 30), (4, 40)]
    assert len(list(payments.items_from(None))) == 5


def test_sequence_counts_from_zero(store):
    seq = Sequence(store, b"payment/count/")
    assert [seq.next() for _ in range(3)] == [0, 1, 2]
    assert seq.peek() == 3


def test_sequence_set_then_next(store):
    seq = Sequence(store, b"s/")
    seq.set(7)
    assert seq.next() == 7
    assert seq.peek() == 8


def test_sequence_rejects_negative(store):
    with pytest.raises(ValueError):
        Sequence(store, b"s/").set(-1)


def test_item_lifecycle(store):
    params = Item(store, b"p_payment", "params")
    assert not params.has()
    with pytest.raises(NotFoundError):
        params.get()
    params.set({"fee": 1})
    assert params.has()
    assert params.get() == {"fee": 1}


def test_map_rejects_unsupported_key_type(store):
    with pytest.raises(TypeError):
        Map(store, b"x/", float)