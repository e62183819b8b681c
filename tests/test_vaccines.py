import pytest

from vaxbatch.dates import Date
from vaxbatch.messages import Message
from vaxbatch.vaccines import (
    MAX_BATCHES,
    Vaccine,
    VaccineStock,
    is_valid_batch,
    is_valid_name,
)


def make(name="flu", batch="A1", date=Date(2025, 6, 1), stock=5):
    return Vaccine(name, batch, date, stock)


@pytest.fixture
def stock():
    s = VaccineStock()
    s.add(make(batch="B2", date=Date(2025, 6, 1)))
    s.add(make(name="covid", batch="A1", date=Date(2025, 6, 1)))
    s.add(make(batch="C3", date=Date(2025, 3, 1)))
    return s


@pytest.mark.parametrize("batch", ["", "0123456789ABCDEF", "A" * 20])
def test_valid_batches(batch):
    assert is_valid_batch(batch) is True


@pytest.mark.parametrize("batch", ["a1", "G", "A B", "A" * 21])
def test_invalid_batches(batch):
    assert is_valid_batch(batch) is False


def test_name_validity():
    assert is_valid_name("x" * 50) is True
    assert is_valid_name("x" * 51) is False
    assert is_valid_name("two words") is False
    assert is_valid_name("tab\there") is False


def test_vaccine_str():
    assert str(make(name="pfizer", date=Date(2025, 2, 1), stock=10)) == (
        "pfizer A1 01-02-2025 10 0"
    )


def test_order_by_date_then_batch(stock):
    keys = [(v.date, v.batch) for v in stock]
    assert keys == sorted(keys)
    assert [v.batch for v in stock][0] == "C3"
    assert len(stock) == 3


def test_duplicate_batch_refused(stock):
    with pytest.raises(ValueError) as info:
        stock.add(make(batch="A1"))
    assert info.value.args[0] is Message.DUPLICATE_BATCH
    assert len(stock) == 3


def test_capacity_limit():
    s = VaccineStock()
    for n in range(MAX_BATCHES):
        s.add(make(batch=format(n, "X")))
    with pytest.raises(ValueError) as info:
        s.add(make(batch="FFFFF"))
    assert info.value.args[0] is Message.TOO_MANY_VACCINES
    assert len(s) == MAX_BATCHES


def test_lookups(stock):
    assert stock.has_batch("B2") is True
    assert stock.has_batch("ZZ") is False
    assert stock.has_name("covid") is True
    assert stock.has_name("polio") is False
    assert [v.batch for v in stock.with_name("flu")] == ["C3", "B2"]
    assert stock.with_name("polio") == []


def test_find_available_needs_strictly_later_expiry(stock):
    assert stock.find_available("flu", Date(2025, 1, 1)).batch == "C3"
    assert stock.find_available("flu", Date(2025, 3, 1)).batch == "B2"
    assert stock.find_available("flu", Date(2025, 6, 1)) is None


def test_find_available_skips_empty_batches(stock):
    stock.with_name("flu")[0].stock = 0
    assert stock.find_available("flu", Date(2025, 1, 1)).batch == "B2"
    assert stock.find_available("polio", Date(2025, 1, 1)) is None


def test_remove_unused_batch_drops_it(stock):
    assert stock.remove("B2") == 0
    assert stock.has_batch("B2") is False
    assert len(stock) == 2


def test_remove_used_batch_empties_it(stock):
    vaccine = stock.with_name("covid")[0]
    vaccine.applied = 2
    assert stock.remove("A1") == 2
    assert stock.has_batch("A1") is True
    assert vaccine.stock == 0


def test_remove_unknown_batch(stock):
    with pytest.raises(KeyError):
        stock.remove("ABC")