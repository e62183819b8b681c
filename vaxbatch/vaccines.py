"""Vaccine batches and the sorted stock that holds them."""

from bisect import insort
from dataclasses import dataclass

from vaxbatch.dates import Date
from vaxbatch.messages import Message

MAX_BATCH_CODE = 20
MAX_NAME = 50
MAX_BATCHES = 1000

_BATCH_CHARS = frozenset("0123456789ABCDEF")


def is_valid_batch(batch):
    """Return True if the batch code is short enough and upper-case hex."""
    return len(batch) <= MAX_BATCH_CODE and all(c in _BATCH_CHARS for c in batch)


def is_valid_name(name):
    """Return True if the vaccine name is short enough and has no blanks."""
    return len(name) <= MAX_NAME and not any(c in " \n\t" for c in name)


@dataclass
class Vaccine:
    """A batch of one vaccine, with its expiry date and dose counts."""

    name: str
    batch: str
    date: Date
    stock: int
    applied: int = 0

    def __str__(self):
        return f"{self.name} {self.batch} {self.date} {self.stock} {self.applied}"


def _order_key(vaccine):
    return (vaccine.date, vaccine.batch)


class VaccineStock:
    """Vaccine batches kept in order of date, then batch code."""

    def __init__(self):
        self._vaccines = []

    def __iter__(self):
        return iter(list(self._vaccines))

    def __len__(self):
        return len(self._vaccines)

    def add(self, vaccine):
        """Insert a batch; raise ValueError carrying the reason if refused."""
        if len(self._vaccines) >= MAX_BATCHES:
            raise ValueError(Message.TOO_MANY_VACCINES)
        if self.has_batch(vaccine.batch):
            raise ValueError(Message.DUPLICATE_BATCH)
        insort(self._vaccines, vaccine, key=_order_key)

    def has_batch(self, batch):
        """Return True if a batch with this code is held."""
        return any(v.batch == batch for v in self._vaccines)

    def has_name(self, name):
        """Return True if any batch is of the named vaccine."""
        return any(v.name == name for v in self._vaccines)

    def with_name(self, name):
        """Return the batches of the named vaccine, in stock order."""
        return [v for v in self._vaccines if v.name == name]

    def find_available(self, name, date):
        """Return the first usable batch of the vaccine on date, or None."""
        return next(
            (
                v
                for v in self._vaccines
                if v.name == name and v.date.is_valid() and date < v.date and v.stock > 0
            ),
            None,
        )

    def remove(self, batch):
        """Withdraw a batch and return its applied doses.

        A batch with no applied doses is dropped; otherwise its stock is
        emptied. Raises KeyError if the batch is unknown.
        """
        for index, vaccine in enumerate(self._vaccines):
            if vaccine.batch == batch:
                if vaccine.applied == 0:
                    del self._vaccines[index]
                else:
                    vaccine.stock = 0
                return vaccine.applied
        raise KeyError(batch)