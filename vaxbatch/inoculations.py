"""Records of vaccine doses given to users."""

from dataclasses import dataclass

from vaxbatch.dates import Date


@dataclass(frozen=True)
class Inoculation:
    """One dose of a vaccine batch given to a user on a date."""

    name: str
    batch: str
    date: Date
    vaccine_name: str

    def __str__(self):
        return f"{self.name} {self.batch} {self.date}"


def extract_name(text):
    """Split a user name off the front of text.

    A name in double quotes may hold blanks and ends at the closing quote;
    otherwise the name ends at the first space or newline. Returns the name
    and the rest of the text. Raises ValueError on an unclosed quote.
    """
    if text.startswith('"'):
        end = text.find('"', 1)
        if end < 0:
            raise ValueError(f"unterminated quoted name: {text!r}")
        return text[1:end], text[end + 1 :]
    ends = [i for i in (text.find(" "), text.find("\n")) if i >= 0]
    end = min(ends) if ends else len(text)
    return text[:end], text[end:]


class InoculationRegistry:
    """Inoculations kept in the order they were given, indexed by user."""

    def __init__(self):
        self._records = []
        self._by_name = {}

    def __iter__(self):
        return iter(list(self._records))

    def __len__(self):
        return len(self._records)

    def record(self, inoculation):
        """Add an inoculation at the end of the history."""
        self._records.append(inoculation)
        self._by_name.setdefault(inoculation.name, []).append(inoculation)

    def is_vaccinated(self, name, vaccine_name, date):
        """Return True if the user got this vaccine on that date."""
        return any(
            inoc.vaccine_name == vaccine_name and inoc.date == date
            for inoc in self._by_name.get(name, ())
        )

    def has_user(self, name):
        """Return True if the user has at least one inoculation."""
        return bool(self._by_name.get(name))

    def for_user(self, name):
        """Return the user's inoculations in the order they were given."""
        return list(self._by_name.get(name, ()))

    def _remove_where(self, predicate):
        kept = [inoc for inoc in self._records if not predicate(inoc)]
        removed = len(self._records) - len(kept)
        self._records = kept
        self._by_name = {}
        for inoc in kept:
            self._by_name.setdefault(inoc.name, []).append(inoc)
        return removed

    def remove_by_name(self, name):
        """Remove every inoculation of the user; return how many went."""
        return self._remove_where(lambda inoc: inoc.name == name)

    def remove_by_name_and_date(self, name, date):
        """Remove the user's inoculations on date; return how many went."""
        return self._remove_where(
            lambda inoc: inoc.name == name and inoc.date == date
        )

    def remove_by_name_batch_and_date(self, name, batch, date):
        """Remove the user's inoculations of batch on date.

        Returns how many went. Raises KeyError if no inoculation at all
        is of that batch.
        """
        if not any(inoc.batch == batch for inoc in self._records):
            raise KeyError(batch)
        return self._remove_where(
            lambda inoc: inoc.name == name
            and inoc.batch == batch
            and inoc.date == date
        )