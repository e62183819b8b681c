"""Command interpreter for the vaccine batch system."""

import re
import sys

from vaxbatch.dates import Date, parse_date
from vaxbatch.inoculations import Inoculation, InoculationRegistry, extract_name
from vaxbatch.messages import Language, Message
from vaxbatch.vaccines import (
    MAX_BATCH_CODE,
    MAX_BATCHES,
    MAX_NAME,
    Vaccine,
    VaccineStock,
    is_valid_batch,
    is_valid_name,
)

START_DATE = Date(2025, 1, 1)

_COMMAND = re.compile(r"\s*\S*")
_CREATE_FIELDS = re.compile(
    r"\s*(\S+)\s+([+-]?\d+)-\s*([+-]?\d+)-\s*([+-]?\d+)\s+([+-]?\d+)\s+(\S+)"
)
_REMOVE_FIELDS = re.compile(
    r"\s*([+-]?\d+)(?:-\s*([+-]?\d+)(?:-\s*([+-]?\d+)(?:\s*(\S+))?)?)?"
)


def _arguments(line):
    """Return the line with its leading command word removed."""
    return line[_COMMAND.match(line).end():]


class VaccineSystem:
    """Vaccine stock and inoculation history driven by text commands."""

    def __init__(self, language=Language.ENGLISH):
        self.language = language
        self.current_date = START_DATE
        self.vaccines = VaccineStock()
        self.inoculations = InoculationRegistry()
        self.running = True
        self._handlers = {
            "c": self.create_vaccine,
            "l": self.list_vaccines,
            "a": self.apply_inoculation,
            "t": self.change_date,
            "u": self.list_inoculations,
            "r": self.remove_vaccine,
            "d": self.remove_inoculations,
        }

    def _say(self, message):
        return message.text(self.language)

    def _about(self, subject, message):
        return f"{subject}: {self._say(message)}"

    def execute(self, line):
        """Run one command line and return the lines it prints."""
        if not line:
            return []
        if line[0] == "q":
            self.running = False
            return []
        handler = self._handlers.get(line[0])
        return handler(line) if handler else []

    def change_date(self, line):
        """Show the current date, or move it forward to the given one."""
        try:
            date = parse_date(_arguments(line))
        except ValueError:
            return [str(self.current_date)]
        if not date.is_valid() or self.current_date > date:
            return [self._say(Message.INVALID_DATE)]
        self.current_date = date
        return [str(date)]

    def create_vaccine(self, line):
        """Add a batch: 'c <batch> <DD-MM-YYYY> <doses> <name>'."""
        if len(self.vaccines) + 1 > MAX_BATCHES:
            return [self._say(Message.TOO_MANY_VACCINES)]
        tokens = [token for token in line.split(" ") if token]
        if len(tokens) < 5:
            return [self._say(Message.INVALID_INPUT)]
        if len(tokens[1]) > MAX_BATCH_CODE:
            return [self._say(Message.INVALID_BATCH)]
        if len(tokens[4]) > MAX_NAME:
            return [self._say(Message.INVALID_NAME)]

        match = _CREATE_FIELDS.match(_arguments(line))
        if match is None:
            return [self._say(Message.INVALID_INPUT)]
        batch, day, month, year, doses, name = match.groups()
        date = Date(int(year), int(month), int(day))
        doses = int(doses)

        if self.vaccines.has_batch(batch):
            return [self._say(Message.DUPLICATE_BATCH)]
        if not is_valid_batch(batch):
            return [self._say(Message.INVALID_BATCH)]
        if not is_valid_name(name):
            return [self._say(Message.INVALID_NAME)]
        if not date.is_valid() or self.current_date > date:
            return [self._say(Message.INVALID_DATE)]
        if doses < 0:
            return [self._say(Message.INVALID_QUANTITY)]

        self.vaccines.add(Vaccine(name, batch, date, doses))
        return [batch]

    def list_vaccines(self, line):
        """List every batch, or the batches of each named vaccine."""
        names = [name for name in re.split(r"[ \n]+", _arguments(line)) if name]
        if not names:
            return [str(vaccine) for vaccine in self.vaccines]
        output = []
        for name in names:
            if not self.vaccines.has_name(name):
                output.append(self._about(name, Message.NO_SUCH_VACCINE))
            else:
                output.extend(str(vaccine) for vaccine in self.vaccines.with_name(name))
        return output

    def apply_inoculation(self, line):
        """Give a dose: 'a <user> <vaccine>', the user optionally quoted."""
        space = line.find(" ")
        if space < 0:
            return [self._say(Message.INVALID_INPUT)]
        try:
            name, rest = extract_name(line[space + 1:])
        except ValueError:
            return [self._say(Message.INVALID_INPUT)]
        fields = rest.split()
        if not fields:
            return [self._say(Message.INVALID_INPUT)]
        vaccine_name = fields[0]

        vaccine = self.vaccines.find_available(vaccine_name, self.current_date)
        if vaccine is None:
            return [self._say(Message.NO_STOCK)]
        if self.inoculations.is_vaccinated(name, vaccine_name, self.current_date):
            return [self._say(Message.ALREADY_VACCINATED)]

        self.inoculations.record(
            Inoculation(name, vaccine.batch, self.current_date, vaccine_name)
        )
        vaccine.stock -= 1
        vaccine.applied += 1
        return [vaccine.batch]

    def list_inoculations(self, line):
        """List every inoculation, or those of one user."""
        space = line.find(" ")
        if space < 0:
            return [str(inoc) for inoc in self.inoculations]
        try:
            name, _ = extract_name(line[space + 1:])
        except ValueError:
            return [self._say(Message.INVALID_INPUT)]
        records = self.inoculations.for_user(name)
        if not records:
            return [self._about(name, Message.NO_SUCH_USER)]
        return [str(inoc) for inoc in records]

    def remove_vaccine(self, line):
        """Withdraw a batch and report how many of its doses were given."""
        fields = _arguments(line).split()
        if not fields:
            return [self._say(Message.INVALID_INPUT)]
        batch = fields[0]
        try:
            applied = self.vaccines.remove(batch)
        except KeyError:
            return [self._about(batch, Message.NO_SUCH_BATCH)]
        return [str(applied)]

    def remove_inoculations(self, line):
        """Delete a user's inoculations, narrowed by date and batch if given."""
        space = line.find(" ")
        if space < 0:
            return [self._say(Message.INVALID_INPUT)]
        try:
            name, rest = extract_name(line[space + 1:])
        except ValueError:
            return [self._say(Message.INVALID_INPUT)]
        if not self.inoculations.has_user(name):
            return [self._about(name, Message.NO_SUCH_USER)]

        match = _REMOVE_FIELDS.match(rest)
        groups = match.groups() if match else ()
        filled = sum(group is not None for group in groups)

        if filled >= 3:
            day, month, year, batch = groups
            date = Date(int(year), int(month), int(day))
        if filled == 3:
            if self.current_date < date or not date.is_valid():
                return [self._say(Message.INVALID_DATE)]
            count = self.inoculations.remove_by_name_and_date(name, date)
        elif filled == 4:
            try:
                count = self.inoculations.remove_by_name_batch_and_date(
                    name, batch, date
                )
            except KeyError:
                return [self._about(batch, Message.NO_SUCH_BATCH)]
        else:
            count = self.inoculations.remove_by_name(name)
        return [str(count)]


def run(lines, language=Language.ENGLISH):
    """Execute command lines in order, yielding output until 'q'."""
    system = VaccineSystem(language)
    for line in lines:
        yield from system.execute(line)
        if not system.running:
            return


def main(argv=None):
    """Read commands from standard input; 'pt' selects Portuguese output."""
    args = sys.argv[1:] if argv is None else argv
    language = Language.PORTUGUESE if args and args[0] == "pt" else Language.ENGLISH
    for output in run(sys.stdin, language):
        print(output)
    return 0