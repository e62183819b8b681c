# vaxbatch

A small command-driven system for tracking vaccine batches and the
inoculations given from them. It reads one command per line from standard
input and writes its replies to standard output, in English by default or in
Portuguese on request.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
vaxbatch          # replies in English
vaxbatch pt       # replies in Portuguese
```

The system starts on the date `01-01-2025` and holds at most 1000 batches.
It stops at the `q` command or at the end of input. Lines that start with any
other letter than those below are ignored. Dates are written `DD-MM-YYYY`.

## Commands

Each line starts with a one-letter command:

| Command | Form | Effect |
|---------|------|--------|
| `c` | `c <batch> <DD-MM-YYYY> <doses> <vaccine>` | Add a batch; prints the batch code. Batch codes are up to 20 characters of `0-9` and `A-F` and must not already be held; vaccine names are up to 50 characters with no whitespace; the expiry date must be a real date not before the current one; the dose count must not be negative. |
| `l` | `l [<vaccine> ...]` | List all batches, or those of each named vaccine, ordered by expiry date and then batch code. Each line shows name, batch, expiry, stock and doses applied. An unknown name prints `<vaccine>: no such vaccine`. |
| `a` | `a <user> <vaccine>` | Give a user one dose from the first batch, in listing order, of that vaccine that has stock and expires after the current date; prints the batch used. A user cannot get the same vaccine twice on one day. Names with spaces go in double quotes. |
| `t` | `t [<DD-MM-YYYY>]` | Show the current date, or set it to a later (or the same) valid date. |
| `u` | `u [<user>]` | List all inoculations in the order given, or those of one user. |
| `r` | `r <batch>` | Remove a batch; prints the doses applied from it. A batch already used is kept with its stock set to zero. |
| `d` | `d <user> [<DD-MM-YYYY> [<batch>]]` | Delete a user's inoculation records: all of them, those of one date (which must be valid and not after the current date), or those of one date and batch (the batch must appear in some inoculation). Prints the number removed. |
| `q` | `q` | Quit. |

Errors are reported as a single line, for example `invalid batch`,
`no stock`, `already vaccinated` or `<user>: no such user`, and leave the
state unchanged.

## Example

```
$ printf 'c A1 31-12-2025 10 flu\na "Ana Silva" flu\nu\nq\n' | vaxbatch
A1
A1
Ana Silva A1 01-01-2025
```

## Use from Python

```python
from vaxbatch.cli import VaccineSystem, run
from vaxbatch.messages import Language

system = VaccineSystem(Language.ENGLISH)
system.execute("c A1 31-12-2025 10 flu\n")   # returns ["A1"]
system.execute("a ana flu\n")                # returns ["A1"]

for line in run(["c B2 30-06-2025 5 mmr\n", "l\n"], Language.PORTUGUESE):
    print(line)
```

`VaccineSystem.execute` returns the lines a command prints as a list;
`run` yields the output of a sequence of command lines until `q`.

The building blocks are available on their own:

- `vaxbatch.dates`: `Date`, `parse_date`, `is_leap_year`
- `vaxbatch.vaccines`: `Vaccine`, `VaccineStock`, `is_valid_batch`, `is_valid_name`
- `vaxbatch.inoculations`: `Inoculation`, `InoculationRegistry`, `extract_name`
- `vaxbatch.messages`: `Language`, `Message`

## What it does not do

All state lives in memory for the length of one run: batches and
inoculations are not saved anywhere, and nothing is loaded at start-up.