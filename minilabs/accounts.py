"""Fixed-slot account records kept in a binary file, with an interactive menu."""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

MAX_ACCOUNTS = 100
NAME_LEN = 15
SURNAME_LEN = 20
INPUT_WIDTH = 15

_RECORD = struct.Struct(f"<i{NAME_LEN}s{SURNAME_LEN}sxd")
RECORD_SIZE = _RECORD.size


@dataclass
class ClientRecord:
    id: int = 0
    name: str = ""
    surname: str = ""
    balance: float = 0.0


def _pack(record: ClientRecord) -> bytes:
    return _RECORD.pack(
        record.id,
        record.name.encode("utf-8")[:NAME_LEN],
        record.surname.encode("utf-8")[:SURNAME_LEN],
        record.balance,
    )


def _text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _unpack(data: bytes) -> ClientRecord:
    ident, name, surname, balance = _RECORD.unpack(data)
    return ClientRecord(ident, _text(name), _text(surname), balance)


def _check_range(account: int) -> None:
    if not 1 <= account <= MAX_ACCOUNTS:
        raise ValueError(f"account number must be 1-{MAX_ACCOUNTS}")


class AccountStore:
    """A file of ``MAX_ACCOUNTS`` fixed-size slots, one per account number."""

    def __init__(self, path: str | Path) -> None:
        try:
            self._file = open(path, "r+b")
        except FileNotFoundError:
            self._file = open(path, "w+b")
        self._file.seek(0, 2)
        if self._file.tell() == 0:
            empty = _pack(ClientRecord())
            self._file.write(empty * MAX_ACCOUNTS)
            self._file.flush()

    def __enter__(self) -> AccountStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _read(self, account: int) -> ClientRecord:
        self._file.seek((account - 1) * RECORD_SIZE)
        data = self._file.read(RECORD_SIZE)
        if len(data) < RECORD_SIZE:
            raise OSError("File could not be read.")
        return _unpack(data)

    def _write(self, account: int, record: ClientRecord) -> None:
        self._file.seek((account - 1) * RECORD_SIZE)
        self._file.write(_pack(record))
        self._file.flush()

    def create(self, account: int, name: str, surname: str) -> ClientRecord:
        """Open a new account with a zero balance."""
        _check_range(account)
        if self._read(account).id != 0:
            raise ValueError("Selected account id already used.")
        record = ClientRecord(account, name[:INPUT_WIDTH], surname[:INPUT_WIDTH], 0.0)
        self._write(account, record)
        return record

    def delete(self, account: int) -> None:
        """Blank the account's slot."""
        _check_range(account)
        self._write(account, ClientRecord())

    def deposit(self, account: int, amount: float) -> ClientRecord:
        """Add ``amount`` to an existing account's balance."""
        _check_range(account)
        record = self._read(account)
        if record.id == 0:
            raise ValueError("Incorrect account number")
        record.balance += amount
        self._write(account, record)
        return record

    def get(self, account: int) -> ClientRecord | None:
        """Return the account's record, or None if the slot is empty."""
        _check_range(account)
        record = self._read(account)
        return record if record.id != 0 else None

    def __iter__(self) -> Iterator[ClientRecord]:
        self._file.seek(0)
        while len(data := self._file.read(RECORD_SIZE)) == RECORD_SIZE:
            record = _unpack(data)
            if record.id != 0:
                yield record

    def write_listing(self, path: str | Path) -> None:
        """Write a tab-separated table of all open accounts."""
        with open(path, "w", encoding="utf-8") as listing:
            listing.write(f"{'Account':<10}\t{'Name':<17}\t{'Surname':<22}\tBalance\n")
            for record in self:
                listing.write(
                    f"{record.id:<10}\t{record.name:<17}\t"
                    f"{record.surname:<22}\t{record.balance:.3f}\n"
                )

    def close(self) -> None:
        self._file.close()


_MENU = (
    "Select an option:\n"
    "1 - Create a new account.\n"
    "2 - Delete an account.\n"
    "3 - Update an account.\n"
    "4 - List all accounts.\n"
    "5 - Exit\n"
)


class _Console:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdout = stdout
        self._words = (word for line in stdin for word in line.split())

    def say(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def word(self, prompt: str = "") -> str:
        self.say(prompt)
        try:
            return next(self._words)
        except StopIteration:
            raise EOFError from None

    def number(self, prompt: str = "") -> int:
        try:
            return int(self.word(prompt))
        except ValueError:
            return 0

    def account(self, prompt: str) -> int:
        value = self.number(prompt)
        while not 1 <= value <= MAX_ACCOUNTS:
            self.say("Select a correct number.\n")
            value = self.number(prompt)
        return value

    def amount(self, prompt: str) -> float:
        try:
            return float(self.word(prompt))
        except ValueError:
            return 0.0


def _session(store: AccountStore, listing: str, console: _Console) -> None:
    while True:
        console.say(_MENU)
        choice = console.number()
        while not 1 <= choice <= 5:
            console.say("Select a correct option.\n")
            console.say(_MENU)
            choice = console.number()
        if choice == 5:
            return
        if choice == 1:
            account = console.account(f"Select account number (1-{MAX_ACCOUNTS}): ")
            if store.get(account) is not None:
                console.say("Selected account id already used.\n")
                continue
            name = console.word("Client name: ")
            surname = console.word("Client surname: ")
            store.create(account, name, surname)
        elif choice == 2:
            store.delete(console.account(f"Select account number to delete (1-{MAX_ACCOUNTS}): "))
        elif choice == 3:
            account = console.account(f"Select account number to update (1-{MAX_ACCOUNTS}): ")
            if store.get(account) is None:
                console.say("Incorrect account number\n")
                continue
            store.deposit(account, console.amount("Select a balance to add: "))
        else:
            try:
                store.write_listing(listing)
            except OSError:
                console.say("Unable to open file .txt\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on ``[data file [listing file]]``."""
    args = sys.argv[1:] if argv is None else argv
    data_path = args[0] if args else "Data.dat"
    listing = args[1] if len(args) > 1 else "List.txt"
    try:
        store = AccountStore(data_path)
    except OSError:
        print("Unable to open file .dat")
        return 1
    console = _Console(sys.stdin, sys.stdout)
    with store:
        try:
            _session(store, listing, console)
        except EOFError:
            pass
    return 0