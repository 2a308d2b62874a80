"""Flat-text account snapshots.

Each account is written as ``<id>;<phone>;<balance>|`` and records are
concatenated without any header::

    1;911;1000|2;912;0|

Backslash escapes ``\\``, ``;`` and ``|`` inside a field, so a phone that
contains a separator still decodes to the same value. Values without those
characters are written verbatim.
"""

import re
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

import structlog

from wallet_ledger.domain.exceptions import SnapshotFormatError
from wallet_ledger.domain.models import Account


logger = structlog.get_logger()

FIELD_SEPARATOR = ";"
RECORD_TERMINATOR = "|"
ESCAPE = "\\"
FIELDS_PER_RECORD = 3

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def escape_field(value: str) -> str:
    return (
        value.replace(ESCAPE, ESCAPE * 2)
        .replace(FIELD_SEPARATOR, ESCAPE + FIELD_SEPARATOR)
        .replace(RECORD_TERMINATOR, ESCAPE + RECORD_TERMINATOR)
    )


def encode_account(account: Account) -> str:
    fields = [str(account.id), escape_field(account.phone), str(account.balance)]
    return FIELD_SEPARATOR.join(fields) + RECORD_TERMINATOR


def encode_accounts(accounts: Iterable[Account]) -> str:
    return "".join(encode_account(account) for account in accounts)


def _split_records(content: str) -> list[list[str]]:
    records: list[list[str]] = []
    fields: list[str] = []
    buffer: list[str] = []
    escaped = False

    for char in content:
        if escaped:
            buffer.append(char)
            escaped = False
        elif char == ESCAPE:
            escaped = True
        elif char == FIELD_SEPARATOR:
            fields.append("".join(buffer))
            buffer = []
        elif char == RECORD_TERMINATOR:
            fields.append("".join(buffer))
            records.append(fields)
            fields = []
            buffer = []
        else:
            buffer.append(char)

    if escaped:
        raise SnapshotFormatError(len(records), "dangling escape character")

    # Text after the last terminator is dropped; only whitespace may be there.
    if fields or "".join(buffer).strip():
        raise SnapshotFormatError(len(records), "record is not terminated")

    return records


def _parse_int(value: str, name: str, index: int) -> int:
    if not _INTEGER_RE.fullmatch(value):
        raise SnapshotFormatError(index, f"{name} {value!r} is not an integer")
    try:
        return int(value)
    except ValueError as e:
        raise SnapshotFormatError(index, f"{name} is not a valid integer") from e


def decode_accounts(content: str) -> list[Account]:
    """Decode snapshot text into accounts, in record order.

    Raises SnapshotFormatError for the first malformed record. Nothing is
    returned for the records before it.
    """
    accounts: list[Account] = []
    for index, fields in enumerate(_split_records(content)):
        if len(fields) != FIELDS_PER_RECORD:
            raise SnapshotFormatError(index, f"expected {FIELDS_PER_RECORD} fields, got {len(fields)}")

        raw_id, phone, raw_balance = fields
        account_id = _parse_int(raw_id, "id", index)
        balance = _parse_int(raw_balance, "balance", index)
        if balance < 0:
            raise SnapshotFormatError(index, f"balance {balance} is negative")

        accounts.append(Account(id=account_id, phone=phone, balance=balance))
    return accounts


@contextmanager
def _open_snapshot(path: str | Path, mode: str, encoding: str) -> Iterator[TextIO]:
    file = open(path, mode, encoding=encoding, newline="")  # noqa: SIM115
    try:
        yield file
    finally:
        try:
            file.close()
        except OSError as e:
            logger.warning("snapshot_close_failed", path=str(path), error=str(e))


def write_snapshot(path: str | Path, accounts: Iterable[Account], encoding: str = "utf-8") -> int:
    """Write accounts to ``path``, replacing its contents.

    Returns the number of records written.
    """
    count = 0
    with _open_snapshot(path, "w", encoding) as file:
        for account in accounts:
            file.write(encode_account(account))
            count += 1
        file.flush()
    return count


def read_snapshot(path: str | Path, encoding: str = "utf-8") -> list[Account]:
    with _open_snapshot(path, "r", encoding) as file:
        content = file.read()
    return decode_accounts(content)
