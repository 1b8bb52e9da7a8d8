import re
import pytest
from fastapi.testclient import TestClient
from order_tracker.auth import create_token
from order_tracker.exceptions import StoreFailure
from order_tracker.main import create_app

_CELL_RE = re.compile(r"^(?P<sheet>.+)!(?P<col>[A-Z]+)(?P<row>\d+)$")


class FakeSheetsClient:
    """In-memory stand-in for SheetsClient, one list of rows per sheet name."""

    def __init__(self, tables=None, fail=False):
        self.tables = {name: [list(r) for r in rows] for name, rows in (tables or {}).items()}
        self.fail = fail
        self.updates = []

    @staticmethod
    def _sheet(range_name):
        return range_name.split("!", 1)[0]

    def get_values(self, range_name):
        if self.fail:
            raise StoreFailure(f"Could not read {range_name}")
        return [list(r) for r in self.tables.get(self._sheet(range_name), [])]

    def append_values(self, range_name, rows):
        if self.fail:
            raise StoreFailure(f"Could not append to {range_name}")
        self.tables.setdefault(self._sheet(range_name), []).extend(list(r) for r in rows)

    def update_values(self, range_name, rows):
        if self.fail:
            raise StoreFailure(f"Could not update {range_name}")
        match = _CELL_RE.match(range_name)
        col = ord(match.group("col")) - ord("A")
        row_index = int(match.group("row")) - 1
        table = self.tables.setdefault(match.group("sheet"), [])
        while len(table) <= row_index:
            table.append([])
        row = table[row_index]
        while len(row) <= col:
            row.append("")
        row[col] = rows[0][0]
        self.updates.append((range_name, rows))


@pytest.fixture
def sheets():
    return FakeSheetsClient({
        "usuarios": [
            ["alice", "pw1", "packer"],
            ["bob", "pw2", "releaser"],
        ],
        "pedidos": [],
    })


@pytest.fixture
def client(sheets):
    with TestClient(create_app(sheets_client=sheets)) as c:
        yield c


@pytest.fixture
def packer_headers():
    return {"Authorization": create_token("alice", "packer")}


@pytest.fixture
def releaser_headers():
    return {"Authorization": create_token("bob", "releaser")}
