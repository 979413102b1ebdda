import io

import pytest

from minilabs.accounts import MAX_ACCOUNTS, RECORD_SIZE, AccountStore, ClientRecord, main


@pytest.fixture
def store(tmp_path):
    with AccountStore(tmp_path / "data.dat") as opened:
        yield opened


def test_new_file_is_initialised_with_empty_slots(tmp_path):
    path = tmp_path / "data.dat"
    AccountStore(path).close()
    assert RECORD_SIZE == 48
    assert path.stat().st_size == MAX_ACCOUNTS * RECORD_SIZE


def test_create_then_get(store):
    created = store.create(7, "Ada", "Lovelace")
    assert created == ClientRecord(7, "Ada", "Lovelace", 0.0)
    assert store.get(7) == created


def test_empty_slot_is_none(store):
    assert store.get(1) is None


def test_create_duplicate_raises(store):
    store.create(3, "Ada", "Lovelace")
    with pytest.raises(ValueError, match="already used"):
        store.create(3, "Grace", "Hopper")


@pytest.mark.parametrize("account", [0, MAX_ACCOUNTS + 1, -5])
def test_out_of_range_rejected(store, account):
    with pytest.raises(ValueError):
        store.create(account, "A", "B")
    with pytest.raises(ValueError):
        store.get(account)


def test_delete_empties_slot(store):
    store.create(5, "Ada", "Lovelace")
    store.delete(5)
    assert store.get(5) is None
    store.create(5, "Grace", "Hopper")
    assert store.get(5).name == "Grace"


def test_deposit_accumulates(store):
    store.create(9, "Ada", "Lovelace")
    store.deposit(9, 1.5)
    record = store.deposit(9, 2.25)
    assert record.balance == 1.5 + 2.25
    assert store.get(9).balance == record.balance


def test_deposit_to_missing_account_raises(store):
    with pytest.raises(ValueError, match="Incorrect account number"):
        store.deposit(4, 10.0)


def test_names_truncated_to_input_width(store):
    record = store.create(1, "A" * 30, "B" * 30)
    assert record.name == "A" * 15
    assert store.get(1).surname == "B" * 15


def test_records_persist_across_reopen(tmp_path):
    path = tmp_path / "data.dat"
    with AccountStore(path) as first:
        first.create(MAX_ACCOUNTS, "Ada", "Lovelace")
        first.deposit(MAX_ACCOUNTS, 4.0)
    with AccountStore(path) as second:
        assert second.get(MAX_ACCOUNTS) == ClientRecord(MAX_ACCOUNTS, "Ada", "Lovelace", 4.0)
    assert path.stat().st_size == MAX_ACCOUNTS * RECORD_SIZE


def test_write_listing(store, tmp_path):
    store.create(2, "Ada", "Lovelace")
    store.create(1, "Grace", "Hopper")
    out = tmp_path / "list.txt"
    store.write_listing(out)
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0].split() == ["Account", "Name", "Surname", "Balance"]
    assert len(lines) == 3
    assert lines[1].split() == ["1", "Grace", "Hopper", "0.000"]
    assert lines[2].split()[0] == "2"


def test_main_session(tmp_path, monkeypatch):
    data = tmp_path / "data.dat"
    listing = tmp_path / "list.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n7\nAda\nLovelace\n3\n7\n10.5\n4\n5\n"))
    assert main([str(data), str(listing)]) == 0
    assert "Ada" in listing.read_text(encoding="utf-8")
    with AccountStore(data) as reopened:
        assert reopened.get(7).balance == 10.5


def test_main_rejects_bad_option(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n5\n"))
    assert main([str(tmp_path / "data.dat"), str(tmp_path / "list.txt")]) == 0
    assert "Select a correct option." in capsys.readouterr().out


def test_main_update_missing_account(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0\n4\n"))
    assert main([str(tmp_path / "data.dat"), str(tmp_path / "list.txt")]) == 0
    out = capsys.readouterr().out
    assert "Select a correct number." in out
    assert "Incorrect account number" in out