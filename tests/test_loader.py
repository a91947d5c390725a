"""
Tests for the TransactionLoader class.
"""

import json

import pytest

from loader import TransactionLoader


@pytest.fixture
def loader():
    return TransactionLoader()


@pytest.fixture
def ledger_records():
    """Records in the ledger document form."""
    return [
        {"transaction_id": "1", "transaction_type": "debit", "transaction_amount": "75.50",
         "transaction_date": "2019-01-15", "merchant_name": "SuperMart",
         "transaction_description": "Weekly groceries"},
        {"transaction_id": "2", "transaction_type": "credit", "transaction_amount": "1200.00",
         "transaction_date": "2019-01-31", "merchant_name": "Employer Inc",
         "transaction_description": "Salary"},
    ]


def write_json(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_load_json_array(loader, ledger_records, tmp_path, capsys):
    """Test loading a JSON array of records."""
    path = write_json(tmp_path / "transactions.json", ledger_records)

    transactions = loader.load(path)

    assert [t.id for t in transactions] == ["1", "2"]
    assert transactions[0].amount == pytest.approx(75.5)
    assert transactions[1].merchant == "Employer Inc"

    out = capsys.readouterr().out
    assert "Loading transactions.json..." in out
    assert "Found 2 transactions" in out


def test_load_json_wrapped_document(loader, ledger_records, tmp_path):
    path = write_json(tmp_path / "ledger.json", {"transactions": ledger_records})
    assert len(loader.load(path)) == 2


def test_load_json_rejects_non_list(loader, tmp_path):
    path = write_json(tmp_path / "ledger.json", {"records": []})
    with pytest.raises(ValueError, match="expected a list"):
        loader.load(path)


def test_load_json_malformed_document(loader, tmp_path):
    path = tmp_path / "ledger.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        loader.load(path)


def test_strict_loading_fails_on_invalid_record(loader, ledger_records, tmp_path):
    """Test that a malformed amount stops the load with its position."""
    ledger_records[1]["transaction_amount"] = "twelve"
    path = write_json(tmp_path / "ledger.json", ledger_records)

    with pytest.raises(ValueError, match="invalid record #2"):
        loader.load(path)


def test_non_strict_loading_skips_invalid_record(ledger_records, tmp_path, capsys):
    """Test that non-strict mode warns and keeps the valid records."""
    ledger_records[0]["transaction_date"] = "someday"
    path = write_json(tmp_path / "ledger.json", ledger_records)

    transactions = TransactionLoader(strict=False).load(path)

    assert [t.id for t in transactions] == ["2"]
    assert "Warning: Skipping invalid record #1" in capsys.readouterr().out


def test_load_csv(loader, tmp_path):
    """Test loading a CSV ledger with a header row."""
    path = tmp_path / "ledger.CSV"
    path.write_text(
        "id,type,amount,date,merchant,description\n"
        "1,debit,\"$1,050.00\",2021-03-01,A,Laptop\n"
        "2,credit,30.00,2021-03-15,B,\n",
        encoding="utf-8",
    )

    transactions = loader.load(path)

    assert [t.id for t in transactions] == ["1", "2"]
    assert transactions[0].amount == pytest.approx(1050.0)
    assert transactions[1].description == ""


def test_load_csv_blank_required_cell(loader, tmp_path):
    path = tmp_path / "ledger.csv"
    path.write_text("id,type,amount,date\n1,debit,,2021-03-01\n", encoding="utf-8")

    with pytest.raises(ValueError, match="amount"):
        loader.load(path)


def test_load_unsupported_format(loader, tmp_path):
    path = tmp_path / "ledger.xml"
    path.write_text("<ledger/>", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported ledger format"):
        loader.load(path)


def test_load_missing_file(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load(tmp_path / "missing.json")
