"""Tests for the persisted processed-code set."""

import pytest

from pickup_monitor.core import STORAGE_KEY, CodeRecord, ProcessedCodeSet


def test_code_record_parse() -> None:
    """Test exact and legacy entries parse to the same code."""
    assert CodeRecord.parse("1234") == CodeRecord(code="1234")
    assert CodeRecord.parse("1234|南门驿站") == CodeRecord(code="1234", legacy_suffix="南门驿站")


def test_load_empty_store(store) -> None:
    """Test cold start yields an empty set without writing."""
    codes = ProcessedCodeSet.load(store)
    
    assert len(codes) == 0
    assert not store.writes


def test_load_normalizes_legacy_entries(store) -> None:
    """Test legacy `code|location` entries are looked up by code."""
    store.data[STORAGE_KEY] = ["1234|南门驿站", "5678", "1234"]
    
    codes = ProcessedCodeSet.load(store)
    
    assert "1234" in codes
    assert "5678" in codes
    assert "南门驿站" not in codes
    assert len(codes) == 2
    assert codes.legacy_count == 1


def test_lookup_is_exact_code(store) -> None:
    """Test codes sharing a prefix are not confused."""
    store.data[STORAGE_KEY] = ["12|北门", "1234"]
    
    codes = ProcessedCodeSet.load(store)
    
    assert "12" in codes
    assert "123" not in codes
    assert "1" not in codes


def test_add_and_persist(store) -> None:
    """Test adding codes and writing them in exact-key form."""
    store.data[STORAGE_KEY] = ["1234|南门驿站"]
    codes = ProcessedCodeSet.load(store)
    
    assert codes.add("5678") is True
    assert codes.add("5678") is False
    assert codes.add("1234") is False
    
    codes.persist()
    
    assert store.data[STORAGE_KEY] == ["1234", "5678"]
    assert len(store.writes) == 1


def test_load_rejects_non_list(store) -> None:
    """Test malformed stored value is reported."""
    store.data[STORAGE_KEY] = {"1234": True}
    
    with pytest.raises(ValueError, match="Expected a list"):
        ProcessedCodeSet.load(store)
