"""
Tests for identifier generation
Run with: pytest tests/test_id_generator.py -v
"""

import logging
import string

import pytest
from igaming.core.errors import ExhaustedAttemptsError, InvalidInputError
from igaming.services.id_generator import ALPHABET, IDGenerator


@pytest.fixture
def generator(monkeypatch):
    monkeypatch.delenv("ID_MAX_ATTEMPTS", raising=False)
    return IDGenerator(seed=2024)


class TestUniqueId:

    def test_alphabet(self):
        assert len(ALPHABET) == 62

    def test_default_shape(self, generator):
        uid = generator.generate_unique_id()
        assert len(uid) == 8
        assert set(uid) <= set(string.digits + string.ascii_uppercase)

    def test_prefix_and_length(self, generator):
        uid = generator.generate_unique_id(12, prefix="AFF-")
        assert uid.startswith("AFF-")
        assert len(uid) == 16

    def test_lowercase_kept(self, generator):
        ids = "".join(generator.generate_unique_id(32, uppercase=False) for _ in range(20))
        assert any(c in string.ascii_lowercase for c in ids)

    def test_seeded_reproducible(self):
        assert IDGenerator(seed=1).generate_unique_id() == IDGenerator(seed=1).generate_unique_id()


class TestHashId:

    def test_shape(self, generator):
        uid = generator.generate_from_hash()
        assert len(uid) == 8
        assert set(uid) <= set("0123456789ABCDEF")

    def test_prefix(self, generator):
        assert generator.generate_from_hash(6, "TX").startswith("TX")

    def test_length_capped_at_digest(self, generator):
        assert len(generator.generate_from_hash(64)) == 32


class TestNumericId:

    def test_four_digits(self, generator):
        for _ in range(500):
            value = generator.generate_numeric_id(4)
            assert len(value) == 4
            assert 1000 <= int(value) <= 9999

    def test_single_digit_never_zero(self, generator):
        assert all(generator.generate_numeric_id(1) != "0" for _ in range(200))

    def test_long_ids(self, generator):
        value = generator.generate_numeric_id(30)
        assert len(value) == 30
        assert value[0] != "0"

    def test_prefix(self, generator):
        assert generator.generate_numeric_id(6, "N").startswith("N")

    def test_invalid_length(self, generator):
        with pytest.raises(InvalidInputError):
            generator.generate_numeric_id(0)


class TestUniqueIdWithCheck:
    """Retry loop around the host's existence check"""

    def test_returns_first_free(self, generator):
        seen = []

        def exists(candidate):
            seen.append(candidate)
            return len(seen) < 3

        uid = generator.generate_unique_id_with_check(exists)
        assert len(seen) == 3
        assert uid == seen[-1]

    def test_exhausts_attempts(self, generator):
        calls = []

        def always_taken(candidate):
            calls.append(candidate)
            return True

        with pytest.raises(ExhaustedAttemptsError) as excinfo:
            generator.generate_unique_id_with_check(always_taken, max_attempts=7)

        assert len(calls) == 7
        assert excinfo.value.attempts == 7

    def test_default_budget_is_hundred(self, generator):
        calls = []

        def always_taken(candidate):
            calls.append(candidate)
            return True

        with pytest.raises(ExhaustedAttemptsError):
            generator.generate_unique_id_with_check(always_taken)
        assert len(calls) == 100

    def test_exhaustion_logged(self, generator, caplog):
        with caplog.at_level(logging.WARNING, logger="igaming.services.id_generator"):
            with pytest.raises(ExhaustedAttemptsError):
                generator.generate_unique_id_with_check(lambda _: True, max_attempts=2)
        assert "after 2 attempts" in caplog.text

    def test_budget_from_environment(self, monkeypatch):
        monkeypatch.setenv("ID_MAX_ATTEMPTS", "5")
        assert IDGenerator(seed=1).max_attempts == 5

    def test_invalid_budget(self, monkeypatch):
        monkeypatch.setenv("ID_MAX_ATTEMPTS", "-3")
        with pytest.raises(ValueError):
            IDGenerator()

    def test_prefix_passed_through(self, generator):
        uid = generator.generate_unique_id_with_check(lambda _: False, length=6, prefix="REF")
        assert uid.startswith("REF")
        assert len(uid) == 9


class TestAttemptBudget:
    """An explicit budget is honoured, including zero"""

    def test_zero_budget_rejected_without_lookups(self, generator):
        calls = []

        def exists(candidate):
            calls.append(candidate)
            return True

        with pytest.raises(InvalidInputError):
            generator.generate_unique_id_with_check(exists, max_attempts=0)
        assert calls == []

    def test_negative_budget_rejected(self, generator):
        with pytest.raises(InvalidInputError):
            generator.generate_unique_id_with_check(lambda _: False, max_attempts=-1)

    def test_single_attempt(self, generator):
        calls = []

        def exists(candidate):
            calls.append(candidate)
            return True

        with pytest.raises(ExhaustedAttemptsError) as excinfo:
            generator.generate_unique_id_with_check(exists, max_attempts=1)
        assert len(calls) == 1
        assert excinfo.value.attempts == 1

    def test_constructor_zero_budget_rejected(self, monkeypatch):
        monkeypatch.delenv("ID_MAX_ATTEMPTS", raising=False)
        with pytest.raises(ValueError):
            IDGenerator(max_attempts=0)
