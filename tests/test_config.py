import pytest
from pydantic import ValidationError

from cartesian import MAX_ARITY, ProductConfig


class TestProductConfig:
    """Validation of construction settings."""

    def test_defaults(self):
        config = ProductConfig()
        assert config.max_arity == MAX_ARITY
        assert config.buffer_iterators is False

    @pytest.mark.parametrize("max_arity", [0, MAX_ARITY + 1])
    def test_max_arity_bounds(self, max_arity):
        with pytest.raises(ValidationError):
            ProductConfig(max_arity=max_arity)


class TestConfigFromEnv:
    """CARTESIAN_* environment variables."""

    def test_unset_keeps_defaults(self, monkeypatch):
        monkeypatch.delenv("CARTESIAN_MAX_ARITY", raising=False)
        monkeypatch.delenv("CARTESIAN_BUFFER_ITERATORS", raising=False)
        assert ProductConfig.from_env() == ProductConfig()

    def test_reads_values(self, monkeypatch):
        monkeypatch.setenv("CARTESIAN_MAX_ARITY", "4")
        monkeypatch.setenv("CARTESIAN_BUFFER_ITERATORS", "true")
        config = ProductConfig.from_env()
        assert config.max_arity == 4
        assert config.buffer_iterators is True

    @pytest.mark.parametrize("value", ["abc", "27", "0"])
    def test_invalid_max_arity(self, monkeypatch, value):
        monkeypatch.setenv("CARTESIAN_MAX_ARITY", value)
        with pytest.raises(ValidationError):
            ProductConfig.from_env()
