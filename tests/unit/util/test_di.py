"""Unit tests for provider selection."""

import pytest

from resdir.util.di import (
    ClassifierProvider,
    PersistenceProvider,
    ProdClassifierProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from resdir.util.di.base import ProviderBase
from resdir.util.error import DependencyInjectionError
from tests.di import (
    MockClassifierProvider,
    MockPersistenceProvider,
    build_test_container,
)


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_selects_by_mock_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        mock = get_provider(PersistenceProvider, use_mock=True)
        assert mock is MockPersistenceProvider
        assert get_provider(ClassifierProvider) is ProdClassifierProvider
        assert get_provider(ClassifierProvider, use_mock=True) is MockClassifierProvider

    def test_missing_mock_raises(self):
        class ProdOnlyProvider(ProviderBase):
            __mock_component__ = "classifier"

        class RealOnly(ProdOnlyProvider):
            __is_mock__ = False

        with pytest.raises(DependencyInjectionError) as exc_info:
            get_provider(ProdOnlyProvider, use_mock=True)

        assert exc_info.value.component == "classifier"
        assert "No mock implementation" in str(exc_info.value)


class TestBuildTestContainer:
    """Tests for the test container builder."""

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"search_index"})
