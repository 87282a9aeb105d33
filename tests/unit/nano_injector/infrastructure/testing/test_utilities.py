"""Unit tests for testing utilities."""

import pytest

from nano_injector.application.injector import Injector
from nano_injector.application.injectors_stack import INJECTORS_STACK
from nano_injector.application.provider import create_provider
from nano_injector.domain import Lifetime, NoBinderError
from nano_injector.infrastructure.testing.utilities import (
    MockScope,
    TestInjector,
    create_mock_injector,
)

EmailProvider = create_provider("Email")
DatabaseProvider = create_provider("Database")


class RealEmailService:
    pass


class MockEmailService:
    pass


@pytest.fixture
def production_injector():
    injector = Injector(name="production")
    injector.bind_provider(EmailProvider).to_constructor(RealEmailService).as_singleton()
    return injector


class TestTestInjector:
    """Test cases for TestInjector."""

    def test_falls_back_to_parent(self, production_injector):
        """Test that bindings that are not overridden come from the parent."""
        test_injector = TestInjector(production_injector)

        assert isinstance(test_injector.get_value(EmailProvider), RealEmailService)
        assert test_injector.parent is production_injector

    def test_without_parent(self):
        """Test an empty test injector."""
        test_injector = TestInjector()

        with pytest.raises(NoBinderError):
            test_injector.get_value(EmailProvider)

    def test_mock_value(self, production_injector):
        """Test overriding a provider with a mock instance."""
        test_injector = TestInjector(production_injector)
        mock_email = MockEmailService()

        test_injector.mock_value(EmailProvider, mock_email)

        assert test_injector.get_value(EmailProvider) is mock_email
        assert isinstance(production_injector.get_value(EmailProvider), RealEmailService)

    def test_mock_value_twice_does_not_report(self, production_injector):
        """Test that replacing a mock does not emit rebinding diagnostics."""
        messages = []
        test_injector = TestInjector(production_injector)
        test_injector._settings = test_injector._settings.model_copy(update={"logger": messages.append})

        test_injector.mock_value(EmailProvider, MockEmailService())
        test_injector.mock_value(EmailProvider, MockEmailService())

        assert messages == []

    def test_mock_factory(self):
        """Test that a mock factory is called on each resolution."""
        test_injector = TestInjector()
        test_injector.mock_factory(DatabaseProvider, lambda: object())

        assert test_injector.get_value(DatabaseProvider) is not test_injector.get_value(DatabaseProvider)

    def test_override_binding_singleton(self):
        """Test overriding with a singleton factory."""
        test_injector = TestInjector()
        test_injector.override_binding(DatabaseProvider, lambda i: object(), Lifetime.SINGLETON)

        assert test_injector.get_value(DatabaseProvider) is test_injector.get_value(DatabaseProvider)

    def test_override_binding_transient(self):
        """Test overriding with a transient factory."""
        test_injector = TestInjector()
        test_injector.override_binding(DatabaseProvider, lambda i: object(), Lifetime.TRANSIENT)

        assert test_injector.get_value(DatabaseProvider) is not test_injector.get_value(DatabaseProvider)

    def test_reset_overrides(self, production_injector):
        """Test that resetting restores the parent bindings."""
        test_injector = TestInjector(production_injector)
        test_injector.mock_value(EmailProvider, MockEmailService())

        test_injector.reset_overrides()

        assert isinstance(test_injector.get_value(EmailProvider), RealEmailService)

    def test_context_manager_activates(self, production_injector):
        """Test that providers called directly resolve through the test injector."""
        mock_email = MockEmailService()

        with TestInjector(production_injector) as test_injector:
            test_injector.mock_value(EmailProvider, mock_email)
            assert EmailProvider() is mock_email

        assert INJECTORS_STACK.is_active is False
        assert test_injector.is_bound(EmailProvider, recursive=False) is False

    def test_context_manager_cleans_up_on_exception(self, production_injector):
        """Test cleanup when the block raises."""
        with pytest.raises(RuntimeError):
            with TestInjector(production_injector) as test_injector:
                test_injector.mock_value(EmailProvider, MockEmailService())
                raise RuntimeError("test failure")

        assert INJECTORS_STACK.is_active is False
        assert isinstance(test_injector.get_value(EmailProvider), RealEmailService)


class TestCreateMockInjector:
    """Test cases for create_mock_injector."""

    def test_creates_injector_with_values(self):
        """Test pre-configured mock values."""
        mock_email = MockEmailService()
        mock_db = object()

        test_injector = create_mock_injector((EmailProvider, mock_email), (DatabaseProvider, mock_db))

        assert isinstance(test_injector, TestInjector)
        assert test_injector.get_value(EmailProvider) is mock_email
        assert test_injector.get_value(DatabaseProvider) is mock_db

    def test_creates_injector_with_parent(self, production_injector):
        """Test that a parent can be given."""
        test_injector = create_mock_injector((DatabaseProvider, "db"), parent=production_injector)

        assert test_injector.get_value(DatabaseProvider) == "db"
        assert isinstance(test_injector.get_value(EmailProvider), RealEmailService)


class TestMockScope:
    """Test cases for MockScope."""

    def test_yields_activated_child(self, production_injector):
        """Test that the child is active inside the block."""
        with MockScope(production_injector) as scoped:
            assert scoped.parent is production_injector
            assert INJECTORS_STACK.active_injector is scoped
            assert isinstance(EmailProvider(), RealEmailService)

        assert INJECTORS_STACK.is_active is False

    def test_bindings_stay_in_child(self, production_injector):
        """Test that bindings made in the scope do not leak to the parent."""
        with MockScope(production_injector) as scoped:
            scoped.bind_provider(DatabaseProvider).to_value("scoped db")
            assert DatabaseProvider() == "scoped db"

        assert production_injector.is_bound(DatabaseProvider) is False

    def test_restores_previous_injector(self, production_injector):
        """Test nesting inside another activation."""
        outer = Injector(name="outer")

        with INJECTORS_STACK.activated(outer):
            with MockScope(production_injector):
                pass
            assert INJECTORS_STACK.active_injector is outer
