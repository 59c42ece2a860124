"""Unit tests for user manager."""
import pytest

from telemedcart.infrastructure.auth.user_manager import DEMO_PASSWORD, UserManager


@pytest.fixture
def manager():
    """Create an empty user manager."""
    return UserManager(seed_demo_users=False)


class TestUserManager:
    """Test UserManager functionality."""

    def test_initialization_empty(self, manager):
        assert manager.list_users() == []

    def test_demo_accounts_seeded(self):
        manager = UserManager()

        assert {u.role for u in manager.list_users()} == {"patient", "doctor", "admin"}
        doctor = manager.get_user("doctor@demo.com")
        assert doctor.specialization == "Internal Medicine"

        success, user = manager.authenticate_user("admin@demo.com", DEMO_PASSWORD)
        assert success
        assert user.role == "admin"

    def test_register_user_success(self, manager):
        success, message = manager.register_user(
            name="Jane Doe",
            email="Jane.Doe@Example.com",
            password="password123",
        )

        assert success
        assert "successful" in message.lower()

        user = manager.get_user("jane.doe@example.com")
        assert user.name == "Jane Doe"
        assert user.email == "jane.doe@example.com"
        assert user.role == "patient"
        assert user.specialization is None
        assert user.created_at is not None

    def test_register_doctor_keeps_specialization(self, manager):
        manager.register_user("Dr. Who", "who@example.com", "password123", role="doctor", specialization=" Cardiology ")
        assert manager.get_user("who@example.com").specialization == "Cardiology"

    def test_patient_specialization_dropped(self, manager):
        manager.register_user("Pat", "pat@example.com", "password123", role="patient", specialization="Cardiology")
        assert manager.get_user("pat@example.com").specialization is None

    def test_register_duplicate_email(self, manager):
        manager.register_user("Jane Doe", "jane@example.com", "password123")

        success, message = manager.register_user("Other", "JANE@EXAMPLE.COM", "password456")

        assert not success
        assert "already registered" in message.lower()

    def test_email_exists(self, manager):
        assert not manager.email_exists("jane@example.com")
        manager.register_user("Jane Doe", "jane@example.com", "password123")
        assert manager.email_exists(" Jane@Example.com ")

    def test_authenticate(self, manager):
        manager.register_user("Jane Doe", "jane@example.com", "password123")

        success, user = manager.authenticate_user("JANE@example.com", "password123")
        assert success
        assert user.email == "jane@example.com"
        assert "password_hash" not in user.model_dump()

        success, user = manager.authenticate_user("jane@example.com", "wrong-password1")
        assert not success
        assert user is None

    def test_authenticate_unknown_email(self, manager):
        assert manager.authenticate_user("nobody@example.com", "password123") == (False, None)

    def test_password_is_hashed(self, manager):
        manager.register_user("Jane Doe", "jane@example.com", "password123")

        stored = manager._users["jane@example.com"].password_hash
        assert stored != "password123"
        assert stored.startswith("$2b$")
        assert len(stored) == 60

    def test_lookup_by_id_and_role(self, manager):
        manager.register_user("Jane Doe", "jane@example.com", "password123")
        manager.register_user("Dr. Who", "who@example.com", "password123", role="doctor", specialization="GP")

        jane = manager.get_user("jane@example.com")
        assert manager.get_user_by_id(jane.id) == jane
        assert manager.get_user_by_id("missing") is None
        assert [u.email for u in manager.list_users(role="doctor")] == ["who@example.com"]
        assert manager.get_user("missing@example.com") is None
