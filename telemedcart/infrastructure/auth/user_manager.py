"""In-memory user accounts with bcrypt password hashing."""
import logging
import uuid
from datetime import datetime
from typing import Dict, List, Optional, Tuple

import bcrypt

from telemedcart.domain.models import PublicUser, User


logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
DEMO_PASSWORD = "password123"

DEMO_USERS = (
    {"id": "1", "name": "Demo Patient", "email": "patient@demo.com", "role": "patient"},
    {
        "id": "2",
        "name": "Dr. Demo Doctor",
        "email": "doctor@demo.com",
        "role": "doctor",
        "specialization": "Internal Medicine",
    },
    {"id": "3", "name": "Admin User", "email": "admin@demo.com", "role": "admin"},
)


class UserManager:
    """Manages user registration, authentication, and lookup."""

    def __init__(self, seed_demo_users: bool = True):
        """
        Initialize UserManager.

        Args:
            seed_demo_users: Create the patient, doctor and admin demo
                             accounts (password ``password123``).
        """
        self._users: Dict[str, User] = {}
        if seed_demo_users:
            self._seed_demo_users()

    def _seed_demo_users(self) -> None:
        hashed = self._hash_password(DEMO_PASSWORD)
        for record in DEMO_USERS:
            user = User(password_hash=hashed, created_at=datetime.now(), **record)
            self._users[user.email] = user
        logger.info("Seeded %d demo accounts", len(DEMO_USERS))

    def _hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    def _verify_password(self, password: str, hashed_password: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode('utf-8'),
                hashed_password.encode('utf-8')
            )
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False

    def email_exists(self, email: str) -> bool:
        return email.strip().lower() in self._users

    def register_user(
        self,
        name: str,
        email: str,
        password: str,
        role: str = "patient",
        specialization: Optional[str] = None,
    ) -> Tuple[bool, str]:
        """
        Register a new user.

        Returns:
            Tuple of (success, message)
        """
        email = email.strip().lower()

        if self.email_exists(email):
            return False, "Email already registered"

        specialization = specialization.strip() if specialization else None
        user = User(
            id=str(uuid.uuid4()),
            name=name.strip(),
            email=email,
            role=role,
            specialization=specialization if role == "doctor" else None,
            created_at=datetime.now(),
            password_hash=self._hash_password(password),
        )
        self._users[email] = user
        logger.info("Registered %s account %s", role, user.id)
        return True, "Registration successful"

    def authenticate_user(self, email: str, password: str) -> Tuple[bool, Optional[PublicUser]]:
        """
        Authenticate user with email and password.

        Returns:
            Tuple of (success, public user or None)
        """
        user = self._users.get(email.strip().lower())
        if user is None or not self._verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            return False, None
        return True, user.public()

    def get_user(self, email: str) -> Optional[PublicUser]:
        user = self._users.get(email.strip().lower())
        return user.public() if user else None

    def get_user_by_id(self, user_id: str) -> Optional[PublicUser]:
        for user in self._users.values():
            if user.id == user_id:
                return user.public()
        return None

    def list_users(self, role: Optional[str] = None) -> List[PublicUser]:
        return [
            user.public()
            for user in self._users.values()
            if role is None or user.role == role
        ]
