"""Form validation for registration and login."""
import re
from typing import Optional, Tuple


ROLES = ("patient", "doctor", "admin")

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'


def validate_email(email: str) -> Tuple[bool, str]:
    """
    Validate email format.

    Args:
        email: Email address to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not email or not email.strip():
        return False, "Email is required"

    email = email.strip().lower()

    if len(email) > 254:
        return False, "Email is too long"

    if not re.match(EMAIL_PATTERN, email):
        return False, "Invalid email format"

    local_part = email.rsplit('@', 1)[0]
    if '..' in email or local_part.startswith('.') or local_part.endswith('.'):
        return False, "Invalid email format"

    return True, ""


def validate_password(password: str) -> Tuple[bool, str]:
    """
    Validate password for new accounts.

    At least 8 characters with one letter and one number, so the demo
    style ``password123`` is accepted.
    """
    if not password:
        return False, "Password is required"

    if len(password) < 8:
        return False, "Password must be at least 8 characters long"

    if len(password) > 128:
        return False, "Password is too long (max 128 characters)"

    if not re.search(r'[A-Za-z]', password):
        return False, "Password must contain at least one letter"

    if not re.search(r'\d', password):
        return False, "Password must contain at least one number"

    return True, ""


def validate_name(name: str) -> Tuple[bool, str]:
    if not name or not name.strip():
        return False, "Full name is required"

    name = name.strip()
    if len(name) < 2:
        return False, "Full name must be at least 2 characters long"
    if len(name) > 100:
        return False, "Full name is too long (max 100 characters)"

    # "Dr. Jane O'Neil-Smith"
    if not re.match(r"^[a-zA-Z\s\-'.]+$", name):
        return False, "Full name can only contain letters, spaces, dots, hyphens, and apostrophes"

    return True, ""


def validate_role(role: str, specialization: Optional[str] = None) -> Tuple[bool, str]:
    if role not in ROLES:
        return False, f"Role must be one of: {', '.join(ROLES)}"
    if role == "doctor" and not (specialization and specialization.strip()):
        return False, "Specialization is required for doctors"
    return True, ""


def passwords_match(password: str, confirm_password: str) -> Tuple[bool, str]:
    if password != confirm_password:
        return False, "Passwords do not match"
    return True, ""
