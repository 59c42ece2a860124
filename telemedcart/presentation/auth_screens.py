"""Authentication screens for login and registration."""
import logging
import time

import streamlit as st

from telemedcart.infrastructure.auth.validators import (
    passwords_match,
    validate_email,
    validate_name,
    validate_password,
    validate_role,
)
from telemedcart.presentation.state import get_services


logger = logging.getLogger(__name__)

SESSION_KEYS = ("symptom_chat", "video_session", "video_appointment_id", "nav_page")


def _sign_in(user) -> None:
    services = get_services()
    st.session_state.authenticated = True
    st.session_state.user_data = user
    st.session_state.token = services.tokens.issue(user)


def show_login_screen() -> bool:
    """
    Display login screen.

    Returns:
        True if user successfully logged in, False otherwise
    """
    st.markdown("# 🔐 Sign in to TeleMedCart")
    st.caption("Demo accounts: patient@demo.com, doctor@demo.com, admin@demo.com / password123")

    with st.form("login_form"):
        email = st.text_input("Email", placeholder="your.email@example.com")
        password = st.text_input("Password", type="password", placeholder="Enter your password")

        col1, col2 = st.columns([1, 1])
        with col1:
            submit = st.form_submit_button("Sign in", use_container_width=True)
        with col2:
            register_btn = st.form_submit_button("Need an account? Register", use_container_width=True)

        if register_btn:
            st.session_state.auth_mode = "register"
            st.rerun()

        if submit:
            if not email or not password:
                st.error("❌ Please enter both email and password")
                return False

            email_valid, email_error = validate_email(email)
            if not email_valid:
                st.error(f"❌ {email_error}")
                return False

            success, user = get_services().users.authenticate_user(email, password)
            if not success:
                st.error("❌ Invalid credentials")
                return False

            _sign_in(user)
            st.success(f"✅ Welcome back, {user.name}!")
            st.rerun()
            return True

    return False


def show_register_screen() -> bool:
    """
    Display registration screen.

    Returns:
        True if user successfully registered, False otherwise
    """
    st.markdown("# ✍️ Create your account")

    with st.form("register_form"):
        name = st.text_input("Full Name", placeholder="Jane Doe")
        email = st.text_input("Email", placeholder="your.email@example.com")
        role = st.selectbox("I am a", ["patient", "doctor"], format_func=str.title)
        specialization = st.text_input("Specialization (doctors only)", placeholder="Internal Medicine")
        password = st.text_input("Password", type="password")
        confirm_password = st.text_input("Confirm Password", type="password")

        st.caption("Password must be at least 8 characters and include a letter and a number.")

        col1, col2 = st.columns([1, 1])
        with col1:
            submit = st.form_submit_button("Register", use_container_width=True)
        with col2:
            login_btn = st.form_submit_button("Already have an account? Sign in", use_container_width=True)

        if login_btn:
            st.session_state.auth_mode = "login"
            st.rerun()

        if submit:
            errors = []
            for valid, error in (
                validate_name(name),
                validate_email(email),
                validate_role(role, specialization),
                validate_password(password),
            ):
                if not valid:
                    errors.append(error)

            if not errors:
                match_valid, match_error = passwords_match(password, confirm_password)
                if not match_valid:
                    errors.append(match_error)

            if errors:
                for error in errors:
                    st.error(f"❌ {error}")
                return False

            users = get_services().users
            success, message = users.register_user(
                name=name,
                email=email,
                password=password,
                role=role,
                specialization=specialization,
            )
            if not success:
                st.error(f"❌ {message}")
                return False

            # registration signs the user straight in, like the login flow
            _, user = users.authenticate_user(email, password)
            _sign_in(user)
            st.success(f"✅ {message}!")
            time.sleep(1)
            st.rerun()
            return True

    return False


def _session_is_valid() -> bool:
    claims = get_services().tokens.verify(st.session_state.get("token"))
    user = st.session_state.get("user_data")
    return bool(claims and user is not None and claims.get("id") == user.id)


def show_auth_screen() -> bool:
    """
    Display appropriate authentication screen based on session state.

    Returns:
        True if user is authenticated, False otherwise
    """
    if "auth_mode" not in st.session_state:
        st.session_state.auth_mode = "login"

    if st.session_state.get("authenticated", False):
        if _session_is_valid():
            return True
        logger.info("Session token invalid or expired; signing out")
        _clear_session()
        st.warning("Your session has expired. Please sign in again.")

    if st.session_state.auth_mode == "register":
        return show_register_screen()
    return show_login_screen()


def _clear_session() -> None:
    st.session_state.authenticated = False
    st.session_state.user_data = None
    st.session_state.token = None
    st.session_state.auth_mode = "login"
    for key in SESSION_KEYS:
        if key in st.session_state:
            del st.session_state[key]


def logout():
    """Logout current user."""
    _clear_session()
    st.rerun()
