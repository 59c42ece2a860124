import logging

import streamlit as st

from telemedcart.infrastructure.config import Settings
from telemedcart.presentation.admin_panel import render_admin_panel
from telemedcart.presentation.appointments import render_appointments, render_book_appointment
from telemedcart.presentation.auth_screens import logout, show_auth_screen
from telemedcart.presentation.dashboard import render_dashboard
from telemedcart.presentation.medical_history import render_medical_history
from telemedcart.presentation.state import current_user
from telemedcart.presentation.symptom_checker import render_symptom_checker
from telemedcart.presentation.video_consult import render_video_consult


logger = logging.getLogger(__name__)


PAGES = {
    "Dashboard": render_dashboard,
    "Symptom Checker": render_symptom_checker,
    "Book Appointment": render_book_appointment,
    "Appointments": render_appointments,
    "Medical History": render_medical_history,
    "Video Consult": render_video_consult,
    "Admin Panel": render_admin_panel,
}

ROLE_PAGES = {
    "patient": ["Dashboard", "Symptom Checker", "Book Appointment", "Appointments", "Medical History", "Video Consult"],
    "doctor": ["Dashboard", "Appointments", "Video Consult"],
    "admin": ["Admin Panel", "Appointments"],
}


def pages_for(role: str) -> list:
    return ROLE_PAGES.get(role, ["Dashboard"])


def _render_sidebar(user) -> str:
    st.sidebar.title("🏥 TeleMedCart")
    st.sidebar.caption(f"Signed in as **{user.name}** ({user.role})")

    pages = pages_for(user.role)
    if st.session_state.get("nav_page") not in pages:
        st.session_state.nav_page = pages[0]
    page = st.sidebar.radio("Navigate", pages, key="nav_page")

    st.sidebar.divider()
    if st.sidebar.button("🚪 Sign out", use_container_width=True):
        logout()
    return page


def main():
    settings = Settings()
    logging.basicConfig(level=settings.log_level)

    st.set_page_config(
        page_title=settings.app_name,
        page_icon="🏥",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    if not show_auth_screen():
        st.stop()

    user = current_user()
    page = _render_sidebar(user)
    try:
        PAGES[page]()
    except Exception as e:
        logger.exception("Page %s failed: %s", page, e)
        st.error("❌ Something went wrong. Please try again.")


if __name__ == "__main__":
    main()
