import streamlit as st

from telemedcart.infrastructure.container import Services, build_services


@st.cache_resource
def get_services() -> Services:
    """Process-wide services shared by every browser session."""
    return build_services()


def current_user():
    return st.session_state.get("user_data")


def navigate(page: str, **updates) -> None:
    """Button callback: switch the sidebar page before the next rerun."""
    for key, value in updates.items():
        st.session_state[key] = value
    st.session_state.nav_page = page
