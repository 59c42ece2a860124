"""Integration tests for authentication screens."""
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock, patch

import pytest

from telemedcart.infrastructure.config import Settings
from telemedcart.infrastructure.container import build_services


class MockSessionState(dict):
    """Mock Streamlit session state."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.__dict__ = self


@pytest.fixture(scope="module")
def services():
    return build_services(Settings())


@pytest.fixture
def mock_streamlit(services):
    """Mock streamlit module and the shared services."""
    with patch('telemedcart.presentation.auth_screens.st') as mock_st, \
            patch('telemedcart.presentation.auth_screens.get_services', return_value=services):
        mock_st.session_state = MockSessionState()
        yield mock_st


class TestAuthScreens:
    """Tests for the auth screen session handling."""

    def test_sign_in_stores_token(self, mock_streamlit, services):
        from telemedcart.presentation.auth_screens import _sign_in

        _, user = services.users.authenticate_user("patient@demo.com", "password123")
        _sign_in(user)

        state = mock_streamlit.session_state
        assert state['authenticated'] is True
        assert state['user_data'] == user
        assert services.tokens.verify(state['token'])["id"] == user.id

    def test_session_state_initialized(self, mock_streamlit):
        from telemedcart.presentation.auth_screens import show_auth_screen

        with patch('telemedcart.presentation.auth_screens.show_login_screen', return_value=False):
            assert show_auth_screen() is False

        assert mock_streamlit.session_state.get('auth_mode') == 'login'

    def test_register_mode_shows_register_screen(self, mock_streamlit):
        from telemedcart.presentation.auth_screens import show_auth_screen

        mock_streamlit.session_state['auth_mode'] = 'register'
        with patch('telemedcart.presentation.auth_screens.show_register_screen', return_value=False) as register:
            show_auth_screen()
        register.assert_called_once()

    def test_authenticated_user_bypass(self, mock_streamlit, services):
        from telemedcart.presentation.auth_screens import show_auth_screen

        user = services.users.get_user("doctor@demo.com")
        mock_streamlit.session_state.update({
            'authenticated': True,
            'user_data': user,
            'token': services.tokens.issue(user),
        })

        assert show_auth_screen() is True

    def test_expired_session_signs_out(self, mock_streamlit, services):
        from telemedcart.presentation.auth_screens import show_auth_screen

        user = services.users.get_user("doctor@demo.com")
        stale = services.tokens.issue(user, now=datetime.now(timezone.utc) - timedelta(days=2))
        mock_streamlit.session_state.update({
            'authenticated': True,
            'user_data': user,
            'token': stale,
            'symptom_chat': Mock(),
        })

        with patch('telemedcart.presentation.auth_screens.show_login_screen', return_value=False):
            assert show_auth_screen() is False

        state = mock_streamlit.session_state
        assert not state['authenticated']
        assert state['user_data'] is None
        assert 'symptom_chat' not in state
        mock_streamlit.warning.assert_called_once()

    def test_token_for_other_user_rejected(self, mock_streamlit, services):
        from telemedcart.presentation.auth_screens import show_auth_screen

        patient = services.users.get_user("patient@demo.com")
        admin = services.users.get_user("admin@demo.com")
        mock_streamlit.session_state.update({
            'authenticated': True,
            'user_data': admin,
            'token': services.tokens.issue(patient),
        })

        with patch('telemedcart.presentation.auth_screens.show_login_screen', return_value=False):
            assert show_auth_screen() is False

    def test_logout_functionality(self, mock_streamlit):
        from telemedcart.presentation.auth_screens import logout

        mock_streamlit.session_state.update({
            'authenticated': True,
            'user_data': Mock(),
            'token': 'token',
            'auth_mode': 'register',
            'symptom_chat': Mock(),
            'video_session': Mock(),
            'video_appointment_id': 'abc',
            'nav_page': 'Dashboard',
        })
        mock_streamlit.rerun = Mock(side_effect=Exception("rerun called"))

        with pytest.raises(Exception, match="rerun called"):
            logout()

        state = mock_streamlit.session_state
        assert not state.get('authenticated', False)
        assert state.get('user_data') is None
        assert state.get('token') is None
        assert state.get('auth_mode') == 'login'
        for key in ('symptom_chat', 'video_session', 'video_appointment_id', 'nav_page'):
            assert key not in state
