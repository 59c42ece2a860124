import streamlit as st

from telemedcart.application.video import VideoConsultSession
from telemedcart.presentation.state import current_user, get_services


def _session() -> VideoConsultSession:
    if st.session_state.get("video_session") is None:
        st.session_state.video_session = VideoConsultSession(
            user=current_user(),
            room=get_services().video,
            appointment_id=st.session_state.get("video_appointment_id"),
        )
    return st.session_state.video_session


def render_video_consult():
    call = _session()
    st.markdown(f"# 🎥 {call.title}")

    if not call.is_connected:
        st.info("Waiting to connect to your consultation room...")
        if st.button("Connect", use_container_width=True):
            call.connect()
            st.rerun()
        return

    st.caption(f"⏱️ {call.duration()}")

    col1, col2, col3, col4 = st.columns(4)
    if col1.button("🎙️ Mute" if call.audio_on else "🔇 Unmute", use_container_width=True):
        call.toggle_audio()
        st.rerun()
    if col2.button("📷 Stop video" if call.video_on else "🚫 Start video", use_container_width=True):
        call.toggle_video()
        st.rerun()
    if col3.button("Initialize Jitsi Meet", use_container_width=True):
        call.start_room()
    if col4.button("📞 End call", type="primary", use_container_width=True):
        call.end()
        st.rerun()

    if call.room_options:
        st.caption("Video transport is simulated; the room would open with these options:")
        st.json(call.room_options)

    st.markdown("### Chat")
    for entry in call.chat_messages:
        st.markdown(f"**{entry['sender']}:** {entry['message']}")
    message = st.chat_input("Type a message...")
    if message:
        call.send_message(message)
        st.rerun()
