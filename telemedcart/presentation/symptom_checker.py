import logging

import streamlit as st

from telemedcart.application.conversation import SymptomChatSession
from telemedcart.presentation.state import get_services, navigate


logger = logging.getLogger(__name__)

URGENCY_BADGES = {
    "high": "🔴 HIGH",
    "medium": "🟡 MEDIUM",
    "low": "🟢 LOW",
}

DISCLAIMER = (
    "⚕️ **DISCLAIMER:** This is NOT medical advice and NOT a diagnosis. "
    "If you experience emergency symptoms, seek immediate care (call local emergency number)."
)


def _chat() -> SymptomChatSession:
    if "symptom_chat" not in st.session_state:
        st.session_state.symptom_chat = SymptomChatSession(get_services().symptom_check)
    return st.session_state.symptom_chat


def _render_analysis(chat: SymptomChatSession):
    assessment = chat.last_assessment
    if assessment is None or not assessment.conditions:
        return

    st.sidebar.markdown("### Analysis")
    st.sidebar.markdown(f"**Urgency:** {URGENCY_BADGES[assessment.urgency]}")
    for condition in assessment.conditions:
        st.sidebar.markdown(f"**{condition.name.title()}** · {condition.severity}")
        st.sidebar.progress(condition.probability / 100, text=f"{condition.probability}% match")

    if assessment.urgency == "high":
        st.error("🚨 Your symptoms may need urgent care. Contact emergency services if they worsen.")
    st.sidebar.button(
        "📅 Book an appointment",
        on_click=navigate,
        args=("Book Appointment",),
        use_container_width=True,
    )


def render_symptom_checker():
    st.markdown("# 🧠 AI Symptom Checker")
    st.info(DISCLAIMER)

    chat = _chat()
    if st.sidebar.button("🔄 New Conversation", use_container_width=True):
        chat.reset()
        st.rerun()

    for msg in chat.messages:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])

    user_input = st.chat_input("Describe your symptoms...")
    if user_input:
        with st.spinner("⏳ Analyzing your symptoms..."):
            try:
                chat.send(user_input)
            except Exception as e:
                logger.exception("Analysis failed: %s", e)
                st.error("❌ Analysis failed. Please try again.")
                return
        st.rerun()

    _render_analysis(chat)
