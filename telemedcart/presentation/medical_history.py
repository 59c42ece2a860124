import streamlit as st

from telemedcart.presentation.state import current_user, get_services


RECORD_TYPES = ["all", "consultation", "prescription", "test-result", "diagnosis"]

STATUS_BADGES = {
    "completed": "🟢 completed",
    "pending": "🟡 pending",
    "follow-up": "🔵 follow-up",
}


def render_medical_history():
    user = current_user()
    st.markdown("# 📄 Medical History")

    selected = st.radio(
        "Filter",
        RECORD_TYPES,
        horizontal=True,
        format_func=lambda t: t.replace("-", " ").title(),
    )
    records = get_services().records.list_for_patient(user.id, record_type=selected)
    if not records:
        st.info("No records found.")
        return

    for record in records:
        with st.container(border=True):
            st.markdown(f"**{record.title}** · {STATUS_BADGES.get(record.status, record.status)}")
            st.caption(f"{record.date} · {record.doctor_name} · {record.type}")
            st.write(record.description)
