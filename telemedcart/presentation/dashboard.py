import streamlit as st

from telemedcart.presentation.state import current_user, get_services, navigate


PATIENT_ACTIONS = [
    ("🧠 Symptom Checker", "Check your symptoms with AI", "Symptom Checker"),
    ("📅 Book Appointment", "Schedule a consultation", "Book Appointment"),
    ("📄 Medical History", "View your medical records", "Medical History"),
    ("🎥 Video Consult", "Join a video consultation", "Video Consult"),
]

DOCTOR_ACTIONS = [
    ("📅 Schedule", "Manage your appointments", "Appointments"),
    ("🎥 Consultations", "Start a video consultation", "Video Consult"),
]


def render_dashboard():
    services = get_services()
    user = current_user()

    st.markdown(f"# 👋 Welcome, {user.name}")
    st.caption(
        "Manage your patients and consultations" if user.role == "doctor"
        else "Your health journey starts here"
    )

    appointments = services.booking.list_for(user)
    upcoming = [a for a in appointments if a.status == "scheduled"]
    completed = [a for a in appointments if a.status == "completed"]

    col1, col2, col3 = st.columns(3)
    col1.metric("Upcoming", len(upcoming))
    col2.metric("Completed", len(completed))
    col3.metric("Total", len(appointments))

    st.markdown("### Quick actions")
    actions = DOCTOR_ACTIONS if user.role == "doctor" else PATIENT_ACTIONS
    cols = st.columns(len(actions))
    for col, (title, description, page) in zip(cols, actions):
        with col:
            st.markdown(f"**{title}**")
            st.caption(description)
            st.button("Open", key=f"action_{page}", on_click=navigate, args=(page,), use_container_width=True)

    st.markdown("### Upcoming appointments")
    if not upcoming:
        st.info("No upcoming appointments.")
        return
    for appointment in upcoming:
        other_id = appointment.doctor_id if user.role == "patient" else appointment.patient_id
        other = services.users.get_user_by_id(other_id)
        st.markdown(
            f"- **{appointment.date} {appointment.time}** · {appointment.type} with "
            f"{other.name if other else 'unknown'}"
        )
