import streamlit as st

from telemedcart.application.errors import AccessDeniedError
from telemedcart.presentation.state import current_user, get_services


def render_admin_panel():
    services = get_services()
    user = current_user()

    st.markdown("# 🛠️ Admin Panel")
    try:
        stats = services.admin.stats(user)
    except AccessDeniedError as e:
        st.error(f"❌ {e}")
        return

    overview, users_tab, appointments_tab = st.tabs(["Overview", "Users", "Appointments"])

    with overview:
        cols = st.columns(5)
        cols[0].metric("Users", stats.total_users)
        cols[1].metric("Doctors", stats.total_doctors)
        cols[2].metric("Patients", stats.total_patients)
        cols[3].metric("Appointments", stats.total_appointments)
        cols[4].metric("Completed", stats.completed_appointments)

    with users_tab:
        role = st.selectbox("Role", ["all", "patient", "doctor", "admin"], format_func=str.title)
        users = services.admin.users_list(user, role=None if role == "all" else role)
        st.dataframe(
            [u.model_dump(mode="json") for u in users],
            use_container_width=True,
            hide_index=True,
        )

    with appointments_tab:
        appointments = services.admin.appointments_list(user)
        if not appointments:
            st.info("No appointments booked yet.")
        else:
            st.dataframe(
                [a.model_dump(mode="json") for a in appointments],
                use_container_width=True,
                hide_index=True,
            )
