import logging
from datetime import date, timedelta

import streamlit as st

from telemedcart.application.errors import AccessDeniedError, BookingError
from telemedcart.application.schemas import TIME_SLOTS
from telemedcart.presentation.state import current_user, get_services, navigate


logger = logging.getLogger(__name__)


def render_book_appointment():
    services = get_services()
    user = current_user()

    st.markdown("# 📅 Book an Appointment")
    if user.role != "patient":
        st.info("Only patients can book appointments.")
        return

    doctors = services.doctors.list_doctors()
    if not doctors:
        st.warning("No doctors are available right now.")
        return

    labels = {d.id: f"{d.name} · {d.specialization or 'General'} · ⭐ {d.rating:.1f} · {d.experience}" for d in doctors}

    with st.form("booking_form"):
        doctor_id = st.selectbox("Doctor", list(labels), format_func=labels.get)
        appointment_type = st.radio("Appointment type", ["video", "in-person"], horizontal=True,
                                    format_func=lambda t: "Video Call" if t == "video" else "In Person")
        day = st.date_input("Date", min_value=date.today(), value=date.today() + timedelta(days=1))
        slot = st.selectbox("Time", TIME_SLOTS)
        symptoms = st.text_area("Describe your symptoms (optional)")
        submit = st.form_submit_button("Book Appointment", use_container_width=True)

    if submit:
        try:
            appointment = services.booking.book_from_form(
                user,
                doctor_id=doctor_id,
                date=day.isoformat(),
                time=slot,
                type=appointment_type,
                symptoms=symptoms,
            )
        except (BookingError, AccessDeniedError) as e:
            st.error(f"❌ {e}")
            return
        except Exception as e:
            logger.exception("Failed to book appointment: %s", e)
            st.error("❌ Failed to book appointment")
            return
        doctor = services.users.get_user_by_id(appointment.doctor_id)
        st.success(
            f"✅ Appointment Booked! Your appointment with {doctor.name} has been confirmed "
            f"for {appointment.date} at {appointment.time}."
        )


def render_appointments():
    services = get_services()
    user = current_user()

    st.markdown("# 🗓️ My Appointments")
    appointments = services.booking.list_for(user)
    if not appointments:
        st.info("No appointments yet.")
        return

    for appointment in appointments:
        other_id = appointment.patient_id if user.role == "doctor" else appointment.doctor_id
        other = services.users.get_user_by_id(other_id)
        with st.container(border=True):
            st.markdown(
                f"**{appointment.date} {appointment.time}** · {appointment.type} · "
                f"{other.name if other else 'unknown'} · _{appointment.status}_"
            )
            if appointment.symptoms:
                st.caption(appointment.symptoms)
            if appointment.status == "scheduled" and user.role != "doctor":
                if st.button("Cancel", key=f"cancel_{appointment.id}"):
                    try:
                        services.booking.cancel(user, appointment.id)
                    except (BookingError, AccessDeniedError) as e:
                        st.error(f"❌ {e}")
                        return
                    st.rerun()
            if appointment.status == "scheduled" and appointment.type == "video":
                st.button(
                    "Join video call",
                    key=f"join_{appointment.id}",
                    on_click=navigate,
                    args=("Video Consult",),
                    kwargs={"video_appointment_id": appointment.id, "video_session": None},
                )
