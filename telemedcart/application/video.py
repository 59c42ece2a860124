import logging
import time
from typing import List, Optional

from telemedcart.application.ports import VideoRoomPort
from telemedcart.domain.models import PublicUser


logger = logging.getLogger(__name__)


def format_duration(seconds: int) -> str:
    mins, secs = divmod(max(int(seconds), 0), 60)
    return f"{mins:02d}:{secs:02d}"


class VideoConsultSession:
    """Client-side state of a mock video consultation."""

    def __init__(self, user: PublicUser, room: VideoRoomPort, appointment_id: Optional[str] = None):
        self.user = user
        self.room = room
        self.appointment_id = appointment_id
        self.audio_on = True
        self.video_on = True
        self.connected_at: Optional[float] = None
        self.chat_messages: List[dict] = []
        self.room_options: Optional[dict] = None

    @property
    def is_connected(self) -> bool:
        return self.connected_at is not None

    @property
    def title(self) -> str:
        return "Patient Consultation" if self.user.role == "doctor" else "Doctor Consultation"

    def connect(self, now: Optional[float] = None) -> None:
        if self.connected_at is None:
            self.connected_at = time.time() if now is None else now
            logger.info("Consultation %s connected for %s", self.appointment_id or "demo", self.user.email)

    def duration(self, now: Optional[float] = None) -> str:
        if self.connected_at is None:
            return format_duration(0)
        now = time.time() if now is None else now
        return format_duration(int(now - self.connected_at))

    def toggle_audio(self) -> bool:
        self.audio_on = not self.audio_on
        return self.audio_on

    def toggle_video(self) -> bool:
        self.video_on = not self.video_on
        return self.video_on

    def send_message(self, message: str) -> Optional[dict]:
        if not message or not message.strip():
            return None
        entry = {
            "id": str(len(self.chat_messages) + 1),
            "sender": self.user.name or "You",
            "message": message.strip(),
        }
        self.chat_messages.append(entry)
        return entry

    def start_room(self) -> dict:
        self.room_options = self.room.initialize(self.appointment_id, self.user, self.audio_on, self.video_on)
        return self.room_options

    def end(self) -> None:
        logger.info("Consultation %s ended after %s", self.appointment_id or "demo", self.duration())
        self.connected_at = None
