import logging
from typing import Optional

from telemedcart.application.ports import VideoRoomPort
from telemedcart.domain.models import PublicUser
from telemedcart.infrastructure.config import Settings


logger = logging.getLogger(__name__)


def room_name(appointment_id: Optional[str]) -> str:
    return f"telemedcart-{appointment_id or 'demo'}"


class MockVideoRoomAdapter(VideoRoomPort):
    """Builds Jitsi Meet options and logs them instead of opening a call."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def initialize(self, appointment_id: Optional[str], user: PublicUser, audio_on: bool, video_on: bool) -> dict:
        options = {
            "domain": self.settings.video_domain,
            "roomName": room_name(appointment_id),
            "width": "100%",
            "height": "100%",
            "userInfo": {
                "displayName": user.name or "User",
                "email": user.email or "",
            },
            "configOverwrite": {
                "startWithAudioMuted": not audio_on,
                "startWithVideoMuted": not video_on,
                "disableModeratorIndicator": False,
                "startScreenSharing": False,
                "enableEmailInStats": False,
            },
            "interfaceConfigOverwrite": {
                "DISABLE_JOIN_LEAVE_NOTIFICATIONS": True,
                "DISABLE_PRESENCE_STATUS": True,
                "MOBILE_APP_PROMO": False,
                "SHOW_JITSI_WATERMARK": False,
                "SHOW_WATERMARK_FOR_GUESTS": False,
            },
        }
        logger.info("Jitsi would initialize with options: %s", options)
        return options
