import logging
from typing import List, Optional

from telemedcart.application.schemas import SymptomCheckRequest
from telemedcart.application.use_cases import SymptomCheckUseCase, format_assessment_reply
from telemedcart.domain.models import Assessment


logger = logging.getLogger(__name__)


GREETING = (
    "Hello! I'm your AI health assistant. I can help analyze your symptoms and provide "
    "medical guidance. Please describe what symptoms you're experiencing."
)


class SymptomChatSession:
    """Chat transcript for the symptom checker, one per signed-in browser session."""

    def __init__(self, usecase: Optional[SymptomCheckUseCase] = None):
        self.usecase = usecase or SymptomCheckUseCase()
        self.messages: List[dict] = []
        self.last_assessment: Optional[Assessment] = None
        self.reset()

    def reset(self):
        self.messages = [{"role": "assistant", "content": GREETING}]
        self.last_assessment = None

    def send(self, user_message: str) -> Optional[str]:
        """Analyze a message and append the reply. Blank messages are ignored."""
        if not user_message or not user_message.strip():
            return None

        self.messages.append({"role": "user", "content": user_message})

        assessment = self.usecase.check(SymptomCheckRequest(symptoms=user_message))
        self.last_assessment = assessment
        reply = format_assessment_reply(assessment)

        self.messages.append({"role": "assistant", "content": reply})
        return reply

    @property
    def needs_more_information(self) -> bool:
        return self.last_assessment is not None and not self.last_assessment.conditions
