from .base import BasePromptBuilder  # noqa: D100

SPEECH_PERSONA = (
    "Đọc bài đọc sau đây với giọng một cô giáo người Việt Nam dịu dàng, "
    "truyền cảm: "
)


class SpeechPromptBuilder(BasePromptBuilder):
    """Builds the narration prompt: a fixed teacher persona plus the passage."""

    def create_prompt(self, text: str) -> str:  # type: ignore[override]
        return f"{SPEECH_PERSONA}{text}"
