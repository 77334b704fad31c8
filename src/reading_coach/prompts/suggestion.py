from collections.abc import Sequence  # noqa: D100

from .base import BasePromptBuilder


class SuggestionPromptBuilder(BasePromptBuilder):
    """Builds a prompt asking for one cheerful sentence naming one lesson.

    The chosen title must be bolded with markdown (``**Tên bài**``) so the
    front end can highlight it, and nothing but the sentence may be returned.
    """

    def create_prompt(  # type: ignore[override]
        self, learner_name: str, candidate_titles: Sequence[str]
    ) -> str:
        if not candidate_titles:
            raise ValueError("candidate_titles must contain at least one lesson title")

        titles = ", ".join(candidate_titles)
        return (
            "Bạn là một cô giáo dạy tiếng Việt lớp 2, thân thiện. "
            f"Học sinh tên là {learner_name} cần gợi ý đọc bài. "
            "Hãy chọn đúng MỘT bài từ danh sách sau và viết một câu gợi ý thật "
            "đáng yêu, bao gồm tên bài đọc được in đậm bằng markdown "
            "(ví dụ: **Tên bài**). Chỉ in đậm đúng một tên bài. "
            f'Ví dụ: "Chào {learner_name}! Hôm nay mình đọc bài **Tên bài** nhé, '
            'nghe vui lắm đó! 😺". '
            "Chỉ trả về câu gợi ý đó thôi. "
            f"Danh sách: {titles}"
        )
