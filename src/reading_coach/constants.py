"""
Project-wide constants for the reading coach
"""  # noqa: D200, D212, D415

# ==============================================================================
# Model Configuration
# ==============================================================================

SPEECH_MODEL = "gemini-2.5-flash-preview-tts"
EVALUATION_MODEL = "gemini-2.5-pro"
SUGGESTION_MODEL = "gemini-2.5-flash"

# Prebuilt voice used for passage narration
DEFAULT_VOICE_NAME = "Kore"

# Semantic score range requested from the model (not enforced by the schema)
SCORE_MIN = 0
SCORE_MAX = 10

# ==============================================================================
# User-facing fallback messages (Vietnamese, grade-2 audience)
# ==============================================================================

MISSING_KEY_FEEDBACK = (
    "Không thể chấm bài vì thiếu API Key. "
    "Vui lòng cung cấp API Key cá nhân ở màn hình đăng nhập."
)
EVALUATION_FAILED_FEEDBACK = (
    "Rất tiếc, đã có lỗi xảy ra khi AI chấm điểm. Con vui lòng thử lại nhé."
)
MALFORMED_RESPONSE_FEEDBACK = (
    "AI đã trả về một phản hồi không mong muốn. Vui lòng thử lại lần nữa."
)

MISSING_KEY_SUGGESTION = "Không thể lấy gợi ý vì thiếu API Key."
SUGGESTION_FAILED = (
    "Gợi ý của AI đang gặp lỗi. Con hãy tự chọn một bài đọc thú vị nhé!"
)

# Quote characters the suggestion model sometimes wraps its sentence in
WRAPPING_QUOTES = ('"', "“", "”")
