from abc import ABC, abstractmethod  # noqa: D100


class BasePromptBuilder(ABC):
    """Abstract base class for all prompt builders.

    Builders are pure: the same inputs always give the same prompt text.
    """

    @abstractmethod
    def create_prompt(self, *args: str, **kwargs: str) -> str:
        """Creates the full prompt text to be sent to the model."""
        pass  # noqa: PIE790

    @staticmethod
    def delimit(label: str, content: str) -> str:
        """Wrap user content between sentinel tags.

        Any copy of the closing tag inside the content is neutralized so the
        content cannot end the block early and pose as instructions.
        """
        opening = f"<{label}>"
        closing = f"</{label}>"
        safe = content.replace(closing, f"</ {label}>").replace(opening, f"< {label}>")
        return f"{opening}\n{safe}\n{closing}"
