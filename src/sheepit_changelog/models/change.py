"""Model for a single change description."""

from typing import Self

from pydantic import BaseModel, ConfigDict


class Change(BaseModel):
    """One opaque line describing a single modification."""

    model_config = ConfigDict(frozen=True)

    text: str
    """The change description, exactly as written after its bullet."""

    @classmethod
    def from_text(cls: type[Self], text: str) -> Self:
        """Wrap a string in a Change."""
        return cls(text=text)

    def render(self) -> str:
        """Returns the change text unchanged."""
        return self.text

    def __str__(self) -> str:
        return self.render()
