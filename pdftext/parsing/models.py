from dataclasses import dataclass


@dataclass(frozen=True)
class ParseResult:
    """Text extracted from one submitted document."""

    text: str

    def to_body(self) -> dict[str, str]:
        return {"text": self.text}
