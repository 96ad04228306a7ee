"""
OutputLine domain entity.
"""

from dataclasses import dataclass

INPUT = "input"
OUTPUT = "output"
ERROR = "error"


@dataclass(frozen=True)
class OutputLine:
    """One rendered unit of the terminal log: an input echo, output or error."""

    kind: str
    text: str
    is_directory_entry: bool = False

    @classmethod
    def echo(cls, raw: str) -> "OutputLine":
        return cls(INPUT, f"> {raw}")

    @classmethod
    def output(cls, text: str, is_directory_entry: bool = False) -> "OutputLine":
        return cls(OUTPUT, text, is_directory_entry)

    @classmethod
    def error(cls, text: str) -> "OutputLine":
        return cls(ERROR, text)

    def get_details(self) -> dict[str, object]:
        return {
            "kind": self.kind,
            "text": self.text,
            "is_directory_entry": self.is_directory_entry,
        }
