"""
Error types raised by hexgraph.

Every error carries a stable machine-readable ``code`` next to the
human-readable message, plus optional next steps for the caller.
"""

from typing import List, Optional


class HexGraphError(Exception):
    code = "E_HEX_000"

    def __init__(self, message: str, code: Optional[str] = None, next_steps: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.next_steps: List[str] = list(next_steps or [])

    def with_next_step(self, step: str) -> "HexGraphError":
        self.next_steps.append(step)
        return self

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "next_steps": self.next_steps,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ExportError(HexGraphError):
    """An exporter could not render or write a visual graph."""
    code = "E_HEX_VIZ_001"


class ContextSerializationError(HexGraphError):
    """The AI context or agent pack envelope could not be serialized."""
    code = "E_AI_SERIALIZE"


class GraphValidationError(HexGraphError):
    """Raised only by the opt-in GraphBuilder.build_validated()."""
    code = "E_HEX_GRAPH_001"


class UnknownFormatError(HexGraphError):
    code = "E_HEX_VIZ_404"
