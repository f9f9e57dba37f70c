# hexgraph/ai/agent_pack.py
"""
Agent Pack - everything an AI agent needs in one JSON document.

Bundles the AI context, the structured graph document, coding guidelines
and the project's documentation files.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel

from hexgraph import config
from hexgraph.ai.context import SCHEMA_VERSION, AIContext
from hexgraph.ai.context_builder import ContextBuilder
from hexgraph.errors import ContextSerializationError
from hexgraph.exporters.json_exporter import VisualDocument
from hexgraph.graph.graph import Graph
from hexgraph.visual.visual_schema import VisualGraph

logger = logging.getLogger(__name__)


class GuidelinesSnapshot(BaseModel):
    dependency_direction: str = "inward"
    registration: str = "import-time"
    function_length_max: int = 50
    testing_mandate: bool = True
    error_guidelines: List[str] = [
        "Raise HexGraphError subclasses with a stable code",
        "Never swallow exceptions",
        "Include next steps in user-facing errors",
    ]


class DocEntry(BaseModel):
    path: str
    title: str
    content: str
    bytes: int


class DocBundle(BaseModel):
    entries: List[DocEntry] = []


class AgentPack(BaseModel):
    schema_version: str = SCHEMA_VERSION
    package_name: str
    package_version: str
    ai_context: AIContext
    graph: VisualDocument
    guidelines: GuidelinesSnapshot = GuidelinesSnapshot()
    docs: DocBundle = DocBundle()

    @classmethod
    def from_graph(
        cls,
        graph: Graph,
        doc_paths: Optional[Iterable[Union[str, Path]]] = None,
        package_name: Optional[str] = None,
        package_version: Optional[str] = None,
    ) -> "AgentPack":
        from hexgraph import __version__

        context = ContextBuilder(graph).build()
        document = VisualDocument.from_visual_graph(VisualGraph.from_graph(graph))
        paths = config.DOC_PATHS if doc_paths is None else doc_paths
        return cls(
            package_name=package_name or "hexgraph",
            package_version=package_version or __version__,
            ai_context=context,
            graph=document,
            docs=load_docs(paths),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        try:
            return self.model_dump_json(indent=indent, by_alias=True)
        except ValueError as e:
            raise ContextSerializationError(
                f"Agent pack serialization failed: {e}", code="E_AI_PACK_SERIALIZE"
            ) from e


def derive_title(content: str, path: Path) -> str:
    """First non-empty line, else the file name."""
    for line in content.splitlines():
        trimmed = line.strip()
        if trimmed:
            return trimmed
    return path.name or "document"


def load_docs(paths: Iterable[Union[str, Path]]) -> DocBundle:
    """Read the given documentation files; missing or unreadable ones are skipped."""
    entries: List[DocEntry] = []
    for raw in paths:
        path = Path(raw)
        if not path.is_file():
            logger.warning("Documentation file not found, skipping: %s", path)
            continue
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read documentation file %s: %s", path, e)
            continue
        entries.append(DocEntry(
            path=str(path),
            title=derive_title(content, path),
            content=content,
            bytes=len(content.encode("utf-8")),
        ))
    logger.debug("Loaded %d documentation file(s)", len(entries))
    return DocBundle(entries=entries)
