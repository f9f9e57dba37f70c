import logging
from typing import Optional

from hexgraph.errors import ExportError
from hexgraph.exporters.base import FormatExporter
from hexgraph.visual.visual_schema import VisualGraph
from hexgraph.visual.visual_style import VisualStyle

logger = logging.getLogger(__name__)


class ExportGraph:
    """
    Graph → VisualGraph → text, with the chosen exporter.

    The only failure is ExportError: either the exporter's own, or one
    raised here when the text cannot be encoded as UTF-8 (e.g. a label
    holding a lone surrogate).
    """

    def __init__(self, exporter: FormatExporter, style: Optional[VisualStyle] = None):
        self.exporter = exporter
        self.style = style or VisualStyle()

    def execute(self, graph) -> str:
        visual = VisualGraph.from_graph(graph, self.style)
        logger.debug(
            "Exporting %d nodes, %d edges as %s",
            len(visual.nodes), len(visual.edges), self.exporter.format_name(),
        )
        text = self.exporter.export(visual)
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.error("%s output is not valid UTF-8: %s", self.exporter.format_name(), e)
            raise ExportError(
                f"{self.exporter.format_name()} output is not valid UTF-8: {e}",
                code="E_HEX_VIZ_001",
                next_steps=["Check component names and labels for invalid characters"],
            ) from e
        return text
