from abc import ABC, abstractmethod

from hexgraph.visual.visual_schema import VisualGraph


class FormatExporter(ABC):
    """
    Converts a VisualGraph into one textual format.

    export() raises ExportError when the graph cannot be rendered.
    """

    @abstractmethod
    def export(self, visual_graph: VisualGraph) -> str:
        pass

    @abstractmethod
    def format_name(self) -> str:
        pass

    @abstractmethod
    def file_extension(self) -> str:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.format_name()}>"
