from dataclasses import dataclass, field
from typing import Dict

from hexgraph.graph.layer import Layer

# Layer → display attributes
VISUAL_STYLE = {
    Layer.DOMAIN: {"color": "lightblue"},
    Layer.PORT: {"color": "lightgreen"},
    Layer.ADAPTER: {"color": "lightyellow"},
    Layer.APPLICATION: {"color": "lightcoral"},
    Layer.INFRASTRUCTURE: {"color": "lightgray"},
    Layer.UNKNOWN: {"color": "red"},
}

DEFAULT_SHAPE = "box"


def _default_layer_colors() -> Dict[Layer, str]:
    return {layer: attrs["color"] for layer, attrs in VISUAL_STYLE.items()}


@dataclass
class VisualStyle:
    layer_colors: Dict[Layer, str] = field(default_factory=_default_layer_colors)
    node_shape: str = DEFAULT_SHAPE

    def color_for_layer(self, layer: Layer) -> str:
        return self.layer_colors.get(layer, VISUAL_STYLE[Layer.UNKNOWN]["color"])

    def with_color(self, layer: Layer, color: str) -> "VisualStyle":
        colors = dict(self.layer_colors)
        colors[layer] = color
        return VisualStyle(layer_colors=colors, node_shape=self.node_shape)
