from enum import Enum


class Layer(Enum):
    """Architectural tier a component belongs to."""
    DOMAIN = "Domain"
    PORT = "Port"
    ADAPTER = "Adapter"
    APPLICATION = "Application"
    INFRASTRUCTURE = "Infrastructure"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, text: str) -> "Layer":
        """Case-insensitive lookup by name or value; anything else is UNKNOWN."""
        key = (text or "").strip().lower()
        for layer in cls:
            if key in (layer.value.lower(), layer.name.lower()):
                return layer
        return cls.UNKNOWN

    def __str__(self) -> str:
        return self.value


# Display order used by summaries and diagrams
LAYER_ORDER = [
    Layer.DOMAIN,
    Layer.PORT,
    Layer.ADAPTER,
    Layer.APPLICATION,
    Layer.INFRASTRUCTURE,
    Layer.UNKNOWN,
]
