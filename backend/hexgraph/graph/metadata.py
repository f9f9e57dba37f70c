import time
from dataclasses import dataclass, field
from typing import Dict, Optional

DEFAULT_DESCRIPTION = "Hexagonal Architecture Graph"


@dataclass(frozen=True)
class GraphMetadata:
    description: str = DEFAULT_DESCRIPTION
    version: int = 1
    created_at: int = field(default_factory=lambda: int(time.time()))
    attributes: Dict[str, str] = field(default_factory=dict, compare=False)

    def get_attribute(self, key: str) -> Optional[str]:
        return self.attributes.get(key)
