import os
from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

LOG_LEVEL = os.getenv("HEXGRAPH_LOG_LEVEL", "WARNING")

GRAPH_DESCRIPTION = os.getenv("HEXGRAPH_GRAPH_DESCRIPTION", "Hexagonal Architecture Graph")

DOT_RANKDIR = os.getenv("HEXGRAPH_DOT_RANKDIR", "TB")
MERMAID_DIRECTION = os.getenv("HEXGRAPH_MERMAID_DIRECTION", "TD")
D2_DIRECTION = os.getenv("HEXGRAPH_D2_DIRECTION", "down")

DOC_PATHS = [
    p for p in os.getenv("HEXGRAPH_DOC_PATHS", "README.md").split(os.pathsep) if p.strip()
]

CORS_ORIGINS = [
    o.strip() for o in os.getenv("HEXGRAPH_CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()
]
