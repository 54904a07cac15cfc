"""Simple launcher for the interactive route planner.

Data files are read from ``data/`` unless ECOROUTE_GRAPH_DATA_DIR is set.
"""

from __future__ import annotations

from ecoroute.cli import main

if __name__ == "__main__":
    main()
