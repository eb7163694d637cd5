"""
End-to-End Demo

Walks the whole session flow:
Example graph → Matrix view → Path query → Render view
then rebuilds the graph from a bulk description.
"""

import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from pathgraph import ExplorerConfig, GraphExplorerSession
from pathgraph.views import matrix_rows


def run_example_graph(session: GraphExplorerSession):
    print("\n" + "=" * 60)
    print("STEP 1: EXAMPLE GRAPH")
    print("=" * 60)

    session.load_example()
    rows = matrix_rows(session.adjacency_view())
    width = max(len(cell) for row in rows for cell in row) + 2
    for row in rows:
        print("".join(cell.rjust(width) for cell in row))


def run_path_query(session: GraphExplorerSession, origin: str, destination: str):
    print("\n" + "=" * 60)
    print(f"STEP 2: PATHS {origin} → {destination}")
    print("=" * 60)

    result = session.find_paths(origin, destination)
    if result.is_failure:
        print(f"⚠ {result.error.message}")
        return
    print(result.value.to_text())

    view = session.render_view()
    for highlight in view.highlights:
        print(f"highlight {highlight.color}: {' → '.join(highlight.path)}")


def run_bulk_description(session: GraphExplorerSession):
    print("\n" + "=" * 60)
    print("STEP 3: BULK DESCRIPTION")
    print("=" * 60)

    result = session.load_description([
        {"name": "X", "neighbors": ["Y", "Z"]},
        {"name": "Y", "neighbors": ["W"]},
    ])
    if result.is_failure:
        print(f"⚠ {result.error.message}")
        return

    for node in session.render_view().nodes:
        print(f"{node.name}: ({node.x:.1f}, {node.y:.1f})")
    run_path_query(session, "X", "W")


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s %(levelname)s %(message)s")
    session = GraphExplorerSession(ExplorerConfig.from_env())

    run_example_graph(session)
    run_path_query(session, "A", "F")
    run_path_query(session, "A", "Q")
    run_bulk_description(session)


if __name__ == "__main__":
    main()
