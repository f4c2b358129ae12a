"""Named constants: eliminates magic numbers across the codebase."""

from __future__ import annotations

DEFAULT_START_NODE = 0

# Random input bounds
RANDOM_ARRAY_LENGTH = 20
RANDOM_ARRAY_LOW = 10
RANDOM_ARRAY_HIGH = 99

RANDOM_GRAPH_NODE_COUNT = 6
RANDOM_GRAPH_EDGE_PROBABILITY = 0.7
RANDOM_GRAPH_MAX_WEIGHT = 15
REPAIR_EDGE_MAX_WEIGHT = 10

# Autoplay intervals (seconds)
INSERTION_SORT_INTERVAL = 0.2
MERGE_SORT_INTERVAL = 0.3
TRAVERSAL_INTERVAL = 1.0
BST_OPERATIONS_INTERVAL = 1.0
KRUSKAL_INTERVAL = 1.5
PRIM_INTERVAL = 2.0

EDGE_KEY_TEMPLATE = "{low}-{high}"
