"""Algorithm step recorder and playback engine."""

from .api import (  # noqa: F401
    generate_sort_timeline,
    generate_mst_timeline,
    generate_traversal_timeline,
    generate_bst_timeline,
    dump_timeline,
)
from .playback import PlaybackController, PlaybackState  # noqa: F401
from .timeline_types import Snapshot, StepKind, Timeline  # noqa: F401
