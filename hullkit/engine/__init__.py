"""Graham scan convex hull engine.

Dependency order: orientation -> pivot -> ordering -> graham.
"""

from hullkit.engine.config import HullConfig
from hullkit.engine.errors import EmptyPointSetError, InvalidPointSetError
from hullkit.engine.graham import HullResult, convex_hull, graham_scan
from hullkit.engine.orientation import Turn, orientation

__all__ = [
    "EmptyPointSetError",
    "HullConfig",
    "HullResult",
    "InvalidPointSetError",
    "Turn",
    "convex_hull",
    "graham_scan",
    "orientation",
]
