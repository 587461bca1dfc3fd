"""CompassMenu - radial context menu interaction engine."""

from .catalog import CatalogBuilder, MenuCatalog
from .context import ContextDetector, ContextRule
from .controller import PieMenuController
from .filters import FilterPipeline, STANDARD_FILTERS
from .geometry import AffineTransform, GeometryError, Vector2D, sector_index
from .menus import build_default_catalog
from .scheduler import FrameScheduler
from .types import MenuConfig, PageState, Variant

__all__ = [
    'CatalogBuilder',
    'MenuCatalog',
    'ContextDetector',
    'ContextRule',
    'PieMenuController',
    'FilterPipeline',
    'STANDARD_FILTERS',
    'AffineTransform',
    'GeometryError',
    'Vector2D',
    'sector_index',
    'build_default_catalog',
    'FrameScheduler',
    'MenuConfig',
    'PageState',
    'Variant',
]
