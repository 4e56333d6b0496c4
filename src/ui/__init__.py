from .shell import DashboardShell, run_dashboard, show_detail
from .widgets import Cell, ListWidget, TableWidget
from .layout import Grid, Rect
from .colors import ColorContext

__all__ = [
    "DashboardShell",
    "run_dashboard",
    "show_detail",
    "Cell",
    "ListWidget",
    "TableWidget",
    "Grid",
    "Rect",
    "ColorContext",
]
