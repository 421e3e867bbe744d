from .grid_visualizer import format_time, render_snapshot

__all__ = ["format_time", "render_snapshot"]
