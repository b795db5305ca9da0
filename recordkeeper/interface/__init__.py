"""Mini README: Terminal interfaces for Record Keeper.

Exports the rich-based renderers used by the Typer CLI in
``main_record_keeper.py``.
"""

from .display import build_record_table, render_no_records, render_records, render_stats

__all__ = ["build_record_table", "render_no_records", "render_records", "render_stats"]
