"""jumptree widgets."""

from .history_panel import HistoryPanel
from .source_view import SourceView, invalidate_file_cache, load_source
from .symbol_list import SymbolList

__all__ = [
    "HistoryPanel",
    "SourceView",
    "SymbolList",
    "invalidate_file_cache",
    "load_source",
]
