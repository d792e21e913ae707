from .sheet_name import create_unique_sheet_name, sanitize_sheet_name
from .value_convert import convert_to_local_datetime, resolve_cell_content

__all__ = [
    "create_unique_sheet_name",
    "sanitize_sheet_name",
    "convert_to_local_datetime",
    "resolve_cell_content",
]
