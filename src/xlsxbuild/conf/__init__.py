from .constant import (
    N_LEN_EXCEL_SHEET_NAME_MAX,
    N_NCOLS_EXCEL_MAX,
    N_NROWS_EXCEL_MAX,
    TUP_EXCEL_ILLEGAL,
)
from .default import DEFAULT_CONTENT_POLICY, DEFAULT_XLSX_ENGINE_OPTIONS

__all__ = [
    "N_NROWS_EXCEL_MAX",
    "N_NCOLS_EXCEL_MAX",
    "N_LEN_EXCEL_SHEET_NAME_MAX",
    "TUP_EXCEL_ILLEGAL",
    "DEFAULT_CONTENT_POLICY",
    "DEFAULT_XLSX_ENGINE_OPTIONS",
]
