from collections.abc import Collection

from ..conf import N_LEN_EXCEL_SHEET_NAME_MAX, TUP_EXCEL_ILLEGAL


def sanitize_sheet_name(name: str, *, replace_to: str = "_") -> str:
    for _chr in TUP_EXCEL_ILLEGAL:
        name = name.replace(_chr, replace_to)
    # truncate first: the cut may expose an apostrophe, which Excel rejects at either end
    name = name[:N_LEN_EXCEL_SHEET_NAME_MAX].strip().strip("'")
    return name or "Sheet"


def create_unique_sheet_name(name: str, existing: Collection[str]) -> str:
    # Excel compares sheet names case-insensitively
    set_taken = {_n.lower() for _n in existing}
    if name.lower() not in set_taken:
        return name

    # deterministic bump: name__2, name__3 ...
    c_base_name = name[: max(1, N_LEN_EXCEL_SHEET_NAME_MAX - 3)].strip().strip("'")
    c_base_name = c_base_name or "Sheet"
    i = 2
    c_candidate_name = f"{c_base_name}__{i}"[:N_LEN_EXCEL_SHEET_NAME_MAX]
    while c_candidate_name.lower() in set_taken:
        i += 1
        c_candidate_name = f"{c_base_name}__{i}"[:N_LEN_EXCEL_SHEET_NAME_MAX]
    return c_candidate_name
