from collections.abc import Iterator
from typing import Any

import polars as pl


def convert_to_polars(df: Any) -> pl.DataFrame:
    return df if isinstance(df, pl.DataFrame) else pl.DataFrame(df)


def iter_frame_records(df: pl.DataFrame) -> Iterator[tuple[Any, ...]]:
    # polars yields python-native values (date, datetime, Decimal, None ...)
    yield from df.iter_rows(named=False)
