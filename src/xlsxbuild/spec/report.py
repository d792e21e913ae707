from dataclasses import dataclass, field


@dataclass(slots=True)
class SpecSheetSummary:
    sheet_name: str
    n_rows: int = 0
    n_cells: int = 0


@dataclass(slots=True)
class SpecXlsxBuildReport:
    sheets: list[SpecSheetSummary] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def warn(self, msg: str) -> None:
        self.warnings.append(str(msg))

    @property
    def n_cells(self) -> int:
        return sum(_s.n_cells for _s in self.sheets)
