from dataclasses import dataclass, field


@dataclass
class TableModel:
    """Presentation-neutral table; cells are strings that may carry rich markup."""

    title: str
    columns: list[str]
    rows: list[list[str]] = field(default_factory=list)

    def add_row(self, *cells: str) -> None:
        self.rows.append(list(cells))

    @property
    def is_empty(self) -> bool:
        return not self.rows
