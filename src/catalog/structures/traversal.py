from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from src.catalog.config import DisplayConfig

@dataclass(frozen=True)
class TraversalRecord:
    """
    Registro produzido pelo percurso em pré-ordem da AVL.
    Filhos ausentes também geram um registro (placeholder=True), de modo que
    a forma da árvore pode ser reconstruída a partir da sequência.
    """
    key: Optional[int]
    data: Any
    depth: int
    deleted: bool = False
    placeholder: bool = False

    def __repr__(self):
        if self.placeholder:
            return f"<vazio @{self.depth}>"
        marker = " (D)" if self.deleted else ""
        return f"<{self.key}{marker} @{self.depth}>"


def format_record(record: TraversalRecord) -> str:
    """Formata um registro com a indentação proporcional à profundidade."""
    level = record.depth + 1

    if record.placeholder:
        return DisplayConfig.PLACEHOLDER.rjust(level * DisplayConfig.INDENT_WIDTH)

    text = str(record.key)
    if record.deleted:
        text += DisplayConfig.DELETED_MARKER
        return text.rjust(level * DisplayConfig.DELETED_INDENT_WIDTH)
    return text.rjust(level * DisplayConfig.INDENT_WIDTH)


def render_records(records: Iterable[TraversalRecord]) -> List[str]:
    return [format_record(record) for record in records]
