"""File-backed document, document-list and noise-word sources."""

from pathlib import Path
from typing import Protocol

from littlesearch.errors import ConfigUnavailable, SourceUnavailable


class DocumentSource(Protocol):
    def tokens(self, doc_id: str) -> list[str]: ...


class FileDocumentSource:
    """Reads documents as files, resolving relative names against base_dir."""

    def __init__(self, base_dir: Path | None = None) -> None:
        self.base_dir = base_dir

    def path_for(self, doc_id: str) -> Path:
        path = Path(doc_id)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path

    def tokens(self, doc_id: str) -> list[str]:
        path = self.path_for(doc_id)
        try:
            return path.read_text(encoding="utf-8").split()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailable(f"Cannot read document {path}: {exc}") from exc


def read_doc_list(path: Path) -> list[str]:
    """Document names in file order, one per whitespace-delimited token."""
    try:
        return path.read_text(encoding="utf-8").split()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailable(f"Cannot read document list {path}: {exc}") from exc


def read_noise_words(path: Path) -> frozenset[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigUnavailable(f"Cannot read noise words {path}: {exc}") from exc
    return frozenset(w.lower() for w in text.split())
