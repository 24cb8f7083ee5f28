"""Corpus source reading JSON and plain-text files from a directory."""

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ....core.domain.exceptions import CorpusSourceError
from ....core.domain.utils import clean_text
from ....core.ports.corpus_source_port import CorpusSourcePort

logger = logging.getLogger(__name__)

TEXT_CATEGORY = "general"


class DirectoryCorpusSource(CorpusSourcePort):
    """Loads source documents from ``*.json`` and ``*.txt`` files.

    A JSON file holds either a list of ``{title, content, category, tags}``
    objects or a single such object. A text file becomes one document
    titled after the file, in the ``general`` category. Files are read in
    name order; a file that cannot be read or parsed is logged and skipped.
    """

    name = "directory"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> Iterator[dict[str, Any]]:
        if not self.path.is_dir():
            logger.info(f"Corpus directory {self.path} not found")
            return

        for file_path in sorted(self.path.iterdir()):
            suffix = file_path.suffix.lower()
            if not file_path.is_file() or suffix not in (".json", ".txt"):
                continue

            try:
                records = self.read_file(file_path)
            except CorpusSourceError as e:
                logger.warning(f"Skipping {file_path.name}: {e.message}")
                continue

            logger.info(f"Loaded {len(records)} document(s) from {file_path.name}")
            yield from records

    def read_file(self, file_path: Path) -> list[dict[str, Any]]:
        """Parse one corpus file into raw records.

        Raises:
            CorpusSourceError: If the file is unreadable or not a document list.
        """
        try:
            content = clean_text(file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusSourceError(
                "Could not read corpus file", cause=e, context={"path": str(file_path)}
            ) from e

        if file_path.suffix.lower() == ".txt":
            return [
                {"title": file_path.name, "content": content, "category": TEXT_CATEGORY, "tags": []}
            ]

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise CorpusSourceError(
                "Corpus file is not valid JSON", cause=e, context={"path": str(file_path)}
            ) from e

        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise CorpusSourceError(
                "Corpus file must contain a document object or a list of them",
                context={"path": str(file_path), "type": type(data).__name__},
            )
        return data
