"""Knowledge document loading.

Reads the bundled documents from disk on every call. One document, picked by
a filename marker, becomes the system instruction; the rest are concatenated
with filename headers into the knowledge blob sent with each question.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from support_chat.relay.exceptions import KnowledgeLoadError

logger = logging.getLogger(__name__)


class KnowledgeBase(BaseModel):
    """Documents loaded for a single request.

    Attributes:
        system_prompt: Contents of the system prompt document ("" if none).
        blob: Concatenated contents of every other document.
        documents: Names of the documents included in the blob, in order.
    """

    system_prompt: str = ""
    blob: str = ""
    documents: list[str] = Field(default_factory=list)


def format_document(name: str, content: str) -> str:
    """Format one document for the knowledge blob."""
    return f"\n--- FILE: {name} ---\n{content}\n"


def load_knowledge(
    directory: Path,
    marker: str = "System_Prompt",
    suffix: str = ".md",
) -> KnowledgeBase:
    """Load the knowledge documents in a directory.

    Files are read in filename order. When several names contain the marker,
    the last one read is used as the system prompt.

    Args:
        directory: Directory holding the documents.
        marker: Filename substring designating the system prompt document.
        suffix: Only files ending with this suffix are read.

    Returns:
        KnowledgeBase with the system prompt and the knowledge blob.

    Raises:
        KnowledgeLoadError: If the directory or a document cannot be read.
    """
    try:
        paths = sorted(
            (p for p in directory.iterdir() if p.is_file() and p.name.endswith(suffix)),
            key=lambda p: p.name,
        )
    except OSError as e:
        raise KnowledgeLoadError(f"Failed to list knowledge directory {directory}: {e}") from e

    knowledge = KnowledgeBase()
    parts: list[str] = []

    for path in paths:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise KnowledgeLoadError(f"Failed to read knowledge file {path.name}: {e}") from e

        if marker in path.name:
            knowledge.system_prompt = content
        else:
            parts.append(format_document(path.name, content))
            knowledge.documents.append(path.name)

    knowledge.blob = "".join(parts)

    if not knowledge.system_prompt:
        logger.warning(f"No system prompt document matching '{marker}' in {directory}")
    logger.debug(f"Loaded {len(knowledge.documents)} knowledge documents from {directory}")

    return knowledge
