"""Unit tests for knowledge document loading."""

from pathlib import Path

import pytest
import pytest_check as check

from support_chat.relay.exceptions import KnowledgeLoadError
from support_chat.relay.knowledge import format_document, load_knowledge


class TestLoadKnowledge:
    """Tests for splitting the system prompt from the knowledge blob."""

    def test_system_prompt_separated_from_blob(self, knowledge_dir: Path) -> None:
        """System_Prompt.md becomes the instruction and is left out of the blob."""
        knowledge = load_knowledge(knowledge_dir)

        check.equal(knowledge.system_prompt, "S")
        check.is_in("--- FILE: Other.md ---\nO", knowledge.blob)
        check.is_not_in("System_Prompt.md", knowledge.blob)
        check.equal(knowledge.documents, ["Other.md"])

    def test_blob_format(self, knowledge_dir: Path) -> None:
        knowledge = load_knowledge(knowledge_dir)

        assert knowledge.blob == "\n--- FILE: Other.md ---\nO\n"

    def test_documents_concatenated_in_name_order(self, knowledge_dir: Path) -> None:
        (knowledge_dir / "A_First.md").write_text("first", encoding="utf-8")
        (knowledge_dir / "Z_Last.md").write_text("last", encoding="utf-8")

        knowledge = load_knowledge(knowledge_dir)

        assert knowledge.documents == ["A_First.md", "Other.md", "Z_Last.md"]
        assert knowledge.blob == (
            format_document("A_First.md", "first")
            + format_document("Other.md", "O")
            + format_document("Z_Last.md", "last")
        )

    def test_last_matching_system_prompt_wins(self, knowledge_dir: Path) -> None:
        """When several names contain the marker, the last one read is used."""
        (knowledge_dir / "Z_System_Prompt_v2.md").write_text("S2", encoding="utf-8")

        knowledge = load_knowledge(knowledge_dir)

        check.equal(knowledge.system_prompt, "S2")
        check.equal(knowledge.documents, ["Other.md"])

    def test_ignores_other_suffixes_and_directories(self, knowledge_dir: Path) -> None:
        (knowledge_dir / "notes.txt").write_text("ignored", encoding="utf-8")
        (knowledge_dir / "nested.md").mkdir()

        knowledge = load_knowledge(knowledge_dir)

        check.equal(knowledge.documents, ["Other.md"])
        check.is_not_in("ignored", knowledge.blob)

    def test_custom_marker_and_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "instructions.txt").write_text("be brief", encoding="utf-8")
        (tmp_path / "faq.txt").write_text("Q&A", encoding="utf-8")

        knowledge = load_knowledge(tmp_path, marker="instructions", suffix=".txt")

        check.equal(knowledge.system_prompt, "be brief")
        check.equal(knowledge.documents, ["faq.txt"])

    def test_missing_system_prompt_gives_empty_instruction(self, tmp_path: Path) -> None:
        (tmp_path / "Other.md").write_text("O", encoding="utf-8")

        knowledge = load_knowledge(tmp_path)

        check.equal(knowledge.system_prompt, "")
        check.equal(knowledge.documents, ["Other.md"])

    def test_empty_directory(self, tmp_path: Path) -> None:
        knowledge = load_knowledge(tmp_path)

        check.equal(knowledge.system_prompt, "")
        check.equal(knowledge.blob, "")
        check.equal(knowledge.documents, [])

    def test_reloads_on_every_call(self, knowledge_dir: Path) -> None:
        """Changes on disk are picked up without restarting."""
        load_knowledge(knowledge_dir)
        (knowledge_dir / "Other.md").write_text("updated", encoding="utf-8")

        knowledge = load_knowledge(knowledge_dir)

        assert "updated" in knowledge.blob


class TestLoadKnowledgeErrors:
    """Tests for filesystem failures."""

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(KnowledgeLoadError, match="knowledge directory"):
            load_knowledge(tmp_path / "missing")

    def test_undecodable_file_raises(self, knowledge_dir: Path) -> None:
        (knowledge_dir / "Broken.md").write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(KnowledgeLoadError, match="Broken.md"):
            load_knowledge(knowledge_dir)
