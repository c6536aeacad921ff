"""Tests for document discovery."""

import pytest

from mdrun.lib.document import candidate_names, find_document
from mdrun.lib.errors import DocumentNotFoundError


def test_candidate_order():
    assert candidate_names("mdrun", ["TASKS.md"]) == [
        "mdrun.md",
        ".mdrun.md",
        "TASKS.md",
        "README.md",
    ]


def test_program_document_preferred_over_readme(tmp_path):
    (tmp_path / "README.md").write_text("# readme\n")
    (tmp_path / "mdrun.md").write_text("# mine\n")
    assert find_document("mdrun", start=tmp_path) == tmp_path / "mdrun.md"


def test_hidden_document(tmp_path):
    (tmp_path / ".mdrun.md").write_text("")
    assert find_document("mdrun", start=tmp_path).name == ".mdrun.md"


def test_names_match_case_insensitively(tmp_path):
    (tmp_path / "readme.MD").write_text("")
    assert find_document("mdrun", start=tmp_path).name == "readme.MD"


def test_searches_parent_directories(tmp_path):
    (tmp_path / "README.md").write_text("")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_document("mdrun", start=nested) == tmp_path / "README.md"


def test_nearest_directory_wins(tmp_path):
    (tmp_path / "mdrun.md").write_text("")
    child = tmp_path / "child"
    child.mkdir()
    (child / "README.md").write_text("")
    assert find_document("mdrun", start=child) == child / "README.md"


def test_extra_names(tmp_path):
    (tmp_path / "README.md").write_text("")
    (tmp_path / "TASKS.md").write_text("")
    assert find_document("mdrun", start=tmp_path, extra_names=["TASKS.md"]).name == "TASKS.md"


def test_directories_are_not_documents(tmp_path):
    (tmp_path / "mdrun.md").mkdir()
    (tmp_path / "README.md").write_text("")
    assert find_document("mdrun", start=tmp_path).name == "README.md"


def test_not_found(tmp_path, monkeypatch):
    # Stop the walk from finding a README somewhere above tmp_path
    monkeypatch.setattr("mdrun.lib.document.FALLBACK_NAME", "MDRUN-NEVER-THERE.md")
    with pytest.raises(DocumentNotFoundError) as exc:
        find_document("mdrun-test-prog", start=tmp_path)
    assert "mdrun-test-prog.md" in exc.value.message
