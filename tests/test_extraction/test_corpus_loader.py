"""
Tests for the corpus loader module.

Tests PDF discovery, filtering, deduplication, symlink loop handling,
and warning collection in directory trees.
"""

import os
import pytest
from pathlib import Path

from pdfscan.extraction.corpus_loader import CorpusLoader


@pytest.fixture
def loader(configured):
    """A loader with PDF extension and generous size limit."""
    return CorpusLoader(extensions=[".pdf"], max_file_size_mb=100)


class TestCorpusLoader:
    """Tests for CorpusLoader.load."""

    def test_load_finds_pdfs_recursively(self, loader, sample_pdf_collection: Path):
        """Test that directories are walked recursively."""
        scan = loader.load([sample_pdf_collection])

        names = [doc.display_name for doc in scan.documents]
        assert names == [
            "folder1/doc1.pdf",
            "folder1/doc2.pdf",
            "folder2/doc3.pdf",
            "root_doc.pdf",
        ]
        assert scan.warnings == []

    def test_load_ignores_non_pdfs(self, loader, sample_pdf_collection: Path):
        """Test that non-PDF files are skipped without warnings."""
        scan = loader.load([sample_pdf_collection])

        assert all(doc.path.suffix == ".pdf" for doc in scan.documents)

    def test_extension_match_is_case_insensitive(self, loader, temp_dir: Path):
        """Test that .PDF files are discovered."""
        (temp_dir / "upper.PDF").write_bytes(b"%PDF-1.4")
        (temp_dir / "notes.txt").write_text("Not a PDF")

        scan = loader.load([temp_dir])

        assert [doc.display_name for doc in scan.documents] == ["upper.PDF"]

    def test_paths_are_absolute(self, loader, sample_pdf_collection: Path, monkeypatch):
        """Test that relative inputs produce absolute document paths."""
        monkeypatch.chdir(sample_pdf_collection.parent)

        scan = loader.load(["data"])

        assert all(doc.path.is_absolute() for doc in scan.documents)

    def test_explicit_file(self, loader, sample_pdf: Path):
        """Test that explicit files use their name for display."""
        scan = loader.load([sample_pdf])

        assert len(scan.documents) == 1
        assert scan.documents[0].display_name == "sample.pdf"
        assert scan.documents[0].path == sample_pdf.resolve()

    def test_duplicates_removed(self, loader, sample_pdf_collection: Path):
        """Test that the same file reached twice appears once."""
        doc1 = sample_pdf_collection / "folder1" / "doc1.pdf"

        scan = loader.load([doc1, sample_pdf_collection, str(doc1)])

        paths = [doc.path for doc in scan.documents]
        assert len(paths) == len(set(paths)) == 4
        assert scan.documents[0].display_name == "doc1.pdf"

    def test_missing_path_is_warning(self, loader, temp_dir: Path, sample_pdf: Path):
        """Test that missing inputs are reported, not raised."""
        scan = loader.load([temp_dir / "missing", sample_pdf])

        assert len(scan.documents) == 1
        assert len(scan.warnings) == 1
        assert "does not exist" in scan.warnings[0]

    def test_explicit_non_pdf_is_warning(self, loader, temp_dir: Path):
        """Test that an explicit file with wrong extension is reported."""
        text_file = temp_dir / "notes.txt"
        text_file.write_text("hello")

        scan = loader.load([text_file])

        assert scan.documents == []
        assert "supported extension" in scan.warnings[0]

    def test_large_file_skipped_with_warning(self, configured, temp_dir: Path):
        """Test that files over the size limit are skipped."""
        big = temp_dir / "big.pdf"
        big.write_bytes(b"0" * (2 * 1024 * 1024))

        scan = CorpusLoader(extensions=[".pdf"], max_file_size_mb=1).load([temp_dir])

        assert scan.documents == []
        assert "large file" in scan.warnings[0]

    def test_directory_files_sorted_by_relative_path(self, loader, make_pdf, temp_dir: Path):
        """Test that nested files sort with top-level files by relative path."""
        make_pdf("tree/zeta.pdf")
        make_pdf("tree/alpha/deep/b.pdf")
        make_pdf("tree/alpha/a.pdf")
        make_pdf("tree/beta.pdf")

        scan = loader.load([temp_dir / "tree"])

        assert [doc.display_name for doc in scan.documents] == [
            "alpha/a.pdf",
            "alpha/deep/b.pdf",
            "beta.pdf",
            "zeta.pdf",
        ]

    def test_zero_size_limit_is_respected(self, configured, temp_dir: Path):
        """Test that an explicit limit of 0 MB is not replaced by the default."""
        pdf = temp_dir / "small.pdf"
        pdf.write_bytes(b"0" * 20480)

        loader = CorpusLoader(extensions=[".pdf"], max_file_size_mb=0)
        scan = loader.load([pdf])

        assert loader.max_file_size_mb == 0
        assert scan.documents == []
        assert "large file" in scan.warnings[0]

    def test_empty_directory(self, loader, temp_dir: Path):
        """Test scanning an empty directory."""
        empty_dir = temp_dir / "empty"
        empty_dir.mkdir()

        scan = loader.load([empty_dir])

        assert scan.documents == []
        assert scan.warnings == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_loop_terminates(self, loader, sample_pdf_collection: Path):
        """Test that a directory symlink pointing to an ancestor is not walked forever."""
        loop = sample_pdf_collection / "folder1" / "loop"
        os.symlink(sample_pdf_collection, loop, target_is_directory=True)

        scan = loader.load([sample_pdf_collection])

        assert len(scan.documents) == 4

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_broken_symlink_is_warning(self, loader, temp_dir: Path):
        """Test that a dangling explicit symlink is reported."""
        link = temp_dir / "dangling.pdf"
        os.symlink(temp_dir / "nowhere.pdf", link)

        scan = loader.load([link])

        assert scan.documents == []
        assert len(scan.warnings) == 1

    def test_default_extensions_from_config(self, configured):
        """Test that extensions come from config by default."""
        assert CorpusLoader().extensions == [".pdf"]
