"""Tests for layerenv.sources readers"""

from pathlib import Path

import pytest

from layerenv.sources import FileSourceReader, MappingSourceReader, SourceHandle, SourceReader


class TestSourceReaderInterface:
    """Tests for the SourceReader abstract interface"""

    def test_reader_is_abstract(self):
        """Test that SourceReader cannot be instantiated directly"""
        with pytest.raises(TypeError):
            SourceReader()  # type: ignore

    def test_handle_str(self):
        """Test a handle renders as its name"""
        assert str(SourceHandle(".env")) == ".env"


class TestFileSourceReader:
    """Tests for FileSourceReader"""

    def test_reads_relative_to_base_dir(self, tmp_path: Path):
        """Test names resolve against the base directory"""
        (tmp_path / ".env").write_text("A=1\n")
        reader = FileSourceReader(tmp_path)
        assert reader.read(".env") == "A=1\n"

    def test_base_dir_accepts_string(self, tmp_path: Path):
        """Test the base directory may be given as a string"""
        reader = FileSourceReader(str(tmp_path))
        assert reader.base_dir == tmp_path

    def test_missing_file_returns_none(self, tmp_path: Path):
        """Test a missing file reads as None"""
        reader = FileSourceReader(tmp_path)
        assert reader.read(".env") is None
        assert reader.exists(".env") is False

    def test_directory_returns_none(self, tmp_path: Path):
        """Test a directory is not a source"""
        (tmp_path / "conf").mkdir()
        assert FileSourceReader(tmp_path).read("conf") is None

    def test_absolute_path(self, tmp_path: Path):
        """Test absolute names ignore the base directory"""
        target = tmp_path / "abs.env"
        target.write_text("B=2\n")
        reader = FileSourceReader(tmp_path / "elsewhere")
        assert reader.read(str(target)) == "B=2\n"

    def test_defaults_to_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test names resolve against the cwd without a base directory"""
        (tmp_path / ".env").write_text("C=3\n")
        monkeypatch.chdir(tmp_path)
        assert FileSourceReader().read(".env") == "C=3\n"

    def test_encoding(self, tmp_path: Path):
        """Test the configured encoding is used"""
        (tmp_path / ".env").write_bytes("NAME=caf\xe9\n".encode("latin-1"))
        reader = FileSourceReader(tmp_path, encoding="latin-1")
        assert reader.read(".env") == "NAME=caf\xe9\n"

    def test_empty_file_reads_as_empty_text(self, tmp_path: Path):
        """Test an empty file is found but empty"""
        (tmp_path / ".env").write_text("")
        assert FileSourceReader(tmp_path).read(".env") == ""

    def test_discover_walks_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test discover roots the reader at the nearest matching file"""
        (tmp_path / "layerenv-discover.env").write_text("D=4\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        reader = FileSourceReader.discover("layerenv-discover.env")
        assert reader.base_dir == tmp_path
        assert reader.read("layerenv-discover.env") == "D=4\n"

    def test_discover_falls_back_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Test discover uses the cwd when nothing is found"""
        monkeypatch.chdir(tmp_path)
        reader = FileSourceReader.discover("layerenv-never-exists-7f3a.env")
        assert reader.base_dir == tmp_path


class TestMappingSourceReader:
    """Tests for MappingSourceReader"""

    def test_read(self):
        """Test reading a known source"""
        reader = MappingSourceReader({".env": "A=1"})
        assert reader.read(".env") == "A=1"
        assert reader.exists(".env") is True

    def test_missing(self):
        """Test unknown names read as None"""
        assert MappingSourceReader().read(".env") is None

    def test_put_and_remove(self):
        """Test adding and removing sources"""
        reader = MappingSourceReader()
        reader.put(".env", "A=1")
        assert reader.read(".env") == "A=1"
        assert reader.remove(".env") is True
        assert reader.remove(".env") is False
        assert reader.read(".env") is None

    def test_copies_input_mapping(self):
        """Test later changes to the input mapping are not seen"""
        sources = {".env": "A=1"}
        reader = MappingSourceReader(sources)
        sources[".env"] = "A=2"
        assert reader.read(".env") == "A=1"
