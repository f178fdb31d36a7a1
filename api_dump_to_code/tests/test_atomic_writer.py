import pytest

from api_dump_to_code.pipeline.config import OutputConfig, OutputMode
from api_dump_to_code.pipeline.errors import OutputValidationError
from api_dump_to_code.pipeline.writer.atomic_writer import AtomicWriter

VALID = "// header\nnamespace Roblox;\n\npublic partial interface A\n{\n}\n"


class TestAtomicWriter:
    def test_write(self, tmp_path):
        path = tmp_path / "nested" / "A.cs"
        AtomicWriter().write(path, VALID)
        assert path.read_text(encoding="utf-8") == VALID
        assert not list(path.parent.glob("*.tmp"))

    def test_missing_namespace(self, tmp_path):
        path = tmp_path / "A.cs"
        with pytest.raises(OutputValidationError, match="namespace"):
            AtomicWriter().write(path, "// namespace in a comment\npublic interface A {}\n")
        assert not path.exists()
        assert not list(tmp_path.glob("*.tmp"))

    def test_unbalanced_braces(self, tmp_path):
        path = tmp_path / "A.cs"
        path.write_text("previous", encoding="utf-8")
        with pytest.raises(OutputValidationError, match="unbalanced"):
            AtomicWriter().write(path, "namespace N;\ninterface A\n{\n")
        assert path.read_text(encoding="utf-8") == "previous"

    def test_braces_in_comments_are_ignored(self, tmp_path):
        AtomicWriter().write(tmp_path / "A.cs", "/// <summary>{</summary>\nnamespace N;\n")

    def test_skip_validation(self, tmp_path):
        path = tmp_path / "A.cs"
        AtomicWriter().write(path, "not C#", validate=False)
        assert path.read_text(encoding="utf-8") == "not C#"

    def test_custom_validator(self, tmp_path):
        def reject(content):
            raise OutputValidationError("rejected")

        with pytest.raises(OutputValidationError, match="rejected"):
            AtomicWriter(validate_csharp=reject).write(tmp_path / "A.cs", VALID)


class TestWriteOutput:
    def test_error_if_exists(self, tmp_path):
        path = tmp_path / "A.cs"
        path.write_text("old", encoding="utf-8")
        with pytest.raises(FileExistsError):
            AtomicWriter().write_output(path, VALID)
        assert path.read_text(encoding="utf-8") == "old"

    def test_force(self, tmp_path):
        path = tmp_path / "A.cs"
        path.write_text("old", encoding="utf-8")
        AtomicWriter(OutputConfig(mode=OutputMode.FORCE)).write_output(path, VALID)
        assert path.read_text(encoding="utf-8") == VALID

    def test_direct_write(self, tmp_path):
        path = tmp_path / "sub" / "A.cs"
        AtomicWriter(OutputConfig(atomic_write=False)).write_output(path, VALID)
        assert path.read_text(encoding="utf-8") == VALID

    def test_direct_write_validates(self, tmp_path):
        path = tmp_path / "A.cs"
        with pytest.raises(OutputValidationError):
            AtomicWriter(OutputConfig(atomic_write=False)).write_output(path, "{")
        assert not path.exists()


class TestWriteOutputs:
    def test_writes_all(self, tmp_path):
        outputs = {tmp_path / "A.cs": VALID, tmp_path / "B.cs": VALID}
        assert AtomicWriter().write_outputs(outputs) == [tmp_path / "A.cs", tmp_path / "B.cs"]
        assert (tmp_path / "B.cs").read_text(encoding="utf-8") == VALID

    def test_existing_target_blocks_every_write(self, tmp_path):
        (tmp_path / "B.cs").write_text("old", encoding="utf-8")
        with pytest.raises(FileExistsError):
            AtomicWriter().write_outputs({tmp_path / "A.cs": VALID, tmp_path / "B.cs": VALID})
        assert not (tmp_path / "A.cs").exists()

    def test_invalid_content_blocks_every_write(self, tmp_path):
        with pytest.raises(OutputValidationError):
            AtomicWriter().write_outputs({tmp_path / "A.cs": VALID, tmp_path / "B.cs": "namespace N;\n{\n"})
        assert list(tmp_path.iterdir()) == []

    def test_force_overwrites(self, tmp_path):
        (tmp_path / "A.cs").write_text("old", encoding="utf-8")
        AtomicWriter(OutputConfig(mode=OutputMode.FORCE, atomic_write=False)).write_outputs({tmp_path / "A.cs": VALID})
        assert (tmp_path / "A.cs").read_text(encoding="utf-8") == VALID
