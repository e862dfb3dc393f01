"""
Tests del script CLI de validación
"""
import importlib.util
import io
import sys
from pathlib import Path

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

spec = importlib.util.spec_from_file_location(
    "validate_spl", ROOT / "scripts" / "validate_spl.py"
)
validate_spl = importlib.util.module_from_spec(spec)
spec.loader.exec_module(validate_spl)


class TestValidateScript:
    def test_valid_spl_exits_zero(self, capsys):
        code = validate_spl.main(["index=app | stats count"])

        assert code == 0
        assert "✓ index=app | stats count" in capsys.readouterr().out

    def test_invalid_spl_exits_one(self, capsys):
        code = validate_spl.main(["index=prod | delete"])

        out = capsys.readouterr().out
        assert code == 1
        assert "Index 'prod' is not allowed" in out

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(
            sys, "stdin", io.StringIO("index=app | stats count\n\nindex=infra | customcmd\n")
        )

        code = validate_spl.main(["--quiet"])

        out = capsys.readouterr().out
        assert code == 1
        assert "✓" not in out
        assert "1/2 SPL válidos" in out

    def test_summary_for_multiple_inputs(self, capsys):
        argv = ["index=app | stats count", "index=security | head 5"]

        assert validate_spl.main(argv) == 0
        assert "2/2 SPL válidos" in capsys.readouterr().out
