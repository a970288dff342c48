"""
Integration tests for the demonstration entry point
"""

import io
import os
import re
import tempfile

import pytest
import yaml

from functest.cli import main, run_demo
from functest.config import HarnessSettings


class TestRunDemo:
    """Test the documented example series end to end."""

    def test_demo_report(self):
        """Test the full report of the example series."""
        output = io.StringIO()

        assert run_demo(HarnessSettings(), output) is True

        lines = output.getvalue().splitlines()
        assert re.fullmatch(r"TESTING Run 1: \.{45} OK \(\d+ ms\)", lines[0])
        assert re.fullmatch(r"TESTING Run 2: \.{45} FAILED \(\d+ ms\)", lines[1])
        assert lines[2:5] == [" RESULT:   1, 13, 99", " EXPECTED: 1, 13, 15", "."]
        assert re.fullmatch(r"TESTING divide: \.{44} OK \(\d+ ms\)", lines[5])
        assert lines[6] == "TESTING div by zero: " + "." * 39 + " EXCEPTION"
        assert lines[7:] == ["ZeroDivisionError:", "integer division or modulo by zero"]

    def test_demo_quiet(self):
        output = io.StringIO()

        assert run_demo(HarnessSettings(verbose=False), output) is True

        assert "RESULT" not in output.getvalue()


class TestMain:
    """Test argument handling and exit codes."""

    def test_main_exit_code(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "TESTING Run 1: " in capsys.readouterr().out

    def test_main_line_length(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--line-length", "20", "--quiet"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "TESTING Run 1: ..... OK" in out
        assert "RESULT" not in out

    def test_main_config_file(self, capsys):
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            yaml.dump({"harness": {"fill_char": "-", "output_line_length": 20}}, f)
            config_path = f.name

        try:
            with pytest.raises(SystemExit) as exc_info:
                main(["--config", config_path])
            assert exc_info.value.code == 0
            assert "TESTING Run 1: ----- OK" in capsys.readouterr().out
        finally:
            os.unlink(config_path)

    def test_main_invalid_config(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", "/nonexistent/settings.yaml"])
        assert exc_info.value.code == 2
