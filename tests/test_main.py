"""Tests for main.py CLI functionality."""

import json
from unittest.mock import patch

import pytest

from photo_normalizer.core.exceptions import InvalidKey
from photo_normalizer.main import main


class TestMainCLI:
    """Tests for the main CLI functionality."""

    def test_main_with_no_args_shows_help(self):
        """Test that running main without arguments shows help."""
        with patch("argparse.ArgumentParser.print_help") as mock_help:
            with pytest.raises(SystemExit) as excinfo:
                main([])
        mock_help.assert_called_once()
        assert excinfo.value.code == 1

    def test_main_version_command(self, capsys):
        """Test version command output."""
        with pytest.raises(SystemExit) as excinfo:
            main(["version"])
        assert excinfo.value.code == 0

        out = capsys.readouterr().out
        assert "Photo Normalizer CLI" in out
        assert "Version 0.1.0" in out

    def test_main_process_invokes_handler(self, capsys):
        response = {"statusCode": 200, "body": {"key": "a1/m2/p3.jpg"}}
        with patch("photo_normalizer.main.lambda_handler", return_value=response) as mock_handler:
            main(["process", "--key", "a1/m2/p3.jpg"])

        event = mock_handler.call_args.args[0]
        assert event["Records"][0]["s3"]["object"]["key"] == "a1/m2/p3.jpg"
        assert json.loads(capsys.readouterr().out) == response

    def test_main_process_reports_pipeline_errors(self, capsys):
        with patch(
            "photo_normalizer.main.lambda_handler", side_effect=InvalidKey("bad key")
        ):
            with pytest.raises(SystemExit) as excinfo:
                main(["process", "--key", "bad"])

        assert excinfo.value.code == 1
        assert "Error: bad key" in capsys.readouterr().err

    def test_main_process_requires_key(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["process"])
        assert excinfo.value.code == 2
