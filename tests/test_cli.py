"""
Tests for CLI functionality.
"""

from __future__ import annotations

import argparse
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from pydantic import SecretStr

from redlist_ids.cli import cmd_batch, cmd_coerce, cmd_info, cmd_resolve, create_parser, main
from redlist_ids.errors import MissingApiKeyError
from redlist_ids.schemas import IucnIds, MatchReason, ResolvedTaxon

if TYPE_CHECKING:
    from pathlib import Path


def _ids() -> IucnIds:
    return IucnIds(
        items=(
            ResolvedTaxon(id="22732", name="Panthera uncia", match=MatchReason.FOUND),
            ResolvedTaxon(id=None, name="Foo bar", match=MatchReason.NOT_FOUND),
        )
    )


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "redlist-ids"

    def test_parser_has_version(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--version"])

    def test_resolve_command(self) -> None:
        args = create_parser().parse_args(["--key", "k", "resolve", "Panthera uncia", "Foo bar"])
        assert args.command == "resolve"
        assert args.names == ["Panthera uncia", "Foo bar"]
        assert args.key == "k"
        assert args.quiet is False

    def test_coerce_defaults_to_check(self) -> None:
        args = create_parser().parse_args(["coerce", "22732"])
        assert args.check is True

    def test_coerce_no_check(self) -> None:
        args = create_parser().parse_args(["coerce", "22732", "1", "--no-check"])
        assert args.ids == ["22732", "1"]
        assert args.check is False

    def test_batch_default_output(self) -> None:
        args = create_parser().parse_args(["batch", "names.txt"])
        assert str(args.output) == "iucn_ids.json"


class TestCmdResolve:
    def test_prints_table(self) -> None:
        args = argparse.Namespace(names=["Panthera uncia", "Foo bar"], key="k", quiet=True)
        with (
            patch("redlist_ids.cli.get_iucn", return_value=_ids()) as mock_get,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            assert cmd_resolve(args) == 0
        mock_get.assert_called_once_with(["Panthera uncia", "Foo bar"], key="k", verbose=False)
        lines = mock_stdout.getvalue().splitlines()
        assert lines[0] == "ids\tclass\tname\tmatch\turi"
        assert lines[1].split("\t") == [
            "22732",
            "iucn",
            "Panthera uncia",
            "found",
            "http://www.iucnredlist.org/details/22732/0",
        ]
        assert lines[2].split("\t") == ["NA", "iucn", "Foo bar", "not found", "NA"]

    def test_missing_key_returns_one(self) -> None:
        args = argparse.Namespace(names=["x"], key=None, quiet=True)
        with (
            patch("redlist_ids.cli.get_iucn", side_effect=MissingApiKeyError),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert cmd_resolve(args) == 1
        assert "API key" in mock_stderr.getvalue()


class TestCmdCoerce:
    def test_unchecked_without_network(self) -> None:
        args = argparse.Namespace(ids=["22732"], key=None, check=False)
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            assert cmd_coerce(args) == 0
        assert "22732\tiucn\tNA\tunchecked" in mock_stdout.getvalue()


class TestCmdBatch:
    def test_missing_file_returns_one(self, tmp_path: Path) -> None:
        args = argparse.Namespace(
            names_file=tmp_path / "nope.txt", output=tmp_path / "o.json", key=None
        )
        with patch("sys.stderr", new=StringIO()):
            assert cmd_batch(args) == 1

    def test_runs_flow(self, tmp_path: Path) -> None:
        names_file = tmp_path / "names.txt"
        names_file.write_text("Panthera uncia\n")
        args = argparse.Namespace(names_file=names_file, output=tmp_path / "o.json", key="k")
        with (
            patch("redlist_ids.cli.resolve_all") as mock_flow,
            patch("sys.stdout", new=StringIO()),
        ):
            mock_flow.return_value = {"names": 1, "found": 1, "output": "o.json"}
            assert cmd_batch(args) == 0
        mock_flow.assert_called_once_with(names_file, tmp_path / "o.json", key=SecretStr("k"))

    def test_missing_key_returns_one(self, tmp_path: Path) -> None:
        names_file = tmp_path / "names.txt"
        names_file.write_text("Panthera uncia\n")
        args = argparse.Namespace(names_file=names_file, output=tmp_path / "o.json", key=None)
        with (
            patch("redlist_ids.cli.resolve_all", side_effect=MissingApiKeyError) as mock_flow,
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert cmd_batch(args) == 1
        mock_flow.assert_called_once_with(names_file, tmp_path / "o.json", key=None)
        assert mock_stderr.getvalue().startswith("Error: ")


class TestCmdInfo:
    def test_prints_app_info(self) -> None:
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            assert cmd_info(argparse.Namespace()) == 0
        output = mock_stdout.getvalue()
        assert "Application" in output
        assert "API key configured" in output


class TestMain:
    def test_no_command_shows_help(self) -> None:
        with patch("sys.argv", ["redlist-ids"]), patch("sys.stdout", new=StringIO()):
            assert main() == 0

    def test_dispatches_resolve(self) -> None:
        with (
            patch("sys.argv", ["redlist-ids", "resolve", "Panthera uncia"]),
            patch("redlist_ids.cli.configure_logging"),
            patch("redlist_ids.cli.cmd_resolve", return_value=0) as mock_cmd,
        ):
            assert main() == 0
            mock_cmd.assert_called_once()

    def test_debug_sets_debug_logging(self) -> None:
        with (
            patch("sys.argv", ["redlist-ids", "--debug", "info"]),
            patch("redlist_ids.cli.configure_logging") as mock_logging,
            patch("redlist_ids.cli.cmd_info", return_value=0),
        ):
            main()
        assert mock_logging.call_args.kwargs["level"] == 10
