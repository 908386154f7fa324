"""Integration tests for the keysmith CLI."""

import json
import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from keysmith.cli import cli
from keysmith.domain.services.charset import DEFAULT_CATALOG


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_generate_random_defaults(runner):
    result = runner.invoke(cli, ["generate", "random"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 1
    assert len(lines[0]) == 16


def test_generate_random_options(runner):
    result = runner.invoke(
        cli, ["generate", "random", "--length", "10", "--no-symbols", "--count", "3"]
    )

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 3
    for line in lines:
        assert len(line) == 10
        assert not set(line) & set(DEFAULT_CATALOG.symbols)


def test_generate_random_show_strength(runner):
    result = runner.invoke(cli, ["generate", "random", "-l", "20", "--show-strength"])

    assert result.exit_code == 0
    password, strength = result.output.rstrip("\n").split("\t")
    assert len(password) == 20
    assert "/100" in strength
    assert "bits" in strength


def test_generate_random_json(runner):
    result = runner.invoke(cli, ["generate", "random", "-n", "2", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert len(data) == 2
    for item in data:
        assert len(item["password"]) == 16
        assert 0 <= item["strength"]["score"] <= 100


@pytest.mark.parametrize("length", ["5", "27"])
def test_generate_random_invalid_length(runner, length):
    result = runner.invoke(cli, ["generate", "random", "--length", length])

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "between 8 and 26" in result.output


def test_generate_memorable(runner):
    result = runner.invoke(
        cli, ["generate", "memorable", "--words", "4", "--separator", "_", "--no-capitalize"]
    )

    assert result.exit_code == 0
    password = result.output.strip()
    assert len(password.split("_")) == 4
    assert password == password.lower()


def test_generate_memorable_too_many_words(runner):
    result = runner.invoke(cli, ["generate", "memorable", "--words", "500"])

    assert result.exit_code == 1
    assert "exceeds" in result.output


def test_generate_memorable_custom_word_list(runner, tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("sun\nmoon\n", encoding="utf-8")

    with patch.dict(os.environ, {"KEYSMITH_WORD_LIST_PATH": str(path)}):
        result = runner.invoke(cli, ["generate", "memorable", "-w", "2", "-s", " "])

    assert result.exit_code == 0
    assert result.output.strip() in {"Sun Moon", "Moon Sun"}


def test_evaluate_argument(runner):
    result = runner.invoke(cli, ["evaluate", "password12"])

    assert result.exit_code == 0
    assert "Strength:    medium 56/100" in result.output
    assert "Risks:       weak_pattern" in result.output
    assert "  - Increase the password length" in result.output


def test_evaluate_with_context(runner):
    result = runner.invoke(
        cli, ["evaluate", "johnSmith1990!", "-u", "JohnSmith", "-b", "1990", "--json"]
    )

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert "contains_username" in data["risks"]
    assert "contains_birth_year" in data["risks"]


def test_evaluate_prompts_for_password(runner):
    result = runner.invoke(cli, ["evaluate"], input="Xk7#mP2q!Rt9$Lw\n")

    assert result.exit_code == 0
    assert "Xk7#mP2q!Rt9$Lw" not in result.output
    assert "very-strong 100/100" in result.output


def test_info(runner):
    result = runner.invoke(cli, ["info"])

    assert result.exit_code == 0
    assert "KeySmith v0.1.0" in result.output
    assert "Length:        16" in result.output
    assert "Word List:     built-in" in result.output


@pytest.mark.parametrize(
    "args",
    [["generate", "memorable"], ["generate", "random"], ["evaluate", "secret"]],
)
def test_missing_word_list_file(runner, tmp_path, args):
    missing = tmp_path / "missing.txt"

    with patch.dict(os.environ, {"KEYSMITH_WORD_LIST_PATH": str(missing)}):
        result = runner.invoke(cli, args)

    assert result.exit_code == 1
    assert "Error: Cannot read word list" in result.output
    assert "Traceback" not in result.output
