import io
import json
from pathlib import Path

import pytest

from querysense.chat import DEFAULT_KNOWLEDGE_BASE
from querysense.cli import build_parser, load_config, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "QUERYSENSE_DATABASE_TYPE",
        "QUERYSENSE_SQS_QUEUE_URL",
        "QUERYSENSE_HISTORY_ENDPOINT",
        "QUERYSENSE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sql_file(tmp_path: Path) -> Path:
    path = tmp_path / "queries.sql"
    path.write_text("SELECT * FROM users;\nSELECT id FROM users WHERE id = 1;\n", encoding="utf-8")
    return path


class TestAnalyzeCommand:
    def test_console_report(self, sql_file: Path, capsys) -> None:
        assert main(["analyze", str(sql_file)]) == 0

        out = capsys.readouterr().out
        assert "[REPORT] [MODERATE] SELECT * FROM users - 2 issue(s)" in out
        assert "[REPORT] [FAST] SELECT id FROM users WHERE id = 1 - 1 issue(s)" in out

    def test_json_report(self, sql_file: Path, capsys) -> None:
        assert main(["analyze", str(sql_file), "--json", "--database-type", "mysql"]) == 0

        out = capsys.readouterr().out
        decoder = json.JSONDecoder()
        first, end = decoder.raw_decode(out)
        second, _ = decoder.raw_decode(out[end:].lstrip())
        assert first["query_text"] == "SELECT * FROM users"
        assert first["database_type"] == "mysql"
        assert second["workload_category"] == "FAST"

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("SELECT * FROM t ORDER BY rand()"))

        assert main(["analyze", "-"]) == 0

        assert "[HEAVY]" in capsys.readouterr().out

    def test_missing_file_exits_with_2(self, tmp_path: Path) -> None:
        assert main(["analyze", str(tmp_path / "missing.sql")]) == 2

    def test_bad_config_exits_with_2(self, sql_file: Path, tmp_path: Path, capsys) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("nonsense_key: 1\n", encoding="utf-8")

        assert main(["analyze", str(sql_file), "--config", str(config)]) == 2
        assert "nonsense_key" in capsys.readouterr().err

    def test_config_console_prefix(self, sql_file: Path, tmp_path: Path, capsys) -> None:
        config = tmp_path / "querysense.yaml"
        config.write_text("console_prefix: '[SQL]'\n", encoding="utf-8")

        assert main(["analyze", str(sql_file), "--config", str(config)]) == 0
        assert "[SQL] [FAST]" in capsys.readouterr().out

    def test_unknown_log_level_in_environment_exits_with_2(
        self, sql_file: Path, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        monkeypatch.setenv("QUERYSENSE_LOG_LEVEL", "verbose")

        assert main(["analyze", str(sql_file)]) == 2
        assert "Unknown log level" in capsys.readouterr().err

    def test_unknown_log_level_flag_exits_with_2(self, sql_file: Path, capsys) -> None:
        assert main(["analyze", str(sql_file), "--log-level", "loud"]) == 2
        assert "loud" in capsys.readouterr().err


class TestChatCommand:
    def test_topic_answer(self, capsys) -> None:
        assert main(["chat", "tell", "me", "about", "index"]) == 0

        assert capsys.readouterr().out.strip() == DEFAULT_KNOWLEDGE_BASE.topics["index"]

    def test_default_answer(self, capsys) -> None:
        assert main(["chat", "banana"]) == 0

        assert capsys.readouterr().out.strip() == DEFAULT_KNOWLEDGE_BASE.default


class TestLoadConfig:
    def test_flags_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUERYSENSE_DATABASE_TYPE", "sqlite")
        args = build_parser().parse_args(["analyze", "x.sql", "--database-type", "mysql"])

        assert load_config(args).database_type == "mysql"

    def test_log_level_flag_is_upper_cased(self) -> None:
        args = build_parser().parse_args(["analyze", "x.sql", "--log-level", "warning"])

        assert load_config(args).log_level == "WARNING"

    def test_environment_used_without_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUERYSENSE_DATABASE_TYPE", "sqlite")
        args = build_parser().parse_args(["analyze", "x.sql"])

        assert load_config(args).database_type == "sqlite"

    def test_requires_a_command(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
