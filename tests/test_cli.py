import os
import subprocess
import sys

import pytest

from candle_stick_plotter.cli import main, parse_args
from candle_stick_plotter.config import DEFAULT_CSV_FILE, DEFAULT_OUTPUT_DIR, LOG_LEVEL_ENV

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def run_cli(tmp_path, *args):
    argv = list(args)
    if "--csv-file" not in argv:
        argv += ["--csv-file", str(tmp_path / "nonexistent.csv")]
    if "--output-dir" not in argv:
        argv += ["--output-dir", str(tmp_path / "output")]
    main(argv)


def test_parse_args_defaults(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    args = parse_args(["hello"])
    assert args.input_string == "hello"
    assert args.csv_file == DEFAULT_CSV_FILE
    assert args.output_dir == DEFAULT_OUTPUT_DIR
    assert args.sink == "log"
    assert args.log_level == "INFO"
    assert not args.candlesticks


def test_parse_args_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert parse_args(["hello"]).log_level == "DEBUG"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("hello world", "HELLO WORLD"),
        ("WORLD", "WORLD"),
        ("mixedCase", "MIXEDCASE"),
        ("hello@world#123", "HELLO@WORLD#123"),
        ("", ""),
    ],
)
def test_main_prints_uppercase(tmp_path, capsys, value, expected):
    run_cli(tmp_path, value)
    assert capsys.readouterr().out == expected + "\n"


def test_main_creates_missing_output_dir(tmp_path):
    out_dir = tmp_path / "nested" / "output"
    run_cli(tmp_path, "test input", "--output-dir", str(out_dir))
    assert out_dir.is_dir()


def test_main_accepts_existing_output_dir(tmp_path):
    out_dir = tmp_path / "output"
    out_dir.mkdir()
    run_cli(tmp_path, "again", "--output-dir", str(out_dir))
    assert out_dir.is_dir()


def test_main_fails_when_output_dir_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    with pytest.raises(SystemExit) as excinfo:
        run_cli(tmp_path, "x", "--output-dir", str(blocker / "output"))
    assert str(excinfo.value.code).startswith("Failed to create output directory")


def test_main_fails_on_malformed_row(tmp_path):
    csv_path = tmp_path / "bad.csv"
    csv_path.write_text("Timestamp,Open,High,Low,Close,Volume\n2023-01-01 00:00:00,x,2,1,1,1\n")
    with pytest.raises(SystemExit) as excinfo:
        run_cli(tmp_path, "x", "--csv-file", str(csv_path))
    assert str(excinfo.value.code).startswith("Failed to load CSV data")


def test_main_converts_candlesticks_only_when_requested(tmp_path):
    csv_path = tmp_path / "bad_ts.csv"
    csv_path.write_text("Timestamp,Open,High,Low,Close,Volume\n2023-01-01,1,2,0.5,1.5,1\n")

    run_cli(tmp_path, "x", "--csv-file", str(csv_path))
    with pytest.raises(SystemExit) as excinfo:
        run_cli(tmp_path, "x", "--csv-file", str(csv_path), "--candlesticks")
    assert str(excinfo.value.code).startswith("Failed to convert candlesticks")


def test_main_validate_ohlc_rejects_inverted_range(tmp_path):
    csv_path = tmp_path / "inverted.csv"
    csv_path.write_text(
        "Timestamp,Open,High,Low,Close,Volume\n2023-01-01 00:00:00,100,90,110,95,1\n"
    )
    run_cli(tmp_path, "x", "--csv-file", str(csv_path))
    with pytest.raises(SystemExit):
        run_cli(tmp_path, "x", "--csv-file", str(csv_path), "--validate-ohlc")


def test_main_chart_sink_writes_png(tmp_path):
    out_dir = tmp_path / "charts"
    run_cli(
        tmp_path,
        "chart",
        "--candlesticks",
        "--sink",
        "chart",
        "--img-size",
        "128",
        "--dpi",
        "64",
        "--output-dir",
        str(out_dir),
    )
    assert (out_dir / "historical_data.png").exists()


def test_script_exit_codes(tmp_path):
    script = os.path.join(REPO_ROOT, "plot_candles.py")
    ok = subprocess.run(
        [sys.executable, script, "hello world", "--output-dir", str(tmp_path / "out")],
        cwd=tmp_path,
        capture_output=True,
        text=True,
    )
    assert ok.returncode == 0
    assert ok.stdout == "HELLO WORLD\n"
    assert (tmp_path / "out").is_dir()

    bad_csv = tmp_path / "bad.csv"
    bad_csv.write_text("Timestamp,Open,High,Low,Close,Volume\n2023-01-01 00:00:00,x,2,1,1,1\n")
    failed = subprocess.run(
        [sys.executable, script, "hello", "--csv-file", str(bad_csv), "--output-dir", str(tmp_path / "out")],
        cwd=tmp_path,
        capture_output=True,
        text=True,
    )
    assert failed.returncode != 0
    assert "Failed to load CSV data" in failed.stderr


def test_parse_args_rejects_invalid_log_level_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "verbose")
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["hello"])
    assert str(excinfo.value.code).startswith(f"Invalid {LOG_LEVEL_ENV}")


def test_script_reports_invalid_log_level_without_traceback(tmp_path):
    script = os.path.join(REPO_ROOT, "plot_candles.py")
    env = dict(os.environ, **{LOG_LEVEL_ENV: "verbose"})
    result = subprocess.run(
        [sys.executable, script, "hi", "--output-dir", str(tmp_path / "out")],
        cwd=tmp_path,
        capture_output=True,
        text=True,
        env=env,
    )
    assert result.returncode != 0
    assert f"Invalid {LOG_LEVEL_ENV}" in result.stderr
    assert "Traceback" not in result.stderr
