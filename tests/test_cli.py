import pytest

from fars.cli import main


def test_years(config, data_dir, capsys):
    main(["years", "--data-dir", str(data_dir)])
    assert capsys.readouterr().out.split() == ["2013", "2014", "2015"]


def test_years_empty_dir_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["years", "--data-dir", str(tmp_path)])
    assert exc.value.code == 1


def test_missing_data_dir_exits(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(["years", "--data-dir", str(tmp_path / "missing")])
    assert "Data directory not found" in capsys.readouterr().err


def test_summarize_prints_table_and_saves(data_dir, tmp_path, capsys):
    out = tmp_path / "summary.csv"
    main(["summarize", "2013", "2014", "--data-dir", str(data_dir), "--output", str(out)])

    printed = capsys.readouterr().out
    assert "MONTH" in printed
    assert "2014" in printed
    assert out.exists()


def test_summarize_reports_invalid_year(data_dir, capsys):
    main(["summarize", "2012", "2013", "--data-dir", str(data_dir)])
    assert "invalid year: 2012" in capsys.readouterr().err


def test_summarize_nothing_readable_exits(data_dir):
    with pytest.raises(SystemExit):
        main(["summarize", "2012", "--data-dir", str(data_dir)])


def test_map_writes_html(data_dir, tmp_path, capsys):
    out = tmp_path / "ma.html"
    main(["map", "25", "2013", "--data-dir", str(data_dir), "--output", str(out)])
    assert out.exists()
    assert "Saved" in capsys.readouterr().out


def test_map_invalid_state_exits(data_dir, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["map", "99", "2013", "--data-dir", str(data_dir), "--output", str(tmp_path / "x.html")])
    assert exc.value.code == 1
    assert "invalid STATE number: 99" in capsys.readouterr().err


def test_map_requires_output_or_show(data_dir):
    with pytest.raises(SystemExit):
        main(["map", "25", "2013", "--data-dir", str(data_dir)])


def test_log_json(data_dir, capsys):
    main(["--log-json", "summarize", "2012", "2013", "--data-dir", str(data_dir)])
    err = capsys.readouterr().err
    assert '"level": "WARNING"' in err
    assert '"year": "2012"' in err
