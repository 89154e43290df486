import json

from covid_dashboard.cli.export_dashboard_data import main


def _write_cases(path):
    lines = ["Date,Country/Region,Province/State,Confirmed,Deaths,Recovered,Active"]
    for day in range(1, 13):
        lines.append(f"2020-03-{day:02d},Italy,,{100 * day},{day},{10 * day},{89 * day}")
        lines.append(f"2020-03-{day:02d},Canada,Ontario,{10 * day},0,0,{10 * day}")
    path.write_text("\n".join(lines), encoding="utf-8")


def test_export_writes_json(tmp_path):
    csv_path = tmp_path / "cases.csv"
    out_path = tmp_path / "out" / "view.json"
    _write_cases(csv_path)

    rc = main([
        "--csv-file", str(csv_path),
        "--metric", "recovered",
        "--region", "Italy",
        "--forecast",
        "--output", str(out_path),
    ])

    assert rc == 0
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["metric"] == "recovered"
    assert data["metric_color"] == "#52c41a"
    assert data["regions"] == ["Global", "Canada", "Italy"]
    assert len(data["series"]) == 22
    assert data["series"][0]["date"] == "2020-03-01"
    assert data["series"][-1]["periodLabel"] == "Forecast 10"
    assert data["series"][-1]["isForecast"] is True
    assert data["series"][0]["movingAverage"] == 10
    assert "period_label" not in data["series"][0]


def test_list_regions(tmp_path, capsys):
    csv_path = tmp_path / "cases.csv"
    _write_cases(csv_path)

    rc = main(["--csv-file", str(csv_path), "--list-regions"])

    assert rc == 0
    assert capsys.readouterr().out.split() == ["Global", "Canada", "Italy"]


def test_missing_csv_exports_synthetic(tmp_path, capsys):
    rc = main(["--csv-file", str(tmp_path / "missing.csv"), "--seed", "5"])

    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data["is_synthetic"] is True
    assert len(data["series"]) == 100


def test_invalid_window_returns_error_code(tmp_path):
    csv_path = tmp_path / "cases.csv"
    _write_cases(csv_path)

    assert main(["--csv-file", str(csv_path), "--window", "0"]) == 2
