from sheepdog.main import main, parse_waypoints


def test_parse_waypoints():
    assert parse_waypoints("50,50; 300,200;") == [(50.0, 50.0), (300.0, 200.0)]


def test_headless_cli(capsys):
    summary = main(["--headless", "--ticks", "5", "--seed", "4", "--waypoints", "10,10;90,90"])

    assert summary["ticks"] == 5
    out = capsys.readouterr().out
    assert "HEADLESS RUN" in out
    assert "Final score" in out


def test_headless_cli_with_grid_and_config(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text('{"flockSize": 8}')

    summary = main(["--headless", "--ticks", "3", "--grid", "--config", str(path)])

    assert summary["flock_size"] == 8
    assert "Flock size: 8" in capsys.readouterr().out


def test_plot_skipped_without_matplotlib(monkeypatch, capsys):
    from sheepdog.analysis import plotting

    monkeypatch.setattr(plotting, "MATPLOTLIB_AVAILABLE", False)
    assert plotting.plot_run_summary({"score_over_time": [], "spread_over_time": []}) is False
    assert "matplotlib not available" in capsys.readouterr().out
