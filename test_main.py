from openpyxl import load_workbook

from policylab.main import main


def test_reads_schedule_txt_by_default(tmp_path, monkeypatch, capsys):
    (tmp_path / "schedule.txt").write_text("A 1 5\nB 2 25\nC 3 8\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert main([]) == 0

    out = capsys.readouterr().out
    assert out.startswith("FCFS Scheduling:\nExecuting task: A\nExecuting task: B\nExecuting task: C\n\n")
    assert "Round-Robin Scheduling:\nExecuting task: A\nExecuting task: C\nExecuting task: B\n\n" in out


def test_missing_input_exits_with_error(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "nope.txt" in captured.err


def test_invalid_burst_exits_with_error(tmp_path, capsys):
    path = tmp_path / "schedule.txt"
    path.write_text("A 1 0\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert "Error" in capsys.readouterr().err


def test_invalid_quantum_exits_with_error(tmp_path, capsys):
    path = tmp_path / "schedule.txt"
    path.write_text("A 1 4\n", encoding="utf-8")
    assert main([str(path), "--quantum", "0"]) == 2
    assert capsys.readouterr().out == ""


def test_custom_quantum_and_excel_export(tmp_path, capsys):
    path = tmp_path / "schedule.txt"
    path.write_text("L 0 5\nS 0 2\n", encoding="utf-8")
    xlsx = tmp_path / "out.xlsx"

    assert main([str(path), "--quantum", "2", "--excel", str(xlsx)]) == 0

    out = capsys.readouterr().out
    assert "Round-Robin Scheduling:\nExecuting task: S\nExecuting task: L\n" in out
    metrics = list(load_workbook(xlsx)["Métricas"].iter_rows(values_only=True))
    assert metrics[-1][:2] == ("Quantum", 2)


def test_long_burst_excel_export_succeeds(tmp_path, capsys):
    path = tmp_path / "schedule.txt"
    path.write_text("A 1 20000\n", encoding="utf-8")
    xlsx = tmp_path / "out.xlsx"

    assert main([str(path), "--excel", str(xlsx)]) == 0
    assert xlsx.exists()


def test_export_to_missing_directory_reports_error(tmp_path, capsys):
    path = tmp_path / "schedule.txt"
    path.write_text("A 1 5\n", encoding="utf-8")

    assert main([str(path), "--excel", str(tmp_path / "no" / "o.xlsx")]) == 1

    captured = capsys.readouterr()
    assert captured.out.startswith("FCFS Scheduling:\n")
    assert captured.err.startswith("Error:")


def test_png_export(tmp_path, capsys):
    path = tmp_path / "schedule.txt"
    path.write_text("A 1 5\nB 2 25\nC 3 8\n", encoding="utf-8")
    png = tmp_path / "gantt.png"

    assert main([str(path), "--png", str(png)]) == 0
    assert png.stat().st_size > 0
