from mtxgraph.__main__ import main

TRIANGLE = "%%MatrixMarket matrix coordinate pattern symmetric\n3 3 3\n1 2\n2 3\n3 1\n"


def test_report_without_render(tmp_path, capsys):
    path = tmp_path / "triangle.mtx"
    path.write_text(TRIANGLE)

    assert main([str(path), "--no-render", "--show-matrix"]) == 0

    out = capsys.readouterr().out
    assert "Order (nodes): 3" in out
    assert "0 1 1" in out
    assert "Node 0 : 1, 2" in out
    assert "0 -> 1 -> 2" in out
    assert "contains at least one cycle" in out


def test_report_with_render(tmp_path, capsys):
    path = tmp_path / "triangle.mtx"
    path.write_text(TRIANGLE)
    output = tmp_path / "triangle.png"

    assert main([str(path), "--output", str(output), "--seed", "5"]) == 0

    assert output.exists()
    assert str(output) in capsys.readouterr().out


def test_missing_file_exits_with_error(tmp_path):
    assert main([str(tmp_path / "missing.mtx"), "--no-render"]) == 1


def test_malformed_file_exits_with_error(tmp_path):
    path = tmp_path / "bad.mtx"
    path.write_text("3 3 1\n1 9\n")

    assert main([str(path), "--no-render"]) == 1


def test_invalid_start_exits_with_error(tmp_path):
    path = tmp_path / "triangle.mtx"
    path.write_text(TRIANGLE)

    assert main([str(path), "--no-render", "--start", "7"]) == 1


def test_undecodable_file_exits_with_error(tmp_path):
    path = tmp_path / "binary.mtx"
    path.write_bytes(b"3 3 1\n1 2 \xff\n")

    assert main([str(path), "--no-render"]) == 1
