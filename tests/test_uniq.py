import io

import pytest

from linekit.uniq import main, run, uniq_lines

SAMPLE = "a\na\nb\nc\nc\nc\na\n"


@pytest.mark.parametrize(
    "lines, expected",
    [
        ([], []),
        (["a\n"], ["a\n"]),
        (["a\n", "a\n", "b\n"], ["a\n", "b\n"]),
        (["a\n", "b\n", "a\n"], ["a\n", "b\n", "a\n"]),
        (["a\n", "a \n"], ["a\n"]),
        (["a\n", "a"], ["a\n"]),
        (["a\r\n", "a\n", "b"], ["a\r\n", "b"]),
    ],
)
def test_uniq_lines(lines, expected):
    assert list(uniq_lines(lines)) == expected


def test_uniq_lines_counts():
    result = list(uniq_lines(io.StringIO(SAMPLE), count=True))
    assert result == ["   2 a\n", "   1 b\n", "   3 c\n", "   1 a\n"]


def test_uniq_lines_leading_blank_lines_are_absorbed():
    assert list(uniq_lines(["\n", "\n", "a\n"], count=True)) == ["   1 a\n"]


def test_uniq_lines_wide_count_is_not_truncated():
    result = list(uniq_lines(["x\n"] * 12345, count=True))
    assert result == ["12345 x\n"]


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    return str(path)


def test_main_file_to_stdout(sample_file, capsys):
    assert main([sample_file]) == 0
    assert capsys.readouterr().out == "a\nb\nc\na\n"


def test_main_file_count(sample_file, capsys):
    assert main([sample_file, "-c"]) == 0
    assert capsys.readouterr().out == "   2 a\n   1 b\n   3 c\n   1 a\n"


def test_main_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert main([str(path), "--count"]) == 0
    assert capsys.readouterr().out == ""


def test_main_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))
    assert main(["--count"]) == 0
    assert capsys.readouterr().out == "   2 a\n   1 b\n   3 c\n   1 a\n"


def test_main_outfile(sample_file, tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert main([sample_file, str(out)]) == 0
    assert capsys.readouterr().out == ""
    assert out.read_text(encoding="utf-8") == "a\nb\nc\na\n"


def test_main_stdin_outfile_count(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE))
    out = tmp_path / "out.txt"
    assert main(["-", str(out), "-c"]) == 0
    assert capsys.readouterr().out == ""
    assert out.read_text(encoding="utf-8") == "   2 a\n   1 b\n   3 c\n   1 a\n"


def test_run_preserves_crlf(tmp_path):
    src = tmp_path / "crlf.txt"
    src.write_bytes(b"x\r\nx\r\ny\r\n")
    out = tmp_path / "out.txt"
    run(str(src), str(out))
    assert out.read_bytes() == b"x\r\ny\r\n"


def test_main_bad_file(tmp_path, capsys):
    bad = str(tmp_path / "missing")
    assert main([bad]) == 1
    assert capsys.readouterr().err.startswith(f"{bad}: ")


def test_run_bad_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        run(str(tmp_path / "missing"))