import pytest

from packed_dna.cmd import main


def test_counts_dna(capsys):
    assert main(["--dna", "ACGTTT"]) == 0
    out = capsys.readouterr().out
    assert out == "Input: ACGTTT\n\nA: 1\nC: 1\nG: 1\nT: 3\n"


def test_counts_lower_case_dna(capsys):
    assert main(["-d", "gattaca"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[2:] == ["A: 3", "C: 1", "G: 1", "T: 2"]


def test_rejects_unsupported_dna(capsys):
    """Test that the offending character is named in the error."""
    assert main(["--dna", "ACGB"]) == 1
    captured = capsys.readouterr()
    assert "unsupported input" in captured.err
    assert "'B'" in captured.err
    assert "A: " not in captured.out


def test_requires_an_input():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_dna_and_fasta_are_exclusive(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--dna", "A", "--fasta", str(tmp_path / "x.fasta")])
    assert excinfo.value.code == 2


def test_counts_fasta(tmp_path, capsys):
    path = tmp_path / "reads.fasta"
    path.write_text(">one\nACGT\n>two\nTTg\n>bad\nNNN\n", encoding="ascii")

    assert main(["--fasta", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        ">one", "A: 1", "C: 1", "G: 1", "T: 1", "",
        ">two", "A: 0", "C: 0", "G: 1", "T: 2", "",
        "Total", "A: 1", "C: 1", "G: 2", "T: 3",
    ]


def test_fasta_with_only_invalid_records(tmp_path, capsys):
    path = tmp_path / "reads.fasta"
    path.write_text(">bad\nACGU\n", encoding="ascii")

    assert main(["--fasta", str(path)]) == 1
    assert "all 1 records were skipped" in capsys.readouterr().err


def test_missing_fasta(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--fasta", str(tmp_path / "missing.fasta")])


def test_fasta_with_non_ascii_record(tmp_path, capsys):
    path = tmp_path / "reads.fasta"
    path.write_bytes(b">good\nACGT\n>bad\nAC\xc3\xa9T\n")

    assert main(["--fasta", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert ">bad" not in lines
    assert lines[-5:] == ["Total", "A: 1", "C: 1", "G: 1", "T: 1"]
