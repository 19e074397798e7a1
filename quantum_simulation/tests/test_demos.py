# quantum_simulation/tests/test_demos.py
import pytest

from quantum_simulation.demos import main, parse_bits

def test_parse_bits():
    assert parse_bits("101") == [True, False, True]
    with pytest.raises(Exception):
        parse_bits("12")

def test_bell_demo(capsys):
    main(["--runs", "40", "bell"])
    out = capsys.readouterr().out
    assert "Measurement count: 40" in out
    assert "|01>" not in out and "|10>" not in out

def test_deutsch_jozsa_demo(capsys):
    main(["--runs", "10", "deutsch-jozsa", "--function", "xor", "--n", "3"])
    assert "The function is balanced." in capsys.readouterr().out

def test_bernstein_vazirani_demo(capsys):
    main(["bernstein-vazirani", "--secret", "1101"])
    assert "Recovered secret: [True, True, False, True]" in capsys.readouterr().out

def test_superdense_demo(capsys):
    main(["superdense"])
    out = capsys.readouterr().out
    for bits in ("00", "01", "10", "11"):
        assert f"Sending {bits}... received {bits}." in out

def test_plot_option(tmp_path, capsys):
    path = tmp_path / "ghz.png"
    main(["--runs", "10", "--plot", str(path), "ghz", "--n", "3"])
    assert path.exists()
