import io

import pytest

from numstep.cli import main, system_rhs, third_order_rhs
from numstep.vector import Vector


def test_system_rhs_value():
    assert system_rhs(Vector([1.0, 2.0]), 1.0) == Vector([3.0, 0.0])


def test_third_order_rhs_matches_reciprocal_solution():
    # y = 1/x at x = 1: y''' = -6
    assert third_order_rhs(Vector([1.0, -1.0, 2.0]), 1.0) == pytest.approx(-6.0)


@pytest.mark.parametrize("choice, title", [("1", "Euler"), ("2", "Heun")])
def test_step_output(choice, title, capsys):
    assert main([choice]) == 0
    out = capsys.readouterr().out
    assert f"=== {title} method ===" in out
    assert out.count("Step ") == 100
    assert "Step 100:\nx = 2\n" in out
    last_y = out.strip().splitlines()[-1]
    assert last_y.startswith("y = (") and last_y.endswith(")")
    assert len(last_y[5:-1].split("; ")) == 2


def test_deviation_output(capsys):
    assert main(["3"]) == 0
    out = capsys.readouterr().out
    assert "y(2) = 0.5" in out
    for n in (10, 100, 1000, 10000):
        assert f"Deviation of Euler with {n} steps:" in out
        assert f"Deviation of Heun with {n} steps:" in out
    heun_last = [line for line in out.splitlines() if "Heun with 10000" in line][0]
    assert abs(float(heun_last.rsplit(":", 1)[1])) < 1e-3


def test_choice_read_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main([]) == 0
    assert "=== Heun method ===" in capsys.readouterr().out


def test_invalid_stdin_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "invalid choice" in capsys.readouterr().err


def test_unknown_choice_prints_nothing(capsys):
    assert main(["4"]) == 0
    assert capsys.readouterr().out == ""