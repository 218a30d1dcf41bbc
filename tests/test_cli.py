# tests/test_cli.py
import numpy as np
import pytest

from wavesim_core.cli import (
    EXIT_FILE_NOT_FOUND,
    EXIT_OK,
    EXIT_PARAMETER_ERROR,
    EXIT_READ_ERROR,
    EXIT_SIMULATION_ERROR,
    EXIT_USAGE,
    main,
)


@pytest.fixture(autouse=True)
def in_tmp_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_success(write_parameter_file, tmp_path, capsys):
    path = write_parameter_file()

    assert main([str(path)]) == EXIT_OK

    out = capsys.readouterr().out
    assert "Results written to 'out.txt'." in out
    assert np.loadtxt(tmp_path / "out.txt").shape == (600, 2)


def test_yaml_parameter_file(tmp_path, capsys):
    path = tmp_path / "run.yaml"
    path.write_text(
        'c: "1 m/s"\ntau: "1000 s"\nx1: 0\nx2: "10 m"\nruntime: "5 s"\n'
        'dx: "10 cm"\nouttime: "1 s"\noutfilename: yaml_out.txt\n'
    )

    assert main([str(path)]) == EXIT_OK
    assert (tmp_path / "yaml_out.txt").is_file()


@pytest.mark.parametrize("argv", [[], ["a.txt", "b.txt"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == EXIT_USAGE
    assert "Error" in capsys.readouterr().err


def test_missing_parameter_file(capsys):
    assert main(["does_not_exist.txt"]) == EXIT_FILE_NOT_FOUND
    assert "not found" in capsys.readouterr().err


def test_malformed_parameter_file(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("1.0 1000 0 ten 5 0.1 1 out.txt\n")

    assert main([str(path)]) == EXIT_READ_ERROR
    err = capsys.readouterr().err
    assert "Parameter File Read Error" in err
    assert "Parameter:      x2" in err


def test_too_few_values(tmp_path, capsys):
    path = tmp_path / "short.txt"
    path.write_text("1.0 1000 0\n")
    assert main([str(path)]) == EXIT_READ_ERROR


def test_out_of_range_values(write_parameter_file, capsys):
    path = write_parameter_file(c=-1.0, tau=0.0)

    assert main([str(path)]) == EXIT_PARAMETER_ERROR

    err = capsys.readouterr().err
    assert "PARAM_C_NONPOSITIVE" in err
    assert "PARAM_TAU_NONPOSITIVE" in err
    assert f"Parameter value error in file '{path}'" in err


def test_grid_without_interior_point(write_parameter_file):
    assert main([str(write_parameter_file(x2=1.0, dx=0.5))]) == EXIT_PARAMETER_ERROR


def test_unwritable_output(write_parameter_file, tmp_path, capsys):
    path = write_parameter_file(outfilename=str(tmp_path / "nowhere" / "out.txt"))

    assert main([str(path)]) == EXIT_SIMULATION_ERROR
    assert "Output File Error" in capsys.readouterr().err


def test_log_level_option(write_parameter_file):
    assert main([str(write_parameter_file()), "--log-level", "WARNING"]) == EXIT_OK


@pytest.mark.parametrize("overrides", [{"runtime": 1e308}, {"outtime": 1e308}, {"dx": 1e-12}])
def test_unrunnable_discretization(write_parameter_file, capsys, overrides):
    assert main([str(write_parameter_file(**overrides))]) == EXIT_PARAMETER_ERROR
    assert "PARAM_DISCRETIZATION_OVERFLOW" in capsys.readouterr().err


def test_malformed_unit_in_yaml(tmp_path, capsys):
    path = tmp_path / "run.yaml"
    path.write_text(
        'c: "m/"\ntau: 1000\nx1: 0\nx2: 10\nruntime: 5\ndx: 0.1\nouttime: 1\noutfilename: o.txt\n'
    )
    assert main([str(path)]) == EXIT_READ_ERROR
    assert "Parameter:      c" in capsys.readouterr().err


def test_logs_stay_off_stdout(write_parameter_file, capsys):
    assert main([str(write_parameter_file()), "--log-level", "DEBUG"]) == EXIT_OK
    captured = capsys.readouterr()
    assert captured.out == "Results written to 'out.txt'.\n"
    assert "Simulation successful." in captured.err
