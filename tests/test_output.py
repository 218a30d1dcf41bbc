# tests/test_output.py
from pathlib import Path

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from wavesim_core import MemoryRecorder, OutputWriteError, TextSnapshotWriter
from wavesim_core.output import SnapshotRecorder, format_value


class TestFormatValue:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.0, "1"),
            (0.05, "0.05"),
            (1000.0, "1000"),
            (1.0e9, "1e+09"),
            (0.123456789, "0.123457"),
            (-0.0, "-0"),
            (np.float64(2.5), "2.5"),
            (100, "100"),
            ("out.txt", "out.txt"),
        ],
    )
    def test_values(self, value, expected):
        assert format_value(value) == expected


@pytest.fixture
def small_params(make_params, tmp_path):
    # ngrid=3, dt=0.5, nsteps=4, nper=2
    return make_params(x1=0.0, x2=3.0, dx=1.0, runtime=2.0, outtime=1.0, outfilename=str(tmp_path / "s.txt"))


class TestTextSnapshotWriter:

    def test_preamble(self, small_params):
        writer = TextSnapshotWriter(small_params.outfilename)
        writer.start(small_params, np.array([0.0, 1.5, 3.0]))
        writer.finalize()

        lines = Path(small_params.outfilename).read_text().splitlines()
        assert lines == [
            "#c        1",
            "#tau      1000",
            "#x1       0",
            "#x2       3",
            "#runtime  2",
            "#dx       1",
            "#outtime  1",
            f"#filename {small_params.outfilename}",
            "#ngrid (derived) 3",
            "#dt    (derived) 0.5",
            "#nsteps(derived) 4",
            "#nper  (derived) 2",
        ]

    def test_blocks_and_separators(self, small_params):
        x = np.array([0.0, 1.5, 3.0])
        writer = TextSnapshotWriter(small_params.outfilename)
        writer.start(small_params, x)
        writer.record(0, 0.0, np.array([0.0, 0.25, 0.0]))
        writer.record(2, 1.0, np.array([0.0, -0.125, 0.0]))
        writer.finalize()

        text = Path(small_params.outfilename).read_text()
        body = text.split("#nper  (derived) 2\n", 1)[1]
        assert body == (
            "\n# t = 0\n0 0\n1.5 0.25\n3 0\n"
            "\n\n# t = 1\n0 0\n1.5 -0.125\n3 0\n"
        )
        assert writer.blocks_written == 2

    def test_blocks_are_buffered(self, small_params):
        x = np.array([0.0, 1.5, 3.0])
        writer = TextSnapshotWriter(small_params.outfilename, buffer_size=2)
        writer.start(small_params, x)

        writer.record(0, 0.0, np.zeros(3))
        assert writer.blocks_written == 0
        writer.record(1, 0.5, np.zeros(3))
        assert writer.blocks_written == 2
        writer.record(2, 1.0, np.zeros(3))
        assert writer.blocks_written == 2

        writer.finalize()
        assert writer.blocks_written == 3
        assert np.loadtxt(small_params.outfilename).shape == (9, 2)

    def test_finalize_twice_is_harmless(self, small_params):
        writer = TextSnapshotWriter(small_params.outfilename)
        writer.start(small_params, np.zeros(3))
        writer.finalize()
        writer.finalize()

    def test_missing_directory(self, small_params, tmp_path):
        writer = TextSnapshotWriter(tmp_path / "missing" / "out.txt")
        with pytest.raises(OutputWriteError) as exc_info:
            writer.start(small_params, np.zeros(3))
        assert "Output File Error" in exc_info.value.get_diagnostic_report()


class TestMemoryRecorder:

    def test_keeps_copies(self, small_params):
        recorder = MemoryRecorder()
        x = np.array([0.0, 1.5, 3.0])
        recorder.start(small_params, x)

        field = np.array([0.0, 1.0, 0.0])
        recorder.record(0, 0.0, field)
        field[1] = 2.0
        recorder.record(1, 0.5, field)

        assert recorder.params is small_params
        assert recorder.steps == [0, 1]
        assert recorder.times == [0.0, 0.5]
        assert_array_equal(recorder.as_array(), [[0.0, 1.0, 0.0], [0.0, 2.0, 0.0]])


def test_recorder_base_is_abstract():
    with pytest.raises(TypeError):
        SnapshotRecorder()

    class StartOnly(SnapshotRecorder):
        def start(self, params, x):
            pass

    with pytest.raises(TypeError):
        StartOnly()
