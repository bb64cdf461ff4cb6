"""Tests for the command-line interface."""

import numpy as np
import pytest

from clusterpad.bin.cli import check_dependencies, cli, main
from clusterpad.config.errors import ConfigValidationError
from clusterpad.errors import InvalidParameterError
from clusterpad.math.cluster import NOISE


class TestMain:
    """Test the main CLI driver function."""

    def test_source_and_parameters(self, point_file):
        """Test clustering a point file with explicit parameters."""
        labels = main(source=str(point_file), eps=1.0, min_pts=2)

        assert list(labels) == [0, 0, 0, 1, 1, 1, NOISE]

    def test_config_file(self, tmp_path, point_file):
        """Test clustering with a configuration file and overrides."""
        config = tmp_path / "config.yaml"
        config.write_text(f"""
dbscan:
  eps: 100
  min_pts: 2
points: {point_file}
""")

        labels = main(config=str(config))
        assert list(labels) == [0] * 7

        labels = main(config=str(config), config_overrides=["dbscan.eps=1"])
        assert list(labels) == [0, 0, 0, 1, 1, 1, NOISE]

    def test_config_relative_points(self, tmp_path, point_file, monkeypatch):
        """Test that a relative point file is found next to its configuration."""
        config = tmp_path / "config.yaml"
        config.write_text(f"""
dbscan:
  eps: 1
  min_pts: 2
points: {point_file.name}
""")

        work_dir = tmp_path / "work"
        work_dir.mkdir()
        monkeypatch.chdir(work_dir)

        labels = main(config=str(config))
        assert list(labels) == [0, 0, 0, 1, 1, 1, NOISE]

    def test_relative_source(self, tmp_path, point_file, monkeypatch):
        """Test that a point file given as an argument is relative to the caller."""
        config_dir = tmp_path / "configs"
        config_dir.mkdir()
        config = config_dir / "config.yaml"
        config.write_text("dbscan:\n  eps: 1\n  min_pts: 2\n")

        monkeypatch.chdir(tmp_path)

        labels = main(config=str(config), source=point_file.name)
        assert list(labels) == [0, 0, 0, 1, 1, 1, NOISE]

    def test_default_parameters(self, point_file):
        """Test that the default parameters apply without configuration."""
        labels = main(source=str(point_file))

        assert list(labels) == [0, 0, 0, 0, 0, 0, NOISE]

    def test_invalid_override(self, point_file):
        """Test that malformed --set arguments are rejected."""
        with pytest.raises(ValueError):
            main(source=str(point_file), config_overrides=["dbscan.eps"])

    def test_unknown_override(self, point_file):
        """Test that overrides of unknown keys are rejected."""
        with pytest.raises(ConfigValidationError):
            main(source=str(point_file), config_overrides=["dbscan.radius=3"])

    def test_invalid_parameter(self, point_file):
        """Test that invalid parameters surface as errors."""
        with pytest.raises(InvalidParameterError):
            main(source=str(point_file), eps=0.0)

    def test_output(self, tmp_path, point_file):
        """Test that the figure is written when requested."""
        pytest.importorskip("plotly")

        output = tmp_path / "labels.html"
        main(source=str(point_file), eps=1.0, min_pts=2, output=str(output))

        assert output.exists()


class TestCLI:
    """Test the argument parsing entry point."""

    def test_no_arguments(self, capsys):
        """Test that the help is shown without arguments."""
        assert cli([]) is None
        assert "usage" in capsys.readouterr().out

    def test_version(self, capsys):
        """Test the version flag."""
        with pytest.raises(SystemExit):
            cli(["--version"])

        assert "clusterpad" in capsys.readouterr().out

    def test_info(self, capsys):
        """Test the information flag."""
        cli(["--info"])

        out = capsys.readouterr().out
        assert "Dependencies:" in out
        assert "numba" in out

    def test_run(self, point_file):
        """Test a full run through the argument parser."""
        labels = cli(
            [
                "-s",
                str(point_file),
                "--eps",
                "1",
                "--min-pts",
                "2",
                "--hide-radius",
                "--log-level",
                "WARNING",
            ]
        )

        assert np.array_equal(labels, [0, 0, 0, 1, 1, 1, NOISE])

    def test_check_dependencies(self):
        """Test that the core dependencies are reported."""
        deps = check_dependencies()

        assert deps["numpy"] is not None
        assert deps["numba"] is not None
        assert deps["pyyaml"] is not None
