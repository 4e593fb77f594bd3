"""Test the command-line entry point."""

import pytest

import main


@pytest.fixture
def inputImage(tmp_path, makeImageBytes):
    path = tmp_path / "input.png"
    path.write_bytes(makeImageBytes(2000, 1000))
    return path


def test_probe_prints_dimensions_and_factor(inputImage, capsys):
    """probe prints native size and the sample factor."""
    exitCode = main.main(["probe", str(inputImage), "--max-width", "200", "--max-height", "100"])

    assert exitCode == 0
    output = capsys.readouterr().out.splitlines()
    assert output[:2] == ["2000x1000", "sample factor: 8"]


def test_save_bounded_image(inputImage, configFile, tmp_path, capsys):
    """save loads the image with bounds and stores it in the album."""
    exitCode = main.main([
        "--config", str(configFile),
        "save", str(inputImage),
        "--max-width", "200", "--max-height", "100",
    ])

    assert exitCode == 0
    saved = list((tmp_path / "Pictures" / "PxSort").glob("PXSORT_*.png"))
    assert len(saved) == 1
    assert str(saved[0]) in capsys.readouterr().out


def test_save_malformed_input_fails(tmp_path, configFile):
    """Undecodable input exits with status 1."""
    badInput = tmp_path / "bad.png"
    badInput.write_bytes(b"nope")

    assert main.main(["--config", str(configFile), "save", str(badInput)]) == 1


def test_missing_config_fails(inputImage, tmp_path):
    """An unreadable config exits with status 1."""
    missing = tmp_path / "missing.json"

    assert main.main(["--config", str(missing), "save", str(inputImage)]) == 1


def test_bounds_must_be_paired(inputImage):
    """Giving only one bound is a usage error."""
    with pytest.raises(SystemExit):
        main.main(["probe", str(inputImage), "--max-width", "10"])
