import json

import pytest
from omegaconf import OmegaConf

from simplify_flat_array.cli.benchmark import generate_path, run_benchmark
from simplify_flat_array.cli.cli_utils import handle_errors, run_cli_command, validate_config
from simplify_flat_array.cli.simplify_path import run_simplification
from simplify_flat_array.config import Algorithm, BenchmarkConfig, CliConfig, SimplifyConfig


def test_run_simplification_writes_output(tmp_path, scenario_points, scenario_simplified):
    source = tmp_path / "path.json"
    source.write_text(json.dumps(scenario_points))
    target = tmp_path / "simplified.json"

    config = CliConfig(input=str(source), output=str(target), simplify=SimplifyConfig(tolerance=5))
    result = run_simplification(config)

    assert result == scenario_simplified
    assert json.loads(target.read_text()) == scenario_simplified


def test_run_simplification_without_output(tmp_path, zigzag):
    source = tmp_path / "zigzag.txt"
    source.write_text(" ".join(str(value) for value in zigzag))

    config = CliConfig(
        input=str(source),
        simplify=SimplifyConfig(algorithm=Algorithm.VISVALINGAM, target_points=5),
    )
    assert len(run_simplification(config)) == 10


def test_validate_config_requires_input():
    cfg = OmegaConf.structured(CliConfig)
    with pytest.raises(ValueError, match="input"):
        validate_config(cfg, ["input"])

    cfg.input = "path.json"
    validate_config(cfg, ["input"])


def test_handle_errors_exits():
    with pytest.raises(SystemExit) as excinfo:
        handle_errors(ValueError("boom"), OmegaConf.create({"debug": True}))
    assert excinfo.value.code == 1


def test_run_cli_command_passes_structured_config():
    received = []
    cfg = OmegaConf.structured(BenchmarkConfig(sizes=[10], iterations=1))

    run_cli_command(cfg, received.append)

    assert len(received) == 1
    assert isinstance(received[0], BenchmarkConfig)
    assert received[0].sizes == [10]


def test_run_cli_command_exits_on_failure():
    def failing(config):
        raise ValueError("bad input")

    with pytest.raises(SystemExit):
        run_cli_command(OmegaConf.structured(BenchmarkConfig), failing)


def test_generate_path():
    path = generate_path(3)
    assert len(path) == 6
    assert path[0] == 0.0
    assert path[1] == pytest.approx(40.0)
    assert path[2] == 2.0
    assert path[5] == pytest.approx(30 * 0.19866933)


def test_run_benchmark():
    results = run_benchmark(BenchmarkConfig(sizes=[50, 120], iterations=2, target_points=10))
    assert set(results) == {"douglas-peucker", "visvalingam"}
    for timings in results.values():
        assert set(timings) == {50, 120}
        assert all(seconds >= 0 for seconds in timings.values())
