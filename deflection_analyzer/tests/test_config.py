from __future__ import annotations

from pathlib import Path

import pytest

from deflection_analyzer.config import DEFAULT_FIT_SAMPLE_COUNTS, AnalyzerConfig


def test_defaults() -> None:
    cfg = AnalyzerConfig()
    assert cfg.data_dir == Path("data")
    assert cfg.output_dir == Path("data/html")
    assert cfg.n == 10
    assert cfg.server_url == "http://localhost:8089"
    assert cfg.error_policy == "abort"
    assert cfg.fit_sample_count("cup") == 1000
    assert cfg.fit_sample_count("faceplate") == 10


def test_string_paths_are_converted() -> None:
    cfg = AnalyzerConfig(data_dir="in", output_dir="out")
    assert cfg.data_dir == Path("in")
    assert cfg.output_dir == Path("out")


@pytest.mark.parametrize("n", [0, -1, 2.5, True])
def test_invalid_n_rejected(n) -> None:
    with pytest.raises(ValueError):
        AnalyzerConfig(n=n)


def test_invalid_policy_rejected() -> None:
    with pytest.raises(ValueError):
        AnalyzerConfig(error_policy="retry")


def test_fit_sample_counts_must_cover_every_category() -> None:
    with pytest.raises(ValueError):
        AnalyzerConfig(fit_sample_counts={"cup": 1000})
    with pytest.raises(ValueError):
        AnalyzerConfig(fit_sample_counts={"cup": 1000, "faceplate": 0})


def test_fit_sample_counts_are_tunable_per_category() -> None:
    cfg = AnalyzerConfig(fit_sample_counts={"cup": 50, "faceplate": 200})
    assert cfg.fit_sample_count("cup") == 50
    assert cfg.fit_sample_count("faceplate") == 200
    with pytest.raises(ValueError):
        cfg.fit_sample_count("plate")


def test_default_counts_not_shared_between_instances() -> None:
    a = AnalyzerConfig()
    b = AnalyzerConfig()
    assert a.fit_sample_counts is not b.fit_sample_counts
    assert dict(a.fit_sample_counts) == DEFAULT_FIT_SAMPLE_COUNTS


def test_fit_sample_counts_are_read_only() -> None:
    counts = {"cup": 1000, "faceplate": 10}
    cfg = AnalyzerConfig(fit_sample_counts=counts)
    with pytest.raises(TypeError):
        cfg.fit_sample_counts["cup"] = 5
    counts["cup"] = 5
    assert cfg.fit_sample_count("cup") == 1000


def test_config_is_hashable() -> None:
    assert hash(AnalyzerConfig()) == hash(AnalyzerConfig())
    assert AnalyzerConfig() == AnalyzerConfig()
    assert len({AnalyzerConfig(), AnalyzerConfig(n=3)}) == 2


def test_replace_revalidates() -> None:
    cfg = AnalyzerConfig().replace(n=3, error_policy="skip")
    assert cfg.n == 3
    assert cfg.error_policy == "skip"
    with pytest.raises(ValueError):
        cfg.replace(n=0)


def test_to_dict_is_json_friendly() -> None:
    d = AnalyzerConfig(port=9000).to_dict()
    assert d["data_dir"] == "data"
    assert d["output_dir"] == str(Path("data/html"))
    assert d["port"] == 9000
    assert d["fit_sample_counts"] == {"cup": 1000, "faceplate": 10}
