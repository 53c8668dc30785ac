"""Tests for simulation configuration."""

import pytest

from synreads.simulate.fragsim.config import Mode, SimConfig, get_default_config
from synreads.simulate.fragsim.errors import ConfigurationError


class TestMode:

    def test_parse(self):
        assert Mode.parse("PE") is Mode.PE
        assert Mode.parse(Mode.CONTIG) is Mode.CONTIG

    def test_unknown_mode(self):
        with pytest.raises(ConfigurationError, match="Unknown mode"):
            Mode.parse("nanopore")

    def test_properties(self):
        assert Mode.PE.is_paired and Mode.MP.is_paired
        assert not Mode.SE.is_paired
        assert Mode.CONTIG.emits_fasta
        assert not Mode.PACBIO.emits_fasta
        assert Mode.SE.uses_insert_margin
        assert not Mode.PACBIO.uses_insert_margin


class TestDerivedValues:
    """Test anchors, margins and counts."""

    def test_anchor_length(self):
        assert SimConfig(mode="pe", read_length=100, insert_size=500).anchor_length == 500
        assert SimConfig(mode="se", read_length=100, insert_size=500).anchor_length == 100
        assert SimConfig(mode="contig", read_length=2000).anchor_length == 2000

    def test_fragment_count(self):
        se = SimConfig(mode="se", read_length=100, coverage=10)
        pe = SimConfig(mode="pe", read_length=100, coverage=10)
        contig = SimConfig(mode="contig", read_length=300)

        assert se.fragment_count(1000) == 100
        assert pe.fragment_count(1000) == 50
        assert se.fragment_count(55) == 5
        assert contig.fragment_count(1000) == 3

    def test_contig_coverage_default(self):
        assert SimConfig(mode="contig", read_length=100).effective_coverage == 1.0
        assert SimConfig(mode="se", read_length=100).effective_coverage is None
        assert SimConfig(mode="contig", read_length=100,
                         coverage=3).effective_coverage == 3


class TestValidation:
    """Test configuration checks."""

    def test_valid(self):
        assert SimConfig(mode="se", read_length=100, coverage=5).validate() == []
        assert SimConfig(mode="contig", read_length=100).validate() == []

    def test_missing_values(self):
        problems = SimConfig().validate()
        assert any("mode is required" in p for p in problems)
        assert any("read_length is required" in p for p in problems)
        assert any("coverage is required" in p for p in problems)

    def test_non_positive(self):
        problems = SimConfig(mode="se", read_length=0, coverage=-1).validate()
        assert any("read_length must be > 0" in p for p in problems)
        assert any("coverage must be > 0" in p for p in problems)

    def test_insert_shorter_than_read(self):
        config = SimConfig(mode="pe", read_length=150, coverage=5, insert_size=100)
        with pytest.raises(ConfigurationError, match="insert_size"):
            config.ensure_valid()

    def test_lengths_must_be_integers(self):
        """Float lengths from a config file are rejected before any slicing."""
        config = SimConfig.from_dict(
            {"mode": "se", "read_length": 100.0, "coverage": 2, "region_length": "1000"}
        )
        problems = config.validate()

        assert "read_length must be an integer (got 100.0)" in problems
        assert "region_length must be an integer (got '1000')" in problems
        with pytest.raises(ConfigurationError, match="read_length must be an integer"):
            config.ensure_valid()

    def test_bool_is_not_a_length(self):
        problems = SimConfig(mode="pe", read_length=True, coverage=1,
                             insert_size=300).validate()
        assert problems == ["read_length must be an integer (got True)"]

    def test_coverage_must_be_numeric(self):
        problems = SimConfig(mode="se", read_length=100, coverage="10x").validate()
        assert problems == ["coverage must be a number (got '10x')"]

        problems = SimConfig(mode="contig", read_length=100, coverage="1").validate()
        assert problems == ["coverage must be a number (got '1')"]

        assert SimConfig(mode="se", read_length=100, coverage=2).validate() == []

    def test_flag_prefix_and_seed_types(self):
        problems = SimConfig(mode="se", read_length=100, coverage=1, systematic="yes",
                             name_prefix=7, seed=1.5).validate()
        assert problems == [
            "systematic must be true or false (got 'yes')",
            "name_prefix must be a string (got 7)",
            "seed must be an integer (got 1.5)",
        ]

    def test_negative_seed(self):
        problems = SimConfig(mode="se", read_length=10, coverage=1, seed=-1).validate()
        assert problems == ["seed must be >= 0 (got -1)"]


class TestSerialization:
    """Test YAML/JSON round trips and overrides."""

    def test_yaml(self, tmp_path):
        config = get_default_config("pe")
        path = tmp_path / "sim.yaml"
        config.to_yaml(str(path))

        loaded = SimConfig.from_file(str(path))
        assert loaded == config
        assert loaded.mode is Mode.PE

    def test_json(self, tmp_path):
        config = get_default_config("contig")
        path = tmp_path / "sim.json"
        config.to_json(str(path))

        loaded = SimConfig.from_file(str(path))
        assert loaded == config
        assert loaded.coverage is None

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Unknown configuration keys"):
            SimConfig.from_dict({"mode": "se", "read_len": 100})

    def test_non_mapping_file(self, tmp_path):
        """A config file must hold a mapping at its top level."""
        path = tmp_path / "list.yaml"
        path.write_text("- mode: se\n- read_length: 100\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            SimConfig.from_file(str(path))

        path = tmp_path / "scalar.json"
        path.write_text("42\n")
        with pytest.raises(ConfigurationError, match="got int"):
            SimConfig.from_file(str(path))

    def test_empty_file_is_default(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert SimConfig.from_file(str(path)) == SimConfig()

    def test_merged_ignores_none(self):
        base = SimConfig(mode="se", read_length=100, coverage=5, seed=1)
        merged = base.merged(mode="pacbio", read_length=None, coverage=2.5)

        assert merged.mode is Mode.PACBIO
        assert merged.read_length == 100
        assert merged.coverage == 2.5
        assert merged.seed == 1
        assert base.mode is Mode.SE

    def test_defaults_valid(self):
        for mode in Mode:
            assert get_default_config(mode).validate() == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
