"""
Simulation configuration.

Parameters:
A. Mode: se / pe / mp / pacbio / contig
B. Fragment geometry: read_length, insert_size
C. Output scale: coverage
D. Placement: systematic, region_length
E. Naming and reproducibility: name_prefix, seed
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import List, Optional, Union
import json
import numbers

import yaml

from ...utils.validation import require_positive
from .errors import ConfigurationError


class Mode(str, Enum):
    """Sequencing mode"""
    SE = "se"
    PE = "pe"
    MP = "mp"
    PACBIO = "pacbio"
    CONTIG = "contig"

    @property
    def is_paired(self) -> bool:
        return self in (Mode.PE, Mode.MP)

    @property
    def emits_fasta(self) -> bool:
        return self is Mode.CONTIG

    @property
    def uses_insert_margin(self) -> bool:
        """Whether region overlap is sized by insert_size rather than read_length."""
        return self in (Mode.SE, Mode.PE, Mode.MP)

    @classmethod
    def parse(cls, value: Union[str, "Mode", None]) -> "Mode":
        if isinstance(value, cls):
            return value
        if value is None:
            raise ConfigurationError(
                f"mode is required; choose one of: {', '.join(m.value for m in cls)}"
            )
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown mode: {value}. Supported modes: {', '.join(m.value for m in cls)}"
            ) from None


MODE_DESCRIPTIONS = {
    Mode.SE: "single-end reads of fixed length",
    Mode.PE: "paired-end reads, inward-facing mates",
    Mode.MP: "mate-pair reads, outward-facing mates",
    Mode.PACBIO: "long reads, negative-binomial lengths",
    Mode.CONTIG: "tiled contigs with fuzzed overlaps (FASTA)",
}

DEFAULT_INSERT_SIZE = 180
DEFAULT_REGION_LENGTH = 200000
DEFAULT_NAME_PREFIX = "r"

# Insert size standard deviation as a fraction of the mean
INSERT_SD_RATIO = 0.12
# Long-read length distribution: NB(shape, shape / read_length)
LONG_READ_SHAPE = 5
# Contig tiling fuzz: NB(shape, p) - offset
CONTIG_FUZZ_SHAPE = 5
CONTIG_FUZZ_P = 0.01
CONTIG_FUZZ_OFFSET = 400
# Trailing contig tile is dropped when it is this close in length to its neighbour
CONTIG_MIN_TAIL_DELTA = 10
# Phred 40
FLAT_QUALITY_SYMBOL = "I"


@dataclass
class SimConfig:
    """Resolved, read-only configuration for one run."""

    mode: Optional[Mode] = None
    read_length: Optional[int] = None
    coverage: Optional[float] = None
    insert_size: int = DEFAULT_INSERT_SIZE
    systematic: bool = False
    region_length: int = DEFAULT_REGION_LENGTH
    name_prefix: str = DEFAULT_NAME_PREFIX
    seed: Optional[int] = None

    def __post_init__(self):
        if self.mode is not None:
            self.mode = Mode.parse(self.mode)

    # =========================================================================
    # Derived values
    # =========================================================================

    @property
    def effective_coverage(self) -> Optional[float]:
        """Coverage with the contig default of 1x applied."""
        if self.coverage is None and self.mode is Mode.CONTIG:
            return 1.0
        return self.coverage

    @property
    def anchor_length(self) -> int:
        """Span an offset must have room for within its region."""
        if self.mode.is_paired:
            return self.insert_size
        return self.read_length

    @property
    def region_margin(self) -> int:
        """Overlap between consecutive regions of a long sequence."""
        if self.mode.uses_insert_margin:
            return self.insert_size
        return self.read_length

    @property
    def effective_systematic(self) -> bool:
        return self.systematic and self.mode is not Mode.CONTIG

    def fragment_count(self, region_length: int) -> int:
        """Number of fragments to place in a region, truncated toward zero."""
        if self.mode is Mode.CONTIG:
            return int(region_length / self.read_length)
        count = region_length * self.coverage / self.read_length
        if self.mode.is_paired:
            count /= 2
        return int(count)

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self) -> List[str]:
        """Return a list of problems; empty when the configuration is usable."""
        problems = []

        if self.mode is None:
            problems.append(
                f"mode is required; choose one of: {', '.join(m.value for m in Mode)}"
            )

        for name in ("read_length", "insert_size", "region_length"):
            problem = require_positive(getattr(self, name), name, integer=True)
            if problem:
                problems.append(problem)

        if self.mode is not Mode.CONTIG or self.coverage is not None:
            problem = require_positive(self.coverage, "coverage")
            if problem:
                problems.append(problem)

        if self.mode is not None and self.mode.is_paired and not problems:
            if self.insert_size < self.read_length:
                problems.append(
                    f"insert_size ({self.insert_size}) must be >= read_length ({self.read_length})"
                )

        if not isinstance(self.systematic, bool):
            problems.append(f"systematic must be true or false (got {self.systematic!r})")

        if not isinstance(self.name_prefix, str):
            problems.append(f"name_prefix must be a string (got {self.name_prefix!r})")

        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral):
                problems.append(f"seed must be an integer (got {self.seed!r})")
            elif self.seed < 0:
                problems.append(f"seed must be >= 0 (got {self.seed})")

        return problems

    def ensure_valid(self) -> "SimConfig":
        problems = self.validate()
        if problems:
            raise ConfigurationError("; ".join(problems))
        return self

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value if self.mode is not None else None,
            "read_length": self.read_length,
            "coverage": self.coverage,
            "insert_size": self.insert_size,
            "systematic": self.systematic,
            "region_length": self.region_length,
            "name_prefix": self.name_prefix,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> "SimConfig":
        if d is None:
            d = {}
        if not isinstance(d, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping of keys to values, got {type(d).__name__}"
            )
        d = dict(d)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {unknown}")
        return cls(**d)

    @classmethod
    def from_yaml(cls, path: str) -> "SimConfig":
        with open(path, "r") as f:
            d = yaml.safe_load(f)
        return cls.from_dict(d)

    def to_yaml(self, path: str):
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_json(cls, path: str) -> "SimConfig":
        with open(path, "r") as f:
            d = json.load(f)
        return cls.from_dict(d)

    def to_json(self, path: str):
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_file(cls, path: str) -> "SimConfig":
        if str(path).endswith((".yaml", ".yml")):
            return cls.from_yaml(path)
        return cls.from_json(path)

    def merged(self, **overrides) -> "SimConfig":
        """Copy with every non-None override applied."""
        d = self.to_dict()
        d.update({k: v for k, v in overrides.items() if v is not None})
        return SimConfig.from_dict(d)


def get_default_config(mode: Union[str, Mode] = Mode.SE) -> SimConfig:
    """Starter configuration for a mode."""
    mode = Mode.parse(mode)
    if mode is Mode.PACBIO:
        return SimConfig(mode=mode, read_length=10000, coverage=10.0)
    if mode is Mode.CONTIG:
        return SimConfig(mode=mode, read_length=5000)
    if mode is Mode.MP:
        return SimConfig(mode=mode, read_length=100, coverage=10.0, insert_size=3000)
    if mode is Mode.PE:
        return SimConfig(mode=mode, read_length=100, coverage=10.0, insert_size=300)
    return SimConfig(mode=mode, read_length=100, coverage=10.0)
