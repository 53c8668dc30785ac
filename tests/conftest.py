"""Shared fixtures for synreads tests."""

import random
from pathlib import Path

import pytest


def random_sequence(length: int, seed: int = 42) -> str:
    rnd = random.Random(seed)
    return ''.join(rnd.choices('ACGT', k=length))


def random_quality(length: int, seed: int = 7) -> str:
    rnd = random.Random(seed)
    return ''.join(chr(33 + rnd.randint(2, 40)) for _ in range(length))


def write_fasta(path: Path, records, line_width: int = 80) -> Path:
    with open(path, 'w') as f:
        for seq_id, seq in records:
            f.write(f'>{seq_id} test sequence\n')
            for i in range(0, len(seq), line_width):
                f.write(seq[i:i + line_width] + '\n')
    return path


def write_fastq(path: Path, records) -> Path:
    with open(path, 'w') as f:
        for seq_id, seq, qual in records:
            f.write(f'@{seq_id}\n{seq}\n+\n{qual}\n')
    return path


@pytest.fixture
def reference_fasta(tmp_path):
    """Two-record FASTA reference."""
    return write_fasta(
        tmp_path / "ref.fa",
        [("chr1", random_sequence(1000, seed=1)), ("chr2", random_sequence(3000, seed=2))],
    )


@pytest.fixture
def reference_fastq(tmp_path):
    """Single-record FASTQ reference with varied qualities."""
    seq = random_sequence(2000, seed=3)
    qual = random_quality(2000, seed=4)
    return write_fastq(tmp_path / "ref.fq", [("contig1", seq, qual)])
