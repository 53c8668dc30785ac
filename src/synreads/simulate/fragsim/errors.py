"""Error types raised before any reads are generated."""


class ConfigurationError(ValueError):
    """Invalid or incomplete simulation settings."""


class FormatError(ValueError):
    """Input that is neither FASTA nor FASTQ, or a malformed record."""
