"""
synreads CLI - Command Line Interface for synthetic read generation.

Usage:
    synreads <command> [options]
"""

import logging

import click

from synreads import __version__

MODE_CHOICES = ["se", "pe", "mp", "pacbio", "contig"]


@click.group()
@click.version_option(version=__version__, prog_name="synreads")
def main():
    """synreads - synthetic sequencing reads at a target coverage.

    Use 'synreads <command> --help' for detailed usage of each command.
    """
    pass


# ============================================================================
# Simulation
# ============================================================================

@main.command("sim")
@click.option("-i", "--input", "input_file", required=True,
              help="Input FASTA/FASTQ ('-' for stdin, .gz accepted)")
@click.option("-o", "--output", "output_file", default="-", show_default=True,
              help="Output FASTQ/FASTA ('-' for stdout, .gz to compress)")
@click.option("-m", "--mode", type=click.Choice(MODE_CHOICES, case_sensitive=False),
              help="Sequencing mode")
@click.option("-l", "--length", "read_length", type=int,
              help="Read length (contig length in contig mode)")
@click.option("-c", "--coverage", type=float,
              help="Target coverage (contig mode defaults to 1)")
@click.option("-I", "--insert-size", type=int,
              help="Mean insert size for pe/mp  [default: 180]")
@click.option("--systematic/--random", default=None,
              help="Fixed-step fragment placement instead of random offsets")
@click.option("--region-length", type=int,
              help="Split sequences longer than this  [default: 200000]")
@click.option("-p", "--prefix", "name_prefix", help="Read name prefix  [default: r]")
@click.option("--seed", type=int, help="Random seed")
@click.option("--config", "config_file", help="Config file (YAML/JSON)")
@click.option("--summary", "summary_file", help="Per-record summary TSV")
@click.option("--log-file", help="Also write log messages to this file")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def sim(input_file, output_file, mode, read_length, coverage, insert_size,
        systematic, region_length, name_prefix, seed, config_file,
        summary_file, log_file, verbose):
    """Simulate sequencing reads from a reference.

    Modes:
    - se: single-end reads
    - pe: paired-end reads (inward-facing mates, interleaved)
    - mp: mate-pair reads (outward-facing mates, interleaved)
    - pacbio: long reads with negative-binomial lengths
    - contig: tiled contigs written as FASTA

    Options given on the command line override the config file.
    """
    from synreads.simulate.fragsim.errors import ConfigurationError, FormatError
    from synreads.simulate.reads import run_read_simulation
    from synreads.utils.logging_utils import setup_logger

    setup_logger(log_file=log_file, level=logging.DEBUG if verbose else logging.INFO)

    try:
        run_read_simulation(
            input_file=input_file,
            output_file=output_file,
            mode=mode,
            read_length=read_length,
            coverage=coverage,
            insert_size=insert_size,
            systematic=systematic,
            region_length=region_length,
            name_prefix=name_prefix,
            seed=seed,
            config_file=config_file,
            summary_file=summary_file,
        )
    except ConfigurationError as e:
        raise click.UsageError(str(e))
    except (FormatError, FileNotFoundError) as e:
        raise click.ClickException(str(e))


# ============================================================================
# Configuration helpers
# ============================================================================

@main.command("init-config")
@click.option("-o", "--output", required=True, help="Output config file (.yaml/.json)")
@click.option("-m", "--mode", type=click.Choice(MODE_CHOICES, case_sensitive=False),
              default="se", show_default=True, help="Mode to prefill")
def init_config(output, mode):
    """Write a starter configuration file."""
    from synreads.simulate.fragsim.config import get_default_config

    config = get_default_config(mode)
    if output.endswith(".json"):
        config.to_json(output)
    else:
        config.to_yaml(output)
    click.echo(f"Wrote {mode} configuration to {output}")


@main.command("modes")
def modes():
    """List sequencing modes."""
    from synreads.simulate.fragsim.config import MODE_DESCRIPTIONS

    for mode, description in MODE_DESCRIPTIONS.items():
        anchor = "insert_size" if mode.is_paired else "read_length"
        fmt = "FASTA" if mode.emits_fasta else "FASTQ"
        click.echo(f"{mode.value:<8}{fmt:<7}anchor={anchor:<12}{description}")


if __name__ == "__main__":
    main()
