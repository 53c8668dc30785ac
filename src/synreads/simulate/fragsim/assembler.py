"""
Fragment assembly: turn one (offset, length) draw into output records.

- bounds check (overrunning fragments are dropped, never corrected)
- sequence/quality slicing, or a flat quality for FASTA input
- independent strand flip per fragment
- single read, mate pair (pe inward / mp outward) or FASTA contig
"""

import logging
from typing import List, Optional, Tuple

from .config import Mode, SimConfig
from .models import Fragment, OutputRead, Region, RunContext
from .seq_utils import flat_quality, reverse_complement_read

logger = logging.getLogger(__name__)


class FragmentAssembler:
    """Builds reads from sampled fragments for one configured mode."""

    def __init__(self, config: SimConfig):
        self.config = config
        self.mode = config.mode
        self.read_length = config.read_length
        self.prefix = config.name_prefix

    def extract(
        self,
        region: Region,
        fragment: Fragment,
        context: RunContext,
        with_quality: bool = True,
    ) -> Optional[Tuple[str, Optional[str]]]:
        """
        Slice a fragment and apply its strand.

        Args:
            region: Source region
            fragment: Offset/length relative to the region
            context: Run context (strand draw)
            with_quality: Slice or synthesize quality alongside the sequence

        Returns:
            (sequence, quality) oriented on the drawn strand, or None if the
            fragment does not fit in the region
        """
        if not fragment.fits(region.length):
            return None

        start, end = fragment.offset, fragment.end
        seq = region.sequence[start:end]
        qual = None
        if with_quality:
            if region.quality is not None:
                qual = region.quality[start:end]
            else:
                qual = flat_quality(fragment.length)

        if context.flip_strand():
            seq, qual = reverse_complement_read(seq, qual)
        return seq, qual

    def assemble(
        self,
        region: Region,
        fragment: Fragment,
        context: RunContext,
    ) -> List[OutputRead]:
        """Return the records for one fragment; empty when it was skipped."""
        extracted = self.extract(
            region, fragment, context, with_quality=not self.mode.emits_fasta
        )
        if extracted is None:
            logger.debug(
                f"Skipped fragment {fragment.offset}+{fragment.length} "
                f"(region length {region.length})"
            )
            return []
        seq, qual = extracted

        name = f"{self.prefix}{context.next_fragment_id()}"

        if self.mode is Mode.CONTIG:
            return [OutputRead(name=name, sequence=seq)]

        if self.mode.is_paired:
            return self._mates(name, seq, qual)

        if self.mode is Mode.SE:
            seq, qual = seq[:self.read_length], qual[:self.read_length]
        return [OutputRead(name=name, sequence=seq, quality=qual)]

    def _mates(self, name: str, seq: str, qual: str) -> List[OutputRead]:
        """
        Mate 1 is the first read_length bases, mate 2 the last read_length
        bases (they overlap when the fragment is shorter than two reads).
        """
        n = self.read_length
        seq1, qual1 = seq[:n], qual[:n]
        seq2, qual2 = seq[-n:], qual[-n:]

        if self.mode is Mode.PE:
            seq2, qual2 = reverse_complement_read(seq2, qual2)
        else:
            seq1, qual1 = reverse_complement_read(seq1, qual1)

        return [
            OutputRead(name=f"{name}/1", sequence=seq1, quality=qual1),
            OutputRead(name=f"{name}/2", sequence=seq2, quality=qual2),
        ]
