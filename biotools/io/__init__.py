"""
Sequence input helpers.

FASTA parsing for plain and gzip-compressed files, used by the command
line to feed records into the sequence operations.
"""

from biotools.io.fasta import (
    read_fasta,
    parse_fasta_string,
    looks_like_fasta,
    FastaRecord,
)

__all__ = [
    "read_fasta",
    "parse_fasta_string",
    "looks_like_fasta",
    "FastaRecord",
]
