"""
Sequence type detection and alphabet validation.

Classification is a heuristic over the uppercased, whitespace-free
content of a sequence. It is not a strict biological classifier: several
IUPAC nucleotide ambiguity codes (H, K, M, R, S, V, W, Y, N) share letters
with the protein-only amino-acid set, and any of them forces a protein
call.
"""

import re
from enum import Enum

_WHITESPACE = re.compile(r"\s+")

# Amino acids that never appear in a nucleotide alphabet
PROTEIN_ONLY_CHARS = frozenset("EFHIKLMNPQRSVWY")
DNA_CHARS = frozenset("ACGT")

_DNA_PATTERN = re.compile(r"[ATCGatcg]*")
_RNA_PATTERN = re.compile(r"[AUCGaucg]*")


class SequenceType(str, Enum):
    """Kind of biological sequence detected from its content."""

    DNA = "dna"
    RNA = "rna"
    PROTEIN = "protein"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @property
    def is_nucleic(self) -> bool:
        return self in (SequenceType.DNA, SequenceType.RNA)


def strip_whitespace(sequence: str) -> str:
    """Remove every whitespace character, including internal ones."""
    return _WHITESPACE.sub("", sequence)


def clean_sequence(sequence: str) -> str:
    """Remove whitespace and uppercase a sequence."""
    return strip_whitespace(sequence).upper()


def classify(sequence: str) -> SequenceType:
    """
    Detect whether a sequence is DNA, RNA or protein.

    Rules are applied in order on the cleaned sequence:

    1. Empty -> unknown
    2. Any protein-only amino acid (E F H I K L M N P Q R S V W Y) -> protein
    3. Contains U but no T -> rna
    4. Contains T but no U -> dna
    5. Only A, C, G, T -> dna
    6. Anything else -> unknown

    Args:
        sequence: Raw sequence text; case and whitespace are ignored

    Returns:
        The detected SequenceType

    Example:
        >>> classify("ACGU")
        <SequenceType.RNA: 'rna'>
        >>> classify("AT\\nCG").value
        'dna'
    """
    cleaned = clean_sequence(sequence)
    if not cleaned:
        return SequenceType.UNKNOWN

    if any(char in PROTEIN_ONLY_CHARS for char in cleaned):
        return SequenceType.PROTEIN

    has_t = "T" in cleaned
    has_u = "U" in cleaned
    if has_u and not has_t:
        return SequenceType.RNA
    if has_t and not has_u:
        return SequenceType.DNA

    if all(char in DNA_CHARS for char in cleaned):
        return SequenceType.DNA

    return SequenceType.UNKNOWN


def is_valid_dna(sequence: str) -> bool:
    """
    Check that a sequence only contains A, C, G and T (either case).

    Whitespace is ignored. Ambiguity codes such as N are rejected.
    An empty sequence is valid.
    """
    return _DNA_PATTERN.fullmatch(strip_whitespace(sequence)) is not None


def is_valid_rna(sequence: str) -> bool:
    """Check that a sequence only contains A, C, G and U (either case)."""
    return _RNA_PATTERN.fullmatch(strip_whitespace(sequence)) is not None
