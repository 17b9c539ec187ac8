"""
Sequence classification, validation and transforms.

This module provides:
- Sequence type detection (DNA, RNA, protein)
- Strict DNA/RNA alphabet checks
- Reverse complement, transcription and reverse transcription
- Codon translation
- Case conversion and newline removal
"""

from biotools.sequence.classify import (
    SequenceType,
    classify,
    is_valid_dna,
    is_valid_rna,
    clean_sequence,
    strip_whitespace,
    PROTEIN_ONLY_CHARS,
)

from biotools.sequence.transforms import (
    reverse_complement,
    transcribe,
    reverse_transcribe,
    translate,
    to_uppercase,
    to_lowercase,
    remove_newlines,
    CODON_TABLE,
    STOP_CODONS,
)

__all__ = [
    "SequenceType",
    "classify",
    "is_valid_dna",
    "is_valid_rna",
    "clean_sequence",
    "strip_whitespace",
    "PROTEIN_ONLY_CHARS",
    "reverse_complement",
    "transcribe",
    "reverse_transcribe",
    "translate",
    "to_uppercase",
    "to_lowercase",
    "remove_newlines",
    "CODON_TABLE",
    "STOP_CODONS",
]
