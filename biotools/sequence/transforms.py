"""
Core sequence transforms.

Pure string-to-string functions for DNA and RNA sequences: reverse
complement, transcription, reverse transcription, translation, case
conversion and newline removal. None of them validate their input; the
dispatcher checks preconditions before calling them.
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional

from biotools.sequence.classify import clean_sequence

# Watson-Crick pairs, case preserved
DNA_COMPLEMENT = MappingProxyType({
    "A": "T", "T": "A", "G": "C", "C": "G",
    "a": "t", "t": "a", "g": "c", "c": "g",
})

_COMPLEMENT_TABLE = str.maketrans(dict(DNA_COMPLEMENT))
_TRANSCRIBE_TABLE = str.maketrans("Tt", "Uu")
_REVERSE_TRANSCRIBE_TABLE = str.maketrans("Uu", "Tt")
_NEWLINES = re.compile(r"[\r\n]")

# Standard genetic code (DNA codons)
CODON_TABLE = MappingProxyType({
    "TTT": "F", "TTC": "F", "TTA": "L", "TTG": "L",
    "TCT": "S", "TCC": "S", "TCA": "S", "TCG": "S",
    "TAT": "Y", "TAC": "Y", "TAA": "*", "TAG": "*",
    "TGT": "C", "TGC": "C", "TGA": "*", "TGG": "W",
    "CTT": "L", "CTC": "L", "CTA": "L", "CTG": "L",
    "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAT": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGT": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "ATT": "I", "ATC": "I", "ATA": "I", "ATG": "M",
    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAT": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGT": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V",
    "GCT": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAT": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
})

STOP_SYMBOL = "*"
UNKNOWN_AMINO_ACID = "X"
STOP_CODONS = frozenset(
    codon for codon, aa in CODON_TABLE.items() if aa == STOP_SYMBOL
)


def reverse_complement(sequence: str) -> str:
    """
    Get the reverse complement of a DNA sequence.

    Case is preserved per base; characters without a complement
    (whitespace, ambiguity codes) are kept as they are.

    Args:
        sequence: DNA sequence string

    Returns:
        Reverse complement sequence

    Example:
        >>> reverse_complement("AACG")
        'CGTT'
        >>> reverse_complement("atgc")
        'gcat'
    """
    return sequence.translate(_COMPLEMENT_TABLE)[::-1]


def transcribe(sequence: str) -> str:
    """
    Transcribe DNA to RNA by replacing T with U.

    Example:
        >>> transcribe("ATGc")
        'AUGc'
    """
    return sequence.translate(_TRANSCRIBE_TABLE)


def reverse_transcribe(sequence: str) -> str:
    """Reverse-transcribe RNA to DNA by replacing U with T."""
    return sequence.translate(_REVERSE_TRANSCRIBE_TABLE)


def translate(
    sequence: str,
    codon_table: Optional[Mapping[str, str]] = None
) -> str:
    """
    Translate a DNA or RNA sequence to protein.

    The sequence is cleaned (whitespace removed, uppercased) and U is
    read as T, so RNA codons use the same table as DNA codons. Codons are
    read in frame 0; a trailing partial codon is ignored. Translation
    stops at the first stop codon, which is kept in the output as '*'.

    Args:
        sequence: DNA or RNA sequence
        codon_table: Custom codon table (defaults to the standard code)

    Returns:
        Amino acid sequence, with 'X' for codons not in the table

    Example:
        >>> translate("ATGGCC")
        'MA'
        >>> translate("AUGUAAGGG")
        'M*'
    """
    if codon_table is None:
        codon_table = CODON_TABLE

    sequence = clean_sequence(sequence).replace("U", "T")

    protein = []
    for i in range(0, len(sequence) - 2, 3):
        aa = codon_table.get(sequence[i:i + 3], UNKNOWN_AMINO_ACID)
        protein.append(aa)
        if aa == STOP_SYMBOL:
            break

    return "".join(protein)


def to_uppercase(sequence: str) -> str:
    return sequence.upper()


def to_lowercase(sequence: str) -> str:
    return sequence.lower()


def remove_newlines(sequence: str) -> str:
    """Remove carriage returns and line feeds, keeping all other characters."""
    return _NEWLINES.sub("", sequence)
