import gzip
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union


@dataclass
class FastaRecord:
    """
    A single FASTA entry.

    Attributes:
        id: Sequence identifier (first word after '>')
        description: Full header line without the '>'
        sequence: Sequence lines joined together, case untouched
    """
    id: str
    description: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)


def _open_file(filepath: Union[str, Path], mode: str = "rt"):
    """Open a file, handling gzip compression if needed."""
    filepath = Path(filepath)
    if filepath.suffix == ".gz":
        return gzip.open(filepath, mode, encoding="utf-8")
    return open(filepath, mode, encoding="utf-8")


def _make_record(header: str, lines: List[str]) -> FastaRecord:
    seq_id = header.split()[0] if header else ""
    return FastaRecord(id=seq_id, description=header, sequence="".join(lines))


def parse_fasta_string(content: str) -> Iterator[FastaRecord]:
    """
    Parse FASTA records from a string.

    Blank lines are skipped and text before the first header is ignored.

    Args:
        content: FASTA formatted text

    Yields:
        FastaRecord objects
    """
    current_header: Optional[str] = None
    current_sequence: List[str] = []

    for line in content.splitlines():
        line = line.strip()
        if not line:
            continue

        if line.startswith(">"):
            if current_header is not None:
                yield _make_record(current_header, current_sequence)
            current_header = line[1:].strip()
            current_sequence = []
        elif current_header is not None:
            current_sequence.append(line)

    if current_header is not None:
        yield _make_record(current_header, current_sequence)


def read_fasta(filepath: Union[str, Path]) -> Iterator[FastaRecord]:
    """
    Read records from a FASTA file (plain or .gz).

    Example:
        >>> for record in read_fasta("sequences.fasta"):
        ...     print(f"{record.id}: {len(record)} residues")
    """
    with _open_file(filepath, "rt") as f:
        yield from parse_fasta_string(f.read())


def looks_like_fasta(content: str) -> bool:
    """True when the first non-blank line is a FASTA header."""
    for line in content.splitlines():
        if line.strip():
            return line.lstrip().startswith(">")
    return False
