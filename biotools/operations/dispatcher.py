"""
Operation dispatch.

Maps an operation identifier to its precondition check and
implementation, and shapes the output into a result record. The set of
local operations is closed; identifiers served only by the remote
sequence service are recognised but refused with RemoteOperationError.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List

from biotools.errors import (
    RemoteOperationError,
    UnsupportedOperationError,
    ValidationError,
)
from biotools.results import OperationResult, Result
from biotools.sequence.classify import (
    SequenceType,
    classify,
    is_valid_dna,
    is_valid_rna,
)
from biotools.sequence.transforms import (
    remove_newlines,
    reverse_complement,
    reverse_transcribe,
    to_lowercase,
    to_uppercase,
    transcribe,
    translate,
)
from biotools.stats.composition import compute_stats

LOGGER = logging.getLogger(__name__)

INVALID_DNA_MESSAGE = "Input sequence is not a valid DNA sequence"
INVALID_RNA_MESSAGE = "Input sequence is not a valid RNA sequence"
INVALID_NUCLEIC_MESSAGE = "Input sequence is not a valid DNA or RNA sequence"

# Served by the sequence service only
REMOTE_OPERATIONS = frozenset({"primer-design", "grna-design"})


class Operation(str, Enum):
    """Operations implemented by the local library."""

    REVERSE_COMPLEMENT = "reverse-complement"
    TRANSCRIBE = "transcribe"
    REVERSE_TRANSCRIBE = "reverse-transcribe"
    TRANSLATE = "translate"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    REMOVE_NEWLINES = "remove-newlines"
    STATS = "stats"

    @classmethod
    def from_id(cls, operation_id: str) -> "Operation":
        """
        Look up an operation by identifier.

        Raises:
            RemoteOperationError: If the id is only available remotely
            UnsupportedOperationError: For any other unknown id
        """
        try:
            return cls(operation_id)
        except ValueError:
            if operation_id in REMOTE_OPERATIONS:
                raise RemoteOperationError(operation_id) from None
            raise UnsupportedOperationError(operation_id) from None


def _reverse_complement(sequence: str) -> OperationResult:
    if not is_valid_dna(sequence):
        raise ValidationError(INVALID_DNA_MESSAGE)
    return OperationResult(reverse_complement(sequence), sequence, SequenceType.DNA)


def _transcribe(sequence: str) -> OperationResult:
    if not is_valid_dna(sequence):
        raise ValidationError(INVALID_DNA_MESSAGE)
    return OperationResult(transcribe(sequence), sequence, SequenceType.DNA)


def _reverse_transcribe(sequence: str) -> OperationResult:
    if not is_valid_rna(sequence):
        raise ValidationError(INVALID_RNA_MESSAGE)
    return OperationResult(reverse_transcribe(sequence), sequence, SequenceType.RNA)


def _translate(sequence: str) -> OperationResult:
    sequence_type = classify(sequence)
    if not sequence_type.is_nucleic:
        raise ValidationError(INVALID_NUCLEIC_MESSAGE)
    return OperationResult(translate(sequence), sequence, sequence_type)


def _plain(transform: Callable[[str], str]) -> Callable[[str], OperationResult]:
    """Wrap a transform that has no precondition."""
    def handler(sequence: str) -> OperationResult:
        return OperationResult(transform(sequence), sequence, classify(sequence))
    return handler


_HANDLERS: Dict[Operation, Callable[[str], Result]] = {
    Operation.REVERSE_COMPLEMENT: _reverse_complement,
    Operation.TRANSCRIBE: _transcribe,
    Operation.REVERSE_TRANSCRIBE: _reverse_transcribe,
    Operation.TRANSLATE: _translate,
    Operation.UPPERCASE: _plain(to_uppercase),
    Operation.LOWERCASE: _plain(to_lowercase),
    Operation.REMOVE_NEWLINES: _plain(remove_newlines),
    Operation.STATS: compute_stats,
}

_missing = set(Operation) - set(_HANDLERS)
if _missing:
    raise RuntimeError(f"No handler registered for: {sorted(op.value for op in _missing)}")


def available_operations() -> List[str]:
    """Identifiers of every locally implemented operation."""
    return [op.value for op in Operation]


def dispatch(operation_id: str, sequence: str) -> Result:
    """
    Run an operation on a sequence.

    Args:
        operation_id: One of the Operation values, e.g. "translate"
        sequence: Raw sequence text

    Returns:
        OperationResult for transforms, StatsResult for "stats"

    Raises:
        UnsupportedOperationError: Unknown operation id
        RemoteOperationError: Operation only available remotely
        ValidationError: The sequence fails the operation's precondition

    Example:
        >>> dispatch("reverse-complement", "atgc").result
        'gcat'
    """
    operation = Operation.from_id(operation_id)
    LOGGER.debug("Dispatching %s on %d characters", operation.value, len(sequence))
    return _HANDLERS[operation](sequence)
