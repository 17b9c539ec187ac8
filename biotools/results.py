"""
Result records returned by sequence operations.

Both record types are immutable and serialise to the JSON shape used by
the sequence service, so local and remote results can be handled the
same way.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from biotools.errors import ServiceError
from biotools.sequence.classify import SequenceType


@dataclass(frozen=True)
class OperationResult:
    """
    Output of a transform operation.

    Attributes:
        result: The transformed sequence
        original_sequence: The input, exactly as supplied
        sequence_type: Type used or assumed for the operation
    """
    result: str
    original_sequence: str
    sequence_type: SequenceType

    def to_dict(self) -> Dict[str, Any]:
        return {
            "result": self.result,
            "original_sequence": self.original_sequence,
            "sequence_type": self.sequence_type.value,
        }


@dataclass(frozen=True)
class StatsResult:
    """
    Descriptive statistics for a sequence.

    Attributes:
        length: Length after whitespace removal
        composition: Symbol counts in first-seen order
        sequence_type: Detected sequence type
        gc_content: GC percentage with one decimal (DNA/RNA only)
        molecular_weight: Rough weight estimate in Daltons
    """
    length: int
    composition: Dict[str, int] = field(default_factory=dict)
    sequence_type: SequenceType = SequenceType.UNKNOWN
    gc_content: Optional[float] = None
    molecular_weight: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "length": self.length,
            "composition": dict(self.composition),
            "sequence_type": self.sequence_type.value,
        }
        if self.gc_content is not None:
            data["gc_content"] = self.gc_content
        if self.molecular_weight is not None:
            data["molecular_weight"] = self.molecular_weight
        return data


Result = Union[OperationResult, StatsResult]


def _parse_sequence_type(value: Any) -> SequenceType:
    try:
        return SequenceType(str(value).lower())
    except ValueError:
        return SequenceType.UNKNOWN


def parse_result(payload: Mapping[str, Any]) -> Result:
    """
    Build a result record from a sequence service JSON body.

    Args:
        payload: Decoded JSON object

    Returns:
        OperationResult if the body has a 'result' field,
        StatsResult if it has a 'composition' field

    Raises:
        ServiceError: If the body is an error object ({"detail": ...})
            or has neither shape
    """
    if not isinstance(payload, Mapping):
        raise ServiceError(f"Unexpected response body: {payload!r}")

    if "detail" in payload:
        raise ServiceError(str(payload["detail"]))

    sequence_type = _parse_sequence_type(payload.get("sequence_type"))

    if "result" in payload:
        return OperationResult(
            result=str(payload["result"]),
            original_sequence=str(payload.get("original_sequence", "")),
            sequence_type=sequence_type,
        )

    if "composition" in payload:
        try:
            return _parse_stats(payload, sequence_type)
        except (AttributeError, TypeError, ValueError) as exc:
            raise ServiceError(f"Malformed response body: {exc}") from exc

    raise ServiceError("Response has neither 'result' nor 'composition'")


def _parse_stats(payload: Mapping[str, Any], sequence_type: SequenceType) -> StatsResult:
    gc_content = payload.get("gc_content")
    molecular_weight = payload.get("molecular_weight")
    return StatsResult(
        length=int(payload.get("length", 0)),
        composition={
            str(symbol): int(count)
            for symbol, count in payload["composition"].items()
        },
        sequence_type=sequence_type,
        gc_content=None if gc_content is None else float(gc_content),
        molecular_weight=(
            None if molecular_weight is None else int(round(molecular_weight))
        ),
    )
