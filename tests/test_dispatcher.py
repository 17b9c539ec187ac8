"""Tests for operation dispatch."""

import pytest

from biotools.errors import (
    BiotoolsError,
    RemoteOperationError,
    UnsupportedOperationError,
    ValidationError,
)
from biotools.operations import Operation, available_operations, dispatch
from biotools.results import OperationResult, StatsResult
from biotools.sequence import SequenceType


class TestDispatch:
    """Each local operation through dispatch()."""

    def test_reverse_complement(self):
        result = dispatch("reverse-complement", "atgc")
        assert result == OperationResult("gcat", "atgc", SequenceType.DNA)
        assert result.to_dict() == {
            "result": "gcat",
            "original_sequence": "atgc",
            "sequence_type": "dna",
        }

    def test_transcribe(self):
        result = dispatch("transcribe", "ATGC")
        assert result.result == "AUGC"
        assert result.sequence_type == SequenceType.DNA

    def test_reverse_transcribe(self):
        result = dispatch("reverse-transcribe", "AUGC")
        assert result.result == "ATGC"
        assert result.sequence_type == SequenceType.RNA

    def test_translate_dna(self):
        result = dispatch("translate", "ATGTAA")
        assert result.result == "M*"
        assert result.sequence_type == SequenceType.DNA

    def test_translate_rna(self):
        result = dispatch("translate", "AUGGCC")
        assert result.result == "MA"
        assert result.sequence_type == SequenceType.RNA

    def test_case_and_newlines_report_type(self):
        assert dispatch("uppercase", "acgu").sequence_type == SequenceType.RNA
        assert dispatch("lowercase", "EFGH").result == "efgh"
        result = dispatch("remove-newlines", "AT\nCG")
        assert result.result == "ATCG"
        assert result.original_sequence == "AT\nCG"
        assert result.sequence_type == SequenceType.DNA

    def test_reverse_complement_keeps_newlines(self):
        result = dispatch("reverse-complement", "AT\nCG")
        assert result.result == "CG\nAT"
        assert result.original_sequence == "AT\nCG"

    def test_transcribe_keeps_newlines(self):
        result = dispatch("transcribe", "AT\r\nTG")
        assert result.result == "AU\r\nUG"
        assert result.original_sequence == "AT\r\nTG"

    def test_stats(self):
        result = dispatch("stats", "ATGC")
        assert isinstance(result, StatsResult)
        assert result.gc_content == 50.0

    def test_enum_value_accepted(self):
        assert dispatch(Operation.TRANSCRIBE, "T").result == "U"

    def test_available_operations(self):
        assert available_operations() == [
            "reverse-complement",
            "transcribe",
            "reverse-transcribe",
            "translate",
            "uppercase",
            "lowercase",
            "remove-newlines",
            "stats",
        ]

    def test_empty_input(self):
        assert dispatch("reverse-complement", "").result == ""
        assert dispatch("uppercase", "").sequence_type == SequenceType.UNKNOWN
        assert dispatch("stats", "").length == 0


class TestDispatchErrors:

    def test_unsupported(self):
        with pytest.raises(UnsupportedOperationError) as excinfo:
            dispatch("bogus-op", "ATGC")
        assert excinfo.value.operation_id == "bogus-op"
        assert "bogus-op" in str(excinfo.value)

    def test_remote_only(self):
        with pytest.raises(RemoteOperationError):
            dispatch("primer-design", "ATGC")

    def test_remote_is_unsupported_locally(self):
        with pytest.raises(UnsupportedOperationError):
            dispatch("grna-design", "ATGC")

    @pytest.mark.parametrize("operation", ["reverse-complement", "transcribe"])
    def test_invalid_dna(self, operation):
        with pytest.raises(ValidationError, match="not a valid DNA sequence"):
            dispatch(operation, "ATGCN")

    def test_invalid_rna(self):
        with pytest.raises(ValidationError, match="not a valid RNA sequence"):
            dispatch("reverse-transcribe", "ATGC")

    def test_translate_protein_rejected(self):
        with pytest.raises(ValidationError, match="DNA or RNA"):
            dispatch("translate", "EFGH")

    def test_translate_empty_rejected(self):
        with pytest.raises(ValidationError):
            dispatch("translate", "")

    def test_error_hierarchy(self):
        assert issubclass(ValidationError, ValueError)
        assert issubclass(ValidationError, BiotoolsError)
        assert issubclass(UnsupportedOperationError, LookupError)
