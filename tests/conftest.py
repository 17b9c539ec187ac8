"""Shared fixtures for biotools tests."""

import pytest

from biotools.config import BiotoolsConfig


@pytest.fixture
def dna_sequences():
    """DNA sequences built only from A, C, G and T."""
    return ["ACGT", "AACG", "atgcgt", "GGGCCCAAATTT", "TTAGGC", "A"]


@pytest.fixture
def protein_sequence():
    """Short protein fragment."""
    return "MKTAYIAKQRQISFVKSHFSRQDILDLQY"


@pytest.fixture
def service_config():
    """Config pointing at a fake sequence service."""
    return BiotoolsConfig(api_base_url="http://service.test", timeout_sec=2.0)


@pytest.fixture
def fasta_text():
    """Two-record FASTA document with wrapped lines."""
    return ">seq1 first record\nATGC\nGGTA\n\n>seq2\naugc\n"
