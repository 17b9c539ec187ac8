#!/usr/bin/env python3
"""
Example: Sequence Analysis with biotools

This example walks through the library entry points:
- Detecting sequence types
- Reverse complement, transcription and translation
- Composition statistics
- Dispatching operations by identifier
"""

import sys
sys.path.insert(0, '..')

from biotools import (
    ValidationError,
    UnsupportedOperationError,
    classify,
    compute_stats,
    composition_breakdown,
    dispatch,
    reverse_complement,
    summarize,
    transcribe,
    translate,
)


def demo_classification():
    """Show how sequence types are detected."""
    print("\n" + "=" * 60)
    print("SEQUENCE TYPES")
    print("=" * 60)

    examples = ["ATGCGT", "AUGCGU", "MKTAYIAKQR", "ACGTN", "", "AT\nCG"]
    for seq in examples:
        print(f"  {seq!r:16} -> {classify(seq).value}")

    print(f"\n  {summarize('1 acgtacgt 8')}")


def demo_transforms():
    """Reverse complement, transcription and translation."""
    print("\n" + "=" * 60)
    print("TRANSFORMS")
    print("=" * 60)

    seq = "ATGCGATCGA"
    print(f"\nOriginal:    5'-{seq}-3'")
    print(f"Rev Comp:    5'-{reverse_complement(seq)}-3'")
    print(f"Transcribed: {transcribe(seq)}")

    palindrome = "GAATTC"  # EcoRI site
    print(f"\nEcoRI site is palindromic: {palindrome == reverse_complement(palindrome)}")

    # Start of GFP
    dna = "ATGGTGAGCAAGGGCGAGGAGCTGTTCACCGGGGTGGTGCCCATCCTGGTCGAGCTGGACGGCGACGTAAACGGCCACAAGTTCAGCGTGTCCGGCGAGGGCGAGGGCGATGCCACCTACGGCAAGCTGACCCTGAAGTTCATCTGA"
    protein = translate(dna)
    print(f"\nProtein ({len(protein)} aa, stop included):")
    print(f"  {protein}")


def demo_statistics():
    """Composition, GC content and weight."""
    print("\n" + "=" * 60)
    print("STATISTICS")
    print("=" * 60)

    stats = compute_stats("ATGCATGCATGCTAGCTGATCGATCGATCGATCG")
    print(f"\nType: {stats.sequence_type.value}, length: {stats.length}")
    print(f"GC content: {stats.gc_content}%")
    print(f"Molecular weight: {stats.molecular_weight:,} Da")
    print("Composition:")
    for entry in composition_breakdown(stats.composition):
        print(f"  {entry.symbol}: {entry.count} ({entry.percent}%)")


def demo_dispatch():
    """Run operations by identifier, including failures."""
    print("\n" + "=" * 60)
    print("DISPATCH")
    print("=" * 60)

    for operation, seq in [
        ("reverse-complement", "atgc"),
        ("translate", "AUGGCCUAA"),
        ("reverse-transcribe", "ATGC"),
        ("bogus-op", "ATGC"),
    ]:
        try:
            print(f"\n  {operation}: {dispatch(operation, seq).to_dict()}")
        except (ValidationError, UnsupportedOperationError) as exc:
            print(f"\n  {operation}: error: {exc}")


def main():
    print("=" * 60)
    print("biotools Sequence Analysis Demo")
    print("=" * 60)

    demo_classification()
    demo_transforms()
    demo_statistics()
    demo_dispatch()

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
