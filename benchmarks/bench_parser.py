#!/usr/bin/env python3
"""
Benchmark script comparing SMILES parsing speed between RDKit and smilesink.

Usage:
    python benchmarks/bench_parser.py

RDKit does far more than smilesink here (sanitization, aromaticity), so the
numbers compare end-to-end "string to graph" time, not like with like.
"""

import os
import sys
import time
from dataclasses import dataclass

# Ensure local smilesink is used (not installed version)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

TEST_MOLECULES = {
    "small_ether": "CCOCC",
    "medium_drug": "CC(C)Cc1ccc(cc1)C(C)C(=O)O",  # Ibuprofen
    "drug_like": "Cc1ccc(cc1Nc2nccc(n2)c3cccnc3)NC(=O)c4ccc(cc4)CN5CCN(CC5)C",  # Imatinib-like
    "large_complex": "CCn1c2ccc3cc2c2cc(ccc21)C(=O)c1ccc(cc1)Cn1c[n+](c2ccccc21)Cc1ccc(cc1)C(=O)c1ccc2c(c1)c1cc(ccc1n2CC)C(=O)c1ccc(cc1)C[n+]1cn(c2ccccc21)Cc1ccc(cc1)C3=O",
}

ITERATIONS = 2000


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    name: str
    time_seconds: float
    iterations: int
    num_atoms: int
    
    @property
    def time_per_call_us(self) -> float:
        return (self.time_seconds / self.iterations) * 1_000_000
    
    @property
    def time_per_atom_us(self) -> float:
        """Microseconds per atom per call."""
        return self.time_per_call_us / self.num_atoms


def benchmark_smilesink(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark smilesink parse() into the default Molecule."""
    from smilesink import parse
    
    num_atoms = parse(smiles).num_atoms
    
    start = time.perf_counter()
    for _ in range(iterations):
        parse(smiles)
    end = time.perf_counter()
    
    return BenchmarkResult("smilesink", end - start, iterations, num_atoms)


def benchmark_rdkit(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark RDKit MolFromSmiles."""
    from rdkit import Chem
    
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit failed to parse SMILES: {smiles}")
    num_atoms = mol.GetNumAtoms()
    
    start = time.perf_counter()
    for _ in range(iterations):
        Chem.MolFromSmiles(smiles)
    end = time.perf_counter()
    
    return BenchmarkResult("rdkit", end - start, iterations, num_atoms)


def main() -> None:
    print("=" * 70)
    print("SMILES Parsing Benchmark: RDKit vs smilesink")
    print("=" * 70)
    print(f"Iterations: {ITERATIONS}")
    
    for label, smiles in TEST_MOLECULES.items():
        print("-" * 70)
        print(f"{label} ({len(smiles)} chars)")
        for bench in (benchmark_smilesink, benchmark_rdkit):
            try:
                result = bench(smiles, ITERATIONS)
            except ImportError:
                print(f"  {bench.__name__}: SKIPPED (not installed)")
                continue
            print(
                f"  {result.name:10s} {result.time_per_call_us:10.1f} us/call"
                f"  {result.time_per_atom_us:8.2f} us/atom"
            )
    
    print("=" * 70)


if __name__ == "__main__":
    main()
