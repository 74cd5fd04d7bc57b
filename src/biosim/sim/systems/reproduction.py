from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from ..core.cell import CellParts, NeuronData, OtherData, new_cell
from ..core.config import GenomeLengthError
from ..core.gene import GENE_BITS, Gene

if TYPE_CHECKING:
    from ..core.rng import DeterministicRng

OSCILLATOR_BITS = 32


def new_random(genome_size: int, steps_per_gen: int, rng: DeterministicRng) -> CellParts:
    genome = [Gene.random(rng) for _ in range(genome_size)]
    oscillator = rng.next_bits(OSCILLATOR_BITS)
    return new_cell(genome, oscillator, steps_per_gen, rng)


def sexually_reproduce(
    parent_a: Tuple[OtherData, NeuronData],
    parent_b: Tuple[OtherData, NeuronData],
    genome_length: int,
    steps_per_gen: int,
    mutation_rate: float,
    rng: DeterministicRng,
) -> CellParts:
    """Uniform crossover: every position picks its own parent, then may mutate."""
    genome_a = parent_a[0].genome
    genome_b = parent_b[0].genome
    _check_length(genome_a, genome_length)
    _check_length(genome_b, genome_length)

    genes: List[Gene] = []
    for i in range(genome_length):
        gene = genome_a[i] if rng.next_bool() else genome_b[i]
        if rng.next_percent_hit(mutation_rate):
            gene = gene.flip_bit(rng.next_int(GENE_BITS))
        genes.append(gene)

    oscillator = parent_a[1].oscillator_period if rng.next_bool() else parent_b[1].oscillator_period
    oscillator = _mutate_oscillator(oscillator, mutation_rate, rng)
    return new_cell(genes, oscillator, steps_per_gen, rng)


def asexually_reproduce(
    parent: Tuple[OtherData, int],
    genome_length: int,
    steps_per_gen: int,
    mutation_rate: float,
    rng: DeterministicRng,
) -> CellParts:
    other, oscillator = parent
    _check_length(other.genome, genome_length)

    genes = list(other.genome)
    for i in range(genome_length):
        if rng.next_percent_hit(mutation_rate):
            genes[i] = genes[i].flip_bit(rng.next_int(GENE_BITS))

    oscillator = _mutate_oscillator(oscillator, mutation_rate, rng)
    return new_cell(genes, oscillator, steps_per_gen, rng)


def _mutate_oscillator(oscillator: int, mutation_rate: float, rng: DeterministicRng) -> int:
    if rng.next_percent_hit(mutation_rate):
        oscillator ^= 1 << rng.next_int(OSCILLATOR_BITS)
    return oscillator


def _check_length(genome: Tuple[Gene, ...], genome_length: int) -> None:
    if len(genome) != genome_length:
        raise GenomeLengthError(
            f"parent genome has {len(genome)} genes, expected genome_length={genome_length}"
        )
