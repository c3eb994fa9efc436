"""Comparative benchmark of the sorting algorithms, with CSV export."""

from __future__ import annotations

import argparse
import csv
import random
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from .algorithms import bubble_sort, insertion_sort, merge_sort, quick_sort, selection_sort
from .generators import (
    partially_sorted_array,
    random_array,
    reverse_sorted_array,
    sorted_array,
)
from .metrics import Metrics, is_sorted

SortFunction = Callable[[MutableSequence[int], Metrics], None]

DEFAULT_SIZES = (100, 250, 500, 1000, 2500, 5000, 10000, 25000)
ALGORITHMS: tuple[tuple[str, SortFunction], ...] = (
    ("Bubble Sort", bubble_sort),
    ("Insertion Sort", insertion_sort),
    ("Selection Sort", selection_sort),
    ("Merge Sort", merge_sort),
    ("Quick Sort", quick_sort),
)
CSV_HEADER = (
    "Tipo_Dado",
    "Tamanho_Array",
    "Algoritmo",
    "Tempo_ms",
    "Tempo_s",
    "Comparacoes",
    "Trocas",
    "Memoria_Auxiliar_Bytes",
)
DEFAULT_OUTPUT = "resultados_ordenacao.csv"
_RULE = "==============================================================="


class DataKind(Enum):
    """Shape of the input array; the value is its display label."""

    RANDOM = "Aleatório"
    PARTIALLY_SORTED = "Parcialmente Ordenado"
    SORTED = "Ordenado"
    REVERSE_SORTED = "Ordenado Reversamente"


@dataclass(frozen=True)
class BenchmarkResult:
    """Measurements of one algorithm on one input."""

    kind: DataKind
    size: int
    algorithm: str
    time_ms: float
    comparisons: int
    swaps: int
    auxiliary_bytes: int
    is_sorted: bool

    @property
    def time_s(self) -> float:
        return self.time_ms / 1000.0


def generate(kind: DataKind, size: int, rng: random.Random | None = None) -> list[int]:
    """Build an input array of the given kind; partial disorder swaps 1% of the size."""
    if kind is DataKind.RANDOM:
        return random_array(size, rng)
    if kind is DataKind.PARTIALLY_SORTED:
        return partially_sorted_array(size, size // 100, rng)
    if kind is DataKind.SORTED:
        return sorted_array(size)
    return reverse_sorted_array(size)


def run_benchmark(
    kinds: Iterable[DataKind] = tuple(DataKind),
    sizes: Iterable[int] = DEFAULT_SIZES,
    algorithms: Iterable[tuple[str, SortFunction]] = ALGORITHMS,
    rng: random.Random | None = None,
) -> Iterator[BenchmarkResult]:
    """Yield one result per kind, size and algorithm, each on a freshly generated array."""
    rng = rng or random.Random()
    sizes = tuple(sizes)
    algorithms = tuple(algorithms)
    metrics = Metrics()
    for kind in kinds:
        for size in sizes:
            for name, sort in algorithms:
                arr = generate(kind, size, rng)
                metrics.reset()
                metrics.start_timer()
                sort(arr, metrics)
                elapsed = metrics.stop_timer()
                yield BenchmarkResult(
                    kind=kind,
                    size=size,
                    algorithm=name,
                    time_ms=elapsed,
                    comparisons=metrics.comparisons,
                    swaps=metrics.swaps,
                    auxiliary_bytes=metrics.auxiliary_bytes,
                    is_sorted=is_sorted(arr),
                )


def format_result(result: BenchmarkResult) -> str:
    """Console report of one result, or the error line if it did not sort."""
    if not result.is_sorted:
        return (
            "Erro: O array não esta ordenado corretamente pelo algoritmo."
            f"{result.algorithm}"
        )
    return (
        f"Algoritmo: {result.algorithm}\n"
        f"Tempo: {result.time_ms:.3f} ms ({result.time_s:.6f} segundos)\n"
        f"Comparações: {result.comparisons}\n"
        f"Trocas: {result.swaps}\n"
        f"Memoria Auxiliar: {result.auxiliary_bytes} bytes"
    )


def _csv_row(result: BenchmarkResult) -> list[str]:
    return [
        result.kind.value,
        str(result.size),
        result.algorithm,
        f"{result.time_ms:.6f}",
        f"{result.time_s:.6f}",
        str(result.comparisons),
        str(result.swaps),
        str(result.auxiliary_bytes),
    ]


def write_csv(results: Iterable[BenchmarkResult], stream: TextIO) -> int:
    """Write the header and one row per correctly sorted result; return the row count."""
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    count = 0
    for result in results:
        if result.is_sorted:
            writer.writerow(_csv_row(result))
            count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Run the full comparison, print it and export it as CSV."""
    parser = argparse.ArgumentParser(
        prog="sortbench", description="Compare sorting algorithms."
    )
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES))
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    try:
        out = open(args.output, "w", encoding="utf-8", newline="")
    except OSError:
        print("Erro ao abrir o arquivo")
        return 1

    rng = random.Random(args.seed)
    with out:
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(CSV_HEADER)

        print(_RULE)
        print("||     Análise comparativa de algorítmos de ordenação         ||")
        print(_RULE)

        current_kind: DataKind | None = None
        current_size: int | None = None
        for result in run_benchmark(sizes=args.sizes, rng=rng):
            if result.kind is not current_kind:
                current_kind, current_size = result.kind, None
                print(f"----| Tipo de dado: {result.kind.value} |----")
            if result.size != current_size:
                current_size = result.size
                print(f"----| Tamanho do array: {result.size} |----")
            print(format_result(result))
            if result.is_sorted:
                print()
                writer.writerow(_csv_row(result))

    print(_RULE)
    print("||     Fim da análise comparativa de algoritmos de ordenação  ||")
    print(_RULE)
    print(f"\nDados foram exportados para '{args.output}'.")
    return 0