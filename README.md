# sortbench

A small benchmark that compares five classic sorting algorithms:

- Bubble Sort
- Insertion Sort
- Selection Sort
- Merge Sort
- Quick Sort (Lomuto partition, last element as pivot)

Each algorithm runs on four kinds of input data (random, partially sorted, sorted and reverse sorted) and on arrays of several sizes. For every run the package records the elapsed time, the number of comparisons, the number of swaps or moves, and the auxiliary memory in bytes. It also checks that every result comes back sorted.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
sortbench
```

This runs the full benchmark over every data kind, the sizes 100, 250, 500, 1000, 2500, 5000, 10000 and 25000, and every algorithm. Each run gets a freshly generated array. The report goes to the console (its messages are in Portuguese). Every correctly sorted run is also written as a row of a CSV file with these columns:

```
Tipo_Dado,Tamanho_Array,Algoritmo,Tempo_ms,Tempo_s,Comparacoes,Trocas,Memoria_Auxiliar_Bytes
```

Options:

- `-o`, `--output PATH`: the CSV file to write (default `resultados_ordenacao.csv`). If it cannot be opened, the command prints an error and exits with status 1.
- `--sizes N [N ...]`: the array sizes to test, in place of the defaults.
- `--seed N`: seed for the random number generator, so that runs can be repeated.

The partially sorted data is a sorted array with `size // 100` random transpositions. The quadratic algorithms are slow at the larger default sizes.

## Library use

```python
import random

from sortbench.metrics import Metrics, is_sorted
from sortbench.algorithms import quick_sort
from sortbench.generators import random_array

rng = random.Random(42)
data = random_array(1000, rng)

metrics = Metrics()
metrics.start_timer()
quick_sort(data, metrics)
elapsed_ms = metrics.stop_timer()

assert is_sorted(data)
print(metrics.report())
```

### `sortbench.metrics`

- `Metrics`: a dataclass with `comparisons`, `swaps` and `auxiliary_bytes` counters. `reset()` zeroes them, `start_timer()` and `stop_timer()` measure elapsed milliseconds (`stop_timer()` raises `RuntimeError` if the timer was never started), and `report()` returns the comparison and swap counts as text.
- `is_sorted(arr)`: true if no element is smaller than the one before it.
- `format_array(arr)`: the elements, each followed by a space.

### `sortbench.algorithms`

`bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort` and `quick_sort` each take `(arr, metrics=None)` and sort the list in place. They add their comparisons and swaps to the `Metrics` object. Merge sort records `len(arr) * 4` bytes of auxiliary memory for lists of two or more elements. The others record 0. In insertion sort, inserting one element counts as one swap. In merge sort, every write back to the list counts as one swap.

The building blocks are public too. `merge(arr, left, middle, right, metrics=None)` merges two adjacent sorted runs. `partition(arr, low, high, metrics=None)` partitions around `arr[high]` and returns the pivot's final index.

### `sortbench.generators`

`random_array(size, rng=None)`, `sorted_array(size)`, `partially_sorted_array(size, num_swaps, rng=None)` and `reverse_sorted_array(size)`. `rng` is a `random.Random`. A negative size raises `ValueError`.

### `sortbench.benchmark`

- `DataKind`: the four kinds of input. Each value is its display label.
- `generate(kind, size, rng=None)`: builds an input of that kind.
- `run_benchmark(kinds, sizes, algorithms, rng)`: all four parameters are optional. It yields one `BenchmarkResult` per kind, size and algorithm. A result holds `kind`, `size`, `algorithm`, `time_ms`, `time_s`, `comparisons`, `swaps`, `auxiliary_bytes` and `is_sorted`.
- `format_result(result)`: the console report for one result.
- `write_csv(results, stream)`: writes the header and one row per correctly sorted result, and returns the number of rows written.
- `main(argv=None)`: the `sortbench` command.