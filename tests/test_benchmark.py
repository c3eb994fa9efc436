import io
import random

from sortbench.benchmark import (
    ALGORITHMS,
    BenchmarkResult,
    DataKind,
    DEFAULT_SIZES,
    format_result,
    generate,
    main,
    run_benchmark,
    write_csv,
)
from sortbench.metrics import is_sorted

HEADER = "Tipo_Dado,Tamanho_Array,Algoritmo,Tempo_ms,Tempo_s,Comparacoes,Trocas,Memoria_Auxiliar_Bytes"


def test_kind_labels_written_to_csv():
    results = [
        BenchmarkResult(kind, 1, "Bubble Sort", 0.0, 0, 0, 0, True)
        for kind in DataKind
    ]
    buf = io.StringIO()
    write_csv(results, buf)
    labels = [line.split(",")[0] for line in buf.getvalue().splitlines()[1:]]
    assert labels == [
        "Aleatório",
        "Parcialmente Ordenado",
        "Ordenado",
        "Ordenado Reversamente",
    ]


def test_default_sizes_and_algorithm_order():
    assert DEFAULT_SIZES == (100, 250, 500, 1000, 2500, 5000, 10000, 25000)
    results = list(
        run_benchmark(kinds=[DataKind.SORTED], sizes=[5], rng=random.Random(0))
    )
    assert [r.algorithm for r in results] == [
        "Bubble Sort",
        "Insertion Sort",
        "Selection Sort",
        "Merge Sort",
        "Quick Sort",
    ]


def test_generate_kinds():
    rng = random.Random(0)
    assert generate(DataKind.SORTED, 5, rng) == [0, 1, 2, 3, 4]
    assert generate(DataKind.REVERSE_SORTED, 5, rng) == [4, 3, 2, 1, 0]
    partial = generate(DataKind.PARTIALLY_SORTED, 1000, rng)
    assert sorted(partial) == list(range(1000))
    assert sum(1 for i, x in enumerate(partial) if i != x) <= 2 * (1000 // 100)
    rand = generate(DataKind.RANDOM, 100, rng)
    assert len(rand) == 100 and all(0 <= x < 100 for x in rand)


def test_run_benchmark_order_and_correctness():
    results = list(run_benchmark(sizes=[100, 250], rng=random.Random(5)))
    assert len(results) == len(DataKind) * 2 * len(ALGORITHMS)
    expected = [
        (kind, size, name)
        for kind in DataKind
        for size in (100, 250)
        for name, _ in ALGORITHMS
    ]
    assert [(r.kind, r.size, r.algorithm) for r in results] == expected
    assert all(r.is_sorted for r in results)
    assert all(r.time_ms >= 0 for r in results)


def test_run_benchmark_memory_reporting():
    results = run_benchmark(
        kinds=[DataKind.RANDOM], sizes=[100], rng=random.Random(1)
    )
    memory = {r.algorithm: r.auxiliary_bytes for r in results}
    assert memory["Merge Sort"] == 100 * 4
    assert memory["Quick Sort"] == 0
    assert memory["Bubble Sort"] == 0


def test_run_benchmark_flags_broken_algorithm():
    def broken(arr, metrics):
        arr.reverse()

    results = list(
        run_benchmark(
            kinds=[DataKind.SORTED], sizes=[10], algorithms=[("Broken", broken)]
        )
    )
    assert [r.is_sorted for r in results] == [False]


def test_format_result_success():
    result = BenchmarkResult(DataKind.SORTED, 10, "Bubble Sort", 1.5, 9, 0, 0, True)
    assert format_result(result) == (
        "Algoritmo: Bubble Sort\n"
        "Tempo: 1.500 ms (0.001500 segundos)\n"
        "Comparações: 9\n"
        "Trocas: 0\n"
        "Memoria Auxiliar: 0 bytes"
    )


def test_format_result_failure():
    result = BenchmarkResult(DataKind.SORTED, 10, "Quick Sort", 1.0, 1, 1, 0, False)
    assert format_result(result) == (
        "Erro: O array não esta ordenado corretamente pelo algoritmo.Quick Sort"
    )


def test_write_csv_skips_unsorted():
    good = BenchmarkResult(DataKind.SORTED, 10, "Bubble Sort", 1.5, 9, 0, 0, True)
    bad = BenchmarkResult(DataKind.RANDOM, 10, "Quick Sort", 1.0, 1, 1, 0, False)
    buf = io.StringIO()
    count = write_csv([good, bad], buf)
    assert count == 1
    assert buf.getvalue().splitlines() == [
        HEADER,
        "Ordenado,10,Bubble Sort,1.500000,0.001500,9,0,0",
    ]


def test_main_writes_csv_and_reports(tmp_path, capsys):
    out = tmp_path / "results.csv"
    code = main(["--output", str(out), "--sizes", "100", "250", "--seed", "3"])
    assert code == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == HEADER
    assert len(lines) == 1 + len(DataKind) * 2 * len(ALGORITHMS)
    assert lines[1].startswith("Aleatório,100,Bubble Sort,")
    printed = capsys.readouterr().out
    assert "----| Tipo de dado: Ordenado Reversamente |----" in printed
    assert "----| Tamanho do array: 250 |----" in printed
    assert f"Dados foram exportados para '{out}'." in printed


def test_main_unwritable_output(tmp_path, capsys):
    code = main(["--output", str(tmp_path / "missing" / "x.csv"), "--sizes", "10"])
    assert code == 1
    assert "Erro ao abrir o arquivo" in capsys.readouterr().out


def test_generated_sorted_kind_is_sorted():
    assert is_sorted(generate(DataKind.SORTED, 50))
    assert not is_sorted(generate(DataKind.REVERSE_SORTED, 50))