"""
Testes de validação de complexidade Big-O da AVL.
- Altura: limitada por 1.44 log2(n + 2), mesmo com inserção ordenada
- Inserção e busca: crescimento próximo de log(n)
"""
import sys
import os
import math
import tempfile

import matplotlib.pyplot as plt
import numpy as np
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.catalog.structures.avl_tree import AVLTree
from src.catalog.analysis.complexity import (
    avl_height_bound, log_growth_ratio, measure_operations, plot_results
)

def test_sorted_insert_height_is_logarithmic():
    """Inserção ordenada degeneraria uma BST comum em lista."""
    print("--- Teste: Altura AVL com inserção ordenada ---")

    for size in [10, 100, 1000, 5000]:
        avl = AVLTree()
        for key in range(size):
            avl.insert(key)

        bound = float(avl_height_bound(size))
        minimum = math.ceil(math.log2(size + 1))
        print(f"  n={size:5d}: altura={avl.height} (mín {minimum}, limite {bound:.2f})")

        assert minimum <= avl.height <= bound

def test_measured_heights_within_bound():
    print("\n--- Teste: Complexidade de Inserção e Busca AVL ---")
    sizes = [100, 500, 1000, 2000]
    results = measure_operations(sizes, search_sample=200, seed=3, verbose=True)

    assert list(results["sizes"]) == sizes
    assert np.all(results["heights"] <= avl_height_bound(results["sizes"]))
    assert np.all(results["insert_ms"] > 0)
    assert np.all(results["search_ms"] > 0)

    avg_ratio, avg_log_ratio = log_growth_ratio(results["sizes"], results["search_ms"])
    print(f"  Razão média de tempos: {avg_ratio:.3f}")
    print(f"  Razão média de log(n): {avg_log_ratio:.3f}")

def test_log_growth_ratio_for_logarithmic_series():
    sizes = [10, 100, 1000]
    times = np.log(sizes) * 0.1
    avg_ratio, avg_log_ratio = log_growth_ratio(sizes, times)

    assert abs(avg_ratio - avg_log_ratio) < 1e-9

def test_log_growth_ratio_needs_two_sizes():
    with pytest.raises(ValueError):
        log_growth_ratio([100], [1.0])

def test_plot_results_creates_directory():
    results = measure_operations([50, 100], search_sample=20, seed=1)

    with tempfile.TemporaryDirectory() as tmp:
        filepath = os.path.join(tmp, "graficos", "avl.png")
        assert plot_results(results, filepath) is True
        assert os.path.exists(filepath)

def test_plot_results_closes_figure():
    results = measure_operations([50, 100], search_sample=20, seed=2)
    open_before = plt.get_fignums()

    with tempfile.TemporaryDirectory() as tmp:
        plot_results(results, os.path.join(tmp, "avl.png"))

    assert plt.get_fignums() == open_before, "O gráfico deve ser fechado após salvar."

def test_measure_operations_rejects_invalid_sizes():
    with pytest.raises(ValueError):
        measure_operations([0, 10], search_sample=5)
    with pytest.raises(ValueError):
        measure_operations([-3], search_sample=5)

def test_measure_operations_rejects_empty_search_sample():
    # Amostra 0 explícita não pode cair no valor padrão
    with pytest.raises(ValueError):
        measure_operations([100], search_sample=0)

def test_log_growth_ratio_rejects_degenerate_input():
    # log(1) = 0 levaria a divisão por zero
    with pytest.raises(ValueError):
        log_growth_ratio([1, 10, 100], [1, 2, 3])
    with pytest.raises(ValueError):
        log_growth_ratio([10, 100], [0.0, 1.0])
    with pytest.raises(ValueError):
        log_growth_ratio([10, 100], [1.0, -2.0])

if __name__ == "__main__":
    print("=" * 60)
    print("VALIDAÇÃO DE COMPLEXIDADE BIG-O")
    print("=" * 60)
    test_sorted_insert_height_is_logarithmic()
    test_measured_heights_within_bound()
