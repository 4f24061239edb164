"""
Validação empírica da complexidade da AVL.
- Inserção: O(log n) por operação
- Busca: O(log n) por operação
- Altura: limitada por ~1.44 log2(n + 2)
"""
import os
import random
import time
from typing import Dict, List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from src.catalog.config import BenchmarkConfig
from src.catalog.structures.avl_tree import AVLTree

def avl_height_bound(n):
    """Limite clássico de altura de uma AVL com n nós (aceita escalar ou array)."""
    n = np.asarray(n, dtype=float)
    return 1.4405 * np.log2(n + 2) - 0.3277


def measure_operations(sizes: Sequence[int] = None, search_sample: int = None,
                       seed: Optional[int] = None, verbose: bool = False) -> Dict[str, np.ndarray]:
    """
    Para cada tamanho n, constrói uma AVL com chaves embaralhadas e mede:
    tempo médio de inserção (ms), tempo médio de busca (ms) e altura final.
    """
    sizes = list(BenchmarkConfig.SIZES if sizes is None else sizes)
    search_sample = BenchmarkConfig.SEARCH_SAMPLE if search_sample is None else search_sample
    if any(n <= 0 for n in sizes):
        raise ValueError("Todos os tamanhos precisam ser maiores que zero.")
    if search_sample < 1:
        raise ValueError("A amostra de buscas precisa ter pelo menos um elemento.")
    rng = random.Random(BenchmarkConfig.SEED if seed is None else seed)

    insert_times: List[float] = []
    search_times: List[float] = []
    heights: List[int] = []

    for n in sizes:
        if verbose:
            print(f"\nTestando com N = {n} chaves...")

        avl = AVLTree()
        keys = list(range(n))
        rng.shuffle(keys)  # Embaralha para exercitar todas as rotações

        start = time.perf_counter()
        for key in keys:
            avl.insert(key, key)
        insert_times.append((time.perf_counter() - start) / n * 1000)

        targets = rng.sample(keys, min(n, search_sample))
        start = time.perf_counter()
        for key in targets:
            avl.search(key)
        search_times.append((time.perf_counter() - start) / len(targets) * 1000)

        heights.append(avl.height)

        if verbose:
            print(f"   > Inserção (méd): {insert_times[-1]:.4f} ms")
            print(f"   > Busca (méd):    {search_times[-1]:.4f} ms")
            print(f"   > Altura:         {heights[-1]}")

    return {
        "sizes": np.array(sizes),
        "insert_ms": np.array(insert_times),
        "search_ms": np.array(search_times),
        "heights": np.array(heights),
    }


def log_growth_ratio(sizes: Sequence[int], times: Sequence[float]):
    """
    Compara o crescimento observado com o de log(n).
    Retorna (razão média dos tempos consecutivos, razão média de log(n) consecutivos).
    """
    sizes = np.asarray(sizes, dtype=float)
    times = np.asarray(times, dtype=float)
    if len(sizes) < 2:
        raise ValueError("São necessários pelo menos dois tamanhos para comparar crescimento.")
    if np.any(sizes <= 1):
        raise ValueError("Os tamanhos precisam ser maiores que 1 (log(1) = 0).")
    if np.any(times <= 0):
        raise ValueError("Os tempos medidos precisam ser positivos.")

    ratios = times[1:] / times[:-1]
    log_sizes = np.log(sizes)
    log_ratios = log_sizes[1:] / log_sizes[:-1]
    return float(np.mean(ratios)), float(np.mean(log_ratios))


def plot_results(results: Dict[str, np.ndarray], filepath: str = BenchmarkConfig.PLOT_PATH) -> bool:
    """Gera o gráfico (tempo e altura vs n) e salva em imagem."""
    sizes = results["sizes"]

    fig = plt.figure(figsize=(12, 5))

    # Gráfico 1: Tempo por operação
    plt.subplot(1, 2, 1)
    plt.plot(sizes, results["insert_ms"], marker='o', label='Inserção AVL')
    plt.plot(sizes, results["search_ms"], marker='x', label='Busca AVL')
    plt.xlabel('Número de Chaves (N)')
    plt.ylabel('Tempo Médio (ms)')
    plt.title('Performance AVL: O(log n)')
    plt.legend()
    plt.grid(True)

    # Gráfico 2: Altura observada vs limite teórico
    plt.subplot(1, 2, 2)
    plt.plot(sizes, results["heights"], marker='s', color='orange', label='Altura Observada')
    plt.plot(sizes, avl_height_bound(sizes), 'r--', label='1.44 log2(n+2) Teórico')
    plt.xlabel('Número de Chaves (N)')
    plt.ylabel('Altura')
    plt.title('Altura da AVL')
    plt.legend()
    plt.grid(True)

    try:
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(filepath)
        return True
    except OSError as e:
        print(f"[IO Erro] Falha ao salvar gráfico: {e}")
        return False
    finally:
        plt.close(fig)
