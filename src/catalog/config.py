class DisplayConfig:
    """
    Parâmetros de exibição da árvore no terminal.
    Cada nível de profundidade desloca a chave em INDENT_WIDTH colunas.
    """
    INDENT_WIDTH = 4
    DELETED_INDENT_WIDTH = 8  # Nós removidos logicamente ficam mais afastados
    PLACEHOLDER = "x"         # Representa um filho ausente
    DELETED_MARKER = " (D)"


class BenchmarkConfig:
    """Parâmetros da validação empírica de complexidade."""
    SIZES = [100, 500, 1000, 5000, 10000, 20000]
    SEARCH_SAMPLE = 1000
    SEED = 42
    PLOT_PATH = "data/avl_complexity.png"
