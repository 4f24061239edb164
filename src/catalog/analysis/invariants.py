"""
Verificação independente das invariantes da AVL.
Não confia na altura armazenada nos nós: tudo é recalculado a partir da forma.
"""
from typing import List, Optional, Set, Tuple

from src.catalog.structures.avl_tree import AVLNode, AVLTree

def recompute_height(node: Optional[AVLNode]) -> int:
    """Altura recalculada do zero (filho ausente = 0)."""
    if not node:
        return 0
    return 1 + max(recompute_height(node.left), recompute_height(node.right))


def find_violations(tree: AVLTree) -> List[str]:
    """
    Percorre a árvore e descreve cada violação encontrada:
    ordenação BST, balanceamento, altura em cache e unicidade das chaves.
    Lista vazia significa árvore AVL válida.
    """
    violations: List[str] = []
    seen: Set[int] = set()
    _check_node(tree.root, None, None, seen, violations)
    return violations


def _check_node(node: Optional[AVLNode], low: Optional[int], high: Optional[int],
                seen: Set[int], violations: List[str]) -> int:
    if not node:
        return 0

    # 1. Ordenação: a chave precisa estar estritamente dentro do intervalo herdado
    if (low is not None and node.key <= low) or (high is not None and node.key >= high):
        violations.append(f"Ordenação violada na chave {node.key} (intervalo {low}..{high})")

    # 4. Unicidade
    if node.key in seen:
        violations.append(f"Chave duplicada: {node.key}")
    seen.add(node.key)

    left_h = _check_node(node.left, low, node.key, seen, violations)
    right_h = _check_node(node.right, node.key, high, seen, violations)

    # 2. Balanceamento
    if abs(left_h - right_h) > 1:
        violations.append(f"Desbalanceado em {node.key}: esquerda={left_h}, direita={right_h}")

    # 3. Altura em cache
    real_height = 1 + max(left_h, right_h)
    if node.height != real_height:
        violations.append(f"Altura incorreta em {node.key}: cache={node.height}, real={real_height}")

    return real_height


def is_valid_avl(tree: AVLTree) -> bool:
    return not find_violations(tree)


def snapshot_shape(tree: AVLTree) -> Tuple[Tuple[Optional[int], int, int], ...]:
    """
    Fotografia da forma da árvore: (chave, altura, profundidade) em pré-ordem.
    Ignora o estado das lápides, então serve para comparar antes/depois de um remove.
    """
    shape = []
    stack: List[Tuple[Optional[AVLNode], int]] = [(tree.root, 0)]
    while stack:
        node, depth = stack.pop()
        if not node:
            shape.append((None, 0, depth))
            continue
        shape.append((node.key, node.height, depth))
        stack.append((node.right, depth + 1))
        stack.append((node.left, depth + 1))
    return tuple(shape)
