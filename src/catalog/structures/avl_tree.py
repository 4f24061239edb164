from typing import Any, Iterator, List, Optional, Tuple

from src.catalog.structures.errors import InvalidKeyTypeError
from src.catalog.structures.traversal import TraversalRecord, render_records

class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena a chave, o dado associado, a altura e a marca de remoção lógica.
    """
    def __init__(self, key: int, data: Any = None):
        self.key = key
        self.data = data
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 1         # Altura inicial do nó é 1
        self.deleted = False    # Lápide (tombstone)

    def __repr__(self):
        marker = " (D)" if self.deleted else ""
        return f"AVLNode({self.key}{marker}, h={self.height})"


class AVLTree:
    """
    Árvore AVL (Adelson-Velskii e Landis).
    Árvore binária de busca auto-balanceada: para todo nó, a diferença de
    altura entre as subárvores esquerda e direita é -1, 0 ou 1.
    Garante inserção e busca em O(log n).

    A remoção é lógica: o nó recebe uma lápide e continua na árvore, então
    a forma (e o balanceamento) nunca muda em um remove. O espaço não é
    recuperado; para encolher a árvore é preciso reconstruí-la.
    """
    def __init__(self, verbose: bool = False):
        self.root: Optional[AVLNode] = None
        self.verbose = verbose
        self._size = 0          # Nós alocados (inclui removidos)
        self._live = 0          # Nós não removidos

    # --- Operações Públicas ---

    def insert(self, key: int, data: Any = None):
        """
        Insere (ou atualiza) a chave e rebalanceia os ancestrais.
        Se a chave já existe, o dado é substituído e a lápide é retirada.
        Chave None é ignorada silenciosamente.
        """
        if key is None:
            return
        self._ensure_int(key)
        self.root = self._insert_and_balance(self.root, key, data)

    def remove(self, key: int) -> bool:
        """
        Marca o nó como removido (remoção lógica).
        Retorna True se um nó vivo foi marcado, False caso contrário.
        Não altera a forma da árvore nem as alturas.
        """
        if not self._is_valid_key(key):
            return False

        node = self._search_recursive(self.root, key)
        if node is None or node.deleted:
            return False

        node.deleted = True
        self._live -= 1
        if self.verbose:
            print(f"[AVL REMOVE] Chave {key} marcada como removida.")
        return True

    def search(self, key: int) -> Any:
        """Busca pela chave em O(log n). Retorna o dado ou None se não houver nó vivo."""
        node = self._find_live(key)
        return node.data if node else None

    def contains(self, key: int) -> bool:
        """Indica se existe um nó vivo com a chave (útil quando o dado é None)."""
        return self._find_live(key) is not None

    def traverse(self) -> Iterator[TraversalRecord]:
        """
        Percurso em pré-ordem (nó, esquerda, direita), incluindo nós removidos.
        Filhos ausentes aparecem como registros placeholder.
        Cada chamada devolve um novo gerador.
        """
        return self._traverse_recursive(self.root, 0)

    def render(self) -> List[str]:
        """Retorna as linhas da representação textual da árvore."""
        return render_records(self.traverse())

    def print_tree(self, file=None):
        """Imprime a estrutura da árvore."""
        for line in self.render():
            print(line, file=file)

    def keys(self, include_deleted: bool = False) -> List[int]:
        """Chaves em ordem crescente (in-order traversal)."""
        keys: List[int] = []
        self._in_order(self.root, keys, include_deleted)
        return keys

    def items(self) -> Iterator[Tuple[int, Any]]:
        """Pares (chave, dado) vivos em ordem crescente."""
        stack: List[AVLNode] = []
        current = self.root
        while stack or current:
            while current:
                stack.append(current)
                current = current.left
            current = stack.pop()
            if not current.deleted:
                yield current.key, current.data
            current = current.right

    @property
    def height(self) -> int:
        return self._get_height(self.root)

    @property
    def size(self) -> int:
        """Total de nós fisicamente presentes (vivos + removidos)."""
        return self._size

    def is_empty(self) -> bool:
        return self._live == 0

    def __len__(self):
        return self._live

    def __contains__(self, key):
        return self.contains(key)

    def __repr__(self):
        return f"AVLTree(vivos={self._live}, nós={self._size}, altura={self.height})"

    # --- Inserção e Balanceamento ---

    def _insert_and_balance(self, node: Optional[AVLNode], key: int, data: Any) -> AVLNode:
        # 1. Inserção normal de BST
        if not node:
            self._size += 1
            self._live += 1
            if self.verbose:
                print(f"[AVL INSERT] Nova chave {key}.")
            return AVLNode(key, data)

        if key < node.key:
            node.left = self._insert_and_balance(node.left, key, data)
        elif key > node.key:
            node.right = self._insert_and_balance(node.right, key, data)
        else:
            # Chaves duplicadas não são permitidas: atualiza o dado e revive o nó
            if node.deleted:
                node.deleted = False
                self._live += 1
            node.data = data
            if self.verbose:
                print(f"[AVL UPDATE] Chave {key} atualizada.")

        # 2. Rebalanceia cada ancestral no caminho de volta
        return self._balance(node)

    def _balance(self, node: AVLNode) -> AVLNode:
        self._set_height(node)
        balance = self._get_balance(node)

        # Pesado à esquerda
        if balance == 2:
            if self._get_height(node.left.right) > self._get_height(node.left.left):
                return self._rotate_left_right(node)
            return self._rotate_right(node)

        # Pesado à direita
        if balance == -2:
            if self._get_height(node.right.left) > self._get_height(node.right.right):
                return self._rotate_right_left(node)
            return self._rotate_left(node)

        return node

    # --- Métodos Auxiliares e Rotações ---

    def _get_height(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return node.height

    def _set_height(self, node: AVLNode):
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _get_balance(self, node: AVLNode) -> int:
        return self._get_height(node.left) - self._get_height(node.right)

    def _rotate_left(self, z: AVLNode) -> AVLNode:
        """
        Realiza rotação simples à esquerda.
        Usada quando o peso está na direita (Right-Right).
        """
        y = z.right
        T2 = y.left

        # Rotação
        y.left = z
        z.right = T2

        # A altura de z precisa estar correta antes de calcular a de y
        self._set_height(z)
        self._set_height(y)

        if self.verbose:
            print(f"[AVL ROTACAO] Esquerda em {z.key} -> nova raiz {y.key}")
        return y

    def _rotate_right(self, z: AVLNode) -> AVLNode:
        """
        Realiza rotação simples à direita.
        Usada quando o peso está na esquerda (Left-Left).
        """
        y = z.left
        T3 = y.right

        # Rotação
        y.right = z
        z.left = T3

        self._set_height(z)
        self._set_height(y)

        if self.verbose:
            print(f"[AVL ROTACAO] Direita em {z.key} -> nova raiz {y.key}")
        return y

    def _rotate_left_right(self, node: AVLNode) -> AVLNode:
        """Rotação dupla (Left-Right): filho esquerdo à esquerda, depois o nó à direita."""
        node.left = self._rotate_left(node.left)
        return self._rotate_right(node)

    def _rotate_right_left(self, node: AVLNode) -> AVLNode:
        """Rotação dupla (Right-Left): filho direito à direita, depois o nó à esquerda."""
        node.right = self._rotate_right(node.right)
        return self._rotate_left(node)

    # --- Busca e Percursos ---

    def _find_live(self, key) -> Optional[AVLNode]:
        if not self._is_valid_key(key):
            return None
        node = self._search_recursive(self.root, key)
        if node is None or node.deleted:
            return None
        return node

    def _search_recursive(self, node: Optional[AVLNode], key: int) -> Optional[AVLNode]:
        # Ignora a lápide: quem chama decide o que fazer com nós removidos
        if not node:
            return None
        if key < node.key:
            return self._search_recursive(node.left, key)
        if key > node.key:
            return self._search_recursive(node.right, key)
        return node

    def _traverse_recursive(self, node: Optional[AVLNode], depth: int) -> Iterator[TraversalRecord]:
        if not node:
            yield TraversalRecord(key=None, data=None, depth=depth, placeholder=True)
            return

        yield TraversalRecord(node.key, node.data, depth, node.deleted)
        yield from self._traverse_recursive(node.left, depth + 1)
        yield from self._traverse_recursive(node.right, depth + 1)

    def _in_order(self, node: Optional[AVLNode], keys: List[int], include_deleted: bool):
        if node:
            self._in_order(node.left, keys, include_deleted)
            if include_deleted or not node.deleted:
                keys.append(node.key)
            self._in_order(node.right, keys, include_deleted)

    # --- Validação de Chaves ---

    @staticmethod
    def _is_valid_key(key) -> bool:
        # bool é subclasse de int, mas não é uma chave ordenável do domínio
        return isinstance(key, int) and not isinstance(key, bool)

    def _ensure_int(self, key):
        if not self._is_valid_key(key):
            raise InvalidKeyTypeError(key)
