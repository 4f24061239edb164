"""Exemplos de uso da Árvore AVL."""
from src.catalog.structures.avl_tree import AVLTree

def run_demo(file=None) -> AVLTree:
    # Cria a árvore e insere alguns nós
    tree = AVLTree()
    tree.insert(10)
    tree.insert(20)
    tree.insert(5)

    print("Árvore AVL após inserção:", file=file)
    tree.print_tree(file=file)

    # Remove um nó (remoção lógica)
    tree.remove(10)

    # Busca um nó
    key = 20
    print(f"Nó encontrado com a chave: {key if tree.contains(key) else None}", file=file)

    print("Árvore AVL após remoção:", file=file)
    tree.print_tree(file=file)

    # Rotações: cada sequência desbalancearia uma BST comum
    for sequence in ([10, 20, 30], [30, 20, 10], [30, 10, 20], [10, 30, 20]):
        rotated = AVLTree()
        for key in sequence:
            rotated.insert(key)
        print(f"\nInserindo {sequence} -> raiz {rotated.root.key}", file=file)
        rotated.print_tree(file=file)

    return tree


def main():
    run_demo()


if __name__ == "__main__":
    main()
