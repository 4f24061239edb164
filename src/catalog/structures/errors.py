class InvalidKeyTypeError(TypeError):
    """
    Lançada quando a chave fornecida não é um inteiro.
    A árvore permanece intacta: a validação ocorre antes de qualquer descida.
    """
    def __init__(self, key):
        self.key = key
        super().__init__(
            f"Não é possível usar objetos do tipo {type(key).__name__} como chave. Use int."
        )
