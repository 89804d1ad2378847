class NonNegativeValue:
    """
    Value Object universal: valida invariante de dominio (valor entero >= 0).
    Building block reusable en CUALQUIER sistema que requiera conteos o tamaños.
    """

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("Must be an integer")
        if value < 0:
            raise ValueError("Must be non-negative")
        self.value = value
