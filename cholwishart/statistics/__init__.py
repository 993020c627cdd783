from .bartlett import bartlett_factor
