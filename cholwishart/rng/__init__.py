from .stream import VariateStream, default_stream, seed
