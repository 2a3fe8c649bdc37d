from .compressor import SpaceCompressor, CompressionResult, flatten

__all__ = [
    'SpaceCompressor',
    'CompressionResult',
    'flatten',
]
