# hangul_corrector\adapters\smoothing\__init__.py
from .passthrough import PassthroughSmoother

__all__ = ["PassthroughSmoother"]
