"""Big-integer helpers used to build key blobs."""
from .crt import CRTParameters, CRTParameterDeriver
from .utils import FixedWidthIntegerCodec

__all__ = [
    'CRTParameters',
    'CRTParameterDeriver',
    'FixedWidthIntegerCodec',
]
