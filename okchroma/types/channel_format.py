# No dependencies besides boundednumbers
from boundednumbers import BoundType

BYTE_MAX = 255

# Policy for linear channels that scale outside [0, 255]
DEFAULT_BOUND_TYPE = BoundType.CLAMP

SUPPORTED_BOUND_TYPES = (
    BoundType.CLAMP,
    BoundType.BOUNCE,
    BoundType.CYCLIC,
    BoundType.MODULO,
    BoundType.IGNORE,
)
