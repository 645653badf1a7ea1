from typing import Union
from datetime import datetime
from pandas import Timestamp

import numpy as np
import numpy.typing as npt

DTYPE = np.float32
"""
The floating point type every quaternion, vector, and matrix is stored as.
"""

FLOAT_ARRAY = npt.NDArray[np.float32]
ARRAY_LIKE = npt.ArrayLike

DatetimeLike = Union[datetime, Timestamp]
