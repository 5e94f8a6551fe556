"""Constants used across the trig package."""

import numpy as np

# Pi in single and double precision
PI32 = np.float32(np.pi)
PI64 = np.float64(np.pi)
