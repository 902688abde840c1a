# physics_utils.py

import math
import numbers

import numpy as np

def to_finite_float(value, default=None):
    """
    Coerces a loosely-typed catalog value to a finite float.

    Catalog rows arrive as parsed JSON, so a numeric column may hold an int, a
    float, a numeric string, an empty string or null. Booleans are rejected even
    though Python treats them as integers.

    Args:
        value: The raw value (number, numeric string, None, ...).
        default: Value returned when `value` cannot be coerced or is not finite.

    Returns:
        float or default: The finite float, or `default`.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, numbers.Real):
        result = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return default
        try:
            result = float(text)
        except ValueError:
            return default
    else:
        return default
    if not math.isfinite(result):
        return default
    return result

def clamp(value, lower, upper):
    """Clamps a scalar into [lower, upper]."""
    return max(lower, min(upper, value))

def normalize_vector(vector, epsilon=1e-12):
    """
    Normalizes a vector to unit length.

    Args:
        vector (np.ndarray): The vector to normalize.
        epsilon (float): Threshold below which the vector's magnitude is considered zero.

    Returns:
        np.ndarray: The normalized vector, or a zero vector if its magnitude is close to zero.
    """
    if not isinstance(vector, np.ndarray):
        vector = np.array(vector, dtype=float)

    norm = np.linalg.norm(vector)
    if norm < epsilon:
        return np.zeros_like(vector)
    return vector / norm
