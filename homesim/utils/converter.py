from dataclasses import is_dataclass, fields
from typing import Any
import dacite
import numpy as np


def to_dict_filtered(obj, exclude=("type",), recursion=False):
    """Convert a dataclass to a dictionary, excluding specified fields."""
    if not is_dataclass(obj):
        raise ValueError("to_dict_filtered expects a dataclass instance")

    result = {}
    for f in fields(obj):
        if f.name in exclude:
            continue  # skip excluded fields
        value = getattr(obj, f.name)
        if is_dataclass(value) and recursion:
            value = to_dict_filtered(value, exclude=exclude, recursion=True)
        elif isinstance(value, tuple) and recursion:
            value = [
                to_dict_filtered(v, exclude=exclude, recursion=True) if is_dataclass(v) else v
                for v in value
            ]
        result[f.name] = numpy_to_python(value)
    return result


def numpy_to_python(data: Any) -> Any:
    """
    Recursively convert NumPy scalars and arrays to native Python types.
    - np.generic -> int or float
    - np.ndarray -> list (recursively converted)
    """
    if isinstance(data, np.generic):
        return data.item()  # np.int64, np.float64 → int, float
    elif isinstance(data, np.ndarray):
        return data.tolist()
    elif isinstance(data, dict):
        return {k: numpy_to_python(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [numpy_to_python(x) for x in data]
    else:
        return data


DACITE_CONFIG = dacite.Config(strict=True, cast=[float])
"""dacite settings for config parsing: reject unknown keys, accept ints for float fields."""
