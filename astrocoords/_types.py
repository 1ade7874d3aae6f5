from typing import Union


# Anything float() accepts as a coordinate value
NUMERIC_TYPE = Union[float, int, str]
