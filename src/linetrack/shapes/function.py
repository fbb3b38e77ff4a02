"""
Function generator - Line chains that sketch the graph of y = f(x).
"""

from typing import Callable, List
import numpy as np

from linetrack.errors import InvalidParameterError
from linetrack.geometry.line import Line, LineType


def function_lines(
    func: Callable[[float], float],
    start: float,
    stop: float,
    iterations: int = 10,
    line_type: LineType = LineType.ACCELERATION,
) -> List[Line]:
    """Create lines following a function over [start, stop].
    
    Args:
        func: Function of x to sketch
        start: First x value
        stop: Last x value
        iterations: Samples per unit of x
        line_type: Type of every generated line, acceleration by default
    
    Returns:
        Chain of lines between consecutive samples
    """
    if not stop > start:
        raise InvalidParameterError(f"Empty range: [{start}, {stop}]")
    if iterations < 1:
        raise InvalidParameterError(f"Need at least one iteration per unit, got {iterations}")
    
    num_samples = int(np.ceil((stop - start) * iterations)) + 1
    xs = np.linspace(start, stop, num_samples)
    ys = [func(float(x)) for x in xs]
    
    return [
        Line(xs[i], ys[i], xs[i + 1], ys[i + 1], line_type=line_type)
        for i in range(num_samples - 1)
    ]
