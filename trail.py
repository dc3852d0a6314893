# trail.py

from collections import deque, namedtuple

# A recorded tip position (relative to the pendulum pivot) and its hue.
TrailPoint = namedtuple('TrailPoint', ['x', 'y', 'hue'])


class TrailBuffer:
    """
    Fixed-capacity history of recent tip positions, oldest first.
    Appending past capacity evicts the oldest point in O(1).
    """
    def __init__(self, capacity: int = 200):
        if capacity <= 0:
            raise ValueError(f"Trail capacity must be positive, got {capacity}")
        self._points = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._points.maxlen

    def append(self, point: TrailPoint):
        self._points.append(point)

    def clear(self):
        self._points.clear()

    def segments(self):
        """Yields consecutive (previous, current) point pairs for polyline drawing."""
        points = iter(self._points)
        prev = next(points, None)
        for current in points:
            yield prev, current
            prev = current

    def __iter__(self):
        return iter(self._points)

    def __len__(self):
        return len(self._points)
