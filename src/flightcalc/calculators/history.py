"""Fixed-capacity history of airspeed samples.

The buffer is a preallocated numpy array with a write index and a count.
Inserting never allocates; once full, each new sample overwrites the oldest.

Typical usage example:
    from flightcalc.calculators.history import BoundedHistory

    history = BoundedHistory()
    for ias in readings:
        history.add_reading(ias)
    gust = calculate_gust_factor(history.values())
"""

import numpy as np
import numpy.typing as npt

MAX_IAS_HISTORY = 20


class BoundedHistory:
    """Circular buffer of the most recent indicated-airspeed readings.

    Attributes:
        capacity: Number of slots (20 by default)

    Examples:
        >>> history = BoundedHistory()
        >>> for ias in range(25):
        ...     history.add_reading(float(ias))
        >>> len(history)
        20
        >>> float(history.values()[0])
        5.0
    """

    def __init__(self, capacity: int = MAX_IAS_HISTORY) -> None:
        """Create an empty history.

        Args:
            capacity: Number of samples retained (must be positive)

        Raises:
            ValueError: If capacity is not positive.
        """
        if capacity <= 0:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._data: npt.NDArray[np.float64] = np.zeros(capacity, dtype=np.float64)
        self._head = 0  # Next slot to write
        self._size = 0

    def add_reading(self, value: float) -> None:
        """Store a reading, overwriting the oldest one when full.

        Args:
            value: Indicated airspeed sample (kts)
        """
        self._data[self._head] = value
        self._head = (self._head + 1) % self.capacity
        if self._size < self.capacity:
            self._size += 1

    def values(self) -> npt.NDArray[np.float64]:
        """Read-only view of the valid samples, oldest first.

        Returns:
            Array of length len(self). Writing to it raises ValueError.
        """
        if self._size < self.capacity:
            view = self._data[: self._size]
        else:
            # Full: oldest sample sits at the write index
            view = np.roll(self._data, -self._head)
        view = view.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        """Number of valid samples (never more than capacity)."""
        return self._size

    def is_full(self) -> bool:
        """True once capacity samples have been stored."""
        return self._size == self.capacity
