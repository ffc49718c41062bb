"""
Rotating line sequence used to group index stanzas
"""

class SequenceCounter:
    """
    Counter that runs 1..modulus and then wraps back to 1

    advance() is called once per processed row, whether or not the row
    produced output, and reports whether the counter wrapped.
    """

    def __init__(self, modulus: int = 19):
        if modulus < 1:
            raise ValueError(f"modulus must be positive, got {modulus}")
        self.modulus = modulus
        self.value = 1

    def advance(self) -> bool:
        self.value += 1
        if self.value > self.modulus:
            self.value = 1
            return True
        return False

    def reset(self):
        self.value = 1
