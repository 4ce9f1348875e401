from dataclasses import dataclass

from .fixed import Fixed, MASK32, as_u32

# State used when the seed is exactly 0 (not cycled).
ZERO_SEED_HIGH = 0xD67CE1E8
ZERO_SEED_LOW = 0x42CFADF8
SEED_XOR = 0xBEAD29BA
SEED_CYCLES = 32


def check_seed(seed: int) -> int:
    if not (0 <= seed <= MASK32):
        raise ValueError(f"seed must be an unsigned 32-bit integer, got {seed}")
    return seed


def cycle_state(high: int, low: int):
    """Swap the halves of `high`, then two wrapping adds. Returns (high, low)."""
    swapped = ((high & 0xFFFF) << 16) | (high >> 16)
    new_high = (swapped + low) & MASK32
    new_low = (new_high + low) & MASK32
    return new_high, new_low


@dataclass
class LevelRandom:
    high: int
    low: int

    @classmethod
    def from_seed(cls, seed: int) -> "LevelRandom":
        check_seed(seed)
        if seed == 0:
            return cls(ZERO_SEED_HIGH, ZERO_SEED_LOW)
        rng = cls(seed ^ SEED_XOR, seed)
        for _ in range(SEED_CYCLES):
            rng.cycle()
        return rng

    def cycle(self) -> None:
        self.high, self.low = cycle_state(self.high, self.low)

    def next_max(self, max_value: Fixed) -> Fixed:
        # Modulo over the raw bit pattern of max_value, not its numeric value.
        if max_value.bits == 0:
            return Fixed.ZERO
        self.cycle()
        return Fixed.from_bits(self.high % as_u32(max_value.bits))

    def next(self) -> Fixed:
        return self.next_max(Fixed.ONE)

    def next_uint_max(self, n: int) -> int:
        return self.next_max(Fixed.from_int(n)).floor().to_int()
