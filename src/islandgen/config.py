from dataclasses import dataclass


@dataclass(frozen=True)
class GenSettings:
    # Defaults are fixed by the reference map data; changing any of them means the output
    # no longer matches it.
    warmup_draws: int = 256
    position_attempts: int = 501
    artifact_count: int = 4
    enemy_roll_max: int = 100
    enemy_roll_below: int = 3


SETTINGS = GenSettings()
