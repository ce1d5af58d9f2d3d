"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from typeracer.types import ConfigError


@dataclass(frozen=True)
class GameConfig:
    """Immutable tuning for one game session.

    Attributes:
        screen_width: Right boundary; a word whose x reaches it is lost.
        screen_height: Playfield height used for vertical spawn placement.
        tps: Simulation ticks per second.
        starting_lives: Lives at the start of a game.
        initial_spawn_delay: Seconds before the first word appears.
        spawn_interval: (min, max) seconds between spawns before any ramp.
        min_spawn_interval: Floor applied to both interval bounds.
        ramp_step: Amount the difficulty ramp grows per spawn.
        spawn_margin_top: Smallest spawn y.
        spawn_margin_bottom: Distance from the bottom edge to the largest spawn y.
        speed_range: (min, max) horizontal speed in pixels per second.
        color_changing_chance: Probability a spawned word is color-changing.
        word_reward: Currency for typing a plain word.
        color_changing_reward: Currency for typing a color-changing word.
    """

    screen_width: float = 1200.0
    screen_height: float = 1000.0
    tps: int = 60
    starting_lives: int = 5
    initial_spawn_delay: float = 3.0
    spawn_interval: tuple[float, float] = (3.0, 3.5)
    min_spawn_interval: float = 0.25
    ramp_step: float = 0.01
    spawn_margin_top: float = 40.0
    spawn_margin_bottom: float = 100.0
    speed_range: tuple[float, float] = (50.0, 200.0)
    color_changing_chance: float = 0.30
    word_reward: int = 10
    color_changing_reward: int = 20

    def __post_init__(self) -> None:
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ConfigError(
                f"screen size must be positive, got "
                f"{self.screen_width}x{self.screen_height}"
            )
        if self.screen_height - self.spawn_margin_bottom <= self.spawn_margin_top:
            raise ConfigError(
                f"screen_height {self.screen_height} leaves no room between "
                f"margins {self.spawn_margin_top}/{self.spawn_margin_bottom}"
            )
        if self.tps <= 0:
            raise ConfigError(f"tps must be positive, got {self.tps}")
        if self.starting_lives < 1:
            raise ConfigError(
                f"starting_lives must be >= 1, got {self.starting_lives}"
            )
        lo, hi = self.spawn_interval
        if lo > hi:
            raise ConfigError(f"spawn_interval min {lo} exceeds max {hi}")
        if self.min_spawn_interval <= 0:
            raise ConfigError(
                f"min_spawn_interval must be positive, got {self.min_spawn_interval}"
            )
        if self.ramp_step < 0:
            raise ConfigError(f"ramp_step must be >= 0, got {self.ramp_step}")
        lo, hi = self.speed_range
        if lo <= 0 or lo > hi:
            raise ConfigError(f"invalid speed_range {self.speed_range}")
        if not 0.0 <= self.color_changing_chance <= 1.0:
            raise ConfigError(
                f"color_changing_chance must be in [0, 1], "
                f"got {self.color_changing_chance}"
            )
        if self.word_reward < 0 or self.color_changing_reward < 0:
            raise ConfigError("rewards must be >= 0")

    @property
    def spawn_y_range(self) -> tuple[float, float]:
        return (self.spawn_margin_top, self.screen_height - self.spawn_margin_bottom)
