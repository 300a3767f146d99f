from dataclasses import dataclass, fields

from core.utils.type_safe import is_finite_number, safe_float, safe_int

DEFAULT_TICKS_PER_CYCLE = 100
DEFAULT_STEP_VISIBLE_TICKS = 15


@dataclass(frozen=True)
class WatchRewardsConfig:
    interval_ms: float = 50.0
    step_value: float = 0.5
    initial_value: float = 0.0
    ticks_per_cycle: int = DEFAULT_TICKS_PER_CYCLE
    step_visible_ticks: int = DEFAULT_STEP_VISIBLE_TICKS   # popup hides at this tick of the new cycle
    symbol: str = ""
    decimal_digits: int = 2
    button_title: str = "Claim"
    auto_start: bool = True

    def __post_init__(self):
        if not is_finite_number(self.interval_ms) or self.interval_ms <= 0:
            raise ValueError(f"❌ interval_ms must be a positive number, got {self.interval_ms!r}")
        if not is_finite_number(self.step_value) or self.step_value < 0:
            raise ValueError(f"❌ step_value must be finite and >= 0, got {self.step_value!r}")
        if not is_finite_number(self.initial_value):
            raise ValueError(f"❌ initial_value must be finite, got {self.initial_value!r}")
        if not isinstance(self.ticks_per_cycle, int) or self.ticks_per_cycle <= 0:
            raise ValueError(f"❌ ticks_per_cycle must be a positive int, got {self.ticks_per_cycle!r}")
        if not isinstance(self.step_visible_ticks, int) or self.step_visible_ticks < 1:
            raise ValueError(
                f"❌ step_visible_ticks must be a positive int, got {self.step_visible_ticks!r}"
            )
        if self.step_visible_ticks >= self.ticks_per_cycle:
            raise ValueError(
                f"❌ step_visible_ticks must be < ticks_per_cycle ({self.ticks_per_cycle}), "
                f"got {self.step_visible_ticks!r}"
            )
        if not isinstance(self.decimal_digits, int) or self.decimal_digits < 0:
            raise ValueError(f"❌ decimal_digits must be a non-negative int, got {self.decimal_digits!r}")

    @property
    def interval_secs(self) -> float:
        return self.interval_ms / 1000.0

    @classmethod
    def from_dict(cls, data: dict = None) -> "WatchRewardsConfig":
        """Build from a YAML section. Unknown keys are ignored, missing keys keep defaults."""
        data = data or {}
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}

        for key in ("interval_ms", "step_value", "initial_value"):
            if key in kwargs:
                kwargs[key] = safe_float(kwargs[key], default=float("nan"))
        for key in ("ticks_per_cycle", "step_visible_ticks", "decimal_digits"):
            if key in kwargs:
                kwargs[key] = safe_int(kwargs[key], default=-1)
        for key in ("symbol", "button_title"):
            if key in kwargs:
                kwargs[key] = "" if kwargs[key] is None else str(kwargs[key])
        if "auto_start" in kwargs:
            kwargs["auto_start"] = bool(kwargs["auto_start"])

        return cls(**kwargs)
