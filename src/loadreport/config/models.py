from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loadreport.errors import ConfigError
from loadreport.histogram import Buckets, format_buckets, parse_buckets, validate_buckets


class ReporterType(str, Enum):
    TEXT = "text"
    JSON = "json"
    HISTOGRAM = "hist"
    PLOT = "plot"
    CHART = "chart"


@dataclass(frozen=True, slots=True)
class ReportConfig:
    reporter_type: ReporterType = ReporterType.TEXT
    buckets: Buckets = ()
    plot_asset: str | None = None

    def __post_init__(self) -> None:
        if self.reporter_type is ReporterType.HISTOGRAM:
            object.__setattr__(self, "buckets", validate_buckets(self.buckets))
        elif self.buckets:
            msg = f"Reporter {self.reporter_type.value!r} takes no buckets"
            raise ConfigError(msg)
        else:
            object.__setattr__(self, "buckets", ())

    @classmethod
    def from_spec(cls, spec: str, plot_asset: str | None = None) -> ReportConfig:
        value = spec.strip()
        name, bracket, rest = value.partition("[")
        try:
            reporter_type = ReporterType(name)
        except ValueError:
            msg = f"Unknown reporter {name!r}"
            raise ConfigError(msg) from None
        if reporter_type is ReporterType.HISTOGRAM:
            if not bracket:
                msg = f"Reporter {name!r} requires buckets, e.g. hist[0,100ms,200ms]"
                raise ConfigError(msg)
            return cls(reporter_type, parse_buckets(bracket + rest), plot_asset)
        if bracket:
            msg = f"Reporter {name!r} takes no arguments"
            raise ConfigError(msg)
        return cls(reporter_type, plot_asset=plot_asset)

    def to_spec(self) -> str:
        if self.reporter_type is ReporterType.HISTOGRAM:
            return self.reporter_type.value + format_buckets(self.buckets)
        return self.reporter_type.value
