"""Configuration dataclasses for the boxlayout command line."""
from dataclasses import dataclass, field

from .alignment import Alignment


@dataclass
class FlowConfig:
    """Defaults for flowing text into a single paragraph."""

    width: int = 72
    align: Alignment = Alignment.FIRST


@dataclass
class ColumnsConfig:
    """Defaults for flowing text into side-by-side columns."""

    height: int = 20
    gap: int = 2
    align: Alignment = Alignment.FIRST


@dataclass
class AppConfig:
    """Top-level configuration loaded from ``boxlayout.toml``."""

    flow: FlowConfig = field(default_factory=FlowConfig)
    columns: ColumnsConfig = field(default_factory=ColumnsConfig)
