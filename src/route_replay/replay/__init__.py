"""Route replay: slicing, record synthesis and the step-by-step converter."""

from route_replay.replay.converter import ReplayConverter
from route_replay.replay.models import ConverterConfig, PositionRecord
from route_replay.replay.slicer import RouteSlicer
from route_replay.replay.spacing import InvalidConfiguration, sample_spacing, speed_in_mps
from route_replay.replay.synthesizer import LocationSynthesizer

__all__ = [
    "ConverterConfig",
    "InvalidConfiguration",
    "LocationSynthesizer",
    "PositionRecord",
    "ReplayConverter",
    "RouteSlicer",
    "sample_spacing",
    "speed_in_mps",
]
