"""Linear program model, equality-form transform and instance reader."""

from . import io, model
from .io import parse_lp, read_lp
from .model import LP, transform_to_equality

__all__ = ["io", "model", "LP", "transform_to_equality", "parse_lp", "read_lp"]
