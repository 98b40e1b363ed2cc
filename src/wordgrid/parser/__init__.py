"""Label-file parsing and the shared data model."""

from wordgrid.parser.labels import parse_label_file
from wordgrid.parser.model import LabelSet

__all__ = ["LabelSet", "parse_label_file"]
