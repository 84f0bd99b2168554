from .config_format import ConfigFormat
from .json_format import JSONFormat
from .toml_format import TOMLFormat

__all__ = ["ConfigFormat", "JSONFormat", "TOMLFormat"]
