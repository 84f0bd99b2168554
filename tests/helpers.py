from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from tempfile import TemporaryDirectory

from configgen import default_config


@default_config
@dataclass
class DummyConfig:
    toto: int = 2
    tata: int = 3
    s: str = "test"


@contextmanager
def config_init_data() -> Iterator[tuple[Path, DummyConfig]]:
    with TemporaryDirectory() as temp_dir:
        yield Path(temp_dir) / "config", DummyConfig.default()
