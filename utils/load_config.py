import tomllib
from pathlib import Path
from dacite import from_dict, Config as DaciteConfig
from utils.config import Config

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.toml"

def load_config(config_path: str | Path | None = None) -> Config:
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.is_file():
        if config_path:
            raise FileNotFoundError(f"Config file not found: {path}")
        return Config()
    with open(path, "rb") as f:
        config_dict = tomllib.load(f)
    # TOML writes 0 for a float field as an int
    return from_dict(Config, config_dict, config=DaciteConfig(cast=[float], strict=True))
