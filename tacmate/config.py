# tacmate/config.py
from dataclasses import dataclass, field, fields
import os
import tomllib  # python >=3.11

from tacmate.core.board import Mark
from tacmate.core.errors import ConfigError


def parse_mark(value) -> Mark:
    if isinstance(value, Mark):
        return value
    try:
        return Mark(str(value).strip().upper())
    except ValueError:
        raise ConfigError(f"Unknown mark {value!r}, expected 'X' or 'O'") from None


@dataclass
class SearchConfig:
    threads: int = 1  # >1 scores root moves in a thread pool
    log_info: bool = True  # one info line per search

@dataclass
class GameConfig:
    human_mark: str = "X"
    first_mover: str = "X"

    @property
    def human(self) -> Mark:
        return parse_mark(self.human_mark)

    @property
    def first(self) -> Mark:
        return parse_mark(self.first_mover)

@dataclass
class UIConfig:
    engine_name: str = "TacMate"
    engine_author: str = "TacMate developers"
    clear_screen: bool = True
    color: bool = True

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "game", "ui"):
            target = getattr(cfg, section)
            known = {f.name for f in fields(target)}
            for k, v in raw.get(section, {}).items():
                if k in known:
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        # marks are validated at load time
        parse_mark(cfg.game.human_mark)
        parse_mark(cfg.game.first_mover)
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("TACMATE_CONFIG_TOML", "config.toml"))
# allow env override of thread count for quick experiments
override_threads = os.environ.get("TACMATE_SEARCH_THREADS")
if override_threads:
    try:
        CONFIG.search.threads = int(override_threads)
    except ValueError:
        pass
