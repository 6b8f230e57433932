# othello/config.py
from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 5  # plies searched below each root move
    alpha_beta: bool = True
    workers: int = 1  # >1 scores root moves in a process pool


@dataclass
class EvalConfig:
    corner_weight: int = 50
    edge_weight: int = 10
    material_weight: int = 1
    terminal_weight: int = 5


@dataclass
class WebConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    human_side: str = "dark"
    search_threads: int = 1


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    web: WebConfig = field(default_factory=WebConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "othello.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "web"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    logger.warning("Ignoring unknown config key %s.%s", section, k)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

    def apply_env(self) -> "Config":
        depth = os.environ.get("OTHELLO_SEARCH_DEPTH")
        if depth:
            try:
                self.search.depth = int(depth)
            except ValueError:
                logger.warning("OTHELLO_SEARCH_DEPTH=%r is not an integer, keeping %d", depth, self.search.depth)
        level = os.environ.get("OTHELLO_LOG_LEVEL")
        if level:
            self.log_level = level
        return self


def configure_logging(cfg: Config) -> None:
    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("OTHELLO_CONFIG_TOML", "othello.toml")).apply_env()
