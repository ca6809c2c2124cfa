from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from hydra import compose, initialize_config_dir
from omegaconf import OmegaConf

logger = logging.getLogger(__name__)


@dataclass
class ToolConfig:
    require_harvest: bool = False
    get_from_chest: bool = False
    max_tools: int = 1

    # wait after closing a chest before its contents/inventory are trusted
    settle_delay_ms: int = 200

    hand: str = "hand"

    verbose: bool = True

    @property
    def settle_delay(self) -> float:
        return self.settle_delay_ms / 1000.0

    @classmethod
    def from_config_file(
        cls,
        config_dir: Optional[Path] = None,
        config_name: str = "config",
        overrides: Optional[Sequence[str]] = None,
    ) -> "ToolConfig":
        """
        Load configuration from Hydra YAML (no environment variable side-effects).
        """
        base_dir = config_dir or Path(__file__).resolve().parent.parent / "conf"

        with initialize_config_dir(config_dir=str(Path(base_dir).resolve()), version_base=None):
            cfg = compose(config_name=config_name, overrides=list(overrides or []))

        cfg_dict = OmegaConf.to_container(cfg, resolve=True)
        return cls(**cfg_dict)

    def validate(self) -> list[str]:
        issues = []

        if self.max_tools < 1:
            issues.append(f"max_tools must be at least 1 (got {self.max_tools})")
        if self.settle_delay_ms < 0:
            issues.append(f"settle_delay_ms cannot be negative (got {self.settle_delay_ms})")
        if self.hand not in ("hand", "off-hand"):
            issues.append(f"Unknown hand: {self.hand}")

        return issues

    def print_summary(self) -> None:
        logger.info("=== minetool Configuration ===")
        logger.info(f"  Require harvest: {'yes' if self.require_harvest else 'no'}")
        logger.info(f"  Get from chest: {'enabled' if self.get_from_chest else 'disabled'}")
        logger.info(f"  Max tools per chest: {self.max_tools}")
        logger.info(f"  Settle delay: {self.settle_delay_ms} ms")
        logger.info(f"  Hand: {self.hand}")

        issues = self.validate()
        if issues:
            logger.warning("Configuration issues:")
            for issue in issues:
                logger.warning(f"  - {issue}")


_config: Optional[ToolConfig] = None


def get_config(
    config_dir: Optional[Path] = None,
    config_name: str = "config",
    overrides: Optional[Sequence[str]] = None,
) -> ToolConfig:
    """
    Returns a singleton ToolConfig loaded via Hydra.
    """
    global _config
    if _config is None:
        _config = ToolConfig.from_config_file(
            config_dir=config_dir, config_name=config_name, overrides=overrides
        )
    return _config


def set_config(config: Optional[ToolConfig]) -> None:
    global _config
    _config = config


__all__ = ["ToolConfig", "get_config", "set_config"]
