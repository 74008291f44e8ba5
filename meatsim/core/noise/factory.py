import logging

from meatsim.core.noise.config import NoiseSourceConfig
from meatsim.core.noise.registry import registry
from meatsim.core.noise.sources import NoiseSource

logger = logging.getLogger(__name__)


def build_noise_source(config: NoiseSourceConfig) -> NoiseSource:
    config_name = config.__class__.__name__
    if config_name not in registry:
        raise ValueError(f"Noise config '{config_name}' not found in registry.")
    source_cls = registry[config_name]
    logger.info("Building %s from %s", source_cls.__name__, config)
    return source_cls.from_config(config)
