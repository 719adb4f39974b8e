import sys

import loguru

from english_vocabulary_test.service.config_manager import ConfigManager
from english_vocabulary_test.service_factory import ServiceFactory, ServiceFactoryConfig

config_manager = ConfigManager()

settings_ = config_manager.read_settings()
loguru.logger.remove()
loguru.logger.add(
    sys.stdout,
    level=settings_.logger_level,
)


def get_service_factory() -> ServiceFactory:
    settings = config_manager.read_settings()
    return ServiceFactory(ServiceFactoryConfig(settings=settings))
