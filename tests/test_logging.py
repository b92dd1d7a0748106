import logging
from roomair.logging import ModuleLogger
import roomair.comfort.evaluation


class TestModuleLogger:

    def test_same_logger_is_returned_once_configured(self):
        logger_1 = ModuleLogger.get_logger('roomair.test_logger')
        logger_2 = ModuleLogger.get_logger('roomair.test_logger')
        assert logger_1 is logger_2
        assert len(logger_1.handlers) == 1

    def test_calculation_modules_log_errors_only(self):
        assert roomair.comfort.evaluation.logger.level == logging.ERROR

    def test_set_level_of_package_loggers(self):
        logger = roomair.comfort.evaluation.logger
        ModuleLogger.set_level(ModuleLogger.DEBUG, 'roomair.comfort')
        try:
            assert logger.level == logging.DEBUG
            assert all(h.level == logging.DEBUG for h in logger.handlers)
        finally:
            ModuleLogger.set_level(ModuleLogger.ERROR, 'roomair.comfort')
