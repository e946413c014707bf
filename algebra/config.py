import logging
import os
from dataclasses import dataclass

import logzero
from logzero import logger

def check_variable_name(name):
    if not name:
        raise ValueError("variable name must not be empty")
    return name

@dataclass
class Settings:
    variable_name : str = "x"

    def __post_init__(self):
        check_variable_name(self.variable_name)

    @classmethod
    def from_env(cls, environ=os.environ):
        return cls(environ.get("MINIALGEBRA_VARIABLE_NAME", "x"))

settings = Settings.from_env()

def variable_name():
    return settings.variable_name

def set_variable_name(name):
    check_variable_name(name)
    logger.debug('Default variable name: %s -> %s', settings.variable_name, name)
    settings.variable_name = name

def configure_logging(debug=False, logfile=None):
    if debug:
        logzero.loglevel(logging.DEBUG)
    else:
        logzero.loglevel(logging.INFO)
    if logfile is not None:
        logzero.logfile(logfile, mode='w')
