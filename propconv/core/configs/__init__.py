# -*- coding: utf-8 -*-
"""
propconv.core.configs
~~~~~~~~~~~~~~~~~~~~~


"""

from .errors import (  # noqa: F401
    ConfigurationError,
    ConfigurationUnavailableError,
)

from .configurations import Configurations  # noqa: F401

from .configurator import Configurator  # noqa: F401
