# -*- coding: utf-8 -*-
"""
propconv.core.register
~~~~~~~~~~~~~~~~~~~~~~


"""

from .registrator import Registrator  # noqa: F401

from .registry import (  # noqa: F401
    Registration,
    RegistrationError,
    Registry,
)

from .context import RegistratorContext  # noqa: F401
