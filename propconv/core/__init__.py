# -*- coding: utf-8 -*-
"""
propconv.core
~~~~~~~~~~~~~


"""

from .errors import (  # noqa: F401
    ResourceError,
    ResourceUnavailableError,
)

from .context import Context  # noqa: F401

from .configs import (  # noqa: F401
    Configurations,
    ConfigurationError,
    ConfigurationUnavailableError,
    Configurator,
)

from .register import (  # noqa: F401
    Registration,
    RegistrationError,
    Registry,
    Registrator,
    RegistratorContext,
)
