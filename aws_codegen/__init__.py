from .core.enums import Protocol, Signer, TimestampFormat  # noqa
from .endpoints import GLOBAL, EndpointResolver, RegionalEndpoint  # noqa
from .service import (  # noqa
    Service,
    define_global,
    define_regional,
    to_digital_ocean_spaces,
)

__title__ = "aws-codegen"
__version__ = "0.1.0"
