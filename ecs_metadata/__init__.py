"""Client for the Amazon ECS task metadata endpoint (versions 3 and 4)."""

__version__ = "0.1.0"

from loguru import logger

from .config import EndpointSettings
from .exceptions import *
from .metadata import *
from .models import *
from .resolver import Endpoint, MetadataVersion, resolve_endpoint

# Libraries should not emit logs unless the application asks for them:
# logger.enable("ecs_metadata")
logger.disable(__name__)
