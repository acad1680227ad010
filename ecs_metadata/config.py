from typing import Optional

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

ENV_METADATA_URI_V3 = "ECS_CONTAINER_METADATA_URI"
ENV_METADATA_URI_V4 = "ECS_CONTAINER_METADATA_URI_V4"


class EndpointSettings(BaseSettings):
    """Base URLs of the task metadata endpoint, as advertised by the ECS agent.

    An unset or empty variable means that version of the endpoint is not available.

    `EndpointSettings()` reads both URLs from the environment. Passing any
    argument skips the environment entirely, so
    `EndpointSettings(uri_v3="http://...")` has no V4 endpoint even when
    `ECS_CONTAINER_METADATA_URI_V4` is set.
    """

    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    uri_v3: Optional[str] = Field(None, validation_alias=ENV_METADATA_URI_V3)
    uri_v4: Optional[str] = Field(None, validation_alias=ENV_METADATA_URI_V4)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Endpoints come from the arguments or from the environment, never both
        if isinstance(init_settings, InitSettingsSource) and init_settings.init_kwargs:
            return (init_settings,)
        return (env_settings,)
