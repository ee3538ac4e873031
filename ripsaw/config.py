from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

DEFAULT_BLADE_WIDTH_INCHES = 0.125
CONFIG_FILE = "ripsaw-config.toml"


class CutSettings(BaseModel):
    """Settings a cut list carries. Blade width (kerf) is stored, not yet used in any math."""

    model_config = ConfigDict(frozen=True)

    blade_width_inches: float = Field(default=DEFAULT_BLADE_WIDTH_INCHES, ge=0)

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, str]]) -> "CutSettings":
        """
        Build from a flat str -> str mapping (env vars, config file).
        Unknown keys are ignored; a malformed value raises ValidationError.
        """
        values = values or {}
        known = {k: v for k, v in values.items() if k in cls.model_fields}
        return cls(**known)


class AppSettings(BaseSettings):
    """
    Sources, highest priority first: init kwargs, RIPSAW_* env vars, .env,
    then ripsaw-config.toml in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="RIPSAW_",
        env_file=".env",
        toml_file=CONFIG_FILE,
        extra="ignore",
    )

    BLADE_WIDTH_INCHES: float = DEFAULT_BLADE_WIDTH_INCHES
    LOG_LEVEL: str = "INFO"
    SHOP_NAME: str = "Cut List"
    # Treat parsed specs as nominal call-outs ("2x4x8") instead of measurements
    DEFAULT_NOMINAL: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    def cut_settings(self) -> CutSettings:
        return CutSettings(blade_width_inches=self.BLADE_WIDTH_INCHES)


settings = AppSettings()
