"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use GDSLICE_ prefix (e.g., GDSLICE_EXTENSION=.gd).

Settings can also be loaded from a .env file in the working directory.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use GDSLICE_ prefix.

    Examples:
        GDSLICE_EXTENSION=.gd
        GDSLICE_KEYWORD=EXPORT
        GDSLICE_OUTPUT_FILE=slices.json
    """

    model_config = SettingsConfigDict(
        env_prefix="GDSLICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Scanning configuration
    extension: str = Field(
        default=".gd",
        description="File extension of the scripts to scan (compared case-insensitively)",
    )

    keyword: str = Field(
        default="EXPORT",
        description="Marker keyword; closing markers use the same keyword prefixed with '/'",
    )

    whole_file_name: str = Field(
        default="*",
        description="Slice name used for whole-file captures",
    )

    indent_unit: str = Field(
        default="\t",
        description="Indentation unit that leading space runs are normalized to",
    )

    # Manifest configuration
    resource_scheme: str = Field(
        default="res://",
        description="Prefix joined with the relative file path to build godot_path",
    )

    project_marker: str = Field(
        default="project.godot",
        description="File that must exist at the root of a Godot project",
    )

    # Output configuration
    output_file: str = Field(
        default="slices.json",
        description="Default manifest filename written inside outputdir",
    )

    json_indent: int = Field(
        default=2,
        description="Indentation of the serialized manifest",
    )

    @field_validator("extension")
    @classmethod
    def extension_normalize(cls, value: str) -> str:
        """Lower-case the extension and make sure it starts with a dot."""
        value = value.strip().lower()
        if value and not value.startswith("."):
            value = f".{value}"
        return value

    @field_validator("indent_unit")
    @classmethod
    def indentUnit_check(cls, value: str) -> str:
        if len(value) != 1 or not value.isspace() or value in "\r\n":
            raise ValueError("indent_unit must be a single non-newline whitespace character")
        return value

    def resourcePath_make(self, file_path: str) -> str:
        """
        Build the engine resource path of a project file.

        Args:
            file_path: Path relative to the project root, using forward slashes

        Returns:
            Resource path (e.g., "res://player/player.gd")

        Example:
            >>> settings = AppSettings()
            >>> settings.resourcePath_make("player/player.gd")
            'res://player/player.gd'
        """
        return f"{self.resource_scheme}{file_path}"


# Singleton instance - import this in your code
appsettings = AppSettings()
