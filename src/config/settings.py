"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use NAUSICAA_ prefix (e.g., NAUSICAA_PACKAGE_NAME=ui).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use NAUSICAA_ prefix.

    Examples:
        NAUSICAA_PACKAGE_NAME=ui
        NAUSICAA_ROOT_DIRECTORY=components
        NAUSICAA_FORMATTER=builtin
    """

    model_config = SettingsConfigDict(
        env_prefix="NAUSICAA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Generated source configuration
    package_name: str = Field(
        default="views",
        description="Go package name written into the generated source header",
    )

    root_directory: str = Field(
        default=".",
        description="Base directory for absolute-style <include path=\"/...\"> references",
    )

    generated_by: str = Field(
        default="nausicaa",
        description="Generator name written into the DO NOT EDIT banners",
    )

    # Naming configuration
    roots_field: str = Field(
        default="roots",
        description="Struct field holding a component's root elements (never usable as a ref)",
    )

    string_literal_kind: str = Field(
        default="stringliteral",
        description="Naming kind for text content bindings (stringliteral0, stringliteral1, ...)",
    )

    # Formatting configuration
    formatter: str = Field(
        default="auto",
        description="Source formatter: 'gofmt', 'builtin', or 'auto' (gofmt when on PATH)",
    )

    gofmt_binary: str = Field(
        default="gofmt",
        description="gofmt executable used by the 'gofmt' formatter",
    )

    # Binding configuration
    bindings_file: Optional[str] = Field(
        default=None,
        description="Custom element binding table (YAML); defaults to the packaged webapi table",
    )

    # CLI configuration
    input_glob: str = Field(
        default="**/*.html",
        description="Pattern used to discover components when no input files are named",
    )

    def rootsAccessor_name(self) -> str:
        """
        Name of the generated accessor method for the roots field.

        Example:
            >>> AppSettings().rootsAccessor_name()
            'Roots'
        """
        return self.roots_field[:1].upper() + self.roots_field[1:]


# Singleton instance - import this in your code
appsettings = AppSettings()
