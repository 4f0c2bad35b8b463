"""Configuration models for message decoding."""

import codecs
import logging

from pydantic import BaseModel, Field, field_validator


class CharsetConfig(BaseModel):
    """Python codecs used for the Japanese charsets."""

    iso2022jp_codec: str = "iso2022_jp_ext"
    eucjp_codec: str = "euc_jp"

    @field_validator("iso2022jp_codec", "eucjp_codec")
    def validate_codec(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown codec: {v}")
        return v


class DecoderConfig(BaseModel):
    """Subject and body decoder settings."""

    output_encoding: str = "utf-8"
    transcode_errors: str = "strict"
    charsets: CharsetConfig = Field(default_factory=CharsetConfig)

    @field_validator("output_encoding")
    def validate_output_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown output encoding: {v}")
        return v

    @field_validator("transcode_errors")
    def validate_transcode_errors(cls, v: str) -> str:
        if v not in ("strict", "replace", "ignore"):
            raise ValueError("transcode_errors must be 'strict', 'replace' or 'ignore'")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration for the command line tool."""

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    @field_validator("level")
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main application configuration."""

    schema_version: str = "1.0"
    decoding: DecoderConfig = Field(default_factory=DecoderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("schema_version")
    def validate_schema_version(cls, v: str) -> str:
        if not v:
            raise ValueError("schema_version is required")
        return v
