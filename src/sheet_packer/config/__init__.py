"""Configuration loading."""

from sheet_packer.config.schema import FORMAT_NAMES, PACKER_NAMES, Config, load_config

__all__ = ["Config", "FORMAT_NAMES", "PACKER_NAMES", "load_config"]
