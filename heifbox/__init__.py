"""Reader for ISO base media file format boxes used by HEIF images and MP4 files."""

__version__ = "0.1.0"